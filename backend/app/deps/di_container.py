"""
Dependency injection container using dependency-injector.
Wires services into controllers; controllers validate what they receive.
"""

from typing import Optional

from dependency_injector import containers, providers

from app.controllers.health_controller import HealthController
from app.services.health_service import HealthService


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Services
    # Named checks are added by deployments that own external resources
    health_service = providers.Singleton(
        HealthService,
    )

    # Controllers
    health_controller = providers.Factory(
        HealthController,
        health_service=health_service,
    )


# Global container instance
_container: Optional[Container] = None


def create_container() -> Container:
    """Create a new dependency injection container."""
    return Container()


def get_container() -> Container:
    """Get the global dependency injection container."""
    global _container
    if _container is None:
        _container = create_container()
    return _container


def set_container(container: Optional[Container]) -> None:
    """Replace the global container (None resets it)."""
    global _container
    _container = container
