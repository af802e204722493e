"""
Dependency injection container tests.
"""

import pytest
from dependency_injector import providers

from app.controllers.health_controller import HealthController
from app.core.exceptions import InheritanceViolation, NamingConventionViolation, NotAnObjectError
from app.deps.di_container import get_container
from app.services.health_service import HealthService


class StubHelper:
    def handle(self, *args):
        return None


class StubService:
    def handle(self, *args):
        return None


def test_container_builds_validated_controller(container):
    controller = container.health_controller()

    assert isinstance(controller, HealthController)
    assert isinstance(controller.health_service, HealthService)


def test_health_service_is_singleton(container):
    assert container.health_controller().health_service is container.health_controller().health_service


def test_get_container_returns_installed_container(container):
    assert get_container() is container


@pytest.mark.parametrize(
    "replacement, expected",
    [
        (None, NotAnObjectError),
        (StubHelper(), NamingConventionViolation),
        (StubService(), InheritanceViolation),
    ],
)
def test_overridden_service_is_rejected(container, replacement, expected):
    with container.health_service.override(providers.Object(replacement)):
        with pytest.raises(expected):
            container.health_controller()


def test_container_has_no_configuration_provider(container):
    assert set(container.providers) == {"health_service", "health_controller"}


async def test_health_checks_wired_into_container_reach_route(test_client, container):
    checked = providers.Singleton(HealthService, checks={"queue": lambda: False})

    with container.health_service.override(checked):
        response = await test_client.get("/up")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "degraded"
    assert data["checks"] == {"queue": "error"}
