"""
Base service class.
Services contain business logic and interact with models.

Design pattern: Route -> Controller -> Service -> Model.
Controllers only call services, never models directly.
All services MUST extend BaseService and carry "Service" in their class name.
"""

from abc import ABC, abstractmethod
from typing import Any


class BaseService(ABC):
    """Base service class for all services."""

    @abstractmethod
    def handle(self, *args: Any) -> Any:
        """
        Handle the service operation.

        Args:
            *args: Operation arguments, defined by the concrete service

        Returns:
            Whatever the concrete service produces
        """
