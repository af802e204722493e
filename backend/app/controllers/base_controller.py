"""
Base controller class.
Controllers receive requests from routes and delegate to services.

Design pattern: Route -> Controller -> Service -> Model.
1. Controllers receive HTTP requests from routes
2. Controllers call services (never models directly)
3. Services handle business logic and interact with models
4. Models represent database entities

Example:

    class UserController(BaseController):
        def __init__(self, user_service: UserService):
            self.validate_service(user_service)
            self.user_service = user_service

        async def list_users(self) -> UserListResponse:
            return await self.user_service.get_all_users()
"""

from abc import ABC
from typing import Any

from app.core.exceptions import (
    InheritanceViolation,
    NamingConventionViolation,
    NotAnObjectError,
)
from app.core.logging import get_logger
from app.services.base_service import BaseService

logger = get_logger(__name__)

SERVICE_NAME_MARKER = "Service"

# Exact types that are data rather than object instances; subclasses are objects
PRIMITIVE_TYPES = (
    bool,
    int,
    float,
    complex,
    str,
    bytes,
    bytearray,
    list,
    tuple,
    dict,
    set,
    frozenset,
)


class BaseController(ABC):
    """Base controller class for all controllers."""

    def validate_service(self, service: Any) -> bool:
        """
        Validate that an injected dependency is a service.

        Args:
            service: Dependency handed to the controller

        Returns:
            True if the dependency is a proper service

        Raises:
            NotAnObjectError: If service is None, a primitive value or a class
            NamingConventionViolation: If the class name lacks "Service"
            InheritanceViolation: If the class does not extend BaseService
        """
        if service is None or type(service) in PRIMITIVE_TYPES or isinstance(service, type):
            logger.warning(
                "Rejected non-object service",
                extra={"controller": type(self).__name__, "value_type": type(service).__name__},
            )
            raise NotAnObjectError()

        service_class = type(service).__name__
        if SERVICE_NAME_MARKER not in service_class:
            logger.warning(
                f"Rejected service {service_class}: naming convention",
                extra={"controller": type(self).__name__, "service_class": service_class},
            )
            raise NamingConventionViolation(service_class)

        # Real inheritance only; ABC.register does not carry the handle contract
        if BaseService not in type(service).__mro__:
            logger.warning(
                f"Rejected service {service_class}: does not extend BaseService",
                extra={"controller": type(self).__name__, "service_class": service_class},
            )
            raise InheritanceViolation(service_class)

        logger.debug(
            f"Service {service_class} validated",
            extra={"controller": type(self).__name__},
        )
        return True
