"""
Health service.
Provides health check functionality.
"""

import time
from typing import Callable, Dict, Optional

from app.core.logging import get_logger
from app.schemas.health import HealthResponse
from app.services.base_service import BaseService

logger = get_logger(__name__)


class HealthService(BaseService):
    """Service for health check operations."""

    def __init__(self, checks: Optional[Dict[str, Callable[[], bool]]] = None):
        self.start_time = time.time()
        self.checks = dict(checks or {})

    def handle(self, *args) -> HealthResponse:
        """
        Get system health status.

        Returns:
            HealthResponse with status, uptime, and checks
        """
        uptime_seconds = int(time.time() - self.start_time)
        uptime_str = f"PT{uptime_seconds}S"  # ISO 8601 duration

        results = {}
        for name, check in self.checks.items():
            try:
                results[name] = "ok" if check() else "error"
            except Exception as e:
                logger.warning(f"Health check {name} failed: {e}")
                results[name] = f"error: {str(e)}"

        status = "ok" if all(result == "ok" for result in results.values()) else "degraded"

        return HealthResponse(
            status=status,
            uptime=uptime_str,
            checks=results,
        )
