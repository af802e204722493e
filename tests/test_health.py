"""
Health endpoint and service tests using pytest-asyncio and httpx.AsyncClient.
"""

import pytest

from app.controllers.health_controller import HealthController
from app.core.exceptions import NamingConventionViolation
from app.services.health_service import HealthService


async def test_health_endpoint(test_client):
    """Test the health check endpoint returns expected structure."""
    response = await test_client.get("/api/v1/health")

    assert response.status_code == 200
    data = response.json()

    assert "status" in data
    assert "uptime" in data
    assert "checks" in data
    assert isinstance(data["checks"], dict)
    assert data["status"] in ["ok", "degraded"]


async def test_root_health_endpoint(test_client):
    response = await test_client.get("/up")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["uptime"].startswith("PT")


def test_health_service_without_checks_is_ok():
    result = HealthService().handle()

    assert result.status == "ok"
    assert result.checks == {}


def test_health_service_reports_failing_checks():
    def broken():
        raise RuntimeError("unreachable")

    service = HealthService(checks={"cache": lambda: True, "queue": lambda: False, "mail": broken})
    result = service.handle()

    assert result.status == "degraded"
    assert result.checks == {
        "cache": "ok",
        "queue": "error",
        "mail": "error: unreachable",
    }


async def test_health_controller_delegates_to_service():
    controller = HealthController(HealthService(checks={"cache": lambda: True}))

    result = await controller.get_health()

    assert result.status == "ok"
    assert result.checks == {"cache": "ok"}


def test_health_controller_rejects_non_service():
    class HealthHelper:
        def handle(self, *args):
            return None

    with pytest.raises(NamingConventionViolation):
        HealthController(HealthHelper())
