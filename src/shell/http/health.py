"""
Health endpoints.

Key behaviors:
- /health: Overall status from registered checks (200 or 503)
- /health/live: Liveness check (process alive)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from src.components.pizza import CatalogPort, StaticCatalog

# --- Types ---


class HealthStatus(str, Enum):
    """Health check status values."""

    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"


@dataclass
class CheckResult:
    """Result of a single health check."""

    name: str
    status: HealthStatus
    message: str = ""


class HealthCheck(Protocol):
    """Protocol for health checks."""

    name: str

    def check(self) -> CheckResult:
        """Run the health check and return result."""
        ...


# --- Built-in Checks ---


class ProcessCheck:
    """Basic process liveness check."""

    name = "process"

    def check(self) -> CheckResult:
        return CheckResult(
            name=self.name,
            status=HealthStatus.HEALTHY,
            message="Process is running",
        )


class CatalogCheck:
    """Check that the pizza catalog has entries to serve."""

    name = "catalog"

    def __init__(self, catalog: CatalogPort | None = None) -> None:
        self._catalog = catalog if catalog is not None else StaticCatalog()

    def check(self) -> CheckResult:
        count = len(self._catalog.list_entries())
        if count == 0:
            return CheckResult(
                name=self.name,
                status=HealthStatus.UNHEALTHY,
                message="Catalog is empty",
            )
        return CheckResult(
            name=self.name,
            status=HealthStatus.HEALTHY,
            message=f"{count} pizzas available",
        )


def default_health_checks() -> list[HealthCheck]:
    return [ProcessCheck(), CatalogCheck()]


# --- FastAPI Router ---


def create_health_router(
    version: str = "0.0.0",
    checks: list[HealthCheck] | None = None,
) -> APIRouter:
    """
    Create FastAPI router for health endpoints.

    Args:
        version: Application version string
        checks: Health checks to run (defaults to process + catalog)

    Returns:
        FastAPI router with health endpoints
    """
    router = APIRouter(tags=["health"])
    registered = checks if checks is not None else default_health_checks()

    @router.get(
        "/health",
        response_model=None,
        responses={
            200: {"description": "Service is healthy"},
            503: {"description": "Service is unhealthy"},
        },
    )
    def health_check() -> JSONResponse:
        results = [c.check() for c in registered]
        healthy = all(r.status == HealthStatus.HEALTHY for r in results)
        overall = HealthStatus.HEALTHY if healthy else HealthStatus.UNHEALTHY

        response = {
            "status": overall.value,
            "version": version,
            "checks": [
                {"name": r.name, "status": r.status.value, "message": r.message}
                for r in results
            ],
        }

        status_code = status.HTTP_200_OK if healthy else status.HTTP_503_SERVICE_UNAVAILABLE
        return JSONResponse(content=response, status_code=status_code)

    @router.get("/health/live", response_model=None)
    def liveness_check() -> JSONResponse:
        """Always 200 while the process can answer."""
        return JSONResponse(content={"alive": True}, status_code=status.HTTP_200_OK)

    return router
