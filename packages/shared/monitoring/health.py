"""Liveness and readiness endpoints with pluggable self-checks."""

import time
from enum import Enum
from typing import Awaitable, Callable, List, Optional, Tuple

from fastapi import APIRouter
from pydantic import BaseModel


class CheckStatus(str, Enum):
    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"
    DEGRADED = "degraded"


class CheckResult(BaseModel):
    """Outcome of one readiness check."""

    name: str
    status: CheckStatus
    message: Optional[str] = None
    latency_ms: Optional[float] = None


CheckFn = Callable[[], Awaitable[CheckResult]]


def overall_status(results: List[CheckResult]) -> str:
    statuses = [r.status for r in results]
    if CheckStatus.UNHEALTHY in statuses:
        return CheckStatus.UNHEALTHY.value
    if CheckStatus.DEGRADED in statuses:
        return CheckStatus.DEGRADED.value
    return CheckStatus.HEALTHY.value


class HealthChecker:
    """Runs registered checks for the /ready probe."""

    def __init__(self, service_name: str, version: str = "0.1.0"):
        self.service_name = service_name
        self.version = version
        self._checks: List[Tuple[str, CheckFn]] = []

    def add_check(self, name: str, check: CheckFn) -> None:
        self._checks.append((name, check))

    async def run_checks(self) -> List[CheckResult]:
        """Run every check; a check that raises is reported unhealthy."""
        results = []
        for name, check_fn in self._checks:
            started = time.perf_counter()
            try:
                result = await check_fn()
            except Exception as e:
                result = CheckResult(name=name, status=CheckStatus.UNHEALTHY, message=str(e))
            if result.latency_ms is None:
                result.latency_ms = round((time.perf_counter() - started) * 1000, 3)
            results.append(result)
        return results

    async def readiness(self) -> dict:
        results = await self.run_checks()
        return {
            "status": overall_status(results),
            "service": self.service_name,
            "version": self.version,
            "checks": [r.model_dump() for r in results],
        }


def health_router(health_checker: HealthChecker) -> APIRouter:
    """Router with /health (liveness) and /ready (readiness)."""
    router = APIRouter(tags=["Health"])

    @router.get("/health")
    async def health():
        return {
            "status": "healthy",
            "service": health_checker.service_name,
            "version": health_checker.version,
        }

    @router.get("/ready")
    async def ready():
        return await health_checker.readiness()

    return router
