"""Logging and health checks."""

from .health import CheckResult, CheckStatus, HealthChecker, health_router
from .logging import configure_logging, get_logger, log_with_context

__all__ = [
    "CheckResult",
    "CheckStatus",
    "HealthChecker",
    "health_router",
    "configure_logging",
    "get_logger",
    "log_with_context",
]
