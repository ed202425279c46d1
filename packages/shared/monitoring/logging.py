"""Structured logging for the ranked list schema service."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Optional

DEFAULT_SERVICE = "ranked-list-service"


def configure_logging(
    service_name: str = DEFAULT_SERVICE,
    level: str = "INFO",
    json_format: bool = True,
) -> None:
    """Configure root logging: JSON lines in production, plain text otherwise."""
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    if root.handlers:
        root.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(root.level)

    if json_format:
        handler.setFormatter(StructuredFormatter(service_name=service_name))
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        )

    root.addHandler(handler)


class StructuredFormatter(logging.Formatter):
    """One JSON object per log line."""

    def __init__(self, service_name: str = DEFAULT_SERVICE, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.service_name = service_name

    def format(self, record: logging.LogRecord) -> str:
        log_obj = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).strftime(
                "%Y-%m-%dT%H:%M:%S.%f"
            )[:-3] + "Z",
            "level": record.levelname,
            "service": self.service_name,
            "logger": record.name,
            "request_id": getattr(record, "request_id", None),
            "message": record.getMessage(),
            "context": getattr(record, "context", {}),
        }
        if record.exc_info:
            log_obj["stack_trace"] = self.formatException(record.exc_info)
        return json.dumps(log_obj, default=str, ensure_ascii=False)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    request_id: Optional[str] = None,
    **context: Any,
) -> None:
    """Log with a request ID and structured context fields."""
    extra = {"request_id": request_id, "context": context}
    logger.log(level, message, extra=extra)
