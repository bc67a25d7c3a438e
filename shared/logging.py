"""
Shared logging configuration for the Items Access Layer.

Correlation fields (``request_id``, ``item_id``) live in structlog's
context variables, so every event emitted while a lookup is in flight carries
them without the lookups passing them around.
"""

import sys
import structlog
import logging
import uuid
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional

from structlog.contextvars import (
    bind_contextvars, bound_contextvars, clear_contextvars, get_contextvars
)


def configure_logging(service_name: str, log_level: str = "info") -> None:
    """Configure structured JSON logging for a service."""

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            add_service_context,
            structlog.processors.JSONRenderer()
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper()),
    )
    get_logger(f"{service_name}.logging").debug("Logging configured", log_level=log_level)


def add_service_context(logger: Any, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    """Add the service name, taken from "<service>.<component>" logger names."""
    logger_name = event_dict.get("logger", "")
    if "." in logger_name:
        event_dict["service"] = logger_name.split(".")[0]

    return event_dict


def set_request_id(request_id: Optional[str] = None) -> str:
    """Bind a request ID to the current context."""
    if request_id is None:
        request_id = str(uuid.uuid4())
    bind_contextvars(request_id=request_id)
    return request_id


def get_request_id() -> Optional[str]:
    return get_contextvars().get("request_id")


@contextmanager
def item_context(item_id: str) -> Iterator[None]:
    """Bind ``item_id`` to log events emitted inside the block."""
    with bound_contextvars(item_id=item_id):
        yield


def clear_context():
    """Clear all correlation fields."""
    clear_contextvars()


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)
