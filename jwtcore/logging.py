"""
Logging configuration for jwtcore.
"""

import sys
import structlog
import logging
import uuid
from typing import Any, Dict, Optional
from contextvars import ContextVar

# Correlates every event emitted while one token is being handled
token_id_var: ContextVar[Optional[str]] = ContextVar('token_id', default=None)

# Silent until the host application configures logging
logging.getLogger("jwtcore").addHandler(logging.NullHandler())


def configure_logging(log_level: str = "info") -> None:
    """Configure structured logging for applications embedding jwtcore."""

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            add_library_context,
            add_correlation_context,
            structlog.processors.JSONRenderer()
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, log_level.upper()),
    )


def add_library_context(logger: Any, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    """Tag events coming from jwtcore loggers."""
    logger_name = event_dict.get("logger", "")
    if logger_name.startswith("jwtcore"):
        event_dict["component"] = logger_name.split(".")[-1]

    return event_dict


def add_correlation_context(logger: Any, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    """Add the current token correlation ID to log events."""
    token_id = token_id_var.get()
    if token_id:
        event_dict["token_id"] = token_id

    return event_dict


def set_token_id(token_id: Optional[str] = None) -> str:
    """Set token correlation ID in context."""
    if token_id is None:
        token_id = str(uuid.uuid4())
    token_id_var.set(token_id)
    return token_id


def clear_context():
    """Clear all context variables."""
    token_id_var.set(None)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger backed by the stdlib logger ``name``.

    Events go through stdlib logging, so they follow the host application's
    levels and handlers and stay silent until it configures some.
    """
    return structlog.wrap_logger(logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger)
