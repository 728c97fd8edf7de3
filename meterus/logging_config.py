"""
Logging configuration for the Meterus SDK.

Provides structured logging setup with JSON output for production and
human-readable output for development. Supports correlation IDs so that
RPCs issued on behalf of one application request can be traced together.

The SDK never configures logging on import; applications opt in by calling
``setup_logging``.
"""

import logging
import sys
import uuid
from contextvars import ContextVar
from pathlib import Path
from typing import Any, Dict, Optional

import structlog
from structlog.types import EventDict


# Context variable for correlation ID
correlation_id_var: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)


def add_correlation_id(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """
    Add correlation ID to log events if present in context.

    Args:
        logger: Logger instance
        method_name: Name of the logging method
        event_dict: Event dictionary to modify

    Returns:
        Modified event dictionary with correlation_id if available
    """
    correlation_id = correlation_id_var.get()
    if correlation_id:
        event_dict["correlation_id"] = correlation_id
    return event_dict


def set_correlation_id(correlation_id: Optional[str] = None) -> str:
    """
    Set correlation ID for the current context.

    Args:
        correlation_id: Optional correlation ID. If None, generates a new UUID.

    Returns:
        The correlation ID that was set
    """
    if correlation_id is None:
        correlation_id = str(uuid.uuid4())
    correlation_id_var.set(correlation_id)
    return correlation_id


def clear_correlation_id() -> None:
    """Clear correlation ID from the current context."""
    correlation_id_var.set(None)


def get_correlation_id() -> Optional[str]:
    """Get the current correlation ID from context."""
    return correlation_id_var.get()


SDK_LOGGER_NAME = "meterus"
_HANDLER_NAME = "meterus.setup_logging"


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    json_format: bool = True,
) -> None:
    """
    Configure structured logging for applications using the SDK.

    Only the ``meterus`` logger hierarchy gets a handler; the root logger and
    any handlers the application installed are left alone. SDK records stop
    propagating to the root logger so they are not written twice. Calling
    this again replaces the handler from the previous call.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path to log file. If None, logs only to stderr.
        json_format: If True, use JSON format. If False, use human-readable format.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    sdk_logger = logging.getLogger(SDK_LOGGER_NAME)
    sdk_logger.setLevel(numeric_level)

    for previous in [h for h in sdk_logger.handlers if h.get_name() == _HANDLER_NAME]:
        sdk_logger.removeHandler(previous)
        previous.close()

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_file)
    else:
        handler = logging.StreamHandler(sys.stderr)

    handler.set_name(_HANDLER_NAME)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    sdk_logger.addHandler(handler)
    sdk_logger.propagate = False

    processors: list = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        add_correlation_id,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance for a specific module.

    Args:
        name: Logger name (typically __name__ of the module).

    Returns:
        Structured logger instance.
    """
    if name.startswith(f"{SDK_LOGGER_NAME}."):
        return structlog.get_logger(name)
    return structlog.get_logger(f"{SDK_LOGGER_NAME}.{name}")


def log_rpc_call(
    logger: structlog.stdlib.BoundLogger,
    service: str,
    method: str,
    status: str,
    duration_ms: Optional[float] = None,
    error: Optional[str] = None,
    **kwargs: Any,
) -> None:
    """
    Log a single façade round-trip.

    Args:
        logger: Logger instance
        service: Fully qualified gRPC service name
        method: RPC method name
        status: gRPC status code name (OK, NOT_FOUND, ...)
        duration_ms: Call duration in milliseconds
        error: Error details if the call failed
        **kwargs: Additional context to log
    """
    log_data: Dict[str, Any] = {
        "event_type": "rpc_call",
        "service": service,
        "method": method,
        "status": status,
    }

    if duration_ms is not None:
        log_data["duration_ms"] = round(duration_ms, 3)
    if error is not None:
        log_data["error"] = error

    log_data.update(kwargs)

    if status == "OK":
        logger.debug("rpc_call_completed", **log_data)
    else:
        logger.warning("rpc_call_failed", **log_data)


def log_connection_event(
    logger: structlog.stdlib.BoundLogger,
    address: str,
    channel: str,
    operation: str,
    secure: bool,
    error: Optional[str] = None,
    **kwargs: Any,
) -> None:
    """
    Log a channel lifecycle event.

    Args:
        logger: Logger instance
        address: Target address (host:port)
        channel: Channel role (authenticated, unauthenticated)
        operation: What happened (opened, closed, failed)
        secure: Whether the channel uses TLS
        error: Error message if the operation failed
        **kwargs: Additional context to log
    """
    log_data: Dict[str, Any] = {
        "event_type": "connection_event",
        "address": address,
        "channel": channel,
        "operation": operation,
        "secure": secure,
    }

    if error is not None:
        log_data["error"] = error

    log_data.update(kwargs)

    if operation == "failed":
        logger.error(f"channel_{operation}", **log_data)
    else:
        logger.info(f"channel_{operation}", **log_data)
