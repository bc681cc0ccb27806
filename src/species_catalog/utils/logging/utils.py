# ABOUTME: Logger utilities with context binding and API call tracking decorators
# ABOUTME: Provides get_logger function and decorators for consistent structured logging

import functools
import time
import uuid
from collections.abc import Callable
from typing import Any, TypeVar

import structlog

# Type variable for decorated functions
F = TypeVar("F", bound=Callable[..., Any])


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a logger instance with automatic module detection.

    Args:
        name: Logger name, auto-detected from caller if None

    Returns:
        Configured structlog logger instance
    """
    if name is None:
        import inspect

        frame = inspect.currentframe()
        if frame and frame.f_back:
            # Get the module name of the caller
            caller_module = frame.f_back.f_globals.get("__name__", "unknown")
            name = caller_module

    return structlog.get_logger(name or "species_catalog")


def generate_operation_id() -> str:
    """Generate a unique operation ID for tracking requests."""
    return str(uuid.uuid4())[:8]


def log_api_call(api_name: str, **context) -> Callable[[F], F]:
    """Decorator to log outbound API calls with timing details.

    Args:
        api_name: Name of the API being called
        **context: Additional context for the API call

    Returns:
        Decorated coroutine function with API call logging
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            logger = get_logger(func.__module__)
            call_id = generate_operation_id()

            bound_logger = logger.bind(api_name=api_name, call_id=call_id, **context)

            bound_logger.debug(f"API call to {api_name}")
            start_time = time.time()

            try:
                result = await func(*args, **kwargs)
                duration = time.time() - start_time
                bound_logger.info(
                    f"API call to {api_name} succeeded", duration_seconds=round(duration, 3), success=True
                )
                return result

            except Exception as e:
                duration = time.time() - start_time
                bound_logger.error(
                    f"API call to {api_name} failed",
                    duration_seconds=round(duration, 3),
                    error=str(e),
                    error_type=type(e).__name__,
                    success=False,
                )
                raise

        return wrapper  # type: ignore[return-value]

    return decorator


class LogContext:
    """Context manager for binding logger context."""

    def __init__(self, logger: structlog.stdlib.BoundLogger, **context):
        self.logger = logger
        self.context = context
        self.bound_logger = None

    def __enter__(self) -> structlog.stdlib.BoundLogger:
        self.bound_logger = self.logger.bind(**self.context)
        return self.bound_logger

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is not None and self.bound_logger is not None:
            self.bound_logger.error("Context operation failed", error=str(exc_val), error_type=exc_type.__name__)


def with_species_context(query: str) -> LogContext:
    """Create a logging context for species lookups.

    Args:
        query: Free-text species query for context binding

    Returns:
        LogContext manager with species context
    """
    logger = get_logger()
    return LogContext(logger, query=query, operation_id=generate_operation_id(), entity_type="species")
