# ABOUTME: Logging configuration and structured logger helpers
# ABOUTME: Loguru sinks for interactive/production modes, structlog loggers for call sites

from .config import LoggingMode, configure_logging, detect_logging_mode, get_logging_status
from .utils import LogContext, get_logger, log_api_call, with_species_context

__all__ = [
    # Configuration
    "LoggingMode",
    "configure_logging",
    "detect_logging_mode",
    "get_logging_status",
    # Utilities
    "LogContext",
    "get_logger",
    "log_api_call",
    "with_species_context",
]
