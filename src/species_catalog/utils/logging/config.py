# ABOUTME: Simplified logging configuration using loguru
# ABOUTME: Dual-mode operation: interactive CLI vs production JSON logging; structlog feeds the same sinks

import logging
import os
import sys
from pathlib import Path
from typing import Any

import structlog
from loguru import logger


class LoggingMode:
    """Logging mode constants."""

    INTERACTIVE = "interactive"
    PRODUCTION = "production"


# Third-party loggers held at WARNING so request chatter stays out of CLI output
QUIETED_LOGGERS = ["httpx", "httpcore", "uvicorn.access", "asyncio", "urllib3"]

LOG_DIR = Path("logs")


def detect_logging_mode() -> str:
    """Detect whether we're running in interactive or production mode."""
    mode = os.getenv("SPECIES_CATALOG_LOG_MODE")
    if mode and mode.lower() in [LoggingMode.INTERACTIVE, LoggingMode.PRODUCTION]:
        return mode.lower()

    return LoggingMode.INTERACTIVE if sys.stdout.isatty() else LoggingMode.PRODUCTION


def setup_third_party_logging() -> None:
    """Configure third-party library logging to avoid CLI interference."""
    for logger_name in QUIETED_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    logging.captureWarnings(True)
    logging.getLogger("py.warnings").setLevel(logging.ERROR)


class InterceptHandler(logging.Handler):
    """Forward standard library log records (and structlog output) into loguru sinks."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        logger.patch(lambda r: r.update(name=record.name)).opt(exception=record.exc_info).log(
            level, record.getMessage()
        )


def setup_structlog() -> None:
    """Route structlog through the standard library so its events reach the loguru sinks."""
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.format_exc_info,
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    root_logger = logging.getLogger()
    root_logger.handlers = [InterceptHandler()]


def configure_logging(mode: str | None = None, log_level: str = "INFO", log_file: str | None = None) -> None:
    """Configure logging using loguru.

    Args:
        mode: Logging mode (interactive/production), auto-detected if None
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Custom log file path, uses default if None
    """
    if mode is None:
        mode = detect_logging_mode()

    setup_third_party_logging()
    setup_structlog()

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)
    logging.getLogger().setLevel(numeric_level)

    # Remove default loguru handler
    logger.remove()

    if mode == LoggingMode.INTERACTIVE:
        try:
            LOG_DIR.mkdir(exist_ok=True)
        except OSError:
            # Read-only working directory: no file logging
            mode = LoggingMode.PRODUCTION

    if mode == LoggingMode.PRODUCTION:
        # stderr keeps stdout free for command output such as --json results
        logger.add(sys.stderr, level=log_level, format="{time} | {level} | {name} | {message}", serialize=True)
        return

    log_file_path = log_file or str(LOG_DIR / "species-catalog.log")

    # Human-readable logs
    logger.add(
        log_file_path,
        level=log_level,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
        rotation="10 MB",
        retention="7 days",
    )

    # JSON logs for machine processing
    logger.add(
        LOG_DIR / "species-catalog.json",
        level=log_level,
        format="{time} | {level} | {name} | {message}",
        serialize=True,
        rotation="10 MB",
        retention="7 days",
    )

    # Errors only
    logger.add(
        LOG_DIR / "errors.log",
        level="ERROR",
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
        backtrace=True,
        diagnose=True,
    )


def get_logging_status() -> dict[str, Any]:
    """Get current logging configuration status."""
    mode = detect_logging_mode()
    interactive = mode == LoggingMode.INTERACTIVE

    return {
        "mode": mode,
        "log_directory": str(LOG_DIR.absolute()) if LOG_DIR.exists() else None,
        "log_files": {
            "main": str(LOG_DIR / "species-catalog.log") if interactive else None,
            "json": str(LOG_DIR / "species-catalog.json") if interactive else None,
            "errors": str(LOG_DIR / "errors.log") if interactive else None,
        },
        "third_party_suppressed": [*QUIETED_LOGGERS, "py.warnings"],
    }
