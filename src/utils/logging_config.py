import logging
import sys
from pathlib import Path
from typing import List

import structlog

from src.config.config import config


class CustomFormatter(logging.Formatter):
    """Renders records as `[yyyy-mm-dd hh:mm:ss] [LEVEL] [logger leaf name]: message`."""

    def format(self, record):
        # Extract class name from the logger name
        class_name = record.name.split('.')[-1] if '.' in record.name else record.name

        # Format timestamp as yyyy-mm-dd hh:mm:ss
        timestamp = self.formatTime(record, '%Y-%m-%d %H:%M:%S')

        # Format the log message
        formatted_message = f"[{timestamp}] [{record.levelname}] [{class_name}]: {record.getMessage()}"

        # Add exception info if present
        if record.exc_info:
            formatted_message += '\n' + self.formatException(record.exc_info)

        return formatted_message


def ensure_logs_directory() -> Path:
    """Ensure the logs directory exists."""
    logs_dir = config.get_log_directory()
    logs_dir.mkdir(exist_ok=True)
    return logs_dir


def get_log_file_path() -> Path:
    """Get the log file path based on environment."""
    logs_dir = ensure_logs_directory()
    log_filename = f"weather_proxy_{config.environment}.log"
    return logs_dir / log_filename


def _structlog_processors() -> List:
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if config.log_format == "json":
        processors += [
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    return processors


def setup_logging():
    """
    Configure logging for the application.

    structlog renders each event (key/value text or JSON, per `log_format`)
    and hands it to the stdlib root logger, whose handlers use the format:
    [yyyy-mm-dd hh:mm:ss] [log_type] [class_name]: {message}
    """
    level = getattr(logging, config.log_level.upper())

    structlog.configure(
        processors=_structlog_processors(),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Clear any existing handlers
    root_logger.handlers.clear()

    # JSON lines are already complete records
    formatter = logging.Formatter("%(message)s") if config.log_format == "json" else CustomFormatter()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    log_file_path = None
    if config.log_to_file:
        log_file_path = get_log_file_path()
        file_handler = logging.FileHandler(log_file_path, encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # Log setup completion
    logger = structlog.get_logger(__name__)
    logger.info("Logging configured", log_file=str(log_file_path) if log_file_path else None)
