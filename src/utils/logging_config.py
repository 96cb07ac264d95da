import logging
import sys
from pathlib import Path

import structlog

from src.config.config import config


class CustomFormatter(logging.Formatter):
    """Formats records as: [yyyy-mm-dd hh:mm:ss] [log_type] [module_name]: {message}"""

    def format(self, record):
        module_name = record.name.split('.')[-1] if '.' in record.name else record.name

        timestamp = self.formatTime(record, '%Y-%m-%d %H:%M:%S')

        formatted_message = f"[{timestamp}] [{record.levelname}] [{module_name}]: {record.getMessage()}"

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
    return logs_dir / f"tourism_agent_{config.environment}.log"


def configure_structlog():
    """
    Route structlog events through the standard library loggers.

    Event dictionaries are rendered as ``event='...' key=value`` and handed
    to the stdlib handlers, so level filtering and formatting are shared.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.format_exc_info,
            structlog.processors.KeyValueRenderer(key_order=["event"], drop_missing=True),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def setup_logging():
    """
    Configure logging for the application.

    Sets up console logging (and file logging when enabled) with format:
    [yyyy-mm-dd hh:mm:ss] [log_type] [module_name]: {message}
    """
    level = getattr(logging, config.log_level.upper())

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    formatter = CustomFormatter()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if config.log_to_file:
        log_file_path = get_log_file_path()
        file_handler = logging.FileHandler(log_file_path, encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    configure_structlog()

    logger = logging.getLogger(__name__)
    if config.log_to_file:
        logger.info(f"Logging configured - writing to {get_log_file_path()}")
    else:
        logger.info("Logging configured - writing to stdout")

