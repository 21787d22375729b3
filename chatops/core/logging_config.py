"""
Logging configuration for production use.

Provides structured logging with file and console output.
Log level and log directory come from the startup Config.
"""

import logging
import logging.handlers

from .config import Config


def setup_logging(config: Config, logger_name: str = "") -> logging.Logger:
    """
    Configure and return a logger instance.

    Args:
        config: Startup configuration (log level and directory)
        logger_name: Name of the logger; the default "" configures the root logger

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(logger_name)

    # Don't add handlers if logger already configured
    if logger.handlers:
        return logger

    logger.setLevel(config.log_level)

    formatter = logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(config.log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    config.logs_dir.mkdir(parents=True, exist_ok=True)
    log_file = config.logs_dir / f"{logger_name or 'chat_triage'}.log"
    file_handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
    )
    file_handler.setLevel(config.log_level)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    return logger
