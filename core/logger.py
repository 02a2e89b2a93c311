"""
Service Logger Setup

Configures process-wide logging for a microservice from LoggingConfig.
"""
import logging
import sys
from typing import Optional

from .config import LoggingConfig, get_settings

_configured = False


def setup_service_logger(service_name: str, config: Optional[LoggingConfig] = None) -> logging.Logger:
    """
    Configure root logging once and return the service logger.

    Args:
        service_name: Logger name for the service
        config: Logging configuration, defaults to global settings

    Returns:
        Logger for the service
    """
    global _configured

    if config is None:
        config = get_settings().logging

    if not _configured:
        root = logging.getLogger()
        root.setLevel(getattr(logging, config.log_level.upper(), logging.INFO))
        formatter = logging.Formatter(config.log_format)

        if config.enable_console:
            console = logging.StreamHandler(sys.stdout)
            console.setFormatter(formatter)
            root.addHandler(console)

        if config.log_file:
            file_handler = logging.FileHandler(config.log_file)
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)

        _configured = True

    return logging.getLogger(service_name)
