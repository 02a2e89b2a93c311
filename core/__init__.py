#!/usr/bin/env python3
"""
Core Module for the User Account Service

Shared infrastructure used by the microservice package.

COMPONENTS:
    - config/: Dataclass configuration loaded from the environment
    - logger.py: Service logger setup
    - auth_dependencies.py: FastAPI authentication dependencies (HTTP Basic)

USAGE:
    from core.config import get_settings
    from core.logger import setup_service_logger

    settings = get_settings()
    logger = setup_service_logger("user_account_service")
"""

__version__ = "1.0.0"
