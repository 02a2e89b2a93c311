#!/usr/bin/env python3
"""Modular configuration system for the user account service

Configuration hierarchy:
- service_config: HTTP binding, route prefix, Basic authentication
- logging_config: Logging configuration
- user_config: Main config combining the sub-configs
"""
import os
from dotenv import load_dotenv
from .logging_config import LoggingConfig
from .service_config import ServiceConfig
from .user_config import UserConfig

# Load environment file based on ENV
env = os.getenv("ENV") or os.getenv("ENVIRONMENT", "development")
env_files = {
    "development": "deployment/environments/dev.env",
    "dev": "deployment/environments/dev.env",
    "testing": "deployment/environments/test.env",
    "test": "deployment/environments/test.env",
    "staging": "deployment/environments/staging.env",
    "production": "deployment/environments/production.env",
}
env_file = env_files.get(env, "deployment/environments/dev.env")
load_dotenv(env_file, override=False)

# Create global settings instance
settings = UserConfig.from_env()

def get_settings() -> UserConfig:
    """Get global settings instance"""
    return settings

def reload_settings() -> UserConfig:
    """Reload settings from environment"""
    global settings
    settings = UserConfig.from_env()
    return settings

__all__ = [
    'UserConfig',
    'get_settings',
    'reload_settings',
    'settings',
    'LoggingConfig',
    'ServiceConfig',
]
