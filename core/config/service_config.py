#!/usr/bin/env python3
"""Service configuration for the user account service

HTTP binding, route prefix and Basic authentication settings.
"""
import os
from dataclasses import dataclass

def _bool(val: str) -> bool:
    return val.lower() == "true"

def _int(val: str, default: int) -> int:
    try:
        return int(val) if val else default
    except ValueError:
        return default


@dataclass
class ServiceConfig:
    """User account service settings"""

    # ===========================================
    # HTTP Binding
    # ===========================================
    service_name: str = "user_account_service"
    service_host: str = "0.0.0.0"
    service_port: int = 8080
    api_prefix: str = "/api"
    version: str = "1.0.0"

    # ===========================================
    # Authentication (HTTP Basic)
    # ===========================================
    auth_enabled: bool = True
    basic_username: str = ""
    basic_password: str = ""

    @classmethod
    def from_env(cls) -> 'ServiceConfig':
        """Load service configuration from environment variables"""
        return cls(
            service_name=os.getenv("SERVICE_NAME", "user_account_service"),
            service_host=os.getenv("USER_SERVICE_HOST", "0.0.0.0"),
            service_port=_int(os.getenv("USER_SERVICE_PORT") or os.getenv("PORT", "8080"), 8080),
            api_prefix=os.getenv("USER_SERVICE_API_PREFIX", "/api"),
            version=os.getenv("USER_SERVICE_VERSION", "1.0.0"),

            # Authentication
            auth_enabled=_bool(os.getenv("USER_SERVICE_AUTH_ENABLED", "true")),
            basic_username=os.getenv("USER_SERVICE_BASIC_USERNAME", ""),
            basic_password=os.getenv("USER_SERVICE_BASIC_PASSWORD", ""),
        )
