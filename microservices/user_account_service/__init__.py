"""
User Account Microservice Package

CRUD resource for user accounts with RFC 7807 problem responses.
"""

from .models import *
from .user_account_service import (
    UserAccountService, UserServiceError, UserValidationError, UserNotFoundError
)
from .user_repository import InMemoryUserStore
from .identity import UUIDIdentityGenerator
from .validator import UserValidator, ValidationResult
from .factory import create_user_account_service

__all__ = [
    'UserAccountService',
    'UserServiceError',
    'UserValidationError',
    'UserNotFoundError',
    'InMemoryUserStore',
    'UUIDIdentityGenerator',
    'UserValidator',
    'ValidationResult',
    'create_user_account_service',
]
