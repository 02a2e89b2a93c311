"""
Shared Test Fixtures

Centralized factories used across all test layers.

Structure:
    - common.py: Base ID and email generators
    - user_fixtures.py: User account payloads, models and auth headers
"""

# Common utilities
from .common import (
    make_user_id,
    make_email,
)

# User account fixtures
from .user_fixtures import (
    FIXED_TODAY,
    BASIC_USERNAME,
    BASIC_PASSWORD,
    fixed_clock,
    make_basic_auth_header,
    make_id_document,
    make_user_payload,
    make_user_payload_without,
    make_user,
)

__all__ = [
    "make_user_id",
    "make_email",
    "FIXED_TODAY",
    "BASIC_USERNAME",
    "BASIC_PASSWORD",
    "fixed_clock",
    "make_basic_auth_header",
    "make_id_document",
    "make_user_payload",
    "make_user_payload_without",
    "make_user",
]
