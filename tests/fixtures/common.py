"""
Common/Shared Fixtures

Base factories and generators used across multiple test layers.
"""
import uuid
from typing import Optional


def make_user_id() -> str:
    """Generate a unique user ID"""
    return uuid.uuid4().hex


def make_email(prefix: Optional[str] = None) -> str:
    """Generate a unique email"""
    prefix = prefix or f"test_{uuid.uuid4().hex[:8]}"
    return f"{prefix}@example.com"

