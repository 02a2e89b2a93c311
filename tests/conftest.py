"""
Root conftest.py - Global fixtures and configuration for all test layers.

Test Layers (Top-Down TDD):
    - api/        : HTTP contract tests (in-process ASGI app)
    - integration/: Service + real in-memory store, concurrency
    - component/  : Service with mocked dependencies
    - unit/       : Pure functions and models, no I/O
"""
import os
import sys

import pytest

# Set testing environment BEFORE any project imports
os.environ.setdefault("ENV", "testing")
os.environ.setdefault("ENVIRONMENT", "testing")

# Add project root to path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

# Import shared fixtures from tests/fixtures
from tests.fixtures import (
    fixed_clock,
    make_basic_auth_header,
    make_user_payload,
)


def pytest_configure(config):
    """Register test layer markers"""
    config.addinivalue_line("markers", "unit: pure logic tests, no I/O")
    config.addinivalue_line("markers", "component: service tests with mocked dependencies")
    config.addinivalue_line("markers", "integration: service tests with real collaborators")
    config.addinivalue_line("markers", "api: HTTP contract tests")


# =============================================================================
# Shared Fixtures
# =============================================================================

@pytest.fixture
def valid_payload():
    """A valid user payload (fresh copy per test)"""
    return make_user_payload()


@pytest.fixture
def auth_headers():
    """Accepted HTTP Basic credentials"""
    return make_basic_auth_header()


@pytest.fixture
def validator():
    """UserValidator pinned to FIXED_TODAY"""
    from microservices.user_account_service.validator import UserValidator

    return UserValidator(clock=fixed_clock)
