"""
Component Test Layer Configuration (Layer 3)

Structure:
    tests/component/
    └── user_account_service/   Service with mocked store and ID generator

Usage:
    pytest tests/component -v
"""
import os
import sys

import pytest

# Add project root
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from tests.component.user_account_service.mocks import MockUserStore, SequentialIdentityGenerator
from tests.fixtures import fixed_clock


@pytest.fixture
def mock_store():
    """Create a fresh MockUserStore"""
    return MockUserStore()


@pytest.fixture
def id_generator():
    """Create a deterministic identity generator"""
    return SequentialIdentityGenerator()


@pytest.fixture
def user_service(mock_store, id_generator):
    """UserAccountService wired to mocks with a fixed clock"""
    from microservices.user_account_service.user_account_service import UserAccountService
    from microservices.user_account_service.validator import UserValidator

    return UserAccountService(
        store=mock_store,
        identity_generator=id_generator,
        validator=UserValidator(clock=fixed_clock),
    )
