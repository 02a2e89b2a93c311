"""
API Test Layer Configuration

Layer 1: API Contract Tests
- Runs the FastAPI app in-process over httpx's ASGI transport
- No mocking - validates actual HTTP contracts

Usage:
    pytest tests/api -v
    pytest tests/api -v -k "delete"
"""

import os
import sys
from typing import AsyncGenerator

import httpx
import pytest
import pytest_asyncio

# Add project root
sys.path.insert(
    0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
)

from core.config import ServiceConfig
from tests.fixtures import BASIC_PASSWORD, BASIC_USERNAME, fixed_clock


# =============================================================================
# Configuration
# =============================================================================


class APITestConfig:
    """API test configuration"""

    BASE_URL = "http://testserver"
    USERS_PATH = "/api/users"
    HTTP_TIMEOUT = 30.0


# =============================================================================
# Application Fixtures
# =============================================================================


@pytest.fixture
def service_config() -> ServiceConfig:
    """Service config with known Basic credentials"""
    return ServiceConfig(
        auth_enabled=True,
        basic_username=BASIC_USERNAME,
        basic_password=BASIC_PASSWORD,
    )


@pytest.fixture
def user_app(service_config):
    """Fresh application with an empty store per test"""
    from microservices.user_account_service.factory import create_user_account_service
    from microservices.user_account_service.main import create_app
    from microservices.user_account_service.validator import UserValidator

    service = create_user_account_service(validator=UserValidator(clock=fixed_clock))
    return create_app(user_service=service, config=service_config)


@pytest_asyncio.fixture
async def http_client(user_app) -> AsyncGenerator[httpx.AsyncClient, None]:
    """Async HTTP client bound to the in-process app"""
    transport = httpx.ASGITransport(app=user_app)
    async with httpx.AsyncClient(
        transport=transport,
        base_url=APITestConfig.BASE_URL,
        timeout=APITestConfig.HTTP_TIMEOUT,
    ) as client:
        yield client


# =============================================================================
# Service-Specific Client
# =============================================================================


class APIClient:
    """Base API client for service testing"""

    def __init__(self, http_client: httpx.AsyncClient, api_path: str, headers: dict):
        self.client = http_client
        self.api_path = api_path
        self.headers = headers

    def _merge(self, kwargs: dict) -> dict:
        kwargs["headers"] = {**self.headers, **kwargs.get("headers", {})}
        return kwargs

    async def get(self, path: str = "", **kwargs) -> httpx.Response:
        return await self.client.get(f"{self.api_path}{path}", **self._merge(kwargs))

    async def post(self, path: str = "", **kwargs) -> httpx.Response:
        return await self.client.post(f"{self.api_path}{path}", **self._merge(kwargs))

    async def put(self, path: str = "", **kwargs) -> httpx.Response:
        return await self.client.put(f"{self.api_path}{path}", **self._merge(kwargs))

    async def delete(self, path: str = "", **kwargs) -> httpx.Response:
        return await self.client.delete(f"{self.api_path}{path}", **self._merge(kwargs))


@pytest_asyncio.fixture
async def users_api(http_client: httpx.AsyncClient, auth_headers) -> APIClient:
    """User account API client with valid credentials"""
    return APIClient(http_client, APITestConfig.USERS_PATH, auth_headers)


@pytest_asyncio.fixture
async def anonymous_users_api(http_client: httpx.AsyncClient) -> APIClient:
    """User account API client without credentials"""
    return APIClient(http_client, APITestConfig.USERS_PATH, {})


# =============================================================================
# Assertions
# =============================================================================


class APIAssertions:
    """API-specific assertion helpers"""

    @staticmethod
    def assert_success(response: httpx.Response, expected_status: int = 200):
        """Assert response is successful"""
        assert response.status_code == expected_status, (
            f"Expected {expected_status}, got {response.status_code}: {response.text}"
        )

    @staticmethod
    def assert_created(response: httpx.Response):
        """Assert resource was created"""
        assert response.status_code == 201, (
            f"Expected 201, got {response.status_code}: {response.text}"
        )

    @staticmethod
    def assert_problem(response: httpx.Response, status: int, title: str):
        """Assert an RFC 7807 problem response"""
        assert response.status_code == status, (
            f"Expected {status}, got {response.status_code}: {response.text}"
        )
        assert response.headers["content-type"].startswith("application/problem+json")
        body = response.json()
        assert body["title"] == title
        assert body["status"] == status

    @classmethod
    def assert_not_found(cls, response: httpx.Response):
        """Assert resource not found"""
        cls.assert_problem(response, 404, "Not Found")

    @classmethod
    def assert_invalid_input(cls, response: httpx.Response):
        """Assert validation error"""
        cls.assert_problem(response, 400, "Invalid Input")

    @classmethod
    def assert_unauthorized(cls, response: httpx.Response):
        """Assert unauthorized"""
        cls.assert_problem(response, 401, "Unauthorized")

    @staticmethod
    def assert_has_fields(data: dict, fields: list):
        """Assert response has required fields"""
        missing = [f for f in fields if f not in data]
        assert not missing, f"Missing fields: {missing}"


@pytest.fixture
def api_assert() -> APIAssertions:
    """Provide API assertion helpers"""
    return APIAssertions()
