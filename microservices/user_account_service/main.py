"""
User Account Microservice

User account CRUD resource with RFC 7807 problem responses
Port: 8080
"""

from fastapi import FastAPI, Depends, Request, Path
from starlette.exceptions import HTTPException as StarletteHTTPException
import uvicorn
from contextlib import asynccontextmanager
from typing import Any, Optional

from core.config import get_settings, ServiceConfig
from core.logger import setup_service_logger
from core.auth_dependencies import (
    CredentialVerifier, StaticCredentialVerifier, make_basic_auth_dependency
)

from .factory import create_user_account_service
from .models import User, ProblemDetails, HealthResponse
from .problem_responder import ProblemResponder
from .routes_registry import get_all_routes, get_route_summary, get_service_metadata, users_base_path
from .user_account_service import UserAccountService, UserServiceError

# Initialize configuration
settings = get_settings()

# Setup loggers (use actual service name)
logger = setup_service_logger(settings.service.service_name, settings.logging)

PROBLEM_RESPONSES = {
    400: {"model": ProblemDetails, "description": "Invalid Input"},
    401: {"model": ProblemDetails, "description": "Unauthorized"},
    404: {"model": ProblemDetails, "description": "Not Found"},
}


class UserAccountMicroservice:
    """User account microservice core"""

    def __init__(self, user_service: Optional[UserAccountService] = None):
        self.user_service = user_service or create_user_account_service()

    async def initialize(self):
        logger.info("User account microservice initialized")

    async def shutdown(self):
        logger.info("User account microservice shutdown completed")


async def _read_json(request: Request) -> Any:
    """Decode the request body; an undecodable body becomes None"""
    body = await request.body()
    if not body:
        return None
    try:
        return await request.json()
    except ValueError:
        logger.debug(f"Undecodable JSON body on {request.method} {request.url.path}")
        return None


def get_user_service(request: Request) -> UserAccountService:
    """Get the user account service bound to this app"""
    return request.app.state.microservice.user_service


def create_app(
    user_service: Optional[UserAccountService] = None,
    config: Optional[ServiceConfig] = None,
    verifier: Optional[CredentialVerifier] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        user_service: Service instance, defaults to the factory wiring
        config: Service configuration, defaults to global settings
        verifier: Credential checker, defaults to the configured Basic pair

    Returns:
        Configured FastAPI application
    """
    config = config or settings.service
    if verifier is None:
        if config.auth_enabled and not config.basic_username:
            logger.warning("Basic authentication enabled without configured credentials; all requests will be rejected")
        verifier = StaticCredentialVerifier(config.basic_username, config.basic_password)

    microservice = UserAccountMicroservice(user_service)
    users_path = users_base_path(config.api_prefix)
    metadata = get_service_metadata(config.service_name, config.version)
    require_auth = make_basic_auth_dependency(verifier, enabled=config.auth_enabled)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan management"""
        await microservice.initialize()
        yield
        await microservice.shutdown()

    app = FastAPI(
        title="User Account Service",
        description="User account management microservice",
        version=config.version,
        lifespan=lifespan,
    )
    app.state.microservice = microservice

    # Exception handlers

    @app.exception_handler(UserServiceError)
    async def user_service_error_handler(request: Request, exc: UserServiceError):
        problem = ProblemResponder.from_error(exc, instance=request.url.path)
        return ProblemResponder.to_response(problem)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        problem = ProblemResponder.from_error(exc, instance=request.url.path)
        return ProblemResponder.to_response(problem, headers=getattr(exc, "headers", None))

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception in {request.url}: {exc}", exc_info=True)
        problem = ProblemResponder.from_error(exc, instance=request.url.path)
        return ProblemResponder.to_response(problem)

    # Health & Info

    @app.get("/health", response_model=HealthResponse)
    async def health_check(service: UserAccountService = Depends(get_user_service)):
        """Service health check"""
        health = await service.health_check()
        return HealthResponse(
            status=health["status"],
            service=config.service_name,
            version=config.version,
            user_count=health["user_count"],
            timestamp=health["timestamp"],
        )

    @app.get("/info")
    async def service_info():
        """Service metadata and routes"""
        return {
            **metadata,
            **get_route_summary(config.api_prefix),
            "routes": get_all_routes(config.api_prefix),
        }

    # User Account Resource

    @app.post(users_path, status_code=201, response_model=User, responses=PROBLEM_RESPONSES)
    async def create_user(
        request: Request,
        principal: str = Depends(require_auth),
        service: UserAccountService = Depends(get_user_service),
    ):
        """Create a user account; the id is assigned by the service"""
        payload = await _read_json(request)
        user = await service.create(payload)
        return ProblemResponder.created(user)

    @app.get(f"{users_path}/{{user_id}}", response_model=User, responses=PROBLEM_RESPONSES)
    async def get_user(
        user_id: str = Path(..., description="User ID"),
        principal: str = Depends(require_auth),
        service: UserAccountService = Depends(get_user_service),
    ):
        """Get a user account"""
        user = await service.get_user(user_id)
        return ProblemResponder.found(user)

    @app.put(f"{users_path}/{{user_id}}", response_model=User, responses=PROBLEM_RESPONSES)
    async def update_user(
        request: Request,
        user_id: str = Path(..., description="User ID"),
        principal: str = Depends(require_auth),
        service: UserAccountService = Depends(get_user_service),
    ):
        """Replace every field of a user account except its id"""
        payload = await _read_json(request)
        user = await service.update(user_id, payload)
        return ProblemResponder.updated(user)

    @app.delete(f"{users_path}/{{user_id}}", status_code=204, responses=PROBLEM_RESPONSES)
    async def delete_user(
        user_id: str = Path(..., description="User ID"),
        principal: str = Depends(require_auth),
        service: UserAccountService = Depends(get_user_service),
    ):
        """Permanently delete a user account"""
        await service.delete(user_id)
        return ProblemResponder.deleted()

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "microservices.user_account_service.main:app",
        host=settings.service.service_host,
        port=settings.service.service_port,
        reload=settings.debug,
        log_level=settings.logging.log_level.lower()
    )
