"""
FastAPI Authentication Dependencies for Microservices

HTTP Basic authentication as a request dependency. The credential check is
delegated to a CredentialVerifier so services never hold credential values.
"""

import logging
import secrets
from typing import Awaitable, Callable, Optional, Protocol, runtime_checkable

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials

logger = logging.getLogger(__name__)

ANONYMOUS_PRINCIPAL = "anonymous"

_basic_scheme = HTTPBasic(auto_error=False)


@runtime_checkable
class CredentialVerifier(Protocol):
    """Interface for checking HTTP Basic credentials"""

    def verify(self, username: str, password: str) -> bool:
        """Return True if the credentials are accepted"""
        ...


class StaticCredentialVerifier:
    """
    Accepts exactly one configured username/password pair.

    An empty configured username rejects every request.
    """

    def __init__(self, username: str, password: str):
        self._username = username.encode("utf-8")
        self._password = password.encode("utf-8")

    def verify(self, username: str, password: str) -> bool:
        if not self._username:
            return False
        # Evaluate both comparisons to keep timing independent of which part differs
        username_ok = secrets.compare_digest(username.encode("utf-8"), self._username)
        password_ok = secrets.compare_digest(password.encode("utf-8"), self._password)
        return username_ok and password_ok


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Basic"},
    )


def make_basic_auth_dependency(
    verifier: CredentialVerifier,
    enabled: bool = True,
) -> Callable[..., Awaitable[str]]:
    """
    Build a dependency that requires valid HTTP Basic credentials.

    Args:
        verifier: Credential checker
        enabled: When False every request is treated as authenticated

    Returns:
        Async dependency returning the authenticated username

    Usage:
        require_auth = make_basic_auth_dependency(StaticCredentialVerifier("u", "p"))

        @app.get("/api/resource")
        async def get_resource(principal: str = Depends(require_auth)):
            ...
    """

    async def require_basic_auth(
        request: Request,
        credentials: Optional[HTTPBasicCredentials] = Depends(_basic_scheme),
    ) -> str:
        if not enabled:
            return ANONYMOUS_PRINCIPAL

        if credentials is None:
            logger.warning(f"Missing credentials for {request.method} {request.url.path}")
            raise _unauthorized("Authentication required")

        if not verifier.verify(credentials.username, credentials.password):
            logger.warning(f"Rejected credentials for {request.method} {request.url.path}")
            raise _unauthorized("Invalid credentials")

        return credentials.username

    return require_basic_auth


__all__ = [
    "ANONYMOUS_PRINCIPAL",
    "CredentialVerifier",
    "StaticCredentialVerifier",
    "make_basic_auth_dependency",
]
