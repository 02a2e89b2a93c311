"""
Problem responses

Maps service outcomes and failures to HTTP status codes and RFC 7807
problem details. Callers branch on the stable `title`, never on `detail`.
"""

from http import HTTPStatus
from typing import Optional

from fastapi import status
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException

from .models import ProblemDetails, User
from .user_account_service import UserNotFoundError, UserServiceError, UserValidationError

PROBLEM_MEDIA_TYPE = "application/problem+json"

TITLE_INVALID_INPUT = "Invalid Input"
TITLE_NOT_FOUND = "Not Found"
TITLE_UNAUTHORIZED = "Unauthorized"
TITLE_INTERNAL_ERROR = "Internal Server Error"

_TITLES_BY_STATUS = {
    status.HTTP_400_BAD_REQUEST: TITLE_INVALID_INPUT,
    status.HTTP_401_UNAUTHORIZED: TITLE_UNAUTHORIZED,
    status.HTTP_404_NOT_FOUND: TITLE_NOT_FOUND,
    status.HTTP_500_INTERNAL_SERVER_ERROR: TITLE_INTERNAL_ERROR,
}


class ProblemResponder:
    """Translates service results into transport-facing responses"""

    # Success outcomes

    @staticmethod
    def created(user: User) -> JSONResponse:
        return JSONResponse(status_code=status.HTTP_201_CREATED, content=_serialize(user))

    @staticmethod
    def found(user: User) -> JSONResponse:
        return JSONResponse(status_code=status.HTTP_200_OK, content=_serialize(user))

    updated = found

    @staticmethod
    def deleted() -> Response:
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    # Failure outcomes

    @staticmethod
    def from_error(error: Exception, instance: Optional[str] = None) -> ProblemDetails:
        """
        Build problem details for a failure

        Args:
            error: Service exception or HTTPException raised by a dependency
            instance: Request path the problem occurred on

        Returns:
            ProblemDetails whose status mirrors the chosen HTTP status
        """
        if isinstance(error, UserValidationError):
            return ProblemDetails(
                title=TITLE_INVALID_INPUT,
                status=status.HTTP_400_BAD_REQUEST,
                detail="; ".join(error.errors) or None,
                instance=instance,
                errors=error.errors or None,
            )
        if isinstance(error, UserNotFoundError):
            return ProblemDetails(
                title=TITLE_NOT_FOUND,
                status=status.HTTP_404_NOT_FOUND,
                detail=str(error),
                instance=instance,
            )
        if isinstance(error, HTTPException):
            return ProblemDetails(
                title=_title_for(error.status_code),
                status=error.status_code,
                detail=str(error.detail) if error.detail else None,
                instance=instance,
            )
        if isinstance(error, UserServiceError):
            detail = str(error)
        else:
            # Internal exception text is not surfaced for unknown failures
            detail = "An unexpected error occurred"
        return ProblemDetails(
            title=TITLE_INTERNAL_ERROR,
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail,
            instance=instance,
        )

    @staticmethod
    def to_response(problem: ProblemDetails, headers: Optional[dict] = None) -> JSONResponse:
        """Serialize problem details as application/problem+json"""
        return JSONResponse(
            status_code=problem.status,
            content=problem.model_dump(exclude_none=True),
            media_type=PROBLEM_MEDIA_TYPE,
            headers=headers,
        )


def _title_for(status_code: int) -> str:
    if status_code in _TITLES_BY_STATUS:
        return _TITLES_BY_STATUS[status_code]
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


def _serialize(user: User) -> dict:
    return user.model_dump(mode="json", by_alias=True)
