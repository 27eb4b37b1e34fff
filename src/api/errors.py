"""API error types and the failure envelope."""

from datetime import UTC, datetime
from typing import Any

from fastapi import HTTPException, status

from src.schemas.envelope import ErrorResponse


class APIError(HTTPException):
    """HTTPException carrying an error code for the failure envelope."""

    status_code_for_kind: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_error_code: str = "INTERNAL_SERVER_ERROR"

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: Any = None,
        headers: dict[str, str] | None = None,
    ):
        super().__init__(status_code=self.status_code_for_kind, detail=message, headers=headers)
        self.error_code = error_code or self.default_error_code
        self.details = details


class ValidationFailed(APIError):
    status_code_for_kind = status.HTTP_400_BAD_REQUEST
    default_error_code = "VALIDATION_ERROR"


class AuthenticationFailed(APIError):
    status_code_for_kind = status.HTTP_401_UNAUTHORIZED
    default_error_code = "AUTHENTICATION_FAILED"

    def __init__(self, message: str, error_code: str | None = None):
        super().__init__(message, error_code, headers={"WWW-Authenticate": "Bearer"})


class AccessDenied(APIError):
    status_code_for_kind = status.HTTP_403_FORBIDDEN
    default_error_code = "ACCESS_DENIED"


class NotFound(APIError):
    status_code_for_kind = status.HTTP_404_NOT_FOUND
    default_error_code = "NOT_FOUND"


class InternalFailure(APIError):
    status_code_for_kind = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_error_code = "INTERNAL_SERVER_ERROR"


def error_body(message: str, error_code: str | None = None, details: Any = None) -> dict:
    """Build the failure envelope, omitting empty optional keys."""
    envelope = ErrorResponse(
        message=message,
        error_code=error_code,
        details=details,
        timestamp=datetime.now(UTC),
    )
    return envelope.model_dump(mode="json", exclude_none=True)
