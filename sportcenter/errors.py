from typing import List, Optional

from fastapi import HTTPException, status


class ApiError(HTTPException):
    """Base class for errors returned to API clients as ``{"error": ...}``."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Internal server error"

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[List[str]] = None,
        headers: Optional[dict] = None,
    ):
        self.message = message or self.message
        self.details = details
        super().__init__(
            status_code=self.status_code, detail=self.message, headers=headers
        )

    def to_content(self) -> dict:
        content = {"error": self.message}
        if self.details:
            content["details"] = self.details
        return content


# Prefix pydantic puts on ValueError messages
VALUE_ERROR_PREFIX = "Value error, "


def format_validation_errors(errors) -> List[str]:
    """Turn pydantic error dicts into readable lines.

    Messages raised by our own validators are already complete sentences and
    are kept as they are; the rest are prefixed with the field name.
    """
    details = []
    for error in errors:
        msg = error["msg"]
        if error["type"] == "value_error" and msg.startswith(VALUE_ERROR_PREFIX):
            details.append(msg[len(VALUE_ERROR_PREFIX):])
            continue
        location = ".".join(str(part) for part in error["loc"] if part != "body")
        details.append(f"{location}: {msg}" if location else msg)
    return details


class ValidationError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Validation failed"

    def __init__(self, details: List[str], message: Optional[str] = None):
        super().__init__(message=message, details=details)

    @classmethod
    def from_errors(cls, errors) -> "ValidationError":
        return cls(format_validation_errors(errors))


class BadRequest(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Bad request"


class Unauthorized(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Access token required"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message=message, headers={"WWW-Authenticate": "Bearer"})


class Forbidden(ApiError):
    status_code = status.HTTP_403_FORBIDDEN
    message = "Access denied"


class NotFound(ApiError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"


class Conflict(ApiError):
    status_code = status.HTTP_409_CONFLICT
    message = "Conflict"


class InternalError(ApiError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Internal server error"
