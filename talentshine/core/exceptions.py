from typing import Any, Dict, Optional


class AppException(Exception):
    """Base error carrying the HTTP status and message returned to the client."""

    status_code = 500

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        extra: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.extra = dict(extra or {})
        super().__init__(message)

    def to_content(self) -> Dict[str, Any]:
        return {**self.extra, "message": self.message}


class ValidationError(AppException):
    status_code = 400


class ConflictError(AppException):
    status_code = 409


class NotFoundError(AppException):
    status_code = 404


class AuthError(AppException):
    status_code = 401


class InsufficientFundsError(AppException):
    status_code = 400

    def __init__(self, message: str, shortfall=None, **kwargs):
        self.shortfall = shortfall
        super().__init__(message, **kwargs)


class InternalError(AppException):
    status_code = 500
