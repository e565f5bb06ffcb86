"""
Custom exceptions raised by the service layer.

Each exception carries the HTTP status it maps to; the handlers registered
in ``app.main`` turn them into response envelopes.
"""


class AppError(Exception):
    """Base class for expected, client-facing errors."""
    status_code: int = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationFailedError(AppError):
    """A path parameter or request body did not pass schema validation."""
    status_code = 400


class NotFoundError(AppError):
    status_code = 404


class ConflictError(AppError):
    status_code = 409
