"""Response envelope helpers."""

from .response_formatter import (
    standard_response,
    success_response,
    error_response,
    not_found_response,
    validation_error_response,
    server_error_response,
)

__all__ = [
    "standard_response",
    "success_response",
    "error_response",
    "not_found_response",
    "validation_error_response",
    "server_error_response",
]
