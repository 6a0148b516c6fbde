"""
Error types shared by the API layer and provider clients.

Every error carries the HTTP status it should be answered with and a
human-readable message; the Flask error handler in backend.app turns
them into ``{"error": message}`` JSON responses.
"""

from typing import Optional


class ApiError(Exception):
    """Base class for errors that map directly onto an HTTP response."""
    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> dict:
        return {'error': self.message}


class ValidationError(ApiError):
    """Missing or malformed client input."""
    status_code = 400


class ConfigurationError(ApiError):
    """A required server setting (usually an API key) is missing."""
    status_code = 500


class ProviderError(ApiError):
    """The upstream provider rejected the request or reported an error."""
    status_code = 400
