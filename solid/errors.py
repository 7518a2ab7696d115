from __future__ import annotations


class SolidError(Exception):
    """Base error for solid."""


class HTTPStatusError(SolidError):
    """Raised when a response status does not denote an existing resource."""

    def __init__(self, message: str, status_code: int | None = None, url: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class ResourceNotFoundError(HTTPStatusError):
    """Raised when the resource is gone, missing, or no response was received."""
