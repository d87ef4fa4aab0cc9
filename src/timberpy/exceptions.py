"""Exceptions for the timberpy library."""

from typing import Any

import httpx


class TimberError(Exception):
    """Base exception for everything raised by timberpy."""


class TimberValidationError(TimberError, ValueError):
    """Raised before any network activity when local input is unusable.

    Covers a missing credential at construction time and a missing file on
    upload endpoints. Correct the input instead of retrying.
    """

    pass


class TimberAPIError(TimberError, httpx.HTTPStatusError):
    """Raised when the API answers with a non-success status.

    Extends httpx.HTTPStatusError so users can catch both TimberAPIError
    and httpx.HTTPStatusError. The response is kept intact.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_data: dict[str, Any] | None = None,
        request: httpx.Request | None = None,
        response: httpx.Response | None = None,
    ) -> None:
        """Initialize TimberAPIError.

        Args:
            message: Error message
            status_code: HTTP status code from the API response
            response_data: Decoded response body, if it was JSON
            request: The request that caused the error
            response: The response from the API
        """
        if request and response:
            super().__init__(message, request=request, response=response)
        else:
            Exception.__init__(self, message)

        self.message = message
        self.status_code = status_code
        self.response_data = response_data or {}

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.status_code:
            return f"[{self.status_code}] {self.message}"
        return self.message


class TimberCancelledError(TimberError):
    """Raised when the caller cancelled a request through a CancelToken."""

    def __init__(self, reason: str | None = None) -> None:
        self.reason = reason
        super().__init__(reason or "Request was cancelled")


class TimberFormDataError(TimberError):
    """Raised when no multipart implementation is usable for the runtime."""

    pass
