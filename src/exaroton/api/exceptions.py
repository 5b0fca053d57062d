"""Custom exceptions for the exaroton API client."""

from __future__ import annotations


class ExarotonError(Exception):
    """Base exception for everything raised by this library."""


class ExarotonAPIError(ExarotonError):
    """The API answered, but without the expected payload."""

    def __init__(
        self,
        message: str,
        error: str | None = None,
        *,
        status_code: int | None = None,
    ) -> None:
        self.error = error
        self.status_code = status_code
        if error:
            message = f"{message}: {error}"
        super().__init__(message)


class ExarotonDecodeError(ExarotonError):
    """Response body is not valid JSON or does not match the expected schema."""


class ExarotonValidationError(ExarotonError, ValueError):
    """A local precondition failed before any request was sent."""


class ExarotonIOError(ExarotonError, OSError):
    """Reading or writing a local file failed during an upload or download."""


class ExarotonStateError(ExarotonError, RuntimeError):
    """Operation called in an invalid local state."""
