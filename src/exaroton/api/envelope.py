"""The ``{success, error, data}`` wrapper around every JSON response."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

from exaroton.api.exceptions import ExarotonAPIError, ExarotonDecodeError

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    model_config = ConfigDict(extra="ignore")

    success: bool
    error: str | None = None
    data: T | None = None


def decode_envelope(content: bytes | str, payload_type: Any) -> Envelope[Any]:
    """Validate a raw response body as an envelope around ``payload_type``."""
    try:
        return Envelope[payload_type].model_validate_json(content)
    except ValidationError as exc:
        raise ExarotonDecodeError(f"Invalid API response: {exc}") from exc


def unwrap(envelope: Envelope[T], message: str) -> T:
    """Return the payload, or raise if the API sent none.

    Only the presence of ``data`` counts; ``success`` alone is not trusted.
    """
    if envelope.data is None:
        raise ExarotonAPIError(message, envelope.error or "no data returned")
    return envelope.data


def check(envelope: Envelope[Any], message: str) -> None:
    """Raise if the API reported an error for an action without a payload."""
    if envelope.error is not None:
        raise ExarotonAPIError(message, envelope.error)
