"""Core types for the Textfully client library."""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from .errors import APIError, TextfullyError

DEFAULT_BASE_URL = "https://api.textfully.dev/v1"
DEFAULT_TIMEOUT_SECONDS = 30.0


# ── Configuration ─────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class TextfullyConfig:
    """Configuration for creating a Textfully client.

    ``api_key`` may be empty; sends then fail with a configuration error
    instead of reaching the network.
    """

    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT_SECONDS

    def __post_init__(self) -> None:
        if self.timeout <= 0:
            raise ValueError("TextfullyConfig.timeout must be positive")


# ── Wire types ────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class MessageRequest:
    """A text message to be sent. ``text`` length and content are left to the service."""

    phone_number: str
    text: str

    def __post_init__(self) -> None:
        for name in ("phone_number", "text"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise TypeError(f"MessageRequest.{name} must be a string, got {type(value).__name__}")

    def to_dict(self) -> dict[str, Any]:
        return {"phone_number": self.phone_number, "text": self.text}

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MessageRequest:
        return cls(phone_number=_require_str(data, "phone_number"), text=_require_str(data, "text"))

    @classmethod
    def from_json(cls, raw: str | bytes) -> MessageRequest:
        return cls.from_dict(_load_object(raw))


@dataclass(frozen=True, slots=True)
class MessageResponse:
    """The service's record of an accepted message."""

    id: str
    status: str  # queued, sent, delivered, failed; opaque to the client
    created_at: datetime

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MessageResponse:
        """Parse a success body. Raises ValueError on any missing or mistyped field."""
        return cls(
            id=_require_str(data, "id"),
            status=_require_str(data, "status"),
            created_at=parse_timestamp(_require_str(data, "created_at")),
        )

    @classmethod
    def from_json(cls, raw: str | bytes) -> MessageResponse:
        return cls.from_dict(_load_object(raw))

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "status": self.status,
            "created_at": self.created_at.isoformat().replace("+00:00", "Z"),
        }


def parse_error_envelope(raw: str | bytes, status_code: int) -> APIError:
    """Parse a ``{"error": {"type", "message"}}`` body into an APIError.

    Missing ``type``/``message`` fields decode as empty strings. Raises
    ValueError when the body is not JSON or not shaped like an envelope.
    """
    data = _load_object(raw)
    envelope = data.get("error", {})
    if not isinstance(envelope, dict):
        raise ValueError("field 'error' must be an object")
    return APIError(
        status_code=status_code,
        type=_optional_str(envelope, "type"),
        message=_optional_str(envelope, "message"),
    )


def parse_timestamp(value: str) -> datetime:
    """Parse an RFC 3339 timestamp into an aware datetime."""
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        raise ValueError(f"timestamp {value!r} has no timezone offset")
    return parsed


def _load_object(raw: str | bytes) -> dict[str, Any]:
    # json.JSONDecodeError is a ValueError subclass
    try:
        data = json.loads(raw)
    except RecursionError as exc:
        raise ValueError("JSON nested too deeply") from exc
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    return data


def _require_str(data: dict[str, Any], key: str) -> str:
    if key not in data:
        raise ValueError(f"missing field {key!r}")
    return _optional_str(data, key)


def _optional_str(data: dict[str, Any], key: str) -> str:
    value = data.get(key, "")
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string, got {type(value).__name__}")
    return value


# ── Results ───────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class SendResult:
    """Outcome of one send: exactly one of ``response`` or ``error`` is set."""

    response: MessageResponse | None = None
    error: TextfullyError | None = None

    def __post_init__(self) -> None:
        if (self.response is None) == (self.error is None):
            raise ValueError("SendResult requires exactly one of response or error")

    @property
    def succeeded(self) -> bool:
        return self.response is not None

    @classmethod
    def ok(cls, response: MessageResponse) -> SendResult:
        return cls(response=response)

    @classmethod
    def fail(cls, error: TextfullyError) -> SendResult:
        return cls(error=error)

    def unwrap(self) -> MessageResponse:
        """Return the response, or raise the error."""
        if self.error is not None:
            raise self.error
        assert self.response is not None
        return self.response
