"""Error taxonomy for the Textfully client.

Every failure ``TextfullyClient.send`` can produce is a ``TextfullyError``
tagged with an ``ErrorKind``. When the failure carries service-side detail
(a status code, an error type, an undecodable body), it is kept on the
error as an ``APIError`` so callers can inspect it without parsing text.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ErrorKind(str, Enum):
    """Classification of a failed send."""

    CONFIGURATION = "configuration"
    VALIDATION = "validation"
    REQUEST_CONSTRUCTION = "request_construction"
    TIMEOUT = "timeout"
    TRANSPORT = "transport"
    PROTOCOL = "protocol"
    AUTHENTICATION = "authentication"
    BAD_REQUEST = "bad_request"
    API = "api"

    @property
    def is_client_side(self) -> bool:
        """True for failures detected before any request left the process."""
        return self in _CLIENT_SIDE_KINDS


_CLIENT_SIDE_KINDS = frozenset(
    {
        ErrorKind.CONFIGURATION,
        ErrorKind.VALIDATION,
        ErrorKind.REQUEST_CONSTRUCTION,
    }
)

_STATUS_KINDS: dict[int, ErrorKind] = {
    400: ErrorKind.BAD_REQUEST,
    401: ErrorKind.AUTHENTICATION,
}

_KIND_PREFIXES: dict[ErrorKind, str] = {
    ErrorKind.BAD_REQUEST: "bad request",
    ErrorKind.AUTHENTICATION: "authentication failed",
    ErrorKind.API: "API request failed",
}


def kind_for_status(status_code: int) -> ErrorKind:
    """Map a non-2xx status code carrying a valid error envelope to its kind."""
    return _STATUS_KINDS.get(status_code, ErrorKind.API)


@dataclass(frozen=True, slots=True)
class APIError:
    """A failure reported by (or attributed to) the Textfully service."""

    status_code: int = 0
    type: str = ""
    message: str = ""
    raw_response: str = ""

    def __str__(self) -> str:
        if self.type:
            return f"textfully: {self.message} (Type: {self.type})"
        return f"textfully: {self.message}"


class TextfullyError(RuntimeError):
    """A classified send failure.

    ``api_error`` is set whenever the failure involved the service (or was
    shaped like a service answer, e.g. the missing-key and timeout cases).
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        *,
        api_error: APIError | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.api_error = api_error
        if cause is not None:
            self.__cause__ = cause

    @classmethod
    def from_api_error(cls, api_error: APIError) -> TextfullyError:
        """Wrap a decoded error envelope, classified by its status code."""
        kind = kind_for_status(api_error.status_code)
        return cls(kind, f"{_KIND_PREFIXES[kind]}: {api_error}", api_error=api_error)

    @property
    def status_code(self) -> int:
        return self.api_error.status_code if self.api_error else 0

    @property
    def type(self) -> str:
        return self.api_error.type if self.api_error else ""

    @property
    def raw_response(self) -> str:
        return self.api_error.raw_response if self.api_error else ""

    def __repr__(self) -> str:
        return f"TextfullyError(kind={self.kind.value!r}, message={self.message!r}, status_code={self.status_code})"
