"""
textfully — Python client for the Textfully SMS API.

Validates the destination number, posts the message to
``{base_url}/messages`` and turns whatever comes back into a ``SendResult``
holding either a ``MessageResponse`` or a classified ``TextfullyError``.

Installation::

    pip install textfully

Quick start::

    from textfully import TextfullyClient

    with TextfullyClient.from_api_key("tx_apikey") as client:
        result = client.send("+16175555555", "Hello, world!")
    if result.succeeded:
        print(f"Message ID: {result.response.id}")

Handling failures::

    from textfully import ErrorKind

    result = client.send("+16175555555", "Hello!")
    if not result.succeeded:
        error = result.error
        if error.kind is ErrorKind.AUTHENTICATION:
            print(f"Bad key: {error.status_code} {error.type}")
        elif error.kind is ErrorKind.TIMEOUT:
            print("Try again later")

Prefer exceptions? ``result.unwrap()`` returns the response or raises the
``TextfullyError``.

Configuration from the environment (``TEXTFULLY_API_KEY``, or a ``.env``
file)::

    from textfully import TextfullyClient, load_config

    client = TextfullyClient(load_config())

For testing::

    from textfully import MockSender

    sender = MockSender()
    result = sender.send("+16175555555", "test")
    assert result.succeeded
    assert len(sender.sent) == 1

Module overview
---------------
- ``types``     — Config, MessageRequest, MessageResponse, SendResult
- ``errors``    — ErrorKind, APIError, TextfullyError
- ``client``    — TextfullyClient (the send pipeline)
- ``base``      — SMSSender protocol
- ``mock``      — MockSender
- ``phone/``    — E.164 validation and normalization
- ``settings``  — Environment/.env configuration loading

What this library does NOT do:
- Retries, backoff or rate limiting (the caller owns retry policy)
- Batching or any endpoint other than message send
- Message text validation (length and content are checked by the service)
"""

from .base import SMSSender
from .client import TextfullyClient
from .errors import APIError, ErrorKind, TextfullyError
from .mock import MockSender, SentMessage
from .phone import E164_PATTERN, is_e164, normalize_e164
from .settings import TextfullySettings, load_config
from .types import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_SECONDS,
    MessageRequest,
    MessageResponse,
    SendResult,
    TextfullyConfig,
)
from .version import __version__

__all__ = [
    # Client
    "TextfullyClient",
    "SMSSender",
    "MockSender",
    "SentMessage",
    # Types
    "MessageRequest",
    "MessageResponse",
    "SendResult",
    "TextfullyConfig",
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT_SECONDS",
    # Errors
    "APIError",
    "ErrorKind",
    "TextfullyError",
    # Phone
    "E164_PATTERN",
    "is_e164",
    "normalize_e164",
    # Settings
    "TextfullySettings",
    "load_config",
    "__version__",
]
