"""Textfully REST API client."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any

import httpx

from textfully.errors import APIError, ErrorKind, TextfullyError
from textfully.phone import is_e164
from textfully.types import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_SECONDS,
    MessageRequest,
    MessageResponse,
    SendResult,
    TextfullyConfig,
    parse_error_envelope,
)
from textfully.version import USER_AGENT

logger = logging.getLogger(__name__)

NO_API_KEY_MESSAGE = (
    "No API key provided. Set your API key using "
    "TextfullyClient.from_api_key('tx_apikey') or the TEXTFULLY_API_KEY environment variable"
)
INVALID_PHONE_MESSAGE = "invalid phone number format. Must be in E.164 format (e.g., +16175555555)"
TIMEOUT_MESSAGE = "Request timed out. Please try again."
INVALID_JSON_MESSAGE = "invalid JSON response"
UNDECODABLE_ERROR_MESSAGE = "failed to decode error response"
CLOSED_CLIENT_MESSAGE = "failed to create request: client has been closed"


class TextfullyClient:
    """Sends SMS messages via the Textfully REST API.

    Usage::

        client = TextfullyClient.from_api_key("tx_apikey")
        result = client.send("+16175555555", "Hello, world!")
        if result.succeeded:
            print(result.response.id)
        else:
            print(result.error.kind, result.error.status_code)

    ``send`` performs at most one HTTP round trip and never retries. Every
    failure comes back as ``SendResult.error``; nothing is raised. The
    client keeps no per-call state, so one instance can serve concurrent
    callers.
    """

    def __init__(self, config: TextfullyConfig, *, http_client: httpx.Client | None = None) -> None:
        self._config = config
        self._client = http_client if http_client is not None else httpx.Client(timeout=config.timeout)

    @classmethod
    def from_api_key(
        cls,
        api_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> TextfullyClient:
        return cls(TextfullyConfig(api_key=api_key, base_url=base_url, timeout=timeout))

    @property
    def config(self) -> TextfullyConfig:
        return self._config

    def close(self) -> None:
        """Close the underlying HTTP client. Later sends fail with a request-construction error."""
        self._client.close()

    def __enter__(self) -> TextfullyClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def send(self, phone_number: str, text: str) -> SendResult:
        """Send a text message synchronously."""
        if not self._config.api_key:
            logger.warning("Textfully send rejected: no API key configured")
            return SendResult.fail(
                TextfullyError(
                    ErrorKind.CONFIGURATION,
                    NO_API_KEY_MESSAGE,
                    api_error=APIError(status_code=401, message=NO_API_KEY_MESSAGE),
                )
            )

        if not is_e164(phone_number):
            logger.warning("Textfully send rejected: phone number is not E.164")
            return SendResult.fail(TextfullyError(ErrorKind.VALIDATION, INVALID_PHONE_MESSAGE))

        try:
            payload = MessageRequest(phone_number=phone_number, text=text).to_json().encode("utf-8")
        except (TypeError, ValueError) as exc:
            return SendResult.fail(
                TextfullyError(ErrorKind.REQUEST_CONSTRUCTION, f"failed to marshal message: {exc}", cause=exc)
            )

        if self._client.is_closed:
            logger.error("Textfully send attempted on a closed client")
            return SendResult.fail(TextfullyError(ErrorKind.REQUEST_CONSTRUCTION, CLOSED_CLIENT_MESSAGE))

        try:
            request = self._build_request(payload)
        except (httpx.InvalidURL, ValueError) as exc:
            logger.error("Textfully request could not be built: %s", exc)
            return SendResult.fail(
                TextfullyError(ErrorKind.REQUEST_CONSTRUCTION, f"failed to create request: {exc}", cause=exc)
            )

        deadline = time.monotonic() + self._config.timeout
        try:
            response = self._client.send(request, stream=True)
            try:
                body = _read_body(response, deadline)
            finally:
                response.close()
        except httpx.TimeoutException as exc:
            logger.error("Textfully request timed out after %ss", self._config.timeout)
            return SendResult.fail(
                TextfullyError(
                    ErrorKind.TIMEOUT,
                    TIMEOUT_MESSAGE,
                    api_error=APIError(type="timeout_error", message=TIMEOUT_MESSAGE),
                    cause=exc,
                )
            )
        except httpx.UnsupportedProtocol as exc:
            logger.error("Textfully request could not be built: %s", exc)
            return SendResult.fail(
                TextfullyError(ErrorKind.REQUEST_CONSTRUCTION, f"failed to create request: {exc}", cause=exc)
            )
        except httpx.RequestError as exc:
            logger.error("Textfully request failed: %s", exc)
            return SendResult.fail(TextfullyError(ErrorKind.TRANSPORT, f"request failed: {exc}", cause=exc))

        return self._classify(response.status_code, body)

    async def send_async(self, phone_number: str, text: str) -> SendResult:
        """Send a text message asynchronously (runs sync send in a thread)."""
        return await asyncio.to_thread(self.send, phone_number, text)

    # ── Private helpers ───────────────────────────────────────────

    def _build_request(self, payload: bytes) -> httpx.Request:
        url = httpx.URL(f"{self._config.base_url.rstrip('/')}/messages")
        if url.scheme not in ("http", "https") or not url.host:
            raise ValueError(f"invalid base URL {self._config.base_url!r}")
        return self._client.build_request(
            "POST",
            url,
            content=payload,
            headers={
                "Authorization": f"Bearer {self._config.api_key}",
                "Content-Type": "application/json",
                "Accept": "application/json",
                "User-Agent": USER_AGENT,
            },
            timeout=self._config.timeout,
        )

    def _classify(self, status_code: int, body: bytes) -> SendResult:
        if 200 <= status_code < 300:
            try:
                message = MessageResponse.from_json(body)
            except ValueError as exc:
                logger.error("Textfully returned an undecodable success body. Status: %s", status_code)
                return SendResult.fail(_protocol_error(status_code, INVALID_JSON_MESSAGE, exc))
            logger.info("Textfully message accepted, id=%s status=%s", message.id, message.status)
            return SendResult.ok(message)

        try:
            api_error = parse_error_envelope(body, status_code)
        except ValueError as exc:
            logger.error("Textfully returned an undecodable error body. Status: %s", status_code)
            return SendResult.fail(_protocol_error(status_code, UNDECODABLE_ERROR_MESSAGE, exc))

        logger.error("Textfully API error: status=%s type=%s msg=%s", status_code, api_error.type, api_error.message)
        return SendResult.fail(TextfullyError.from_api_error(api_error))


def _read_body(response: httpx.Response, deadline: float) -> bytes:
    # httpx timeouts bound each read; the deadline bounds the whole exchange.
    chunks: list[bytes] = []
    for chunk in response.iter_bytes():
        chunks.append(chunk)
        if time.monotonic() > deadline:
            raise httpx.ReadTimeout("response not received within the timeout", request=response.request)
    if time.monotonic() > deadline:
        raise httpx.ReadTimeout("response not received within the timeout", request=response.request)
    return b"".join(chunks)


def _protocol_error(status_code: int, message: str, exc: ValueError) -> TextfullyError:
    return TextfullyError(
        ErrorKind.PROTOCOL,
        message,
        api_error=APIError(status_code=status_code, message=message, raw_response=str(exc)),
        cause=exc,
    )
