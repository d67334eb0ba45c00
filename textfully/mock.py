"""Mock SMS sender for testing.

Records every send and returns configurable results. Useful for unit
testing code that depends on ``TextfullyClient`` without hitting the API.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone

from .errors import ErrorKind, TextfullyError
from .phone import is_e164
from .types import MessageRequest, MessageResponse, SendResult


@dataclass
class SentMessage:
    """Record of a message sent through the MockSender."""

    request: MessageRequest
    result: SendResult


class MockSender:
    """Test sender that records messages and returns configurable results.

    Usage::

        sender = MockSender()
        result = sender.send("+16175555555", "hi")
        assert result.succeeded
        assert sender.sent[0].request.text == "hi"

    Or provide a fixed result::

        sender = MockSender(fixed_result=SendResult.fail(
            TextfullyError(ErrorKind.API, "API request failed")
        ))

    Phone numbers and text are checked like the real client, so a malformed
    number or non-string text yields an error and is not recorded.
    """

    def __init__(self, *, status: str = "queued", fixed_result: SendResult | None = None) -> None:
        self.status = status
        self.fixed_result = fixed_result
        self.sent: list[SentMessage] = []

    def send(self, phone_number: str, text: str) -> SendResult:
        if not is_e164(phone_number):
            return SendResult.fail(TextfullyError(ErrorKind.VALIDATION, "invalid phone number format"))

        try:
            request = MessageRequest(phone_number=phone_number, text=text)
        except TypeError as exc:
            return SendResult.fail(
                TextfullyError(ErrorKind.REQUEST_CONSTRUCTION, f"failed to marshal message: {exc}", cause=exc)
            )

        if self.fixed_result is not None:
            result = self.fixed_result
        else:
            result = SendResult.ok(
                MessageResponse(
                    id=f"mock_{uuid.uuid4().hex[:12]}",
                    status=self.status,
                    created_at=datetime.now(timezone.utc),
                )
            )

        self.sent.append(SentMessage(request=request, result=result))
        return result

    def reset(self) -> None:
        """Clear all recorded messages."""
        self.sent.clear()
