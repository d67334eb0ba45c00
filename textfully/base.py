"""Base protocol for SMS senders."""

from __future__ import annotations

from typing import Protocol

from textfully.types import SendResult


class SMSSender(Protocol):
    """Interface shared by ``TextfullyClient`` and ``MockSender``."""

    def send(self, phone_number: str, text: str) -> SendResult:
        """Send a text message and return the result. Must not raise for send failures."""
        ...
