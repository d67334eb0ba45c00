"""Shared test fixtures for the textfully library."""

import threading
import time
from collections.abc import Iterator
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from textfully import MockSender, TextfullyConfig

SLOW_SERVER_DELAY_SECONDS = 3.0
TRICKLE_INTERVAL_SECONDS = 0.2
TRICKLE_BODY = b'{"id":"msg_slow","status":"sent","created_at":"2024-01-01T00:00:00Z"}'


@pytest.fixture
def textfully_config() -> TextfullyConfig:
    return TextfullyConfig(api_key="tx_test_key_123", base_url="https://api.test.textfully.dev/v1")


@pytest.fixture
def mock_sender() -> MockSender:
    return MockSender()


class _SlowHandler(BaseHTTPRequestHandler):
    def do_POST(self) -> None:
        time.sleep(SLOW_SERVER_DELAY_SECONDS)
        body = b'{"id":"msg_late","status":"sent","created_at":"2024-01-01T00:00:00Z"}'
        try:
            self.send_response(200)
            self.send_header("Content-Type", "application/json")
            self.send_header("Content-Length", str(len(body)))
            self.end_headers()
            self.wfile.write(body)
        except (BrokenPipeError, ConnectionResetError):
            pass

    def log_message(self, format: str, *args: object) -> None:
        pass


class _TrickleHandler(BaseHTTPRequestHandler):
    def do_POST(self) -> None:
        try:
            self.send_response(200)
            self.send_header("Content-Type", "application/json")
            self.send_header("Content-Length", str(len(TRICKLE_BODY)))
            self.end_headers()
            for offset in range(len(TRICKLE_BODY)):
                self.wfile.write(TRICKLE_BODY[offset : offset + 1])
                time.sleep(TRICKLE_INTERVAL_SECONDS)
        except (BrokenPipeError, ConnectionResetError):
            pass

    def log_message(self, format: str, *args: object) -> None:
        pass


def _serve(handler: type[BaseHTTPRequestHandler]) -> Iterator[str]:
    server = ThreadingHTTPServer(("127.0.0.1", 0), handler)
    server.daemon_threads = True
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        host, port = server.server_address[:2]
        yield f"http://{host}:{port}/v1"
    finally:
        server.shutdown()
        server.server_close()


@pytest.fixture
def slow_server_url() -> Iterator[str]:
    """Base URL of a local server that waits before answering every POST."""
    yield from _serve(_SlowHandler)


@pytest.fixture
def trickle_server_url() -> Iterator[str]:
    """Base URL of a local server that sends its response body one byte at a time."""
    yield from _serve(_TrickleHandler)
