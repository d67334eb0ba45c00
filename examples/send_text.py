"""Send one text message using credentials from the environment or .env.

Usage::

    TEXTFULLY_API_KEY=tx_... python examples/send_text.py +16175555555 "Hello, world!"
"""

from __future__ import annotations

import logging
import sys

from textfully import TextfullyClient, load_config

logger = logging.getLogger("send_text")


def main(argv: list[str]) -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    phone_number = argv[1] if len(argv) > 1 else "+16175555555"
    text = argv[2] if len(argv) > 2 else "Hello, world!"

    config = load_config()
    if not config.api_key:
        logger.error("TEXTFULLY_API_KEY environment variable not set")
        return 1

    with TextfullyClient(config) as client:
        result = client.send(phone_number, text)

    if not result.succeeded:
        assert result.error is not None
        logger.error("Send failed [%s]: %s", result.error.kind.value, result.error)
        return 1

    assert result.response is not None
    logger.info("Message sent! ID: %s", result.response.id)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
