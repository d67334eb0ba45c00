"""Library version, sent in the User-Agent header."""

__version__ = "0.1.0"

USER_AGENT = f"textfully-python/{__version__}"
