"""Environment-driven configuration.

Reads ``TEXTFULLY_API_KEY``, ``TEXTFULLY_BASE_URL`` and ``TEXTFULLY_TIMEOUT``
from the process environment or a ``.env`` file.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .types import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_SECONDS, TextfullyConfig


class TextfullySettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="TEXTFULLY_", env_file=".env", case_sensitive=False, extra="ignore")

    API_KEY: str = Field(default="")
    BASE_URL: str = Field(default=DEFAULT_BASE_URL)
    TIMEOUT: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)

    def to_config(self) -> TextfullyConfig:
        return TextfullyConfig(api_key=self.API_KEY, base_url=self.BASE_URL, timeout=self.TIMEOUT)


def load_config(env_file: str | None = ".env") -> TextfullyConfig:
    """Build a TextfullyConfig from the environment, then ``env_file`` if it exists."""
    return TextfullySettings(_env_file=env_file).to_config()
