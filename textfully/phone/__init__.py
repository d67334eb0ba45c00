"""Phone number validation and normalization utilities."""

from .e164 import E164_PATTERN, is_e164, normalize_e164

__all__ = [
    "E164_PATTERN",
    "is_e164",
    "normalize_e164",
]
