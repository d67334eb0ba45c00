"""E.164 phone number helpers.

``TextfullyClient.send`` validates its input with ``is_e164`` and never
rewrites it. ``normalize_e164`` is offered to callers who hold loosely
formatted numbers and want to clean them up before sending.
"""

from __future__ import annotations

import re

# "+" then a non-zero digit then 1-14 more digits; ASCII digits only.
E164_PATTERN = re.compile(r"\+[1-9][0-9]{1,14}")

_FORMATTING_CHARS = re.compile(r"[\s\-.()/]")


def is_e164(phone: object) -> bool:
    """Return True if ``phone`` is a string in strict E.164 form."""
    return isinstance(phone, str) and E164_PATTERN.fullmatch(phone) is not None


def normalize_e164(phone: str | None, default_country_code: str | None = None) -> str | None:
    """Normalize a human-formatted phone number to E.164.

    Strips spaces, dashes, dots, slashes and parentheses. A leading ``00``
    international prefix becomes ``+``. Numbers without any international
    prefix get ``default_country_code`` (digits only, e.g. ``"1"``) prepended
    when one is given.

    Args:
        phone: Raw phone number, e.g. ``"+1 (617) 555-5555"``.
        default_country_code: Calling code for numbers written in local form.

    Returns:
        The E.164 string, or None if the input cannot be made valid.
    """
    if not phone:
        return None

    candidate = _FORMATTING_CHARS.sub("", phone.strip())
    if not candidate:
        return None

    if candidate.startswith("00"):
        candidate = "+" + candidate[2:]
    elif not candidate.startswith("+"):
        if not default_country_code:
            return None
        candidate = f"+{default_country_code.lstrip('+')}{candidate.lstrip('0')}"

    return candidate if is_e164(candidate) else None
