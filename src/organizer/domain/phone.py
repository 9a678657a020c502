"""Phone number normalization to the ###-###-#### storage form."""

import re

import phonenumbers

PHONE_DIGITS = 10

_FORMATTED = re.compile(r"[0-9]{3}-[0-9]{3}-[0-9]{4}")
_NOT_ASCII_DIGIT = re.compile(r"[^0-9]")


def digits_only(raw: str) -> str:
    """Return the ASCII digits 0-9 of raw. Everything else is dropped, including non-ASCII digits."""
    return phonenumbers.normalize_digits_only(_NOT_ASCII_DIGIT.sub("", raw))


def normalize_phone(raw: str | None) -> str | None:
    """Return raw reformatted as AAA-BBB-CCCC, or None unless exactly ten digits remain.

    Input that is already formatted comes back unchanged, e.g. "603-555-0101".
    """
    if raw is None or not str(raw).strip():
        return None
    digits = digits_only(str(raw))
    if len(digits) != PHONE_DIGITS:
        return None
    return f"{digits[:3]}-{digits[3:6]}-{digits[6:]}"


def is_formatted_phone(value: str) -> bool:
    return bool(_FORMATTED.fullmatch(value or ""))
