"""
Normalization of raw product code strings.
"""

import string

_DIGITS = frozenset(string.digits)
_ALPHANUMERIC = frozenset(string.ascii_letters + string.digits)


def normalize(code: str | None) -> str:
    """
    Strip everything except ASCII letters and digits.

    Args:
        code: Raw code, possibly with hyphens or spaces

    Returns:
        Normalized code (empty for None or empty input)
    """
    if not code:
        return ""
    return "".join(ch for ch in code if ch in _ALPHANUMERIC)


def extract_digits(code: str | None) -> str:
    """Keep only the ASCII digits of a code."""
    if not code:
        return ""
    return "".join(ch for ch in code if ch in _DIGITS)


def is_numeric(code: str) -> bool:
    """Check that a code is non-empty and made of ASCII digits only."""
    return bool(code) and all(ch in _DIGITS for ch in code)
