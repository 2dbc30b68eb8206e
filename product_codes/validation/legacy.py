"""
Deprecated checksum validation over integer values.

These functions are kept for callers that still pass codes as numbers. A
number cannot carry leading zeros, so any code whose digit form starts with
"0" is validated over fewer digits than it really has and the parity of
every position shifts. For example UPC "036000291452" is valid as a string,
but 36000291452 is rejected here. Use the string-based functions in
product_codes.validation.checksums instead.
"""

import math
import warnings

import structlog

logger = structlog.get_logger(__name__)

# Exclusive upper bounds
UPC_VALUE_LIMIT = 10**12
EAN_VALUE_LIMIT = 10**13
ISBN10_VALUE_LIMIT = 10**10


def _warn_deprecated(name: str, replacement: str) -> None:
    warnings.warn(
        f"{name}() is deprecated and cannot validate codes with leading zeros; "
        f"use {replacement}() with a string instead",
        DeprecationWarning,
        stacklevel=3,
    )
    logger.debug("Legacy numeric validation used", function=name)


def _in_range(value: int, limit: int) -> bool:
    # bool is an int subclass but never a code
    if not isinstance(value, int) or isinstance(value, bool):
        return False
    return 0 < value < limit


def count_digits(value: int) -> int:
    """
    Count decimal digits as floor(log10(|value|)) + 1.

    Zero has no logarithm and is counted as a single digit.
    """
    if value == 0:
        return 1
    return math.floor(math.log10(abs(value))) + 1


def _mod10_valid(value: int, odd_weight: int, even_weight: int) -> bool:
    n_digits = count_digits(value)

    check_digit = value % 10
    value //= 10

    sum_even = 0
    sum_odd = 0
    # Digits come off the right but positions are numbered from the left
    for position in range(n_digits - 1, 0, -1):
        digit = value % 10
        value //= 10
        if position % 2 == 0:
            sum_even += digit
        else:
            sum_odd += digit

    total = even_weight * sum_even + odd_weight * sum_odd
    return check_digit == (10 - (total % 10)) % 10


def is_valid_upc_value(value: int) -> bool:
    """
    Validate a UPC given as an integer.

    Deprecated: use is_valid_upc with a string. Leading zeros are lost.
    """
    _warn_deprecated("is_valid_upc_value", "is_valid_upc")
    if not _in_range(value, UPC_VALUE_LIMIT):
        return False
    return _mod10_valid(value, odd_weight=3, even_weight=1)


def is_valid_ean_value(value: int) -> bool:
    """
    Validate an EAN given as an integer.

    Deprecated: use is_valid_ean with a string. Leading zeros are lost.
    """
    _warn_deprecated("is_valid_ean_value", "is_valid_ean")
    if not _in_range(value, EAN_VALUE_LIMIT):
        return False
    return _mod10_valid(value, odd_weight=1, even_weight=3)


def is_valid_isbn13_value(value: int) -> bool:
    """
    Validate an ISBN-13 given as an integer.

    Deprecated: use is_valid_isbn13 with a string. Leading zeros are lost.
    """
    _warn_deprecated("is_valid_isbn13_value", "is_valid_isbn13")
    if not _in_range(value, EAN_VALUE_LIMIT):
        return False
    return _mod10_valid(value, odd_weight=1, even_weight=3)


def is_valid_isbn10_value(value: int) -> bool:
    """
    Validate an ISBN-10 given as an integer.

    Deprecated: use is_valid_isbn10 with a string. Digits are weighted
    1, 2, 3, ... starting from the rightmost one.
    """
    _warn_deprecated("is_valid_isbn10_value", "is_valid_isbn10")
    if not _in_range(value, ISBN10_VALUE_LIMIT):
        return False

    n_digits = count_digits(value)
    total = 0
    for weight in range(1, n_digits + 1):
        total += (value % 10) * weight
        value //= 10
    return total % 11 == 0
