"""
Checksum validation for UPC, EAN and ISBN codes.

Every predicate first reduces its input to ASCII digits, so separators and
stray letters are ignored rather than rejected. Input without any digits is
never valid.
"""

from product_codes.validation.normalizer import extract_digits


def _position_sums(digits: str) -> tuple[int, int]:
    """
    Sum the digits before the check digit by 1-based position parity.

    Returns:
        Tuple of (sum_even, sum_odd)
    """
    sum_even = 0
    sum_odd = 0
    for position, digit in enumerate(digits[:-1], start=1):
        if position % 2 == 0:
            sum_even += int(digit)
        else:
            sum_odd += int(digit)
    return sum_even, sum_odd


def _mod10_check_digit(total: int) -> int:
    return (10 - (total % 10)) % 10


def is_valid_upc(code: str | None) -> bool:
    """
    Validate a UPC checksum.

    Algorithm (GS1 mod 10):
    1. Sum digits at odd positions (1, 3, 5, ...) and multiply by 3
    2. Add digits at even positions (2, 4, 6, ...)
    3. Check digit = (10 - (total mod 10)) mod 10

    Args:
        code: UPC code, normally 12 digits

    Returns:
        True if the last digit matches the computed check digit
    """
    digits = extract_digits(code)
    if not digits:
        return False

    sum_even, sum_odd = _position_sums(digits)
    return int(digits[-1]) == _mod10_check_digit(sum_even + 3 * sum_odd)


def is_valid_ean(code: str | None) -> bool:
    """
    Validate an EAN checksum.

    Same as UPC with the weights swapped: even positions are multiplied
    by 3. Works for both EAN-8 and EAN-13.

    Args:
        code: EAN code, normally 8 or 13 digits

    Returns:
        True if the last digit matches the computed check digit
    """
    digits = extract_digits(code)
    if not digits:
        return False

    sum_even, sum_odd = _position_sums(digits)
    return int(digits[-1]) == _mod10_check_digit(3 * sum_even + sum_odd)


# ISBN-13 and EAN-13 share one checksum
is_valid_isbn13 = is_valid_ean


def is_valid_isbn10(code: str | None) -> bool:
    """
    Validate an ISBN-10 checksum.

    Each digit is weighted by its 1-based position from the left and the
    weighted sum must be divisible by 11. The "X" check symbol is not
    supported.

    Args:
        code: ISBN-10 code

    Returns:
        True if the weighted sum is a multiple of 11
    """
    digits = extract_digits(code)
    if not digits:
        return False

    total = sum(int(digit) * position for position, digit in enumerate(digits, start=1))
    return total % 11 == 0
