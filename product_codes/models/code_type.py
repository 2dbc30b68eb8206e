"""
Product code type enumeration.
"""

from enum import Enum


class ProductCodeType(str, Enum):
    """
    Supported product code formats.

    ISBN-13 has no variant of its own: it shares the EAN-13 checksum and is
    reported as EAN_13.
    """

    NONE = "NONE"
    SKU = "SKU"
    ASIN = "ASIN"
    UPC = "UPC"
    EAN_8 = "EAN-8"
    EAN_13 = "EAN-13"
    ISBN_10 = "ISBN-10"


# Types that are only reported after a checksum has passed
NUMERIC_CODE_TYPES = frozenset(
    {
        ProductCodeType.UPC,
        ProductCodeType.EAN_8,
        ProductCodeType.EAN_13,
        ProductCodeType.ISBN_10,
    }
)
