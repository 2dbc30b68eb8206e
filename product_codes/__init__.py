"""
Classification and checksum validation of product codes
(UPC, EAN-8/13, ISBN-10/13, SKU, ASIN).
"""

from product_codes.config import Settings, get_settings
from product_codes.log import configure_logging
from product_codes.models import CodeClassification, ProductCodeType
from product_codes.validation import (
    classify,
    describe_code,
    extract_digits,
    is_valid_ean,
    is_valid_ean_value,
    is_valid_isbn10,
    is_valid_isbn10_value,
    is_valid_isbn13,
    is_valid_isbn13_value,
    is_valid_upc,
    is_valid_upc_value,
    normalize,
)

__all__ = [
    # Classification
    "classify",
    "describe_code",
    "normalize",
    "extract_digits",
    "CodeClassification",
    "ProductCodeType",
    # Checksums
    "is_valid_upc",
    "is_valid_ean",
    "is_valid_isbn10",
    "is_valid_isbn13",
    # Deprecated numeric checksums
    "is_valid_upc_value",
    "is_valid_ean_value",
    "is_valid_isbn10_value",
    "is_valid_isbn13_value",
    # Configuration
    "Settings",
    "get_settings",
    "configure_logging",
]
