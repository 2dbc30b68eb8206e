"""
Product code normalization, checksum validation and classification.
"""

from product_codes.validation.checksums import (
    is_valid_ean,
    is_valid_isbn10,
    is_valid_isbn13,
    is_valid_upc,
)
from product_codes.validation.classifier import classify, describe_code
from product_codes.validation.legacy import (
    is_valid_ean_value,
    is_valid_isbn10_value,
    is_valid_isbn13_value,
    is_valid_upc_value,
)
from product_codes.validation.normalizer import extract_digits, normalize

__all__ = [
    "classify",
    "describe_code",
    "normalize",
    "extract_digits",
    "is_valid_upc",
    "is_valid_ean",
    "is_valid_isbn10",
    "is_valid_isbn13",
    # Deprecated
    "is_valid_upc_value",
    "is_valid_ean_value",
    "is_valid_isbn10_value",
    "is_valid_isbn13_value",
]
