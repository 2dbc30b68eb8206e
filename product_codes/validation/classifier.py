"""
Product code classification by shape and checksum.
"""

from collections.abc import Callable

import structlog

from product_codes.log import classification_logging_enabled
from product_codes.models import NUMERIC_CODE_TYPES, CodeClassification, ProductCodeType
from product_codes.validation.checksums import is_valid_ean, is_valid_isbn10, is_valid_upc
from product_codes.validation.normalizer import is_numeric, normalize

logger = structlog.get_logger(__name__)

# Numeric codes: length -> (type, checksum that must pass)
NUMERIC_FORMATS: dict[int, tuple[ProductCodeType, Callable[[str], bool]]] = {
    8: (ProductCodeType.EAN_8, is_valid_ean),
    10: (ProductCodeType.ISBN_10, is_valid_isbn10),
    12: (ProductCodeType.UPC, is_valid_upc),
    13: (ProductCodeType.EAN_13, is_valid_ean),
}

# Alphanumeric codes have no checksum, only a length
ALPHANUMERIC_FORMATS: dict[int, ProductCodeType] = {
    8: ProductCodeType.SKU,
    10: ProductCodeType.ASIN,
}


def _classify_normalized(normalized: str) -> ProductCodeType:
    length = len(normalized)

    if is_numeric(normalized):
        if length not in NUMERIC_FORMATS:
            return ProductCodeType.NONE
        code_type, checksum = NUMERIC_FORMATS[length]
        return code_type if checksum(normalized) else ProductCodeType.NONE

    return ALPHANUMERIC_FORMATS.get(length, ProductCodeType.NONE)


def classify(code: str | None) -> ProductCodeType:
    """
    Detect the format of a product code.

    Numeric codes are only reported when their checksum passes. Codes with
    letters are classified as SKU (8 characters) or ASIN (10 characters)
    from their length alone, so false positives are possible.

    Args:
        code: Raw code, separators allowed

    Returns:
        Detected code type, NONE if nothing matched
    """
    if not code:
        return ProductCodeType.NONE

    normalized = normalize(code)
    code_type = _classify_normalized(normalized)

    if classification_logging_enabled():
        logger.debug("Classified code", normalized_code=normalized, code_type=code_type.value)

    return code_type


def describe_code(code: str | None) -> CodeClassification:
    """
    Classify a code and report the details.

    Args:
        code: Raw code, separators allowed

    Returns:
        Classification with the normalized code and validation flags
    """
    code_type = classify(code)
    normalized = normalize(code)

    return CodeClassification(
        code=code or "",
        normalized_code=normalized,
        code_type=code_type,
        numeric_only=is_numeric(normalized),
        checksum_valid=code_type in NUMERIC_CODE_TYPES,
    )
