"""
Pydantic models and enums for classification results.
"""

from product_codes.models.classification import CodeClassification
from product_codes.models.code_type import NUMERIC_CODE_TYPES, ProductCodeType

__all__ = [
    "CodeClassification",
    "NUMERIC_CODE_TYPES",
    "ProductCodeType",
]
