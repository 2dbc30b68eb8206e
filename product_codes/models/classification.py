"""
Classification result model.
"""

from pydantic import BaseModel, ConfigDict, Field

from product_codes.models.code_type import ProductCodeType


class CodeClassification(BaseModel):
    """Result of classifying a single product code."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(..., description="The code as supplied by the caller")
    normalized_code: str = Field(..., description="Code with separators removed")
    code_type: ProductCodeType = Field(default=ProductCodeType.NONE)

    # Validation
    numeric_only: bool = Field(False, description="Whether the normalized code is all digits")
    checksum_valid: bool = Field(False, description="Whether a checksum was verified")

    @property
    def is_recognized(self) -> bool:
        """Check if the code matched any known format."""
        return self.code_type != ProductCodeType.NONE
