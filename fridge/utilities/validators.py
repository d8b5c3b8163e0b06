"""
Input validation schemas using Pydantic for the refrigerator API.

Quantities are only type-checked here; positivity is judged by the
Refrigerator so the caller gets an invalid_quantity outcome.
"""
from pydantic import BaseModel, Field, field_validator
from fridge.utilities.constants import DATE_PATTERN


class ProductNameInput(BaseModel):
    """Shared product name rules for every request that names a product."""
    name: str = Field(..., min_length=1, max_length=100)

    @field_validator('name')
    @classmethod
    def strip_name(cls, v):
        """Remove leading/trailing whitespace and reject blank names."""
        v = v.strip()
        if not v:
            raise ValueError('Product name cannot be empty')
        return v


class ProductInput(ProductNameInput):
    """Schema for inserting or restocking a product."""
    quantity: float = Field(..., allow_inf_nan=False)
    expiration_date: str = Field(..., pattern=DATE_PATTERN)


class ConsumeInput(ProductNameInput):
    """Schema for consuming part of a product."""
    quantity: float = Field(..., allow_inf_nan=False)


class ExpirationCheckInput(BaseModel):
    """Schema for an expiration sweep."""
    reference_date: str = Field(..., pattern=DATE_PATTERN)
