# catalog_service/schemas.py

"""
Pydantic schemas for the Product Service API.
These define the data structures for incoming requests and outgoing responses.
Field rules are left to the catalog's validation engine, so request schemas
only check types and accept missing fields.
"""

from datetime import datetime
from decimal import Decimal
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, StrictInt

from .models import ProductCandidate


# Schema for creating a new product.
# Used in POST /api/products endpoint.
class ProductCreate(BaseModel):
    name: Optional[str] = Field(None, description="Name of the product, 1-100 characters.")
    description: Optional[str] = Field(None, description="Description of the product.")
    price: Optional[Decimal] = Field(None, description="Price of the product. Must be greater than 0.")
    quantity: Optional[StrictInt] = Field(None, description="Quantity in stock. Must be non-negative.")
    category: Optional[str] = Field(None, description="Category the product belongs to.")

    def to_candidate(self) -> ProductCandidate:
        return ProductCandidate(**self.model_dump())


# Schema for updating an existing product.
# Every field is replaced, partial updates are rejected by validation.
# Used in PUT /api/products/{product_id} endpoint.
class ProductUpdate(ProductCreate):
    pass


# Schema for representing a product in API responses.
class ProductResponse(BaseModel):
    id: int = Field(..., description="Unique identifier of the product.")
    name: str
    description: str
    price: Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]
    quantity: int
    category: str

    model_config = ConfigDict(from_attributes=True)


# Body returned for every failed request.
class ErrorResponse(BaseModel):
    timestamp: datetime = Field(..., description="When the error occurred (UTC).")
    status: int = Field(..., description="HTTP status code.")
    error: str = Field(..., description="HTTP reason phrase.")
    message: str = Field(..., description="Human-readable failure reason.")
    path: str = Field(..., description="Request path that failed.")
