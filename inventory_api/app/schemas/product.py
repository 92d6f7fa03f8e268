"""
Pydantic schemas for product records.

A product is identified by its SKU.  The same model is used as the
request body for add/update, as the record kept by storage and as
the item returned by list/search.  The quantity travels on the wire
as ``qty``; Python code uses ``quantity``.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

UINT8_MAX = 2**8 - 1
UINT32_MAX = 2**32 - 1
UINT64_MAX = 2**64 - 1


class Product(BaseModel):
    """A single inventory record."""

    model_config = ConfigDict(populate_by_name=True)

    sku: str = Field(..., min_length=1, description="Stock keeping unit, unique per product", examples=["OBT-001"])
    name: str = Field(..., min_length=1, examples=["OBT-Sehat01"])
    quantity: int = Field(0, alias="qty", ge=0, le=UINT32_MAX, examples=[100])
    price: int = Field(..., gt=0, le=UINT64_MAX, examples=[100000])
    unit: str = Field(..., min_length=1, examples=["Carton"])
    status: int = Field(0, ge=0, le=UINT8_MAX, description="Opaque status code", examples=[1])


class ProductSKU(BaseModel):
    """Request body for delete and search, which only need the key."""

    sku: str = Field(..., min_length=1, examples=["OBT-001"])


class ProductList(BaseModel):
    """Response body of the list endpoint."""

    data: List[Product]
