"""Product schemas for API requests and responses."""
from datetime import date
from decimal import Decimal
from typing import Annotated, Optional

from pydantic import BaseModel, Field, PlainSerializer
from pydantic.alias_generators import to_camel

# Prices are stored as NUMERIC but travel as plain JSON numbers
Price = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class ProductBase(BaseModel):
    """Mutable product fields, all optional since request bodies are not validated."""

    name: Optional[str] = Field(None, description="Product name", examples=["Laptop"])
    quantity_available: Optional[int] = Field(
        None, description="Units in stock", examples=[5]
    )
    price: Optional[Price] = Field(None, description="Unit price", examples=[999.99])
    available: Optional[bool] = Field(
        None, description="Whether the product is available", examples=[True]
    )
    creation_date: Optional[date] = Field(
        None, description="Date the product was created", examples=["2024-01-10"]
    )

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class ProductRequest(ProductBase):
    """Schema for create and update request bodies.

    ``id`` is accepted but only used by create, where it turns the save into
    an overwrite of the row with that id. Update always takes the id from
    the path.
    """

    id: Optional[int] = Field(None, description="Product id (assigned by the store)")


class ProductResponse(ProductBase):
    """Schema for product responses."""

    id: int

    class Config:
        from_attributes = True
