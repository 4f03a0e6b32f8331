"""
Pydantic models for product data.

``ProductCreate`` describes the body accepted by ``POST /products``;
``ProductRead`` adds the identifier assigned by the database.
"""

from pydantic import BaseModel, Field


class ProductBase(BaseModel):
    name: str = Field(..., min_length=1, examples=["Book"])
    about: str = Field(..., min_length=1, examples=["Paper"])
    price: float = Field(..., gt=0, allow_inf_nan=False, examples=[10])


class ProductCreate(ProductBase):
    """Schema for creating a product."""

    model_config = {
        "strict": True,
    }


class ProductRead(ProductBase):
    """Schema for reading a product from the API."""

    id: str
