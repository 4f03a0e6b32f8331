"""
Pydantic models for order data.

Field names are exposed in camelCase (``userId``, ``productIds``,
``createdAt``, ``updatedAt``) and stored under the same keys.  The
client never supplies ``total`` or the timestamps; they are derived
by ``OrderService``.
"""

from datetime import datetime
from typing import List

from pydantic import BaseModel, Field


class OrderBase(BaseModel):
    user_id: str = Field(..., alias="userId", examples=["u1"])
    product_ids: List[str] = Field(..., alias="productIds", examples=[["6650f1c2a3b4c5d6e7f80911"]])
    payment: bool = Field(False, examples=[False])

    model_config = {
        "strict": True,
    }


class OrderCreate(OrderBase):
    """Schema for creating an order."""
    pass


class OrderUpdate(OrderBase):
    """Schema for replacing an order.

    ``userId``, ``productIds`` and ``payment`` are all replaced; the
    total is recomputed from the new product list.
    """
    pass


class OrderRead(BaseModel):
    """Schema for reading an order from the API."""

    id: str
    user_id: str = Field(..., alias="userId")
    product_ids: List[str] = Field(..., alias="productIds")
    total: float = Field(..., ge=0)
    payment: bool = False
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")
