"""
Order endpoints for API v1.

Totals are computed server-side from the referenced products (see
``services.pricing``).  ``PUT`` replaces ``userId``, ``productIds``
and ``payment`` and recomputes the total and ``updatedAt``.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from shop_api.app.api.deps import get_order_service
from shop_api.app.schemas.common import Message
from shop_api.app.schemas.order import OrderCreate, OrderRead, OrderUpdate
from shop_api.app.services.order_service import OrderService

router = APIRouter()


@router.post("", response_model=OrderRead, status_code=status.HTTP_201_CREATED)
async def create_order(
    order: OrderCreate,
    service: OrderService = Depends(get_order_service),
) -> OrderRead:
    """Create an order.

    Every entry of ``productIds`` must reference an existing product,
    otherwise 400 is returned and nothing is stored.
    """
    return await service.create_order(order)


@router.get("", response_model=List[OrderRead])
async def list_orders(service: OrderService = Depends(get_order_service)) -> List[OrderRead]:
    return await service.list_orders()


@router.get("/{order_id}", response_model=OrderRead)
async def get_order(
    order_id: str,
    service: OrderService = Depends(get_order_service),
) -> OrderRead:
    return await service.get_order(order_id)


@router.put("/{order_id}", response_model=OrderRead)
async def update_order(
    order_id: str,
    order: OrderUpdate,
    service: OrderService = Depends(get_order_service),
) -> OrderRead:
    return await service.update_order(order_id, order)


@router.delete("/{order_id}", response_model=Message)
async def delete_order(
    order_id: str,
    service: OrderService = Depends(get_order_service),
) -> Message:
    await service.delete_order(order_id)
    return Message(message="Order deleted")
