"""
Business logic for orders.

The order total is never taken from the client.  It is computed by
``pricing.price_order`` when the order is created and again on every
update, because the product list may change.
"""

import logging
from datetime import datetime, timezone
from typing import List

from ..core.db import ORDERS, PRODUCTS, Repository, to_object_id
from ..schemas.order import OrderCreate, OrderRead, OrderUpdate
from .pricing import price_order

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class OrderService:
    """Service for working with orders."""

    def __init__(self, database) -> None:
        self.orders = Repository(database[ORDERS], entity="Order")
        self.products = Repository(database[PRODUCTS], entity="Product")

    async def create_order(self, data: OrderCreate) -> OrderRead:
        """Price the referenced products and store a new order.

        The product lookup and the insert are separate operations; a
        product deleted in between does not invalidate the order.
        """
        total = await price_order(self.products, data.product_ids)
        now = utcnow()
        document = {
            **data.model_dump(by_alias=True),
            "total": total,
            "createdAt": now,
            "updatedAt": now,
        }
        order_id = await self.orders.insert_one(document)
        logger.info("Created order %s for user %s (total %.2f)", order_id, data.user_id, total)
        return await self.get_order(order_id)

    async def list_orders(self) -> List[OrderRead]:
        docs = await self.orders.find_all()
        return [OrderRead.model_validate(doc) for doc in docs]

    async def get_order(self, order_id: str) -> OrderRead:
        """Return one order.  Raises ``NotFoundError`` if missing."""
        doc = await self.orders.find_one(order_id)
        return OrderRead.model_validate(doc)

    async def update_order(self, order_id: str, data: OrderUpdate) -> OrderRead:
        """Replace the client-editable fields and recompute the total.

        The order id is validated before pricing so that a malformed
        id is reported ahead of problems in the body.
        """
        to_object_id(order_id)
        total = await price_order(self.products, data.product_ids)
        fields = {
            **data.model_dump(by_alias=True),
            "total": total,
            "updatedAt": utcnow(),
        }
        doc = await self.orders.update_one(order_id, fields)
        logger.info("Updated order %s (total %.2f)", order_id, total)
        return OrderRead.model_validate(doc)

    async def delete_order(self, order_id: str) -> None:
        """Delete one order.  Raises ``NotFoundError`` if missing."""
        await self.orders.delete_one(order_id)
        logger.info("Deleted order %s", order_id)
