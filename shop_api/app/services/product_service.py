"""
Business logic for products.

Products are immutable once created: the API offers create, read and
delete only.
"""

import logging
from typing import List, Optional

from ..core.db import PRODUCTS, Repository
from ..schemas.product import ProductCreate, ProductRead

logger = logging.getLogger(__name__)


class ProductService:
    """Service for working with products."""

    def __init__(self, database) -> None:
        self.products = Repository(database[PRODUCTS], entity="Product")

    async def create_product(self, data: ProductCreate) -> ProductRead:
        """Store a validated product and return it with its new id."""
        product_id = await self.products.insert_one(data.model_dump())
        logger.info("Created product %s (%s)", product_id, data.name)
        return ProductRead(id=product_id, **data.model_dump())

    async def list_products(self, offset: int = 0, limit: Optional[int] = None) -> List[ProductRead]:
        docs = await self.products.find_all(skip=offset, limit=limit)
        return [ProductRead.model_validate(doc) for doc in docs]

    async def get_product(self, product_id: str) -> ProductRead:
        """Return one product.  Raises ``NotFoundError`` if missing."""
        doc = await self.products.find_one(product_id)
        return ProductRead.model_validate(doc)

    async def delete_product(self, product_id: str) -> None:
        """Delete one product.  Raises ``NotFoundError`` if missing."""
        await self.products.delete_one(product_id)
        logger.info("Deleted product %s", product_id)
