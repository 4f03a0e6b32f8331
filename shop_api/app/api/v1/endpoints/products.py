"""
Product endpoints for API v1.

Products can be created, listed, fetched and deleted.  Malformed
identifiers are rejected with 400 and unknown ones with 404; both are
produced by the exception handlers in ``core.errors``.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from shop_api.app.api.deps import get_product_service
from shop_api.app.schemas.common import Message
from shop_api.app.schemas.product import ProductCreate, ProductRead
from shop_api.app.services.product_service import ProductService

router = APIRouter()


@router.post("", response_model=ProductRead, status_code=status.HTTP_201_CREATED)
async def create_product(
    product: ProductCreate,
    service: ProductService = Depends(get_product_service),
) -> ProductRead:
    """Create a product and return it with its generated id."""
    return await service.create_product(product)


@router.get("", response_model=List[ProductRead])
async def list_products(
    offset: int = Query(0, ge=0, le=1_000_000_000),
    limit: Optional[int] = Query(None, ge=1, le=1000),
    service: ProductService = Depends(get_product_service),
) -> List[ProductRead]:
    """Return all products, optionally paginated with ``offset``/``limit``."""
    return await service.list_products(offset=offset, limit=limit)


@router.get("/{product_id}", response_model=ProductRead)
async def get_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
) -> ProductRead:
    return await service.get_product(product_id)


@router.delete("/{product_id}", response_model=Message)
async def delete_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
) -> Message:
    await service.delete_product(product_id)
    return Message(message="Product deleted")
