"""
Top-level router for version 1 of the API.

This router aggregates the domain routers.  Routes are served from
the application root (``/products``, ``/orders``...), matching the
paths existing clients already use.
"""

from fastapi import APIRouter

from .endpoints import documents, games, orders, products, users

router = APIRouter()

router.include_router(products.router, prefix="/products", tags=["products"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(orders.router, prefix="/orders", tags=["orders"])
router.include_router(games.router, prefix="/f2p-games", tags=["f2p-games"])
# The demonstration routes carry their full paths themselves.
router.include_router(documents.router, tags=["documents"])
