"""
FastAPI dependency providers.

The database handle and the game catalog client are created once by
the application lifespan and kept on ``app.state``.  Handlers receive
them, or services built on them, through these providers; tests can
swap any of them with ``app.dependency_overrides``.
"""

from fastapi import Depends, Request

from ..services.document_service import DocumentService
from ..services.game_catalog import GameCatalogClient
from ..services.order_service import OrderService
from ..services.product_service import ProductService
from ..services.user_service import UserService


def get_database(request: Request):
    return request.app.state.database


def get_catalog_client(request: Request) -> GameCatalogClient:
    return request.app.state.catalog


def get_product_service(database=Depends(get_database)) -> ProductService:
    return ProductService(database)


def get_user_service(database=Depends(get_database)) -> UserService:
    return UserService(database)


def get_order_service(database=Depends(get_database)) -> OrderService:
    return OrderService(database)


def get_document_service(database=Depends(get_database)) -> DocumentService:
    return DocumentService(database)
