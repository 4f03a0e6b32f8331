"""
Free-to-Play game endpoints for API v1.

Both routes proxy the FreeToGame catalog and relay its JSON unchanged.
Catalog failures become 500 responses.
"""

from typing import Any

from fastapi import APIRouter, Depends

from shop_api.app.api.deps import get_catalog_client
from shop_api.app.services.game_catalog import GameCatalogClient

router = APIRouter()


@router.get("")
async def list_games(catalog: GameCatalogClient = Depends(get_catalog_client)) -> Any:
    return await catalog.list_games()


@router.get("/{game_id}")
async def get_game(game_id: int, catalog: GameCatalogClient = Depends(get_catalog_client)) -> Any:
    return await catalog.get_game(game_id)
