"""
Client for the third-party Free-to-Play game catalog.

The client relays read-only requests to the FreeToGame API and returns
the parsed JSON body unchanged.  It uses a long-lived ``requests``
session created once at startup; because ``requests`` is blocking,
each call is run in Starlette's threadpool so the event loop keeps
serving other requests.

Any failure (network error, non-2xx status, body that is not JSON) is
raised as ``CatalogError``.  Nothing is retried or cached.
"""

import logging
from typing import Any, Dict, Optional

import requests
from starlette.concurrency import run_in_threadpool

from ..core.errors import CatalogError

logger = logging.getLogger(__name__)


class GameCatalogClient:
    """Thin wrapper around the FreeToGame REST API."""

    def __init__(
        self,
        *,
        base_url: str,
        timeout: float = 15,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the client.

        Args:
            base_url: Base URL of the catalog, e.g.
                ``https://www.freetogame.com/api``.
            timeout: Per-request timeout in seconds.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _request(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """Perform a GET request and return the decoded JSON body."""
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending GET request to %s", url)
            response = self.session.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            logger.error("Catalog request to %s failed with status %s", url, status)
            raise CatalogError(f"Catalog answered with status {status}") from exc
        except requests.RequestException as exc:
            logger.error("Catalog request to %s failed: %s", url, exc)
            raise CatalogError("Catalog request failed") from exc
        except ValueError as exc:
            logger.error("Catalog response from %s is not valid JSON", url)
            raise CatalogError("Catalog response is not valid JSON") from exc

    async def list_games(self) -> Any:
        """Return every game in the catalog."""
        return await run_in_threadpool(self._request, "/games")

    async def get_game(self, game_id: int) -> Any:
        """Return the catalog entry for ``game_id``."""
        return await run_in_threadpool(self._request, "/game", {"id": game_id})

    def close(self) -> None:
        self.session.close()
