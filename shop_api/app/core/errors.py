"""
Error taxonomy and its translation to HTTP responses.

Services and the data-access layer raise the exceptions defined here;
``register_exception_handlers`` installs one handler per exception
type on the application so that every route shares the same response
contract:

* validation failures, malformed identifiers and unknown product
  references produce ``400`` with ``{"message", "errors"}``;
* missing entities, unknown routes and unsupported methods produce
  their status code with ``{"message"}``;
* storage and catalog failures, and any other unexpected exception,
  produce ``500`` with ``{"message", "error"}``, where ``error`` is
  only the exception class name so that connection details never leak
  to clients.
"""

import logging
from typing import Any, Dict, Iterable, List, Sequence

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ShopError(Exception):
    """Base class for all errors raised by the application."""


class InvalidIdentifierError(ShopError):
    """An identifier is not a syntactically valid ObjectId."""

    def __init__(self, value: Any, loc: Sequence[str] = ("path", "id")) -> None:
        super().__init__(f"Invalid identifier: {value!r}")
        self.value = value
        self.loc = list(loc)


class UnknownProductsError(ShopError):
    """An order references product ids that do not exist."""

    def __init__(self, product_ids: Iterable[str]) -> None:
        self.product_ids = list(product_ids)
        super().__init__(f"Unknown product ids: {', '.join(self.product_ids)}")


class OrderTotalError(ShopError):
    """The priced total of an order is not a finite number."""


class NotFoundError(ShopError):
    """A single entity lookup matched nothing."""

    def __init__(self, entity: str, identifier: Any = None) -> None:
        super().__init__(f"{entity} not found")
        self.entity = entity
        self.identifier = identifier


class StorageError(ShopError):
    """The document store failed to complete an operation."""


class CatalogError(ShopError):
    """The external game catalog could not be reached or answered badly."""


def _error_item(loc: Sequence[Any], msg: str, type_: str) -> Dict[str, Any]:
    return {"loc": list(loc), "msg": msg, "type": type_}


def _bad_request(errors: List[Dict[str, Any]], message: str = "Invalid data") -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": message, "errors": errors},
    )


def _server_error(message: str, exc: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": message, "error": type(exc.__cause__ or exc).__name__},
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Return every violated field without echoing the rejected input."""
    errors = [
        _error_item(err.get("loc", ()), err.get("msg", ""), err.get("type", "value_error"))
        for err in exc.errors()
    ]
    logger.debug("Rejected %s %s: %d validation error(s)", request.method, request.url.path, len(errors))
    return _bad_request(errors)


async def invalid_identifier_handler(request: Request, exc: InvalidIdentifierError) -> JSONResponse:
    return _bad_request(
        [_error_item(exc.loc, "Invalid identifier format", "invalid_id")],
        message="Invalid identifier",
    )


async def unknown_products_handler(request: Request, exc: UnknownProductsError) -> JSONResponse:
    return _bad_request([_error_item(("body", "productIds"), str(exc), "unknown_product")])


async def order_total_handler(request: Request, exc: OrderTotalError) -> JSONResponse:
    return _bad_request([_error_item(("body", "productIds"), str(exc), "total_out_of_range")])


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"message": str(exc)})


async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    return _server_error("Server error", exc)


async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
    return _server_error("Failed to fetch Free-to-Play games", exc)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _server_error("Server error", exc)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the handlers above to ``app``."""
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(InvalidIdentifierError, invalid_identifier_handler)
    app.add_exception_handler(UnknownProductsError, unknown_products_handler)
    app.add_exception_handler(OrderTotalError, order_total_handler)
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(StorageError, storage_error_handler)
    app.add_exception_handler(CatalogError, catalog_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
