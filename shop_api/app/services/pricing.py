"""
Order pricing.

An order's total is the sum of the prices of the products it
references, multiplied by a fixed markup.  Every occurrence of a
product id counts, so ordering the same product twice costs twice.
"""

import math
from typing import Iterable, List, Sequence

from ..core.db import Repository, to_object_id
from ..core.errors import OrderTotalError, UnknownProductsError

MARKUP_FACTOR = 1.2

_LOC = ("body", "productIds")


def compute_total(prices: Iterable[float]) -> float:
    """Apply the markup to the sum of ``prices``, rounded to cents."""
    return round(sum(prices) * MARKUP_FACTOR, 2)


async def price_order(products: Repository, product_ids: Sequence[str]) -> float:
    """Resolve ``product_ids`` against the products collection and price them.

    Raises
    ------
    InvalidIdentifierError
        If an id is not a valid ObjectId.
    UnknownProductsError
        If a well-formed id does not match any product.
    OrderTotalError
        If the total overflows to a non-finite number.
    """
    keys = [str(to_object_id(pid, _LOC)) for pid in product_ids]
    found = await products.find_by_ids(keys, loc=_LOC)
    price_by_id = {doc["id"]: doc["price"] for doc in found}
    missing: List[str] = [pid for pid, key in dict(zip(product_ids, keys)).items() if key not in price_by_id]
    if missing:
        raise UnknownProductsError(missing)
    total = compute_total(price_by_id[key] for key in keys)
    if not math.isfinite(total):
        raise OrderTotalError("Order total is out of range")
    return total
