"""
Cart ledger - product to quantity accounting for the shopping session
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Iterator, List, Optional, Sequence

from shopfront.integrations.contracts.interfaces import Product
from shopfront.integrations.contracts.product_catalogues import SortSpec, sort_products

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CartEntry:
    product: Product
    quantity: int

    @property
    def subtotal(self) -> Decimal:
        return self.product.price * self.quantity


class CartLedger:
    """Mutable mapping of product -> quantity.

    Every product held has a quantity of at least 1; a product whose quantity
    drops to 0 is removed. Iteration follows the order products were first added.
    """

    def __init__(self):
        self._items: Dict[Product, int] = {}

    def add_one(self, product: Product) -> int:
        """Add one unit of a product, inserting it at quantity 1 if absent."""
        quantity = self._items.get(product, 0) + 1
        self._items[product] = quantity
        logger.debug("Cart add %s -> %d", product.product_id, quantity)
        return quantity

    def remove_one(self, entry_index: int, ordered_view: Sequence[Product]) -> int:
        """Remove one unit of the product at `entry_index` in a caller-supplied ordering.

        Returns the remaining quantity; 0 means the product left the cart.
        Raises IndexError when the index is outside the view.
        """
        if not 0 <= entry_index < len(ordered_view):
            raise IndexError(f"Cart entry {entry_index} out of range")
        product = ordered_view[entry_index]
        if product not in self._items:
            raise KeyError(product.product_id)

        quantity = self._items[product] - 1
        if quantity == 0:
            del self._items[product]
        else:
            self._items[product] = quantity
        logger.debug("Cart remove %s -> %d", product.product_id, quantity)
        return quantity

    def quantity(self, product: Product) -> int:
        return self._items.get(product, 0)

    def total_count(self) -> int:
        return sum(self._items.values())

    def total_price(self) -> Decimal:
        return sum((p.price * q for p, q in self._items.items()), Decimal("0"))

    def entries(self, sort: Optional[SortSpec] = None) -> List[CartEntry]:
        """Snapshot of the cart, ordered by `sort` when given (insertion order otherwise)."""
        products = list(self._items)
        if sort is not None:
            products = sort_products(products, sort)
        return [CartEntry(p, self._items[p]) for p in products]

    def clear(self) -> None:
        self._items.clear()

    @property
    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Product]:
        return iter(self._items)

    def __contains__(self, product) -> bool:
        return product in self._items
