"""
Session state for a shopping run
"""

import logging
from dataclasses import dataclass, field
from typing import List

from shopfront.integrations.contracts.interfaces import SortKey
from shopfront.integrations.contracts.product_catalogues import ProductFilter, SortSpec
from shopfront.navigation.flows.cart import CartLedger

logger = logging.getLogger(__name__)


@dataclass
class ShopSession:
    """The long-lived state the pages share: active filters, sort spec and cart."""

    filters: List[ProductFilter] = field(default_factory=list)
    sort: SortSpec = field(default_factory=SortSpec.default)
    cart: CartLedger = field(default_factory=CartLedger)

    # --- Filters -------------------------------------------------------------

    def add_filter(self, product_filter: ProductFilter) -> None:
        self.filters.append(product_filter)
        logger.debug("Filter added: %s (%d active)", product_filter.description, len(self.filters))

    def remove_filter(self, index: int) -> ProductFilter:
        """Remove the filter at a 0-based position in display order."""
        removed = self.filters.pop(index)
        logger.debug("Filter removed: %s (%d active)", removed.description, len(self.filters))
        return removed

    # --- Sorting -------------------------------------------------------------

    def reset_sort(self) -> None:
        self.sort = SortSpec.default()

    def add_sort_tier(self, key: SortKey) -> None:
        self.sort = self.sort.then_by(key)
        logger.debug("Sorting by %s", self.sort.description)

    # --- Cart ----------------------------------------------------------------

    def cart_status(self, updated: bool = False) -> str:
        total = self.cart.total_count()
        return "There {verb}{now} {total} item{plural} in your cart.".format(
            verb="is" if total == 1 else "are",
            now=" now" if updated else "",
            total=total,
            plural="" if total == 1 else "s",
        )
