"""
Catalog view - filtered, sorted and paged product listings
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from shopfront.integrations.contracts.interfaces import Product
from shopfront.integrations.contracts.product_catalogues import (
    ProductFilter,
    SortSpec,
    filter_products,
    sort_products,
)

MAX_PRODUCTS_PER_PAGE = 5


@dataclass(frozen=True)
class CatalogPage:
    shown: Tuple[Product, ...]
    matched: int
    available: int

    @property
    def truncated(self) -> bool:
        return self.matched > len(self.shown)

    @property
    def indicator(self) -> str:
        """'5/7' when results were cut off, otherwise just the match count."""
        if self.truncated:
            return f"{len(self.shown)}/{self.matched}"
        return str(self.matched)


class CatalogView:
    def __init__(self, catalog: Sequence[Product], page_size: int = MAX_PRODUCTS_PER_PAGE):
        self.catalog = tuple(catalog)
        self.page_size = page_size

    def search(self, filters: Sequence[ProductFilter], sort: SortSpec) -> List[Product]:
        """All products passing every filter, in sort order."""
        return sort_products(filter_products(self.catalog, filters), sort)

    def page(self, filters: Sequence[ProductFilter], sort: SortSpec) -> CatalogPage:
        """The first page of results. Always computed fresh from the current filters and sort."""
        results = self.search(filters, sort)
        return CatalogPage(
            shown=tuple(results[: self.page_size]),
            matched=len(results),
            available=len(self.catalog),
        )

    def render(self, page: CatalogPage, currency_symbol: str = "$") -> List[str]:
        lines = [
            f"There are {page.available} products available. "
            f"Showing {page.indicator} based on your filters."
        ]
        for i, product in enumerate(page.shown, start=1):
            lines.append(f"{i}\t{product.department}\t{product.name}\t{currency_symbol}{product.price:.2f}")
        return lines
