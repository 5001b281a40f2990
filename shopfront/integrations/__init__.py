"""
Integrations layer.
This package holds the product catalogue contracts and the client that loads
the catalog from disk.

Key rule:
- Navigation pages MUST NOT read catalog files directly.
- They receive an already-loaded tuple of products (see shopfront/main.py).
"""

from .contracts.interfaces import FilterKind, Product, SortKey
from .contracts.product_catalogues import (
    ProductFilter,
    SortSpec,
    compare_products,
    distinct_departments,
    filter_products,
    matches,
    sort_products,
)
from .clients.local_product_catalogues import LocalProductCatalogueClient

__all__ = [
    # interfaces
    "FilterKind", "Product", "SortKey",
    # products
    "ProductFilter", "SortSpec", "compare_products", "distinct_departments",
    "filter_products", "matches", "sort_products",
    # clients
    "LocalProductCatalogueClient",
]
