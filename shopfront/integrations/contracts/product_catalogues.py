"""
Product catalogue contract: filters, sort specs and the helpers that apply them.

Filters and sort specs are plain data. They carry what to test or compare on,
and the functions in this module interpret them:
- matches() / filter_products() evaluate filters (logical AND)
- compare_products() / sort_products() evaluate sort tiers (lexicographic)
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterable, List, Sequence, Tuple, Union

from .interfaces import FilterKind, Product, SortKey


# ---------------------------------------------------------------------------
# Filters
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ProductFilter:
    """A named boolean test over a product."""
    kind: FilterKind
    value: Union[Decimal, str]
    description: str

    @classmethod
    def max_price(cls, limit: Decimal) -> "ProductFilter":
        return cls(FilterKind.MAX_PRICE, limit, f"Price < {limit}")

    @classmethod
    def min_price(cls, limit: Decimal) -> "ProductFilter":
        return cls(FilterKind.MIN_PRICE, limit, f"Price > {limit}")

    @classmethod
    def department(cls, department: str) -> "ProductFilter":
        return cls(FilterKind.DEPARTMENT, department, f"In {department}")

    @classmethod
    def name_contains(cls, text: str) -> "ProductFilter":
        needle = text.lower()
        return cls(FilterKind.NAME_CONTAINS, needle, f'Contains "{needle}"')


def matches(product: Product, f: ProductFilter) -> bool:
    """Evaluate a single filter against a product."""
    if f.kind is FilterKind.MAX_PRICE:
        return product.price < f.value
    if f.kind is FilterKind.MIN_PRICE:
        return product.price > f.value
    if f.kind is FilterKind.DEPARTMENT:
        return product.department == f.value
    if f.kind is FilterKind.NAME_CONTAINS:
        return f.value in product.name.lower()
    raise ValueError(f"Unknown filter kind: {f.kind}")


def filter_products(products: Iterable[Product], filters: Sequence[ProductFilter]) -> List[Product]:
    """Return the products that pass every filter, keeping their input order."""
    return [p for p in products if all(matches(p, f) for f in filters)]


# ---------------------------------------------------------------------------
# Sorting
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SortSpec:
    """An ordered, composable set of sort tiers. No tiers means catalog order."""
    tiers: Tuple[SortKey, ...] = field(default_factory=tuple)

    @classmethod
    def default(cls) -> "SortSpec":
        return cls()

    @property
    def is_default(self) -> bool:
        return not self.tiers

    @property
    def description(self) -> str:
        if not self.tiers:
            return ""
        head, *rest = self.tiers
        return head.label + "".join(f", then by {key.label}" for key in rest)

    def then_by(self, key: SortKey) -> "SortSpec":
        return SortSpec(self.tiers + (key,))

    def __str__(self) -> str:
        return self.description


def _sort_value(product: Product, key: SortKey):
    if key is SortKey.NAME:
        return product.name
    if key is SortKey.PRICE:
        return product.price
    if key is SortKey.DEPARTMENT:
        return product.department
    raise ValueError(f"Unknown sort key: {key}")


def compare_products(a: Product, b: Product, spec: SortSpec) -> int:
    """Compare two products tier by tier. Returns -1, 0 or 1."""
    for key in spec.tiers:
        left, right = _sort_value(a, key), _sort_value(b, key)
        if left < right:
            return -1
        if left > right:
            return 1
    return 0


def sort_key(spec: SortSpec):
    """Build a key function equivalent to compare_products for use with sorted()."""
    return lambda product: tuple(_sort_value(product, key) for key in spec.tiers)


def sort_products(products: Iterable[Product], spec: SortSpec) -> List[Product]:
    """Order products by the spec; ties (and the default spec) keep input order."""
    if spec.is_default:
        return list(products)
    return sorted(products, key=sort_key(spec))


def distinct_departments(products: Iterable[Product]) -> List[str]:
    """Departments present in the catalog, in first-seen order."""
    seen: List[str] = []
    for p in products:
        if p.department not in seen:
            seen.append(p.department)
    return seen
