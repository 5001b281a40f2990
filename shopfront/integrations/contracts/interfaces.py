from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class FilterKind(str, Enum):
    MAX_PRICE = "MAX_PRICE"
    MIN_PRICE = "MIN_PRICE"
    DEPARTMENT = "DEPARTMENT"
    NAME_CONTAINS = "NAME_CONTAINS"


class SortKey(str, Enum):
    NAME = "Name"
    PRICE = "Price"
    DEPARTMENT = "Department"

    @property
    def label(self) -> str:
        return self.value


# ---------------------------------------------------------------------------
# Shared data models
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Product:
    """A read-only catalog entry. Two products are the same product iff their ids match."""

    product_id: str
    name: str = field(compare=False)
    price: Decimal = field(compare=False)
    department: str = field(compare=False)
