"""
Local Product Catalogue Client.

Purpose:
- Loads the storefront catalog from a local pipe-delimited text file.
- One product per line: id|name|price|department

Degrade policy:
- A missing, unreadable or malformed source gives an empty catalog. The shop
  still starts; the failure is logged at WARNING for whoever runs it.
"""

import logging
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Iterable, List, Tuple, Union

from shopfront.error_handler import CatalogLoadError
from shopfront.integrations.contracts.interfaces import Product

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = "|"
FIELD_COUNT = 4


def parse_line(line: str, line_number: int = 0) -> Product:
    """Parse one `id|name|price|department` record."""
    parts = line.rstrip("\r\n").split(FIELD_SEPARATOR)
    if len(parts) != FIELD_COUNT:
        raise CatalogLoadError(f"Line {line_number}: expected {FIELD_COUNT} fields, got {len(parts)}")

    product_id, name, raw_price, department = (p.strip() for p in parts)
    try:
        price = Decimal(raw_price)
    except InvalidOperation:
        raise CatalogLoadError(f"Line {line_number}: invalid price {raw_price!r}") from None
    if not price.is_finite() or price < 0:
        raise CatalogLoadError(f"Line {line_number}: invalid price {raw_price!r}")

    return Product(product_id=product_id, name=name, price=price, department=department)


def parse_lines(lines: Iterable[str]) -> List[Product]:
    return [parse_line(line, n) for n, line in enumerate(lines, start=1) if line.strip()]


class LocalProductCatalogueClient:
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def read(self) -> List[Product]:
        """Read the catalog file. Raises CatalogLoadError on any failure."""
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                return parse_lines(f)
        except (OSError, UnicodeDecodeError) as e:
            raise CatalogLoadError(f"Cannot read catalog: {e}", source=str(self.path)) from e
        except CatalogLoadError as e:
            e.source = str(self.path)
            raise

    def load_catalog(self) -> Tuple[Product, ...]:
        """Read the catalog, substituting an empty one if it cannot be loaded."""
        try:
            products = tuple(self.read())
        except CatalogLoadError as e:
            logger.warning("Catalog unavailable (%s): %s. Continuing with an empty catalog.", e.source, e.message)
            return ()
        logger.info("Loaded %d products from %s", len(products), self.path)
        return products
