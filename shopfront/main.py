"""
Console storefront - Main entry point
"""

from dotenv import load_dotenv

load_dotenv()

import logging
import sys
from pathlib import Path
from typing import Optional

from shopfront.console import Console
from shopfront.integrations.clients.local_product_catalogues import LocalProductCatalogueClient
from shopfront.navigation.engine import NavigationEngine
from shopfront.utils.config_loader import load_shop_config

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = "WARNING") -> None:
    """Log to stderr so prompts and receipts on stdout stay readable."""
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def main(config_path: Optional[Path] = None, console: Optional[Console] = None) -> int:
    config = load_shop_config(config_path)
    setup_logging(config.log_level)

    catalog = LocalProductCatalogueClient(config.resolve_catalog_path()).load_catalog()
    engine = NavigationEngine(catalog, console=console or Console(), config=config)
    engine.run()
    logger.info("Session finished")
    return 0


if __name__ == "__main__":
    sys.exit(main())
