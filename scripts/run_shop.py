#!/usr/bin/env python3
"""
Start the console storefront from a source checkout.

Usage (from repo root):
  python scripts/run_shop.py
  SHOPFRONT_CONFIG=config/shop_config.yml python scripts/run_shop.py
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from shopfront.main import main  # noqa: E402


if __name__ == "__main__":
    sys.exit(main())
