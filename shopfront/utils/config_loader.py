"""
Configuration loader for the storefront
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent.parent
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "config" / "shop_config.yml"
CONFIG_ENV_VAR = "SHOPFRONT_CONFIG"


class ShopConfig(BaseModel):
    """Storefront settings"""

    catalog_path: str = "data/products.csv"
    page_size: int = Field(default=5, ge=1, le=50)
    currency_symbol: str = "$"
    receipt_time_format: str = "%a %b %d, %Y @ %I:%M %p"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    def resolve_catalog_path(self, base: Optional[Path] = None) -> Path:
        """Relative catalog paths are taken from the project root (or `base`)."""
        path = Path(self.catalog_path)
        if path.is_absolute():
            return path
        return (base or PROJECT_ROOT) / path


def load_shop_config(config_path: Optional[Path] = None) -> ShopConfig:
    """
    Load and validate storefront configuration from a YAML file

    Args:
        config_path: Path to config file. Defaults to $SHOPFRONT_CONFIG, then
            config/shop_config.yml. A missing default file yields the built-in defaults.

    Returns:
        Validated ShopConfig object

    Raises:
        FileNotFoundError: If an explicitly requested config file doesn't exist
        ValidationError: If config doesn't match schema
    """
    explicit = config_path is not None
    if config_path is None and os.getenv(CONFIG_ENV_VAR):
        config_path = Path(os.environ[CONFIG_ENV_VAR])
        explicit = True
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    if not config_path.exists():
        if explicit:
            raise FileNotFoundError(f"Config file not found: {config_path}")
        logger.info("No config file at %s, using defaults", config_path)
        return ShopConfig()

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    try:
        cfg = ShopConfig(**data)
        logger.info("Successfully loaded shop config from %s", config_path)
        return cfg
    except ValidationError as e:
        logger.error("Shop config validation failed: %s", e)
        raise
