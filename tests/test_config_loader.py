import pytest
from pydantic import ValidationError

from shopfront.utils.config_loader import CONFIG_ENV_VAR, ShopConfig, load_shop_config


def test_defaults():
    cfg = ShopConfig()
    assert cfg.page_size == 5
    assert cfg.currency_symbol == "$"
    assert cfg.log_level == "WARNING"


def test_load_from_yaml(tmp_path):
    path = tmp_path / "shop.yml"
    path.write_text("page_size: 3\ncatalog_path: /srv/catalog.csv\nlog_level: DEBUG\n", encoding="utf-8")

    cfg = load_shop_config(path)
    assert cfg.page_size == 3
    assert cfg.log_level == "DEBUG"
    assert str(cfg.resolve_catalog_path()) == "/srv/catalog.csv"


def test_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / "shop.yml"
    path.write_text("", encoding="utf-8")
    assert load_shop_config(path) == ShopConfig()


def test_explicit_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_shop_config(tmp_path / "missing.yml")


def test_env_var_points_at_config(tmp_path, monkeypatch):
    path = tmp_path / "env.yml"
    path.write_text("currency_symbol: \"EUR \"\n", encoding="utf-8")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
    assert load_shop_config().currency_symbol == "EUR "


def test_invalid_values_are_rejected(tmp_path):
    path = tmp_path / "shop.yml"
    path.write_text("page_size: 0\n", encoding="utf-8")
    with pytest.raises(ValidationError):
        load_shop_config(path)


def test_relative_catalog_path_is_resolved_from_base(tmp_path):
    cfg = ShopConfig(catalog_path="data/items.csv")
    assert cfg.resolve_catalog_path(tmp_path) == tmp_path / "data" / "items.csv"
