"""Pytest fixtures for storefront tests."""

import io
from decimal import Decimal

import pytest

from shopfront.console import Console
from shopfront.integrations.contracts.interfaces import Product
from shopfront.navigation.engine import NavigationEngine


def make_product(product_id, name, price, department):
    return Product(product_id=product_id, name=name, price=Decimal(price), department=department)


@pytest.fixture
def catalog():
    """Small catalog in a fixed order; several prices sit on the 20.00 boundary."""
    return (
        make_product("B1", "Novel", "15.00", "Books"),
        make_product("T1", "Yo-yo", "10.00", "Toys"),
        make_product("B2", "Atlas", "25.00", "Books"),
        make_product("K1", "Kettle", "20.00", "Kitchen"),
        make_product("T2", "Kite", "20.00", "Toys"),
        make_product("B3", "Cookbook", "20.00", "Books"),
        make_product("K2", "Apron", "7.50", "Kitchen"),
    )


class ScriptedShop:
    """Runs the engine against a canned list of input lines and captures the output."""

    def __init__(self, catalog, lines, **kwargs):
        self.stdout = io.StringIO()
        self.console = Console(stdin=io.StringIO("".join(f"{line}\n" for line in lines)), stdout=self.stdout)
        self.engine = NavigationEngine(catalog, console=self.console, **kwargs)

    def run(self):
        self.engine.run()
        return self.stdout.getvalue()

    @property
    def session(self):
        return self.engine.session


@pytest.fixture
def scripted_shop(catalog):
    def build(lines, **kwargs):
        return ScriptedShop(catalog, lines, **kwargs)

    return build
