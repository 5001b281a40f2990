"""
Pages of the storefront state machine
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

from shopfront.integrations.contracts.interfaces import Product


class Page(str, Enum):
    HOME = "home"
    BROWSE = "browse"
    ADD_TO_CART = "add_to_cart"
    SEARCH_OPTIONS = "search_options"
    ADD_FILTER = "add_filter"
    PRICE_FILTER = "price_filter"
    DEPARTMENT_FILTER = "department_filter"
    NAME_FILTER = "name_filter"
    REMOVE_FILTER = "remove_filter"
    SORT_MODE = "sort_mode"
    CART = "cart"
    REMOVE_CART_ITEM = "remove_cart_item"
    CHECKOUT = "checkout"
    EXIT = "exit"


@dataclass(frozen=True)
class PageState:
    """A page plus the little context its prompt needs.

    `is_max` is only meaningful on PRICE_FILTER; `entries` holds the products
    listed by CART, in the order shown, for REMOVE_CART_ITEM.
    """

    page: Page
    is_max: bool = False
    entries: Tuple[Product, ...] = field(default_factory=tuple)

    @property
    def is_terminal(self) -> bool:
        return self.page is Page.EXIT


HOME = PageState(Page.HOME)
EXIT = PageState(Page.EXIT)
