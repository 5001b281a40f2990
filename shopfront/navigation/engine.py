"""
Navigation engine - drives the storefront from page to page

Each page has two parts:
- an "enter" handler that prints the page (computing any listing fresh) and may
  redirect straight away when there is nothing to choose from
- a transition handler that turns one input token into the next PageState
"""

import logging
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from shopfront.console import Console
from shopfront.error_handler import EmptyCollectionError, ErrorHandler, ShopError, UserInputError
from shopfront.integrations.contracts.interfaces import Product, SortKey
from shopfront.integrations.contracts.product_catalogues import ProductFilter, distinct_departments
from shopfront.navigation.flows.browse import CatalogView
from shopfront.navigation.flows.checkout import CheckoutProcessor
from shopfront.navigation.pages import EXIT, HOME, Page, PageState
from shopfront.navigation.state_manager import ShopSession
from shopfront.navigation.validation import parse_choice, parse_decimal, pick
from shopfront.utils.config_loader import ShopConfig

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = "Welcome to the shop! Please take a look around."
GOODBYE_MESSAGE = "Thank you for using our shop!"

Option = Tuple[str, PageState]

HOME_OPTIONS: Tuple[Option, ...] = (
    ("Browse Products", PageState(Page.BROWSE)),
    ("View Cart", PageState(Page.CART)),
    ("Exit", EXIT),
)

BROWSE_OPTIONS: Tuple[Option, ...] = (
    ("Search", PageState(Page.SEARCH_OPTIONS)),
    ("Add to cart", PageState(Page.ADD_TO_CART)),
    ("Go Back", HOME),
)

SEARCH_OPTIONS: Tuple[Option, ...] = (
    ("Change sorting mode", PageState(Page.SORT_MODE)),
    ("Apply filter", PageState(Page.ADD_FILTER)),
    ("Remove filter", PageState(Page.REMOVE_FILTER)),
    ("Go Back", PageState(Page.BROWSE)),
)

ADD_FILTER_OPTIONS: Tuple[Option, ...] = (
    ("Price (Maximum)", PageState(Page.PRICE_FILTER, is_max=True)),
    ("Price (Minimum)", PageState(Page.PRICE_FILTER, is_max=False)),
    ("Department", PageState(Page.DEPARTMENT_FILTER)),
    ("Name", PageState(Page.NAME_FILTER)),
    ("Go Back", PageState(Page.SEARCH_OPTIONS)),
)

SORT_OPTIONS = ("Reset sort", "Sort by name", "Sort by price", "Sort by department", "Go back")
SORT_TIERS = {2: SortKey.NAME, 3: SortKey.PRICE, 4: SortKey.DEPARTMENT}

CART_OPTIONS = ("Check out", "Remove an item", "Go back")

# Where a page lands after bad input, when it does not simply re-show itself.
RECOVERY_PAGES = {
    Page.ADD_TO_CART: PageState(Page.BROWSE),
    Page.REMOVE_FILTER: PageState(Page.SEARCH_OPTIONS),
    Page.CHECKOUT: PageState(Page.CART),
}

# Where a page lands when it has nothing to choose from.
EMPTY_REDIRECTS = {
    Page.ADD_TO_CART: PageState(Page.BROWSE),
    Page.REMOVE_FILTER: PageState(Page.SEARCH_OPTIONS),
    Page.DEPARTMENT_FILTER: PageState(Page.ADD_FILTER),
}


class NavigationEngine:
    def __init__(
        self,
        catalog: Sequence[Product],
        console: Optional[Console] = None,
        session: Optional[ShopSession] = None,
        config: Optional[ShopConfig] = None,
    ):
        self.config = config or ShopConfig()
        self.catalog = tuple(catalog)
        self.console = console or Console()
        self.session = session or ShopSession()
        self.view = CatalogView(self.catalog, page_size=self.config.page_size)
        self.checkout_processor = CheckoutProcessor(
            currency_symbol=self.config.currency_symbol,
            time_format=self.config.receipt_time_format,
        )
        self.errors = ErrorHandler()
        self.departments = distinct_departments(self.catalog)

        self._enter_handlers: Dict[Page, Callable[[PageState], None]] = {
            Page.HOME: lambda state: self._show_options(HOME_OPTIONS),
            Page.BROWSE: self._enter_browse,
            Page.ADD_TO_CART: self._enter_add_to_cart,
            Page.SEARCH_OPTIONS: self._enter_search_options,
            Page.ADD_FILTER: lambda state: self._show_options(ADD_FILTER_OPTIONS, "Filter by what?"),
            Page.PRICE_FILTER: self._enter_price_filter,
            Page.DEPARTMENT_FILTER: self._enter_department_filter,
            Page.NAME_FILTER: lambda state: self._prompt("What are you looking for?"),
            Page.REMOVE_FILTER: self._enter_remove_filter,
            Page.SORT_MODE: lambda state: self._show_menu(SORT_OPTIONS, None),
            Page.CART: self._enter_cart,
            Page.REMOVE_CART_ITEM: lambda state: self._prompt("Which item to remove?"),
            Page.CHECKOUT: self._enter_checkout,
        }
        self._handlers: Dict[Page, Callable[[PageState, str], PageState]] = {
            Page.HOME: lambda state, token: pick(token, HOME_OPTIONS)[1],
            Page.BROWSE: lambda state, token: pick(token, BROWSE_OPTIONS)[1],
            Page.ADD_TO_CART: self._on_add_to_cart,
            Page.SEARCH_OPTIONS: lambda state, token: pick(token, SEARCH_OPTIONS)[1],
            Page.ADD_FILTER: lambda state, token: pick(token, ADD_FILTER_OPTIONS)[1],
            Page.PRICE_FILTER: self._on_price_filter,
            Page.DEPARTMENT_FILTER: self._on_department_filter,
            Page.NAME_FILTER: self._on_name_filter,
            Page.REMOVE_FILTER: self._on_remove_filter,
            Page.SORT_MODE: self._on_sort_mode,
            Page.CART: self._on_cart,
            Page.REMOVE_CART_ITEM: self._on_remove_cart_item,
            Page.CHECKOUT: self._on_checkout,
        }

    # ------------------------------------------------------------------
    # Run loop
    # ------------------------------------------------------------------

    def run(self, state: PageState = HOME) -> None:
        self.console.writeln(WELCOME_MESSAGE)
        while not state.is_terminal:
            state = self.step(state)
        self.console.writeln(GOODBYE_MESSAGE)

    def step(self, state: PageState) -> PageState:
        """Show a page, read one token and move on."""
        redirect = self.enter(state)
        if redirect is not None:
            return redirect
        token = self.console.read_token()
        if token is None:
            logger.info("Input closed on page %s, leaving the shop", state.page.value)
            return EXIT
        return self.transition(state, token)

    def enter(self, state: PageState) -> Optional[PageState]:
        """Print the page. Returns a redirect when the page has nothing to offer."""
        try:
            self._enter_handlers[state.page](state)
        except EmptyCollectionError as exc:
            self.console.writeln(self.errors.handle(exc))
            return EMPTY_REDIRECTS[state.page]
        return None

    def transition(self, state: PageState, token: str) -> PageState:
        """Compute the next page from the current one and an input token."""
        try:
            next_state = self._handlers[state.page](state, token)
        except ShopError as exc:
            self.console.writeln(self.errors.handle(exc))
            next_state = RECOVERY_PAGES.get(state.page, state)
        logger.debug("Transition %s -> %s on %r", state.page.value, next_state.page.value, token)
        return next_state

    # ------------------------------------------------------------------
    # Output helpers
    # ------------------------------------------------------------------

    def _prompt(self, question: Optional[str] = None) -> None:
        if question:
            self.console.writeln(question)
        self.console.write("> ")

    def _show_menu(self, labels: Sequence[str], header: Optional[str] = "Choose an option:") -> None:
        if header:
            self.console.writeln(header)
        for i, label in enumerate(labels, start=1):
            self.console.writeln(f"{i} - {label}")
        self._prompt()

    def _show_options(self, options: Sequence[Option], header: str = "Choose an option:") -> None:
        self._show_menu([label for label, _ in options], header)

    def _money(self, amount) -> str:
        return f"{amount:.2f}"

    # ------------------------------------------------------------------
    # Browse
    # ------------------------------------------------------------------

    def _enter_browse(self, state: PageState) -> None:
        page = self.view.page(self.session.filters, self.session.sort)
        for line in self.view.render(page, self.config.currency_symbol):
            self.console.writeln(line)
        self._show_options(BROWSE_OPTIONS)

    def _enter_add_to_cart(self, state: PageState) -> None:
        if not self.view.page(self.session.filters, self.session.sort).shown:
            raise EmptyCollectionError("There's nothing to add to cart!")
        self._prompt("Which product would you like to add to cart?")

    def _on_add_to_cart(self, state: PageState, token: str) -> PageState:
        shown = self.view.page(self.session.filters, self.session.sort).shown
        product = pick(token, shown)
        self.session.cart.add_one(product)
        self.console.writeln(self.session.cart_status(updated=True))
        return PageState(Page.BROWSE)

    # ------------------------------------------------------------------
    # Search options and filters
    # ------------------------------------------------------------------

    def _enter_search_options(self, state: PageState) -> None:
        sort = self.session.sort
        count = len(self.session.filters)
        if sort.is_default:
            self.console.writeln("There is no sort applied.")
        else:
            self.console.writeln(f"You are sorting by {sort.description}.")
        self.console.writeln(f"You have {count} filter{'' if count == 1 else 's'} applied.")
        self._show_options(SEARCH_OPTIONS)

    def _enter_price_filter(self, state: PageState) -> None:
        self._prompt(f"What's the {'maximum' if state.is_max else 'minimum'} price?")

    def _on_price_filter(self, state: PageState, token: str) -> PageState:
        limit = parse_decimal(token)
        if state.is_max:
            self.session.add_filter(ProductFilter.max_price(limit))
        else:
            self.session.add_filter(ProductFilter.min_price(limit))
        return PageState(Page.ADD_FILTER)

    def _enter_department_filter(self, state: PageState) -> None:
        if not self.departments:
            raise EmptyCollectionError("There are no departments to choose from!")
        self.console.writeln("Which department are you looking at?")
        for i, department in enumerate(self.departments, start=1):
            self.console.writeln(f"{i} - {department}")
        self._prompt()

    def _on_department_filter(self, state: PageState, token: str) -> PageState:
        department = pick(token, self.departments)
        self.session.add_filter(ProductFilter.department(department))
        return PageState(Page.ADD_FILTER)

    def _on_name_filter(self, state: PageState, token: str) -> PageState:
        self.session.add_filter(ProductFilter.name_contains(token))
        return PageState(Page.ADD_FILTER)

    def _enter_remove_filter(self, state: PageState) -> None:
        if not self.session.filters:
            raise EmptyCollectionError("There's nothing to remove!")
        self.console.writeln("Which filter would you like to remove?")
        for i, product_filter in enumerate(self.session.filters, start=1):
            self.console.writeln(f"{i} - {product_filter.description}")
        self._prompt()

    def _on_remove_filter(self, state: PageState, token: str) -> PageState:
        choice = parse_choice(token, len(self.session.filters))
        self.session.remove_filter(choice - 1)
        return PageState(Page.SEARCH_OPTIONS)

    # ------------------------------------------------------------------
    # Sorting
    # ------------------------------------------------------------------

    def _on_sort_mode(self, state: PageState, token: str) -> PageState:
        choice = parse_choice(token, len(SORT_OPTIONS))
        if choice == 5:
            return PageState(Page.SEARCH_OPTIONS)
        if choice == 1:
            self.session.reset_sort()
        else:
            self.session.add_sort_tier(SORT_TIERS[choice])
        return state

    # ------------------------------------------------------------------
    # Cart and checkout
    # ------------------------------------------------------------------

    def _cart_lines(self) -> List[str]:
        return [
            f"{i} - {entry.quantity}x {self._money(entry.product.price)} {entry.product.name}"
            for i, entry in enumerate(self.session.cart.entries(self.session.sort), start=1)
        ]

    def _enter_cart(self, state: PageState) -> None:
        self.console.writeln(self.session.cart_status())
        for line in self._cart_lines():
            self.console.writeln(line)
        self._show_menu(CART_OPTIONS, "What would you like to do?")

    def _on_cart(self, state: PageState, token: str) -> PageState:
        choice = parse_choice(token, len(CART_OPTIONS))
        if choice == 1:
            return PageState(Page.CHECKOUT)
        if choice == 2:
            shown = tuple(entry.product for entry in self.session.cart.entries(self.session.sort))
            return PageState(Page.REMOVE_CART_ITEM, entries=shown)
        return HOME

    def _on_remove_cart_item(self, state: PageState, token: str) -> PageState:
        try:
            choice = parse_choice(token, len(state.entries))
        except UserInputError as exc:
            self.console.writeln(self.errors.handle(exc))
        else:
            self.session.cart.remove_one(choice - 1, state.entries)
        self.console.writeln(self.session.cart_status(updated=True))
        return PageState(Page.CART)

    def _enter_checkout(self, state: PageState) -> None:
        self.console.writeln(f"Your total will be {self._money(self.session.cart.total_price())}.")
        self._prompt("How much cash do you have?")

    def _on_checkout(self, state: PageState, token: str) -> PageState:
        receipt = self.checkout_processor.checkout(self.session.cart.entries(), token)
        self.console.writeln(f"Your change is {self._money(receipt.change)}.")
        for line in self.checkout_processor.render_receipt(receipt):
            self.console.writeln(line)
        self.console.writeln("Thank you for shopping with us!")
        self.session.cart.clear()
        return HOME
