"""Error types for the storefront and the helper that turns them into console messages.

None of these are fatal. The navigation engine catches them where they are raised
and shows the message, then moves to a sensible page.
"""
from dataclasses import dataclass
from decimal import Decimal
import logging

logger = logging.getLogger(__name__)

INVALID_CHOICE_MESSAGE = "Sorry, I don't understand."


@dataclass
class ShopError(Exception):
    """Base class for recoverable storefront errors.

    Attributes:
        message: human-readable text shown on the console.
    """

    message: str = INVALID_CHOICE_MESSAGE
    reason = "error"

    def __str__(self) -> str:  # pragma: no cover
        return self.message


@dataclass
class UserInputError(ShopError):
    """An unparseable or out-of-range selection."""

    reason: str = "invalid choice"


@dataclass
class EmptyCollectionError(ShopError):
    """The user asked to pick from something that has nothing in it."""

    message: str = "There's nothing to choose from!"
    reason = "empty collection"


@dataclass
class InsufficientFundsError(ShopError):
    """Cash tendered at checkout is below the total."""

    message: str = "You don't have enough money!"
    total: Decimal = Decimal("0")
    paid: Decimal = Decimal("0")
    reason = "insufficient funds"


@dataclass
class CatalogLoadError(ShopError):
    """The catalog source is missing, unreadable or malformed."""

    message: str = "The product catalog could not be loaded"
    source: str = ""
    reason = "catalog unavailable"


class ErrorHandler:
    def handle(self, exc: ShopError) -> str:
        logger.debug("Recovered from %s (%s): %s", type(exc).__name__, exc.reason, exc.message)
        return exc.message
