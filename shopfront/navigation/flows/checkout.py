"""
Checkout - settle the cart against cash tendered and produce a receipt
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import List, Optional, Sequence, Tuple

from shopfront.error_handler import InsufficientFundsError
from shopfront.navigation.flows.cart import CartEntry
from shopfront.navigation.validation import parse_decimal

logger = logging.getLogger(__name__)

RECEIPT_TIME_FORMAT = "%a %b %d, %Y @ %I:%M %p"
UNPARSEABLE_AMOUNT = "unparseable amount"


@dataclass(frozen=True)
class CheckoutReceipt:
    entries: Tuple[CartEntry, ...]
    total: Decimal
    paid: Decimal
    timestamp: datetime

    @property
    def change(self) -> Decimal:
        return self.paid - self.total


class CheckoutProcessor:
    """Computes totals and validates payment over a snapshot of the cart.

    The processor never touches the ledger; the caller clears it once a receipt
    has been issued.
    """

    def __init__(self, currency_symbol: str = "$", time_format: str = RECEIPT_TIME_FORMAT):
        self.currency_symbol = currency_symbol
        self.time_format = time_format

    @staticmethod
    def total(entries: Sequence[CartEntry]) -> Decimal:
        return sum((e.subtotal for e in entries), Decimal("0"))

    def checkout(self, entries: Sequence[CartEntry], cash_text: str, now: Optional[datetime] = None) -> CheckoutReceipt:
        """Validate the cash tendered and issue a receipt.

        Raises:
            UserInputError: the cash amount could not be parsed (reason "unparseable amount").
            InsufficientFundsError: the cash is below the total.
        """
        total = self.total(entries)
        paid = parse_decimal(cash_text, reason=UNPARSEABLE_AMOUNT)

        if paid < total:
            logger.info("Checkout rejected: paid=%s total=%s", paid, total)
            raise InsufficientFundsError(total=total, paid=paid)

        receipt = CheckoutReceipt(
            entries=tuple(entries),
            total=total,
            paid=paid,
            timestamp=now or datetime.now(),
        )
        logger.info("Checkout accepted: items=%d total=%s change=%s", len(receipt.entries), total, receipt.change)
        return receipt

    def render_receipt(self, receipt: CheckoutReceipt) -> List[str]:
        sym = self.currency_symbol
        lines = ["RECEIPT:", receipt.timestamp.strftime(self.time_format)]
        for e in receipt.entries:
            lines.append(f"{e.product.price:6.2f} {e.quantity}x {e.product.product_id} {e.product.name}")
        lines.extend(
            [
                f"TOTAL: {sym}{receipt.total:.2f}",
                f"PAID: {sym}{receipt.paid:.2f}",
                f"CHANGE: {receipt.change:.2f}",
            ]
        )
        return lines
