"""Parsing helpers for console input.

Every page reads a single token. These helpers turn that token into a menu
choice or an amount of money, raising `UserInputError` when they cannot so the
engine can show the standard "I don't understand" message.
"""

from __future__ import annotations

import re
from decimal import Decimal
from typing import Any, Sequence, TypeVar

from shopfront.error_handler import UserInputError

T = TypeVar("T")


_INT_RE = re.compile(r"^[+-]?[0-9]+$")
_DECIMAL_RE = re.compile(r"^[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)$")

# Largest whole-number part accepted for an amount of money.
MAX_AMOUNT_DIGITS = 12


def _strip(v: Any) -> str:
    return "" if v is None else str(v).strip()


def parse_int(token: Any) -> int:
    raw = _strip(token)
    if not _INT_RE.match(raw):
        raise UserInputError()
    return int(raw)


def parse_choice(token: Any, option_count: int) -> int:
    """Parse a 1-based menu choice in the range 1..option_count."""
    choice = parse_int(token)
    if not 1 <= choice <= option_count:
        raise UserInputError()
    return choice


def pick(token: Any, items: Sequence[T]) -> T:
    """Return the item selected by a 1-based index token."""
    return items[parse_choice(token, len(items)) - 1]


def parse_decimal(token: Any, *, reason: str = "invalid choice") -> Decimal:
    """Parse a plain decimal amount such as `12.50`.

    Only ASCII digits with an optional sign and point are accepted; exponents,
    underscores and amounts of more than MAX_AMOUNT_DIGITS whole digits are not.
    """
    raw = _strip(token)
    if not _DECIMAL_RE.match(raw):
        raise UserInputError(reason=reason)
    value = Decimal(raw)
    if value != 0 and value.adjusted() >= MAX_AMOUNT_DIGITS:
        raise UserInputError(reason=reason)
    return value
