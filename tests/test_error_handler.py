from decimal import Decimal

from shopfront.error_handler import (
    INVALID_CHOICE_MESSAGE,
    EmptyCollectionError,
    ErrorHandler,
    InsufficientFundsError,
    UserInputError,
)


def test_handle_returns_user_message():
    eh = ErrorHandler()
    assert eh.handle(UserInputError()) == INVALID_CHOICE_MESSAGE
    assert eh.handle(EmptyCollectionError("There's nothing to remove!")) == "There's nothing to remove!"


def test_insufficient_funds_carries_amounts():
    exc = InsufficientFundsError(total=Decimal("12.50"), paid=Decimal("12.49"))
    assert exc.reason == "insufficient funds"
    assert exc.message == "You don't have enough money!"
    assert exc.total - exc.paid == Decimal("0.01")


def test_user_input_error_reason_can_be_specialised():
    assert UserInputError().reason == "invalid choice"
    assert UserInputError(reason="unparseable amount").reason == "unparseable amount"
