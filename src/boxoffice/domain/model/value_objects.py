"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from boxoffice.domain.exceptions import PurchaseRejected


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Ticket prices are whole pounds today, but Decimal keeps the arithmetic
    exact if that ever changes.
    """

    amount: Decimal
    currency: str = "GBP"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise PurchaseRejected(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < Decimal("0"):
            raise PurchaseRejected(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor, self.currency)

    @property
    def is_zero(self) -> bool:
        return self.amount == Decimal("0")

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"£{self.amount:.2f}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise PurchaseRejected(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(amount: str | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            return Money(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise PurchaseRejected(f"Invalid money amount: {amount!r}") from exc


INVALID_ACCOUNT_MESSAGE = "Invalid request! Account id must be a positive integer."


@dataclass(frozen=True)
class AccountId:
    """Identifier of the customer account paying for the tickets.

    Any positive integer is a valid account; ``bool`` is rejected even
    though it subclasses ``int``.
    """

    value: int

    def __post_init__(self) -> None:
        if not is_positive_int(self.value):
            raise PurchaseRejected(INVALID_ACCOUNT_MESSAGE)


def is_positive_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0
