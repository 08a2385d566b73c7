"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from orderdesk.domain.exceptions import InvalidNumericInput, ValidationError


@dataclass(frozen=True)
class Money:
    """Monetary amount, kept as a Decimal.

    Uses Decimal so that line totals and grand totals are exact sums of
    what the operator typed. The currency symbol is a display concern and
    is passed to ``format``.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        return Money(self.amount + other.amount)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor)

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return self.format("$")

    def format(self, symbol: str) -> str:
        """Two-decimal display with an arbitrary currency symbol."""
        return f"{symbol}{self.amount:.2f}"

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0.00"))

    @staticmethod
    def of(amount: str | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            return Money(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc

    @staticmethod
    def parse(text: str) -> Money:
        """Parse operator-typed price text such as ``"5.50"``."""
        try:
            amount = Decimal(text.strip())
        except InvalidOperation as exc:
            raise InvalidNumericInput(f"Invalid price: {text!r}") from exc
        if not amount.is_finite() or amount < 0:
            raise InvalidNumericInput(f"Invalid price: {text!r}")
        # "-0" parses as negative zero
        return Money(abs(amount))


@dataclass(frozen=True)
class Quantity:
    """A non-negative integer quantity."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value < 0:
            raise ValidationError("Quantity cannot be negative")

    def __str__(self) -> str:
        return str(self.value)

    @staticmethod
    def parse(text: str) -> Quantity:
        """Parse operator-typed quantity text such as ``"3"``."""
        digits = text.strip()
        if not (digits.isascii() and digits.isdigit()):
            raise InvalidNumericInput(f"Invalid quantity: {text!r}")
        return Quantity(int(digits))
