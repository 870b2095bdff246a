"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from shopflow.domain.exceptions import ValidationError


@dataclass(frozen=True)
class DiscountRate:
    """A fraction of a price that is taken off, between 0 and 1."""

    fraction: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.fraction, Decimal):
            raise ValidationError(
                f"Discount rate must be a Decimal, got {type(self.fraction).__name__}"
            )
        if not Decimal("0") <= self.fraction <= Decimal("1"):
            raise ValidationError(
                f"Discount rate must be between 0 and 1, got {self.fraction}"
            )

    def __str__(self) -> str:
        return f"{(self.fraction * 100).normalize():f}%"

    @staticmethod
    def of(fraction: str | Decimal) -> DiscountRate:
        try:
            return DiscountRate(Decimal(str(fraction)))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid discount rate: {fraction!r}") from exc


@dataclass(frozen=True)
class Money:
    """Non-negative monetary amount.

    Uses Decimal so that discounts like 15% of 15000.00 come out exact
    instead of picking up floating-point noise.
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

    def __sub__(self, other: Money) -> Money:
        result = self.amount - other.amount
        if result < Decimal("0"):
            raise ValidationError("Money subtraction would result in a negative amount")
        return Money(result)

    def __mul__(self, factor: int | DiscountRate) -> Money:
        if isinstance(factor, DiscountRate):
            return Money(self.amount * factor.fraction)
        if not isinstance(factor, int) or isinstance(factor, bool):
            raise TypeError(
                f"Can only multiply Money by int or DiscountRate, got {type(factor).__name__}"
            )
        return Money(self.amount * factor)

    def __lt__(self, other: Money) -> bool:
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        return self.amount <= other.amount

    def __gt__(self, other: Money) -> bool:
        return self.amount > other.amount

    def __ge__(self, other: Money) -> bool:
        return self.amount >= other.amount

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            return Money(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0.00"))
