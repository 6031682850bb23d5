"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They own parsing so the rest of the code only ever sees Decimals.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from patterns.domain.exceptions import ValidationError

_HUNDRED = Decimal("100")


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Uses Decimal to avoid floating-point rounding errors. Negative amounts
    are allowed: a discount above 100% is accepted and prices below zero.
    """

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __mul__(self, factor: Decimal) -> Money:
        if not isinstance(factor, Decimal):
            raise TypeError(
                f"Can only multiply Money by Decimal, got {type(factor).__name__}"
            )
        return Money(self.amount * factor, self.currency)

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        text = f"{abs(self.amount):.2f}"
        # -0.0 and amounts that round to zero print unsigned.
        if self.amount < 0 and text != "0.00":
            return f"-${text}"
        return f"${text}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            value = Decimal(str(amount).strip())
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc
        if not value.is_finite():
            raise ValidationError(f"Invalid money amount: {amount!r}")
        return Money(value)

    @staticmethod
    def zero(currency: str = "USD") -> Money:
        return Money(Decimal("0"), currency)


@dataclass(frozen=True)
class Percentage:
    """A discount rate expressed in percent.

    Not bounded to [0, 100]: 150 makes a price negative and -10 raises it.
    """

    value: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.value, Decimal):
            raise ValidationError(
                f"Percentage must be a Decimal, got {type(self.value).__name__}"
            )

    @property
    def remaining_factor(self) -> Decimal:
        """Share of the original price left after applying this rate."""
        return 1 - self.value / _HUNDRED

    def __str__(self) -> str:
        return f"{self.value.normalize():f}%"

    @staticmethod
    def of(value: str | float | int | Decimal) -> Percentage:
        try:
            parsed = Decimal(str(value).strip())
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid percentage: {value!r}") from exc
        if not parsed.is_finite():
            raise ValidationError(f"Invalid percentage: {value!r}")
        return Percentage(parsed)
