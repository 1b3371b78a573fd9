"""Type definitions for pay rate conversion."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

# Fixed conversion constants
HOURS_PER_WEEK = Decimal("40")
WEEKS_PER_YEAR = Decimal("52")
MONTHS_PER_YEAR = Decimal("12")

INVALID_PAY_TYPE_MESSAGE = "PAY-TYPE must be one of the four recognized values"


class PayType(str, Enum):
    """Which figure an input rate represents."""

    YEARLY = "yearly"
    MONTHLY = "monthly"
    WEEKLY = "weekly"
    HOURLY = "hourly"

    @classmethod
    def parse(cls, value: PayType | str) -> PayType | None:
        """Return the matching pay type, or None if the value is not recognized."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


@dataclass(frozen=True)
class PayRateSet:
    """One compensation level expressed at all four frequencies."""

    yearly: Decimal
    monthly: Decimal
    weekly: Decimal
    hourly: Decimal


@dataclass(frozen=True)
class PayRateTable:
    """Result of building a pay rate table.

    When ``message`` is set the pay type was not recognized and
    ``values``, ``rates`` and ``text`` are empty.
    """

    pay_type: PayType | None
    tax_rate: Decimal
    values: list[Decimal] = field(default_factory=list)
    rates: list[PayRateSet] = field(default_factory=list)
    text: str = ""
    message: str | None = None

    @property
    def has_error(self) -> bool:
        return self.message is not None
