"""Text table rendering for pay rate sets."""

from __future__ import annotations

from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal

from pay_rates.calculators.rate_range import Number, to_decimal
from pay_rates.calculators.types import PayRateSet

CURRENCY_SYMBOL = "$"
CENTS = Decimal("0.01")
HUNDRED = Decimal("100")

# (label, width) per column, widths exclude the currency symbol
COLUMNS: tuple[tuple[str, int], ...] = (
    ("Yearly", 10),
    ("w/tax", 10),
    ("Monthly", 8),
    ("w/tax", 8),
    ("Weekly", 7),
    ("w/tax", 7),
    ("Hourly", 5),
)
COLUMN_GAP = "  "
TABLE_WIDTH = 74


def round_to_cents(amount: Decimal) -> Decimal:
    """Round amount to 2 decimal places (cents)."""
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


def take_home_ratio(tax_rate: Number) -> Decimal:
    """Fraction of gross pay kept after a flat percentage tax."""
    rate = to_decimal(tax_rate)
    return (HUNDRED - rate) / HUNDRED


def after_tax(amount: Decimal, ratio: Decimal) -> Decimal:
    """Apply a take-home ratio to a gross amount."""
    return amount * ratio


def format_money(amount: Decimal, width: int) -> str:
    """Format amount as a right-aligned currency figure."""
    return f"{CURRENCY_SYMBOL}{round_to_cents(amount):>{width}.2f}"


def render_header() -> str:
    """Render the column labels and the separator line."""
    labels = [label.rjust(width + len(CURRENCY_SYMBOL)) for label, width in COLUMNS]
    return COLUMN_GAP.join(labels) + "\n" + "-" * TABLE_WIDTH + "\n"


def row_fields(rates: PayRateSet, ratio: Decimal) -> tuple[Decimal, ...]:
    """Return the seven figures shown in one table row."""
    return (
        rates.yearly,
        after_tax(rates.yearly, ratio),
        rates.monthly,
        after_tax(rates.monthly, ratio),
        rates.weekly,
        after_tax(rates.weekly, ratio),
        rates.hourly,
    )


def render_row(rates: PayRateSet, ratio: Decimal) -> str:
    """Render one rate set as a fixed-width table row."""
    fields = row_fields(rates, ratio)
    cells = [format_money(value, width) for value, (_, width) in zip(fields, COLUMNS)]
    return COLUMN_GAP.join(cells) + "\n"


def render_table(rate_sets: Iterable[PayRateSet], tax_rate: Number) -> str:
    """Render a header, separator and one row per rate set as a single block."""
    ratio = take_home_ratio(tax_rate)
    parts = [render_header()]
    parts.extend(render_row(rates, ratio) for rates in rate_sets)
    return "".join(parts)
