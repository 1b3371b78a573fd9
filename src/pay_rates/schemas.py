"""Pydantic schemas for JSON output."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field

from pay_rates.calculators.table import round_to_cents, take_home_ratio
from pay_rates.calculators.types import PayRateSet, PayRateTable


class PayRateRow(BaseModel):
    """One compensation level with base and after-tax amounts in cents."""

    yearly: Decimal
    yearly_after_tax: Decimal
    monthly: Decimal
    monthly_after_tax: Decimal
    weekly: Decimal
    weekly_after_tax: Decimal
    hourly: Decimal
    hourly_after_tax: Decimal

    @classmethod
    def from_rates(cls, rates: PayRateSet, ratio: Decimal) -> PayRateRow:
        return cls(
            yearly=round_to_cents(rates.yearly),
            yearly_after_tax=round_to_cents(rates.yearly * ratio),
            monthly=round_to_cents(rates.monthly),
            monthly_after_tax=round_to_cents(rates.monthly * ratio),
            weekly=round_to_cents(rates.weekly),
            weekly_after_tax=round_to_cents(rates.weekly * ratio),
            hourly=round_to_cents(rates.hourly),
            hourly_after_tax=round_to_cents(rates.hourly * ratio),
        )


class PayRateTableResponse(BaseModel):
    """Schema for a full pay rate table."""

    pay_type: str
    tax_rate: Decimal
    take_home_ratio: Decimal
    rows: list[PayRateRow] = Field(default_factory=list)

    @classmethod
    def from_table(cls, table: PayRateTable) -> PayRateTableResponse:
        """Build the response from a successful table.

        Raises:
            ValueError: If the table carries a pay type message instead of rows.
        """
        if table.pay_type is None:
            raise ValueError(table.message or "Table has no pay type")
        ratio = take_home_ratio(table.tax_rate)
        return cls(
            pay_type=table.pay_type.value,
            tax_rate=table.tax_rate,
            take_home_ratio=ratio,
            rows=[PayRateRow.from_rates(rates, ratio) for rates in table.rates],
        )
