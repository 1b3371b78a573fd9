"""Conversion of a single rate into all four pay frequencies.

Each converter follows its own derivation path: ``from_yearly`` reaches
hourly through weekly, ``from_hourly`` reaches monthly through yearly.
Results from different paths may disagree in the last digits.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Callable

from pay_rates.calculators.types import (
    HOURS_PER_WEEK,
    MONTHS_PER_YEAR,
    WEEKS_PER_YEAR,
    PayRateSet,
    PayType,
)


def from_yearly(yearly: Decimal) -> PayRateSet:
    """Convert a yearly salary; hourly is derived from the weekly figure."""
    monthly = yearly / MONTHS_PER_YEAR
    weekly = yearly / WEEKS_PER_YEAR
    hourly = weekly / HOURS_PER_WEEK
    return PayRateSet(yearly=yearly, monthly=monthly, weekly=weekly, hourly=hourly)


def from_monthly(monthly: Decimal) -> PayRateSet:
    """Convert a monthly salary; weekly and hourly are derived from the yearly figure."""
    yearly = monthly * MONTHS_PER_YEAR
    weekly = yearly / WEEKS_PER_YEAR
    hourly = weekly / HOURS_PER_WEEK
    return PayRateSet(yearly=yearly, monthly=monthly, weekly=weekly, hourly=hourly)


def from_weekly(weekly: Decimal) -> PayRateSet:
    """Convert a weekly wage; monthly is derived from the yearly figure."""
    yearly = weekly * WEEKS_PER_YEAR
    monthly = yearly / MONTHS_PER_YEAR
    hourly = weekly / HOURS_PER_WEEK
    return PayRateSet(yearly=yearly, monthly=monthly, weekly=weekly, hourly=hourly)


def from_hourly(hourly: Decimal) -> PayRateSet:
    """Convert an hourly wage; monthly is derived from the yearly figure."""
    weekly = hourly * HOURS_PER_WEEK
    yearly = weekly * WEEKS_PER_YEAR
    monthly = yearly / MONTHS_PER_YEAR
    return PayRateSet(yearly=yearly, monthly=monthly, weekly=weekly, hourly=hourly)


CONVERTERS: dict[PayType, Callable[[Decimal], PayRateSet]] = {
    PayType.YEARLY: from_yearly,
    PayType.MONTHLY: from_monthly,
    PayType.WEEKLY: from_weekly,
    PayType.HOURLY: from_hourly,
}


def convert(value: Decimal, pay_type: PayType) -> PayRateSet:
    """Convert a rate of the given pay type into a PayRateSet."""
    return CONVERTERS[pay_type](value)
