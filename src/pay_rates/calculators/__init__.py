"""Pay rate calculation pipeline."""

from pay_rates.calculators.converter import (
    convert,
    from_hourly,
    from_monthly,
    from_weekly,
    from_yearly,
)
from pay_rates.calculators.engine import build_pay_rate_table
from pay_rates.calculators.rate_range import InvalidRangeError, generate_range
from pay_rates.calculators.table import render_table, take_home_ratio
from pay_rates.calculators.types import (
    INVALID_PAY_TYPE_MESSAGE,
    PayRateSet,
    PayRateTable,
    PayType,
)

__all__ = [
    "INVALID_PAY_TYPE_MESSAGE",
    "InvalidRangeError",
    "PayRateSet",
    "PayRateTable",
    "PayType",
    "build_pay_rate_table",
    "convert",
    "from_hourly",
    "from_monthly",
    "from_weekly",
    "from_yearly",
    "generate_range",
    "render_table",
    "take_home_ratio",
]
