"""Equivalent pay rate tables.

Converts a range of yearly, monthly, weekly or hourly rates into all
four frequencies, applies a flat tax rate and renders an aligned table.

Example:
    from pay_rates import build_pay_rate_table, stdout_sink

    build_pay_rate_table(20, 30, 5, "hourly", 25, sink=stdout_sink)
"""

from pay_rates.calculators import (
    INVALID_PAY_TYPE_MESSAGE,
    InvalidRangeError,
    PayRateSet,
    PayRateTable,
    PayType,
    build_pay_rate_table,
    convert,
    generate_range,
    render_table,
    take_home_ratio,
)
from pay_rates.sinks import FileSink, OutputSink, stdout_sink

__version__ = "1.0.0"

__all__ = [
    "INVALID_PAY_TYPE_MESSAGE",
    "FileSink",
    "InvalidRangeError",
    "OutputSink",
    "PayRateSet",
    "PayRateTable",
    "PayType",
    "build_pay_rate_table",
    "convert",
    "generate_range",
    "render_table",
    "stdout_sink",
    "take_home_ratio",
]
