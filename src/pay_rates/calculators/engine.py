"""Pay rate table orchestration.

Chains range generation, conversion and rendering, and hands the
finished block to a display sink.
"""

from __future__ import annotations

import logging
from decimal import InvalidOperation

from pay_rates.calculators.converter import convert
from pay_rates.calculators.rate_range import Number, generate_range, to_decimal
from pay_rates.calculators.table import render_table
from pay_rates.calculators.types import (
    INVALID_PAY_TYPE_MESSAGE,
    PayRateTable,
    PayType,
)
from pay_rates.sinks import OutputSink

logger = logging.getLogger(__name__)


def build_pay_rate_table(
    low: Number,
    high: Number,
    increment: Number,
    pay_type: PayType | str,
    tax_rate: Number,
    sink: OutputSink | None = None,
) -> PayRateTable:
    """Build a pay rate table and send it to ``sink``.

    An unrecognized pay type is not an error: the returned table carries
    ``INVALID_PAY_TYPE_MESSAGE`` and nothing is rendered or sent.

    Raises:
        InvalidRangeError: If the range parameters are invalid.
        ValueError: If the tax rate is not a finite number.
    """
    try:
        tax = to_decimal(tax_rate)
    except InvalidOperation as e:
        raise ValueError(f"Tax rate must be numeric, got {tax_rate!r}") from e
    if not tax.is_finite():
        raise ValueError(f"Tax rate must be a finite number, got {tax_rate!r}")

    resolved = PayType.parse(pay_type)
    if resolved is None:
        logger.warning("Unrecognized pay type %r", pay_type)
        return PayRateTable(pay_type=None, tax_rate=tax, message=INVALID_PAY_TYPE_MESSAGE)

    values = generate_range(low, high, increment)
    rates = [convert(value, resolved) for value in values]
    text = render_table(rates, tax)

    logger.debug(
        "Built %s pay rate table: low=%s high=%s increment=%s tax=%s rows=%d",
        resolved.value,
        low,
        high,
        increment,
        tax,
        len(rates),
    )

    if sink is not None:
        sink(text)

    return PayRateTable(
        pay_type=resolved,
        tax_rate=tax,
        values=values,
        rates=rates,
        text=text,
    )
