"""Input value range generation."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation, localcontext

Number = Decimal | int | float | str

# Extra digits on top of the exact width of any element
GUARD_DIGITS = 2


class InvalidRangeError(ValueError):
    """Raised when range parameters cannot produce a finite sequence."""

    def __init__(self, low: object, high: object, increment: object, reason: str):
        self.low = low
        self.high = high
        self.increment = increment
        self.reason = reason
        super().__init__(
            f"Invalid rate range low={low} high={high} increment={increment}: {reason}"
        )


def to_decimal(value: Number) -> Decimal:
    """Convert a number to Decimal without binary float artifacts."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value).strip())


def generate_range(low: Number, high: Number, increment: Number) -> list[Decimal]:
    """Generate input values from low to high in steps of increment.

    Each element is ``low + k * increment``. The upper bound is always
    the last element, even when it is not a whole number of steps from
    ``low``.

    Raises:
        InvalidRangeError: If increment <= 0, low > high, low < 0, or a
            parameter is not a number.
    """
    try:
        low_d = to_decimal(low)
        high_d = to_decimal(high)
        step = to_decimal(increment)
    except (InvalidOperation, ValueError) as e:
        raise InvalidRangeError(low, high, increment, "parameters must be numeric") from e

    if not (low_d.is_finite() and high_d.is_finite() and step.is_finite()):
        raise InvalidRangeError(low, high, increment, "parameters must be finite")
    if step <= 0:
        raise InvalidRangeError(low, high, increment, "increment must be positive")
    if low_d < 0:
        raise InvalidRangeError(low, high, increment, "low must not be negative")
    if low_d > high_d:
        raise InvalidRangeError(low, high, increment, "low must not exceed high")

    values: list[Decimal] = []
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, _exact_digits(low_d, high_d, step))
        k = 0
        current = low_d
        while current <= high_d:
            values.append(current)
            k += 1
            current = low_d + k * step

    if values[-1] != high_d:
        values.append(high_d)

    return values


def _exact_digits(low: Decimal, high: Decimal, step: Decimal) -> int:
    """Digits needed to hold any ``low + k * step`` up to ``high`` exactly."""
    smallest_exponent = min(low.as_tuple().exponent, step.as_tuple().exponent)
    largest = max(high.adjusted(), step.adjusted())
    return largest - smallest_exponent + 1 + GUARD_DIGITS
