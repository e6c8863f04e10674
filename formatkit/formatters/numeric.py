"""
Number rounding, number formatting and duration humanization.
"""

import math
import numbers
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Optional, Union

Number = Union[int, float]

_DURATION_UNITS = (
    ("d", 86400),
    ("h", 3600),
    ("m", 60),
    ("s", 1),
)


def _check_number(value) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"Expected a number, got {type(value).__name__}")


def round_number(value: Number, precision: int = 0) -> Number:
    """
    Round half away from zero to a number of decimal places.

    Goes through Decimal(str(value)) so 2.675 rounds to 2.68 rather than
    the 2.67 that binary floats give with the builtin round().

    Args:
        value: Number to round
        precision: Decimal places; negative values round to tens, hundreds...

    Returns:
        int if precision <= 0, else float. NaN and infinities are returned as is.

    Example:
        round_number(2.675, 2)  # 2.68
        round_number(1250, -2)  # 1300
    """
    _check_number(value)

    if isinstance(value, float) and not math.isfinite(value):
        return value

    exact = Decimal(str(value))

    with localcontext() as ctx:
        # Enough digits for every place kept left and right of the point
        ctx.prec = max(64, exact.adjusted() + max(precision, 0) + 2)
        quantum = Decimal(1).scaleb(-precision)
        rounded = exact.quantize(quantum, rounding=ROUND_HALF_UP)

    if precision <= 0:
        return int(rounded)
    return float(rounded)


def format_number(
    value: Number,
    decimals: Optional[int] = None,
    thousands_separator: str = ",",
    decimal_separator: str = "."
) -> str:
    """
    Format a number with grouped thousands.

    Args:
        value: Number to format
        decimals: Fixed number of decimal places, None keeps natural precision
        thousands_separator: Group separator (default: ",")
        decimal_separator: Decimal point (default: ".")

    Returns:
        str: Formatted number

    Raises:
        TypeError: If value is not a number
        ValueError: If decimals is negative

    Example:
        format_number(1234567.891, decimals=2)  # "1,234,567.89"
        format_number(1234.5, thousands_separator=".", decimal_separator=",")  # "1.234,5"
    """
    _check_number(value)

    if decimals is not None and decimals < 0:
        raise ValueError(f"decimals must be non-negative, got {decimals}")

    if isinstance(value, float) and math.isnan(value):
        return "NaN"
    if isinstance(value, float) and math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    if decimals is None:
        text = f"{value:,}"
    else:
        text = f"{round_number(value, decimals):,.{decimals}f}"

    # Placeholder keeps the two swaps from clobbering each other
    return (
        text.replace(",", "\0")
        .replace(".", decimal_separator)
        .replace("\0", thousands_separator)
    )


def pretty_duration(milliseconds: Number) -> str:
    """
    Humanize a duration given in milliseconds.

    Durations under a second are shown in milliseconds. Longer ones list
    the non-zero day/hour/minute/second parts; leftover milliseconds are
    dropped.

    Raises:
        TypeError: If milliseconds is not a number
        ValueError: If milliseconds is negative, NaN or infinite

    Example:
        pretty_duration(250)      # "250ms"
        pretty_duration(3723000)  # "1h 2m 3s"
    """
    _check_number(milliseconds)

    if not math.isfinite(milliseconds) or milliseconds < 0:
        raise ValueError(f"Duration must be a non-negative number, got {milliseconds}")

    total = int(milliseconds)
    if total < 1000:
        return f"{total}ms"

    remaining = total // 1000
    parts = []
    for suffix, size in _DURATION_UNITS:
        count, remaining = divmod(remaining, size)
        if count:
            parts.append(f"{count}{suffix}")

    return " ".join(parts)
