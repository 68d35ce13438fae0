"""Half-up decimal rounding shared by the scalers."""

from decimal import Context, Decimal, ROUND_HALF_UP

# Digits kept beyond the requested places; any float fits in 17.
_GUARD_DIGITS = 17


def round_half_up(value: float, places: int = 2) -> float:
    """Round to a fixed number of decimal places, halves away from zero."""
    decimal_value = Decimal(str(value))
    if not decimal_value.is_finite():
        return float(value)

    quantum = Decimal(1).scaleb(-places)
    context = Context(prec=max(decimal_value.adjusted(), 0) + places + _GUARD_DIGITS)
    return float(decimal_value.quantize(quantum, rounding=ROUND_HALF_UP, context=context))


def format_number(value: float) -> str:
    """Render a number without a trailing '.0' for whole values."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return str(value)
