from decimal import Decimal, ROUND_HALF_UP, localcontext

TWO_DP = Decimal("0.01")


def to_decimal(value) -> Decimal:
    """Coerce a strategy result to Decimal without going through binary float repr."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_money(amount) -> Decimal:
    """Round to 2 dp, half away from zero. Used for every monetary output field."""
    value = to_decimal(amount)
    with localcontext() as ctx:
        # quantize needs room for every integer digit plus the two decimals
        ctx.prec = max(28, value.adjusted() + 3)
        return value.quantize(TWO_DP, rounding=ROUND_HALF_UP)
