"""Console display helpers.

Currency follows en-US conventions: dollar sign, thousands separators and
no fractional digits, rounding half away from zero.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def format_currency(value: Decimal | int) -> str:
    rounded = Decimal(value).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    sign = "-" if rounded < 0 else ""
    return f"{sign}${abs(rounded):,.0f}"


def format_percent(value: Decimal | int) -> str:
    return f"{Decimal(value).normalize():f}%"
