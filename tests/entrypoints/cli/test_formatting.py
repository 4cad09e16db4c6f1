from __future__ import annotations

from decimal import Decimal

import pytest

from mortgage_lite.entrypoints.cli.formatting import format_currency, format_percent


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (Decimal("7381.41"), "$7,381"),
        (Decimal("967998"), "$967,998"),
        (Decimal("80"), "$80"),
        (Decimal("0"), "$0"),
        (Decimal("0.49"), "$0"),
        (Decimal("666.67"), "$667"),
        (Decimal("1299.50"), "$1,300"),
        (4_000_000, "$4,000,000"),
    ],
)
def test_format_currency_whole_dollars(value, expected) -> None:
    assert format_currency(value) == expected


def test_format_currency_negative() -> None:
    assert format_currency(Decimal("-12.5")) == "-$13"


def test_format_currency_negative_rounding_to_zero_has_no_sign() -> None:
    assert format_currency(Decimal("-0.4")) == "$0"


@pytest.mark.parametrize(
    ("value", "expected"),
    [(2, "2%"), (Decimal("4.264"), "4.264%"), (Decimal("10.00"), "10%"), (100, "100%")],
)
def test_format_percent(value, expected) -> None:
    assert format_percent(value) == expected
