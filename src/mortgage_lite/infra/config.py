from __future__ import annotations

import os
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from mortgage_lite.domain.mortgage import DEFAULT_TERM_YEARS, LoanTermOption, resolve_loan_term


@dataclass(frozen=True, slots=True)
class CalculatorSettings:
    """
    Configured constants consumed by the calculator front end.

    Insurance and property tax are fixed monthly amounts, never computed.
    """

    default_purchase_price: Decimal = Decimal("990000")
    default_down_payment: Decimal = Decimal("22002")
    default_rate_percent: Decimal = Decimal("4.264")
    default_term_years: int = DEFAULT_TERM_YEARS
    homeowners_insurance: Decimal = Decimal("80")
    property_tax: Decimal = Decimal("1300")
    suggested_down_payment_ratio: Decimal = Decimal("0.10")

    @property
    def default_term(self) -> LoanTermOption:
        return resolve_loan_term(self.default_term_years)


def _decimal_env(name: str, default: Decimal) -> Decimal:
    raw = os.getenv(name)

    if raw is None or raw.strip() == "":
        return default

    try:
        value = Decimal(raw.strip())
    except InvalidOperation:
        raise RuntimeError(f"{name} must be a decimal number, got {raw!r}") from None

    if not value.is_finite() or value < 0:
        raise RuntimeError(f"{name} must be a non-negative decimal number, got {raw!r}")

    return value


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)

    if raw is None or raw.strip() == "":
        return default

    try:
        return int(raw.strip())
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}") from None


def load_settings() -> CalculatorSettings:
    defaults = CalculatorSettings()

    return CalculatorSettings(
        default_purchase_price=_decimal_env(
            "MORTGAGE_DEFAULT_PURCHASE_PRICE", defaults.default_purchase_price
        ),
        default_down_payment=_decimal_env(
            "MORTGAGE_DEFAULT_DOWN_PAYMENT", defaults.default_down_payment
        ),
        default_rate_percent=_decimal_env("MORTGAGE_DEFAULT_RATE", defaults.default_rate_percent),
        # Unknown terms resolve to the table default rather than failing
        default_term_years=resolve_loan_term(
            _int_env("MORTGAGE_DEFAULT_TERM_YEARS", defaults.default_term_years)
        ).years,
        homeowners_insurance=_decimal_env(
            "MORTGAGE_HOMEOWNERS_INSURANCE", defaults.homeowners_insurance
        ),
        property_tax=_decimal_env("MORTGAGE_PROPERTY_TAX", defaults.property_tax),
        suggested_down_payment_ratio=_decimal_env(
            "MORTGAGE_SUGGESTED_DOWN_PAYMENT_RATIO", defaults.suggested_down_payment_ratio
        ),
    )
