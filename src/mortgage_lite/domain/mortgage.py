from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

from mortgage_lite.domain.errors import ValidationError

ZERO = Decimal("0")
HUNDRED = Decimal("100")

# Ceiling for any single coerced input (amounts and rate percent alike)
MAX_AMOUNT = Decimal("1e12")


class InvalidLoanInput(ValidationError):
    pass


@dataclass(frozen=True, slots=True)
class LoanTermOption:
    label: str
    years: int

    @property
    def months(self) -> int:
        return self.years * 12


LOAN_TERMS: tuple[LoanTermOption, ...] = (
    LoanTermOption(label="15 years (fix)", years=15),
    LoanTermOption(label="20 years (fix)", years=20),
    LoanTermOption(label="30 years (fix)", years=30),
)
DEFAULT_TERM_YEARS = 20

_TERMS_BY_YEARS = {option.years: option for option in LOAN_TERMS}


def resolve_loan_term(years: Any, default_years: int = DEFAULT_TERM_YEARS) -> LoanTermOption:
    """
    Look up a term option in the closed table.

    Unknown or non-numeric selections fall back to the default option; a default
    that is itself outside the table falls back to DEFAULT_TERM_YEARS.
    """
    fallback = _TERMS_BY_YEARS.get(default_years, _TERMS_BY_YEARS[DEFAULT_TERM_YEARS])

    try:
        key = int(years)
    except (TypeError, ValueError):
        return fallback

    return _TERMS_BY_YEARS.get(key, fallback)


def coerce_amount(raw: Any) -> Decimal:
    """
    Coerce a raw input value to a non-negative Decimal.

    Input-boundary policy: anything that is not a finite, non-negative number
    (None, "", "abc", NaN, infinities, negatives) becomes 0. Values above
    MAX_AMOUNT are clamped to it.
    """
    if raw is None:
        return ZERO

    if isinstance(raw, float):
        raw = str(raw)

    try:
        value = Decimal(raw.strip()) if isinstance(raw, str) else Decimal(raw)
    except (InvalidOperation, TypeError, ValueError):
        return ZERO

    if not value.is_finite() or value < 0:
        return ZERO

    return min(value, MAX_AMOUNT)


def down_payment_percent(purchase_price: Decimal, down_payment: Decimal) -> int:
    """Down payment as a whole-number share of the purchase price."""
    if purchase_price <= 0:
        return 0
    if down_payment >= purchase_price:
        return 100

    ratio = down_payment / purchase_price * HUNDRED
    return int(ratio.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


@dataclass(frozen=True, slots=True)
class LoanInputs:
    purchase_price: Decimal
    down_payment: Decimal
    annual_rate_percent: Decimal
    term_years: int

    def validate(self) -> None:
        if self.term_years <= 0:
            raise InvalidLoanInput(
                errors=[
                    {
                        "field": "term_years",
                        "message": f"Must be positive, got {self.term_years}",
                        "code": "INVALID_VALUE",
                    }
                ]
            )


@dataclass(frozen=True, slots=True)
class PaymentBreakdown:
    loan_amount: Decimal
    term_years: int
    principal_and_interest: Decimal
    principal_and_interest_precise: Decimal
    homeowners_insurance: Decimal
    property_tax: Decimal
    total: Decimal
    down_payment_percent: int


def is_below_suggested_down_payment(
    purchase_price: Decimal, down_payment: Decimal, suggested_ratio: Decimal
) -> bool:
    if purchase_price <= 0:
        return False
    return down_payment < purchase_price * suggested_ratio
