from __future__ import annotations

from decimal import Decimal
from typing import Any

from mortgage_lite.domain.mortgage import (
    LoanInputs,
    LoanTermOption,
    PaymentBreakdown,
    coerce_amount,
    is_below_suggested_down_payment,
    resolve_loan_term,
)
from mortgage_lite.infra.config import CalculatorSettings
from mortgage_lite.use_cases.calculate_payment_breakdown import CalculatePaymentBreakdown


class MortgageForm:
    """
    Holds the current calculator inputs and derives the payment breakdown.

    Every setter takes raw input and coerces it at the boundary:
    - purchase price, down payment and rate fall back to 0 when not numeric
    - the term falls back to the configured default when not in the term table

    The breakdown is recomputed synchronously on each access. The calculation
    is cheap and side-effect free, so nothing is cached.
    """

    def __init__(
        self,
        settings: CalculatorSettings,
        calculate: CalculatePaymentBreakdown | None = None,
    ) -> None:
        self._settings = settings
        self._calculate = calculate or CalculatePaymentBreakdown(
            homeowners_insurance=settings.homeowners_insurance,
            property_tax=settings.property_tax,
        )
        self.reset()

    def reset(self) -> None:
        self.purchase_price: Decimal = self._settings.default_purchase_price
        self.down_payment: Decimal = self._settings.default_down_payment
        self.rate_percent: Decimal = self._settings.default_rate_percent
        self.term: LoanTermOption = self._settings.default_term

    def set_purchase_price(self, raw: Any) -> PaymentBreakdown:
        self.purchase_price = coerce_amount(raw)
        return self.breakdown

    def set_down_payment(self, raw: Any) -> PaymentBreakdown:
        self.down_payment = coerce_amount(raw)
        return self.breakdown

    def set_rate(self, raw: Any) -> PaymentBreakdown:
        self.rate_percent = coerce_amount(raw)
        return self.breakdown

    def set_term(self, raw: Any) -> PaymentBreakdown:
        self.term = resolve_loan_term(raw, default_years=self._settings.default_term_years)
        return self.breakdown

    @property
    def inputs(self) -> LoanInputs:
        return LoanInputs(
            purchase_price=self.purchase_price,
            down_payment=self.down_payment,
            annual_rate_percent=self.rate_percent,
            term_years=self.term.years,
        )

    @property
    def breakdown(self) -> PaymentBreakdown:
        return self._calculate.execute(self.inputs)

    @property
    def below_suggested_down_payment(self) -> bool:
        return is_below_suggested_down_payment(
            self.purchase_price, self.down_payment, self._settings.suggested_down_payment_ratio
        )
