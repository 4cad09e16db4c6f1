from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from mortgage_lite.domain.amortization import loan_amount, monthly_principal_and_interest
from mortgage_lite.domain.mortgage import LoanInputs, PaymentBreakdown, down_payment_percent

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CalculatePaymentBreakdown:
    """
    Estimate the total monthly cost of a mortgage.

    Rounding policy:
    - The amortization formula runs at full Decimal precision
    - Principal & interest is rounded to 2 decimal places (cents) using ROUND_HALF_UP
    - The total is computed from the rounded principal & interest (not re-rounded)
    - This ensures: total = principal_and_interest + insurance + property_tax (exactly)
    - The unrounded principal & interest is kept for whole-dollar display,
      so display values are rounded once, from full precision
    """

    homeowners_insurance: Decimal = Decimal("80")
    property_tax: Decimal = Decimal("1300")

    def execute(self, inputs: LoanInputs) -> PaymentBreakdown:
        inputs.validate()

        principal_and_interest_precise = monthly_principal_and_interest(
            inputs.purchase_price,
            inputs.down_payment,
            inputs.annual_rate_percent,
            inputs.term_years,
        )
        principal_and_interest = principal_and_interest_precise.quantize(
            Decimal("0.01"), rounding=ROUND_HALF_UP
        )

        total = principal_and_interest + self.homeowners_insurance + self.property_tax

        breakdown = PaymentBreakdown(
            loan_amount=loan_amount(inputs.purchase_price, inputs.down_payment),
            term_years=inputs.term_years,
            principal_and_interest=principal_and_interest,
            principal_and_interest_precise=principal_and_interest_precise,
            homeowners_insurance=self.homeowners_insurance,
            property_tax=self.property_tax,
            total=total,
            down_payment_percent=down_payment_percent(
                inputs.purchase_price, inputs.down_payment
            ),
        )

        logger.debug(
            "Payment breakdown computed",
            extra={
                "loan_amount": str(breakdown.loan_amount),
                "term_years": breakdown.term_years,
                "principal_and_interest": str(breakdown.principal_and_interest),
                "total": str(breakdown.total),
            },
        )

        return breakdown
