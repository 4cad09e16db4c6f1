from __future__ import annotations

from decimal import Decimal

from mortgage_lite.domain.mortgage import (
    LoanInputs,
    LoanTermOption,
    PaymentBreakdown,
    is_below_suggested_down_payment,
    resolve_loan_term,
)
from mortgage_lite.entrypoints.cli.dtos.payment import (
    PaymentDisplayDTO,
    PaymentRequestDTO,
    PaymentResponseDTO,
)
from mortgage_lite.entrypoints.cli.formatting import format_currency


class PaymentMapper:
    """Maps between CLI DTOs and domain models for payment estimates."""

    @staticmethod
    def to_domain_inputs(dto: PaymentRequestDTO, default_term_years: int) -> LoanInputs:
        """
        Converts request DTO to domain LoanInputs.

        Monetary values were already coerced by the DTO. The term is resolved
        against the closed term table here, falling back to the default term.

        Args:
            dto: Request DTO with coerced Decimal values
            default_term_years: Term used when the requested one is not offered

        Returns:
            LoanInputs with a term taken from the term table
        """
        term = resolve_loan_term(dto.term_years, default_years=default_term_years)

        return LoanInputs(
            purchase_price=dto.purchase_price,
            down_payment=dto.down_payment,
            annual_rate_percent=dto.annual_rate_percent,
            term_years=term.years,
        )

    @staticmethod
    def to_response(
        breakdown: PaymentBreakdown,
        inputs: LoanInputs,
        suggested_down_payment_ratio: Decimal,
    ) -> PaymentResponseDTO:
        """
        Converts domain PaymentBreakdown to response DTO.

        Handles Decimal → string conversion at the boundary. Display strings
        are rounded to whole dollars from the unrounded principal & interest,
        never from the cent-rounded figures.
        """
        term: LoanTermOption = resolve_loan_term(breakdown.term_years)

        return PaymentResponseDTO(
            loan_amount=str(breakdown.loan_amount),
            term_years=breakdown.term_years,
            term_label=term.label,
            principal_and_interest=str(breakdown.principal_and_interest),
            homeowners_insurance=str(breakdown.homeowners_insurance),
            property_tax=str(breakdown.property_tax),
            total=str(breakdown.total),
            down_payment_percent=breakdown.down_payment_percent,
            below_suggested_down_payment=is_below_suggested_down_payment(
                inputs.purchase_price, inputs.down_payment, suggested_down_payment_ratio
            ),
            display=PaymentDisplayDTO(
                loan_amount=format_currency(breakdown.loan_amount),
                principal_and_interest=format_currency(breakdown.principal_and_interest_precise),
                homeowners_insurance=format_currency(breakdown.homeowners_insurance),
                property_tax=format_currency(breakdown.property_tax),
                total=format_currency(
                    breakdown.principal_and_interest_precise
                    + breakdown.homeowners_insurance
                    + breakdown.property_tax
                ),
            ),
        )
