"""
Test suite for PaymentMapper.

Verifies the mapper's responsibility to translate between CLI DTOs and
domain models:
- Converts request DTO to domain LoanInputs (term resolved against the table)
- Converts domain PaymentBreakdown to response DTO (Decimal → str)
- No business logic, just translation
"""

from __future__ import annotations

from decimal import Decimal

from mortgage_lite.domain.mortgage import LoanInputs, PaymentBreakdown
from mortgage_lite.entrypoints.cli.dtos.payment import PaymentRequestDTO, PaymentResponseDTO
from mortgage_lite.entrypoints.cli.mappers.payment_mapper import PaymentMapper


def _sample_breakdown() -> PaymentBreakdown:
    return PaymentBreakdown(
        loan_amount=Decimal("967998"),
        term_years=20,
        principal_and_interest=Decimal("6001.41"),
        principal_and_interest_precise=Decimal("6001.405829133"),
        homeowners_insurance=Decimal("80"),
        property_tax=Decimal("1300"),
        total=Decimal("7381.41"),
        down_payment_percent=2,
    )


def _sample_inputs() -> LoanInputs:
    return LoanInputs(
        purchase_price=Decimal("990000"),
        down_payment=Decimal("22002"),
        annual_rate_percent=Decimal("4.264"),
        term_years=20,
    )


# ==============================================================================
# Request DTO coercion
# ==============================================================================


def test_request_dto_coerces_strings_to_decimal() -> None:
    dto = PaymentRequestDTO(
        purchase_price="990000",
        down_payment="22002",
        annual_rate_percent="4.264",
        term_years="20",
    )

    assert dto.purchase_price == Decimal("990000")
    assert dto.down_payment == Decimal("22002")
    assert dto.annual_rate_percent == Decimal("4.264")
    assert dto.term_years == 20


def test_request_dto_coerces_non_numeric_input_to_zero() -> None:
    """Non-numeric entry never fails validation; it counts as 0."""
    dto = PaymentRequestDTO(
        purchase_price="abc",
        down_payment="",
        annual_rate_percent="-3",
        term_years="thirty",
    )

    assert dto.purchase_price == 0
    assert dto.down_payment == 0
    assert dto.annual_rate_percent == 0
    assert dto.term_years is None


# ==============================================================================
# to_domain_inputs() - DTO → Domain
# ==============================================================================


def test_to_domain_inputs_with_valid_input() -> None:
    dto = PaymentRequestDTO(
        purchase_price="990000",
        down_payment="22002",
        annual_rate_percent="4.264",
        term_years=30,
    )

    result = PaymentMapper.to_domain_inputs(dto, default_term_years=20)

    assert isinstance(result, LoanInputs)
    assert result == LoanInputs(
        purchase_price=Decimal("990000"),
        down_payment=Decimal("22002"),
        annual_rate_percent=Decimal("4.264"),
        term_years=30,
    )


def test_to_domain_inputs_uses_default_term_when_missing() -> None:
    dto = PaymentRequestDTO(purchase_price="1", down_payment="0", annual_rate_percent="1")

    assert PaymentMapper.to_domain_inputs(dto, default_term_years=15).term_years == 15


def test_to_domain_inputs_uses_default_term_when_unknown() -> None:
    dto = PaymentRequestDTO(
        purchase_price="1", down_payment="0", annual_rate_percent="1", term_years=25
    )

    assert PaymentMapper.to_domain_inputs(dto, default_term_years=20).term_years == 20


# ==============================================================================
# to_response() - Domain → Response DTO
# ==============================================================================


def test_to_response_converts_all_fields() -> None:
    result = PaymentMapper.to_response(_sample_breakdown(), _sample_inputs(), Decimal("0.10"))

    assert isinstance(result, PaymentResponseDTO)
    assert result.loan_amount == "967998"
    assert result.term_years == 20
    assert result.term_label == "20 years (fix)"
    assert result.principal_and_interest == "6001.41"
    assert result.homeowners_insurance == "80"
    assert result.property_tax == "1300"
    assert result.total == "7381.41"
    assert result.down_payment_percent == 2
    assert result.below_suggested_down_payment is True


def test_to_response_formats_display_values() -> None:
    result = PaymentMapper.to_response(_sample_breakdown(), _sample_inputs(), Decimal("0.10"))

    assert result.display.total == "$7,381"
    assert result.display.principal_and_interest == "$6,001"
    assert result.display.homeowners_insurance == "$80"
    assert result.display.property_tax == "$1,300"
    assert result.display.loan_amount == "$967,998"


def test_to_response_respects_suggested_ratio() -> None:
    result = PaymentMapper.to_response(_sample_breakdown(), _sample_inputs(), Decimal("0.02"))

    assert result.below_suggested_down_payment is False


def test_to_response_rounds_display_values_from_unrounded_payment() -> None:
    """A payment of x.4951 rounds to x.50 in cents but must still show as x, not x+1."""
    breakdown = PaymentBreakdown(
        loan_amount=Decimal("100000"),
        term_years=15,
        principal_and_interest=Decimal("666.50"),
        principal_and_interest_precise=Decimal("666.4951"),
        homeowners_insurance=Decimal("80"),
        property_tax=Decimal("1300"),
        total=Decimal("2046.50"),
        down_payment_percent=0,
    )

    result = PaymentMapper.to_response(breakdown, _sample_inputs(), Decimal("0.10"))

    assert result.principal_and_interest == "666.50"
    assert result.total == "2046.50"
    assert result.display.principal_and_interest == "$666"
    assert result.display.total == "$2,046"
