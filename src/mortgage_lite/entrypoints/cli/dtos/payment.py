from decimal import Decimal
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from mortgage_lite.domain.mortgage import coerce_amount


def _coerce_term(raw: Any) -> int | None:
    if raw is None:
        return None
    try:
        return int(str(raw).strip())
    except ValueError:
        return None


CoercedAmount = Annotated[Decimal, BeforeValidator(coerce_amount)]
CoercedTerm = Annotated[int | None, BeforeValidator(_coerce_term)]


class PaymentRequestDTO(BaseModel):
    """Raw calculator inputs as typed on the command line or at a prompt."""

    purchase_price: CoercedAmount = Field(
        description="Purchase price; non-numeric or negative input becomes 0",
        examples=["990000"],
    )
    down_payment: CoercedAmount = Field(
        description="Down payment; non-numeric or negative input becomes 0",
        examples=["22002"],
    )
    annual_rate_percent: CoercedAmount = Field(
        description="Annual interest rate in percent (e.g., '4.264' = 4.264%)",
        examples=["4.264"],
    )
    term_years: CoercedTerm = Field(
        default=None,
        description="Loan term in years. Unknown terms fall back to the default term",
        examples=[20],
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "purchase_price": "990000",
                "down_payment": "22002",
                "annual_rate_percent": "4.264",
                "term_years": 20,
            }
        }
    )


class PaymentDisplayDTO(BaseModel):
    """Currency strings ready for display (whole dollars)."""

    loan_amount: str = Field(examples=["$967,998"])
    principal_and_interest: str = Field(examples=["$6,001"])
    homeowners_insurance: str = Field(examples=["$80"])
    property_tax: str = Field(examples=["$1,300"])
    total: str = Field(examples=["$7,381"])


class PaymentResponseDTO(BaseModel):
    """Estimated monthly payment with its breakdown."""

    loan_amount: str = Field(
        description="Financed amount (purchase price - down payment, min 0) as decimal string",
        examples=["967998"],
    )
    term_years: int = Field(description="Loan term in years", examples=[20])
    term_label: str = Field(description="Label of the selected term", examples=["20 years (fix)"])
    principal_and_interest: str = Field(
        description="Monthly principal & interest as decimal string",
        examples=["6001.41"],
    )
    homeowners_insurance: str = Field(
        description="Fixed monthly homeowners insurance as decimal string",
        examples=["80"],
    )
    property_tax: str = Field(
        description="Fixed monthly property tax as decimal string",
        examples=["1300"],
    )
    total: str = Field(
        description="Total estimated monthly payment as decimal string",
        examples=["7381.41"],
    )
    down_payment_percent: int = Field(
        description="Down payment as a whole percent of the purchase price",
        examples=[2],
    )
    below_suggested_down_payment: bool = Field(
        description="True when the down payment is under the suggested share of the price",
        examples=[True],
    )
    display: PaymentDisplayDTO
