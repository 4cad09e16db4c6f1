from __future__ import annotations

import click

from mortgage_lite.entrypoints.cli.dependencies import get_calculate_payment_breakdown_use_case
from mortgage_lite.entrypoints.cli.dtos.payment import PaymentRequestDTO
from mortgage_lite.entrypoints.cli.mappers.payment_mapper import PaymentMapper
from mortgage_lite.entrypoints.cli.rendering import display_breakdown
from mortgage_lite.infra.config import CalculatorSettings


@click.command("estimate")
@click.option("--price", "purchase_price", type=str, default=None, help="Purchase price")
@click.option("--down-payment", type=str, default=None, help="Down payment")
@click.option("--rate", type=str, default=None, help="Annual interest rate in percent (e.g. 4.264)")
@click.option("--term", type=str, default=None, help="Loan term in years: 15, 20 or 30")
@click.option("--json", "as_json", is_flag=True, help="Print the estimate as JSON")
@click.pass_obj
def estimate(
    settings: CalculatorSettings,
    purchase_price: str | None,
    down_payment: str | None,
    rate: str | None,
    term: str | None,
    as_json: bool,
) -> None:
    """
    Estimate the monthly mortgage payment.

    Omitted options use the configured defaults. Non-numeric amounts count
    as 0 and an unknown term falls back to the default term.
    """
    # 1. Parse raw input (coercion happens in the DTO)
    payload = PaymentRequestDTO(
        purchase_price=settings.default_purchase_price if purchase_price is None else purchase_price,
        down_payment=settings.default_down_payment if down_payment is None else down_payment,
        annual_rate_percent=settings.default_rate_percent if rate is None else rate,
        term_years=term,
    )

    # 2. Map to domain inputs (term resolved against the term table)
    inputs = PaymentMapper.to_domain_inputs(payload, settings.default_term_years)

    # 3. Execute use case
    breakdown = get_calculate_payment_breakdown_use_case(settings).execute(inputs)

    # 4. Map to response and render
    response = PaymentMapper.to_response(breakdown, inputs, settings.suggested_down_payment_ratio)

    if as_json:
        click.echo(response.model_dump_json(indent=2))
    else:
        display_breakdown(response, settings.suggested_down_payment_ratio)
