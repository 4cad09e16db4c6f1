"""Interactive update loop.

Shows the current estimate, lets the user change one input at a time and
recomputes after every change, until the user quits or input ends.
"""

from __future__ import annotations

import click

from mortgage_lite.domain.mortgage import LOAN_TERMS
from mortgage_lite.entrypoints.cli.dependencies import get_mortgage_form
from mortgage_lite.entrypoints.cli.mappers.payment_mapper import PaymentMapper
from mortgage_lite.entrypoints.cli.rendering import console, display_breakdown
from mortgage_lite.infra.config import CalculatorSettings
from mortgage_lite.use_cases.mortgage_form import MortgageForm

FIELDS = ("price", "down", "rate", "term", "reset", "quit")


def _show(form: MortgageForm, settings: CalculatorSettings) -> None:
    inputs = form.inputs
    response = PaymentMapper.to_response(
        form.breakdown, inputs, settings.suggested_down_payment_ratio
    )
    console.print(
        f"Purchase price {inputs.purchase_price} | Down payment {inputs.down_payment} | "
        f"Rate {inputs.annual_rate_percent}% | {form.term.label}",
        markup=False,
    )
    display_breakdown(response, settings.suggested_down_payment_ratio)


def _update(form: MortgageForm, field: str) -> None:
    if field == "price":
        form.set_purchase_price(click.prompt("Purchase price", default=str(form.purchase_price)))
    elif field == "down":
        form.set_down_payment(click.prompt("Down payment", default=str(form.down_payment)))
    elif field == "rate":
        form.set_rate(click.prompt("Interest rate (%)", default=str(form.rate_percent)))
    elif field == "term":
        years = ", ".join(str(option.years) for option in LOAN_TERMS)
        form.set_term(click.prompt(f"Length of loan in years ({years})", default=str(form.term.years)))
    elif field == "reset":
        form.reset()


@click.command("interactive")
@click.pass_obj
def interactive(settings: CalculatorSettings) -> None:
    """Adjust inputs one at a time and watch the estimate update."""
    form = get_mortgage_form(settings)

    try:
        while True:
            _show(form, settings)
            field = click.prompt(
                "Change",
                type=click.Choice(FIELDS),
                default="quit",
                show_choices=True,
            )
            if field == "quit":
                break
            _update(form, field)
    except click.Abort:
        pass

    console.print("Session ended.")
