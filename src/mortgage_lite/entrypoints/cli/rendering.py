from __future__ import annotations

from decimal import Decimal

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from mortgage_lite.domain.mortgage import LOAN_TERMS
from mortgage_lite.entrypoints.cli.dtos.payment import PaymentResponseDTO
from mortgage_lite.entrypoints.cli.formatting import format_percent

console = Console(highlight=False)


def display_breakdown(response: PaymentResponseDTO, suggested_down_payment_ratio: Decimal) -> None:
    display = response.display

    console.print()
    console.print(
        Panel(
            f"[bold green]Estimated Monthly Payment[/bold green]  [bold]{display.total}[/bold]",
            expand=False,
        )
    )

    t = Table(box=box.SIMPLE, show_header=False, padding=(0, 2))
    t.add_column("Item", style="cyan")
    t.add_column("Amount", justify="right")

    t.add_row("Principal & interest", display.principal_and_interest)
    t.add_row("Homeowners insurance", display.homeowners_insurance)
    t.add_row("Property tax", display.property_tax)
    console.print(t)

    console.print(f"Loan amount: {display.loan_amount}")
    console.print(f"Term: {response.term_years} years")
    console.print(f"Down payment: {format_percent(response.down_payment_percent)} of purchase price")

    if response.below_suggested_down_payment:
        suggested = format_percent(suggested_down_payment_ratio * 100)
        console.print(f"[yellow]Suggested: at least {suggested} of purchase price[/yellow]")


def display_terms(default_years: int) -> None:
    t = Table(title="Length of loan", box=box.SIMPLE, padding=(0, 2))
    t.add_column("Years", justify="right")
    t.add_column("Label")
    t.add_column("Default", justify="center")

    for option in LOAN_TERMS:
        t.add_row(str(option.years), option.label, "*" if option.years == default_years else "")

    console.print(t)
