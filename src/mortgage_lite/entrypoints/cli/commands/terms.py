from __future__ import annotations

import click

from mortgage_lite.entrypoints.cli.rendering import display_terms
from mortgage_lite.infra.config import CalculatorSettings


@click.command("terms")
@click.pass_obj
def terms(settings: CalculatorSettings) -> None:
    """List the selectable loan terms."""
    display_terms(settings.default_term_years)
