from __future__ import annotations

import click

from mortgage_lite.entrypoints.cli.commands.estimate import estimate
from mortgage_lite.entrypoints.cli.commands.interactive import interactive
from mortgage_lite.entrypoints.cli.commands.terms import terms
from mortgage_lite.entrypoints.cli.dependencies import get_settings
from mortgage_lite.entrypoints.cli.error_handlers import ErrorHandlingGroup
from mortgage_lite.infra.logging_setup import configure_logging

def build_cli() -> click.Group:
    @click.group(
        cls=ErrorHandlingGroup,
        help="""
        Mortgage payment estimator.

        Computes the monthly principal & interest of a fixed-rate loan and adds
        the fixed homeowners insurance and property tax. Defaults can be
        overridden with MORTGAGE_* environment variables.
        """,
    )
    @click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
    @click.version_option(package_name="mortgage-lite", prog_name="mortgage-lite")
    @click.pass_context
    def cli(ctx: click.Context, verbose: bool) -> None:
        configure_logging(verbose)

        # Tests may inject settings through the context object
        if ctx.obj is None:
            ctx.obj = get_settings()

    # Register commands
    cli.add_command(estimate)
    cli.add_command(terms)
    cli.add_command(interactive)

    return cli


cli = build_cli()


def main() -> None:
    cli(prog_name="mortgage-lite")
