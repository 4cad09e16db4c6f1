"""CLI error handlers for domain errors.

Translates domain errors to console messages and process exit codes.
"""

from __future__ import annotations

import logging
from typing import Any

import click
from rich.console import Console

from mortgage_lite.domain.errors import DomainError

logger = logging.getLogger(__name__)

err_console = Console(stderr=True, highlight=False)

EXIT_DOMAIN_ERROR = 1
EXIT_VALIDATION_ERROR = 2
EXIT_INTERNAL_ERROR = 70

# Map error codes to process exit codes
EXIT_CODE_MAP: dict[str, int] = {
    "VALIDATION_ERROR": EXIT_VALIDATION_ERROR,
}


def handle_domain_error(exc: DomainError) -> int:
    """Report a domain error and return the exit code for it.

    Maps domain errors to exit codes:
    - VALIDATION_ERROR → 2
    - Other → 1

    Exit code 70 is reserved for unexpected errors (see handle_unexpected_error).

    Args:
        exc: Domain error to handle

    Returns:
        Process exit code
    """
    error_dict: dict[str, Any] = exc.to_dict()
    exit_code = EXIT_CODE_MAP.get(exc.error_code, EXIT_DOMAIN_ERROR)

    logger.info("Client error", extra={"error_code": exc.error_code})

    err_console.print(f"Error ({error_dict['code']}): {error_dict['message']}", markup=False)

    # Add field-level errors if present (for ValidationError)
    for error in error_dict.get("errors", []):
        err_console.print(f"  {error['field']}: {error['message']}", markup=False)

    return exit_code


def handle_unexpected_error(exc: Exception) -> int:
    """Catch-all handler for unexpected errors.

    These should be rare and indicate bugs or a broken environment
    (for example, an unparsable MORTGAGE_* variable).
    Always logged with full traceback for investigation.
    """
    logger.error(
        "Unexpected error occurred",
        exc_info=exc,
        extra={"error_type": type(exc).__name__},
    )
    err_console.print("Error (INTERNAL_ERROR): An unexpected error occurred", markup=False)

    return EXIT_INTERNAL_ERROR


class ErrorHandlingGroup(click.Group):
    """Command group that turns errors raised by subcommands into exit codes.

    Click's own control-flow exceptions (usage errors, aborts, explicit exits)
    pass through untouched.
    """

    def invoke(self, ctx: click.Context) -> Any:
        try:
            return super().invoke(ctx)
        except (click.ClickException, click.exceptions.Exit, click.Abort):
            raise
        except DomainError as exc:
            ctx.exit(handle_domain_error(exc))
        except Exception as exc:
            ctx.exit(handle_unexpected_error(exc))
