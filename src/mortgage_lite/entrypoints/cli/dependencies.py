"""
Dependency wiring for CLI commands.

Key principle: settings are a stateless singleton and may be cached.
Use cases and forms are built fresh for every command invocation.
"""

from __future__ import annotations

from functools import lru_cache

from mortgage_lite.infra.config import CalculatorSettings, load_settings
from mortgage_lite.use_cases.calculate_payment_breakdown import CalculatePaymentBreakdown
from mortgage_lite.use_cases.mortgage_form import MortgageForm


@lru_cache(maxsize=1)
def get_settings() -> CalculatorSettings:
    """
    Load calculator settings from the environment once per process.

    Raises:
        RuntimeError: If a MORTGAGE_* variable holds an unparsable value
    """
    return load_settings()


def get_calculate_payment_breakdown_use_case(
    settings: CalculatorSettings,
) -> CalculatePaymentBreakdown:
    """
    Factory function that returns a configured CalculatePaymentBreakdown use case.

    Args:
        settings: Calculator settings supplying the fixed monthly costs

    Returns:
        CalculatePaymentBreakdown: Use case carrying insurance and property tax
    """
    return CalculatePaymentBreakdown(
        homeowners_insurance=settings.homeowners_insurance,
        property_tax=settings.property_tax,
    )


def get_mortgage_form(settings: CalculatorSettings) -> MortgageForm:
    """Factory for an interactive form seeded with the configured defaults."""
    return MortgageForm(
        settings=settings,
        calculate=get_calculate_payment_breakdown_use_case(settings),
    )
