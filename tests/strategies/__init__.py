"""Hypothesis strategies for priceinput property-based testing.

Usage:
    from tests.strategies import amounts_for_precision, formatting_locales
"""

from .amounts import (
    FORMATTING_LOCALES,
    amounts_for_precision,
    currencies,
    formatting_locales,
    single_currency_scenarios,
)

__all__ = [
    "FORMATTING_LOCALES",
    "amounts_for_precision",
    "currencies",
    "formatting_locales",
    "single_currency_scenarios",
]
