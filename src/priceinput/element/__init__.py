"""Price input element: render state, validation and submission.

Public API:
    PriceInputModel - build() / validate() / submit()
    PriceElementConfig - Structured element configuration
    Price - Canonical amount plus currency code
    FieldState, AmountField, CurrencyField - Render output
    EMPTY_FIELD - Build result for an empty catalog
    value_callback - Raw submission reconciliation
    validate_default_value - Default value shape check
"""

from .model import PriceInputModel, value_callback
from .types import (
    EMPTY_FIELD,
    AmountField,
    CurrencyField,
    EmptyField,
    FieldState,
    Price,
    PriceElementConfig,
    PriceLike,
    validate_default_value,
)

__all__ = [
    "EMPTY_FIELD",
    "AmountField",
    "CurrencyField",
    "EmptyField",
    "FieldState",
    "Price",
    "PriceElementConfig",
    "PriceInputModel",
    "PriceLike",
    "validate_default_value",
    "value_callback",
]
