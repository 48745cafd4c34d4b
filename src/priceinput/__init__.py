"""priceinput - Locale-aware monetary amount input.

Renders a canonical amount ("9.99" + "EUR") as editable localized text
("9,99" with a currency selector) and parses submitted text back into a
canonical amount validated against the selected currency's precision.

Public API:
    PriceInputModel - Build field state, validate submissions
    PriceElementConfig - Structured element configuration
    Price - Canonical amount plus currency code
    Currency, InMemoryCurrencyCatalog, IsoCurrencyCatalog - Currency sources
    LocaleNumberFormatter - Locale-bound format/parse of amounts

Exceptions:
    PriceInputError - Base exception class
    ConfigurationError - Caller contract violations (fatal)
    FormattingError - Amount could not be formatted

Submodules:
    priceinput.catalog - Currency catalogs
    priceinput.formatting - LocaleNumberFormatter
    priceinput.parsing - parse_decimal, parse_amount
    priceinput.diagnostics - Error types, templates and validation outcomes
    priceinput.element - PriceInputModel and render types
"""

from .catalog import Currency, CurrencyCatalog, InMemoryCurrencyCatalog, IsoCurrencyCatalog
from .diagnostics import (
    ConfigurationError,
    FieldError,
    FormattingError,
    PriceInputError,
    ValidationOutcome,
)
from .element import (
    EMPTY_FIELD,
    FieldState,
    Price,
    PriceElementConfig,
    PriceInputModel,
    value_callback,
)
from .enums import CurrencyMode
from .formatting import LocaleNumberFormatter

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("priceinput")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "EMPTY_FIELD",
    "ConfigurationError",
    "Currency",
    "CurrencyCatalog",
    "CurrencyMode",
    "FieldError",
    "FieldState",
    "FormattingError",
    "InMemoryCurrencyCatalog",
    "IsoCurrencyCatalog",
    "LocaleNumberFormatter",
    "Price",
    "PriceElementConfig",
    "PriceInputError",
    "PriceInputModel",
    "ValidationOutcome",
    "__version__",
    "value_callback",
]
