"""Shared constants for priceinput.

Centralized configuration constants used across the formatting, parsing and
element layers. Placing constants here avoids circular imports and provides a
single source of truth.

Constants are grouped by domain:
- Fraction digits: Display formatting bounds
- Element defaults: Rendering hints applied when the host omits them
- Cache limits: Memory bounds for caching subsystems
- Sub-field keys: Names shared by render output and submitted input

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Fraction digits
    "MAX_FRACTION_DIGITS",
    "PLACEHOLDER_EXAMPLE",
    # Element defaults
    "DEFAULT_SIZE",
    "DEFAULT_MAX_LENGTH",
    "DEFAULT_TITLE",
    "CURRENCY_SELECT_TITLE",
    "ELEMENT_CSS_CLASS",
    # Locale
    "DEFAULT_LOCALE",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    # Sub-field keys
    "AMOUNT_FIELD",
    "CURRENCY_FIELD",
]

# ============================================================================
# FRACTION DIGITS
# ============================================================================

# Upper bound on fraction digits shown when displaying a stored amount.
# Independent of any currency: stored amounts may carry more precision than
# the currency uses (unit prices, tax-exclusive amounts).
MAX_FRACTION_DIGITS: int = 6

# Canonical amount formatted into the placeholder so users see which decimal
# separator the active locale expects.
PLACEHOLDER_EXAMPLE: str = "9.99"

# ============================================================================
# ELEMENT DEFAULTS
# ============================================================================

DEFAULT_SIZE: int = 10
DEFAULT_MAX_LENGTH: int = 128
DEFAULT_TITLE: str = "Price"

# Title of the currency select list. Rendered visually hidden.
CURRENCY_SELECT_TITLE: str = "Currency"

ELEMENT_CSS_CLASS: str = "form-type-price"

# ============================================================================
# LOCALE
# ============================================================================

# Fallback when neither the caller nor the environment provides a locale.
DEFAULT_LOCALE: str = "en_US"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached LocaleNumberFormatter instances and CLDR currency lookups.
# 128 covers typical multi-region storefronts (major locales + variants).
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# SUB-FIELD KEYS
# ============================================================================

# Keys of the two sub-fields. Used both in render output and in the raw
# submitted mapping, so they double as field references for errors.
AMOUNT_FIELD: str = "number"
CURRENCY_FIELD: str = "currency_code"
