"""Currency catalogs consumed by the price element.

Public API:
    Currency - Currency code plus fraction digits
    CurrencyCatalog - Read-only catalog protocol
    InMemoryCurrencyCatalog - Catalog over a fixed currency list
    IsoCurrencyCatalog - Catalog of ISO 4217 codes with CLDR fraction digits
    get_iso_currency - CLDR lookup for a single code
"""

from .currency import Currency, CurrencyCatalog, CurrencyCode, InMemoryCurrencyCatalog
from .iso import (
    IsoCurrencyCatalog,
    clear_currency_cache,
    get_iso_currency,
    is_valid_currency_code,
)

__all__ = [
    "Currency",
    "CurrencyCatalog",
    "CurrencyCode",
    "InMemoryCurrencyCatalog",
    "IsoCurrencyCatalog",
    "clear_currency_cache",
    "get_iso_currency",
    "is_valid_currency_code",
]
