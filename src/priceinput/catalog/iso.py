"""ISO 4217 currency catalog backed by Babel CLDR data.

Fraction digits come from CLDR's currency data (the same source Babel uses
for currency formatting), so JPY gets 0, USD gets 2 and KWD gets 3 without
any hand-maintained table.

Python 3.13+. Uses Babel for CLDR data.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from functools import lru_cache

from babel import Locale
from babel.numbers import get_currency_precision

from priceinput.constants import MAX_LOCALE_CACHE_SIZE

from .currency import Currency, CurrencyCode, InMemoryCurrencyCatalog

__all__ = [
    "IsoCurrencyCatalog",
    "clear_currency_cache",
    "get_iso_currency",
    "is_valid_currency_code",
]

logger = logging.getLogger(__name__)

# ISO 4217 currency codes are exactly 3 uppercase ASCII letters.
ISO_CURRENCY_CODE_LENGTH: int = 3


@lru_cache(maxsize=1)
def _known_currency_codes() -> frozenset[str]:
    """All ISO 4217 codes CLDR knows (English locale has the complete list)."""
    return frozenset(
        code
        for code in Locale.parse("en").currencies
        if len(code) == ISO_CURRENCY_CODE_LENGTH and code.isalpha() and code.isupper()
    )


@lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _get_iso_currency_impl(code_upper: str) -> Currency | None:
    """Internal cached implementation for get_iso_currency.

    Args:
        code_upper: Pre-uppercased ISO 4217 currency code.

    Returns:
        Currency if known to CLDR, None otherwise.
    """
    if code_upper not in _known_currency_codes():
        return None
    return Currency(code=code_upper, fraction_digits=get_currency_precision(code_upper))


def get_iso_currency(code: str) -> Currency | None:
    """Look up an ISO 4217 currency by code.

    Args:
        code: ISO 4217 currency code (e.g., 'USD'). Case-insensitive.

    Returns:
        Currency with CLDR fraction digits, or None if unknown.

    Thread-safe. Results cached per upper-cased code.

    Example:
        >>> get_iso_currency("jpy")
        Currency(code='JPY', fraction_digits=0)
    """
    if not isinstance(code, str) or len(code) != ISO_CURRENCY_CODE_LENGTH:
        return None
    return _get_iso_currency_impl(code.upper())


def is_valid_currency_code(value: str) -> bool:
    """Check if string is an ISO 4217 currency code known to CLDR."""
    return get_iso_currency(value) is not None


def clear_currency_cache() -> None:
    """Clear all CLDR currency lookup caches.

    Thread-safe.
    """
    _known_currency_codes.cache_clear()
    _get_iso_currency_impl.cache_clear()


class IsoCurrencyCatalog(InMemoryCurrencyCatalog):
    """Catalog of enabled ISO 4217 currencies with CLDR fraction digits.

    Lookups are case-insensitive; list order follows the order codes were
    given in.

    Example:
        >>> catalog = IsoCurrencyCatalog.from_codes(["USD", "JPY"])
        >>> [(c.code, c.fraction_digits) for c in catalog.list_all()]
        [('USD', 2), ('JPY', 0)]
    """

    __slots__ = ()

    @classmethod
    def from_codes(cls, codes: Iterable[CurrencyCode]) -> IsoCurrencyCatalog:
        """Build a catalog from ISO 4217 codes.

        Args:
            codes: Currency codes to enable. Case-insensitive.

        Raises:
            ValueError: If a code is not a known ISO 4217 code, or repeats
        """
        currencies: list[Currency] = []
        for code in codes:
            currency = get_iso_currency(code)
            if currency is None:
                msg = f"Unknown ISO 4217 currency code: {code!r}"
                raise ValueError(msg)
            currencies.append(currency)

        logger.debug("ISO currency catalog: %s", ", ".join(c.code for c in currencies))
        return cls(currencies)

    def lookup(self, code: str) -> Currency | None:
        if not isinstance(code, str):
            return None
        return super().lookup(code.upper())
