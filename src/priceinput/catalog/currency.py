"""Currency records and the catalog contract.

The element only reads currencies: it lists them to build the select list and
to compute the catalog-wide minimum fraction digits, and looks one up by code
to scope parsing to its precision.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

__all__ = [
    "Currency",
    "CurrencyCatalog",
    "CurrencyCode",
    "InMemoryCurrencyCatalog",
]

type CurrencyCode = str
"""ISO 4217 currency code (e.g., 'USD', 'EUR', 'JPY')."""


@dataclass(frozen=True, slots=True)
class Currency:
    """Currency as seen by the price element.

    Immutable, hashable. Safe for use as dict key or set member.

    Attributes:
        code: Unique currency code (e.g., 'USD').
        fraction_digits: Digits after the decimal point the currency uses
            (2 for USD, 0 for JPY, 3 for KWD).
    """

    code: CurrencyCode
    fraction_digits: int

    def __post_init__(self) -> None:
        """Validate currency invariants.

        Raises:
            ValueError: If code is empty or fraction_digits is negative
                or not an integer.
        """
        if not isinstance(self.code, str) or not self.code:
            msg = f"Currency.code must be a non-empty string, got {self.code!r}"
            raise ValueError(msg)
        if (
            isinstance(self.fraction_digits, bool)
            or not isinstance(self.fraction_digits, int)
            or self.fraction_digits < 0
        ):
            msg = (
                f"Currency.fraction_digits must be a non-negative integer, "
                f"got {self.fraction_digits!r}"
            )
            raise ValueError(msg)


@runtime_checkable
class CurrencyCatalog(Protocol):
    """Read-only lookup of available currencies.

    Implementations must return currencies from list_all() in a stable order
    so select lists render deterministically.
    """

    def list_all(self) -> tuple[Currency, ...]:
        """Return every available currency, unique by code."""
        ...

    def lookup(self, code: str) -> Currency | None:
        """Return the currency with the given code, or None if unavailable."""
        ...


class InMemoryCurrencyCatalog:
    """Catalog over a fixed set of currencies, in insertion order.

    Example:
        >>> catalog = InMemoryCurrencyCatalog([Currency("USD", 2), Currency("JPY", 0)])
        >>> [c.code for c in catalog.list_all()]
        ['USD', 'JPY']
        >>> catalog.lookup("JPY")
        Currency(code='JPY', fraction_digits=0)
    """

    __slots__ = ("_currencies",)

    def __init__(self, currencies: Iterable[Currency] = ()) -> None:
        """Build the catalog.

        Raises:
            ValueError: If two currencies share a code
        """
        self._currencies: dict[str, Currency] = {}
        for currency in currencies:
            if currency.code in self._currencies:
                msg = f"Duplicate currency code in catalog: {currency.code}"
                raise ValueError(msg)
            self._currencies[currency.code] = currency

    @classmethod
    def from_fraction_digits(cls, digits: dict[str, int]) -> InMemoryCurrencyCatalog:
        """Build a catalog from a code -> fraction digits mapping.

        Example:
            >>> InMemoryCurrencyCatalog.from_fraction_digits({"USD": 2, "EUR": 2})
            InMemoryCurrencyCatalog([USD, EUR])
        """
        return cls(Currency(code, fraction_digits) for code, fraction_digits in digits.items())

    def list_all(self) -> tuple[Currency, ...]:
        return tuple(self._currencies.values())

    def lookup(self, code: str) -> Currency | None:
        return self._currencies.get(code)

    def __len__(self) -> int:
        return len(self._currencies)

    def __iter__(self) -> Iterator[Currency]:
        return iter(self._currencies.values())

    def __contains__(self, code: object) -> bool:
        return code in self._currencies

    def __repr__(self) -> str:
        codes = ", ".join(self._currencies)
        return f"{type(self).__name__}([{codes}])"
