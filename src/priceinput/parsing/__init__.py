"""Parse locale-aware amount strings back to canonical form.

- Functions NEVER raise for bad input - errors are returned in tuple
- Inverse of priceinput.formatting: display string -> canonical decimal

Public API:
    parse_decimal - Returns tuple[Decimal | None, tuple[ParseError, ...]]
    parse_amount - Returns tuple[str | None, tuple[ParseError, ...]]
    is_valid_decimal - TypeIs guard for finite Decimal

Example:
    >>> from priceinput.parsing import parse_amount
    >>> number, errors = parse_amount("9,99", Currency("EUR", 2), "de_DE")
    >>> number
    '9.99'

Python 3.13+. Uses Babel CLDR data for all parsing.
"""

from .guards import is_valid_decimal
from .numbers import count_fraction_digits, parse_amount, parse_decimal, to_canonical

__all__ = [
    "count_fraction_digits",
    "is_valid_decimal",
    "parse_amount",
    "parse_decimal",
    "to_canonical",
]
