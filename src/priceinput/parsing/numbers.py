"""Amount parsing functions with locale awareness.

- parse_decimal() returns tuple[Decimal | None, tuple[ParseError, ...]]
- parse_amount() returns tuple[str | None, tuple[ParseError, ...]]
- Parse errors are returned in the tuple, never raised

Parsing is strict: Babel's strict mode rejects grouping separators in the
wrong place, which catches the common mistake of typing "9.99" in a locale
whose decimal separator is a comma (non-strict parsing would yield 999).

Thread-safe. Uses Babel for CLDR-compliant parsing.

Python 3.13+.
"""

from decimal import Decimal, InvalidOperation

from babel import UnknownLocaleError
from babel.numbers import NumberFormatError, get_currency_symbol
from babel.numbers import parse_decimal as babel_parse_decimal

from priceinput.catalog.currency import Currency
from priceinput.diagnostics import Diagnostic, ErrorTemplate, ParseError
from priceinput.locale_utils import get_babel_locale

from .guards import is_valid_decimal

__all__ = ["count_fraction_digits", "parse_amount", "parse_decimal", "to_canonical"]


def _error(diagnostic: Diagnostic, value: str, locale_code: str, parse_type: str) -> ParseError:
    return ParseError(
        diagnostic,
        input_value=str(value),
        locale_code=locale_code,
        parse_type=parse_type,
    )


def count_fraction_digits(value: Decimal) -> int:
    """Count significant fraction digits, ignoring trailing zeros.

    Example:
        >>> count_fraction_digits(Decimal("9.990"))
        2
        >>> count_fraction_digits(Decimal("100"))
        0
    """
    # No normalize(): it rounds to the context precision (28 digits)
    _, digits, exponent = value.as_tuple()
    if not isinstance(exponent, int) or exponent >= 0:
        return 0
    places = -exponent
    fraction = "".join(map(str, digits))[-places:].rjust(places, "0")
    return len(fraction.rstrip("0"))


def to_canonical(value: Decimal) -> str:
    """Render a finite Decimal as a canonical decimal string.

    Plain notation, '.' as decimal separator, no grouping.

    Example:
        >>> to_canonical(Decimal("1E+3"))
        '1000'
    """
    return format(value, "f")


def parse_decimal(
    value: str,
    locale_code: str,
) -> tuple[Decimal | None, tuple[ParseError, ...]]:
    """Parse locale-aware number string to Decimal.

    Args:
        value: Number string (e.g., "9,99" for de_DE)
        locale_code: BCP 47 or POSIX locale identifier

    Returns:
        Tuple of (result, errors):
        - result: Parsed Decimal, or None if parsing failed
        - errors: Tuple of ParseError (empty tuple on success)

    Examples:
        >>> parse_decimal("1234.56", "en_US")
        (Decimal('1234.56'), ())

        >>> parse_decimal("9,99", "de_DE")
        (Decimal('9.99'), ())

        >>> result, errors = parse_decimal("9.99", "de_DE")
        >>> result is None
        True
    """
    try:
        locale = get_babel_locale(locale_code)
    except (UnknownLocaleError, ValueError, TypeError):
        diagnostic = ErrorTemplate.parse_locale_unknown(locale_code)
        return (None, (_error(diagnostic, value, locale_code, "decimal"),))

    try:
        return (babel_parse_decimal(value, locale=locale, strict=True), ())
    except (
        NumberFormatError, InvalidOperation, ValueError, AttributeError, TypeError,
    ) as e:
        diagnostic = ErrorTemplate.parse_decimal_failed(value, locale_code, str(e))
        return (None, (_error(diagnostic, value, locale_code, "decimal"),))


def _strip_currency_markers(value: str, currency: Currency, locale_code: str) -> str:
    """Remove one leading or trailing currency code or symbol, then outer whitespace.

    Users sometimes paste a full price ("9,99 €") into the amount field;
    the currency is already fixed by the currency sub-field. Only a single
    affix is removed: a marker inside the number ("9USD99") is left in
    place so the amount is rejected instead of silently becoming 999.
    """
    text = value.strip()
    try:
        symbol = get_currency_symbol(currency.code, locale=get_babel_locale(locale_code))
    except (UnknownLocaleError, ValueError, LookupError):
        symbol = ""

    markers = [currency.code]
    if symbol and not symbol.isdigit() and symbol != currency.code:
        markers.append(symbol)
    # Longest first: "US$" must win over "$"
    for marker in sorted(markers, key=len, reverse=True):
        if text.startswith(marker):
            return text[len(marker):].strip()
        if text.endswith(marker):
            return text[: -len(marker)].strip()
    return text


def parse_amount(
    value: str,
    currency: Currency,
    locale_code: str,
) -> tuple[str | None, tuple[ParseError, ...]]:
    """Parse a localized amount into a canonical decimal string for a currency.

    Steps:
        1. Strip one leading or trailing currency code or symbol and
           surrounding whitespace.
        2. Reject any remaining letters or underscores (exponents, "NaN",
           words, "1_000").
        3. Parse strictly with the locale's separators.
        4. Reject non-finite values.
        5. Reject values with more significant fraction digits than the
           currency allows. Trailing zeros do not count, so "9.990" is a
           valid USD amount while "9.995" is not.

    Args:
        value: User-typed amount (e.g., "9,99")
        currency: Currency whose precision bounds the amount
        locale_code: BCP 47 or POSIX locale identifier

    Returns:
        Tuple of (result, errors):
        - result: Canonical decimal string (e.g., "9.99"), or None on failure
        - errors: Tuple of ParseError (empty tuple on success)

    Examples:
        >>> parse_amount("9,99", Currency("EUR", 2), "de_DE")
        ('9.99', ())

        >>> result, errors = parse_amount("9.999", Currency("USD", 2), "en_US")
        >>> result is None
        True
    """
    text = _strip_currency_markers(value, currency, locale_code)

    if not text or any(ch.isalpha() or ch == "_" for ch in text):
        diagnostic = ErrorTemplate.parse_non_numeric(value, locale_code)
        return (None, (_error(diagnostic, value, locale_code, "amount"),))

    parsed, errors = parse_decimal(text, locale_code)
    if errors:
        return (None, errors)

    if not is_valid_decimal(parsed):
        diagnostic = ErrorTemplate.parse_amount_not_finite(value, locale_code)
        return (None, (_error(diagnostic, value, locale_code, "amount"),))

    if count_fraction_digits(parsed) > currency.fraction_digits:
        diagnostic = ErrorTemplate.parse_precision_exceeded(
            value, currency.code, currency.fraction_digits, locale_code
        )
        return (None, (_error(diagnostic, value, locale_code, "amount"),))

    return (to_canonical(parsed), ())
