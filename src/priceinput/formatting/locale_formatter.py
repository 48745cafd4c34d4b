"""Locale-bound number formatter for price amounts.

This module converts between canonical decimal strings ("9.99") and
localized display strings ("9,99") without global state mutation.
Uses Babel for CLDR-compliant formatting and parsing.

Architecture:
    - LocaleNumberFormatter: Immutable, cached per normalized locale
    - format(): canonical -> display, bounded fraction digits, no grouping
    - parse(): display -> canonical, scoped to one currency's precision
    - No dependency on Python's locale module (avoids global state)

Python 3.13+. Uses Babel for i18n.
"""

import logging
from collections import OrderedDict
from collections.abc import Callable
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from threading import RLock
from typing import ClassVar

from babel import Locale, UnknownLocaleError
from babel import numbers as babel_numbers

from priceinput.catalog.currency import Currency
from priceinput.constants import DEFAULT_LOCALE, MAX_FRACTION_DIGITS, MAX_LOCALE_CACHE_SIZE
from priceinput.diagnostics import ErrorTemplate, FormattingError, ParseError
from priceinput.locale_utils import normalize_locale
from priceinput.parsing.numbers import parse_amount

__all__ = ["FormatterFactory", "LocaleNumberFormatter", "build_pattern"]

logger = logging.getLogger(__name__)


def build_pattern(
    minimum_fraction_digits: int,
    maximum_fraction_digits: int,
    *,
    use_grouping: bool = False,
) -> str:
    """Build a CLDR decimal pattern from fraction-digit bounds.

    '0.00####' = 2-6 decimal places, no grouping
    '#,##0.##' = 0-2 decimal places, with grouping

    Raises:
        ValueError: If bounds are negative or minimum exceeds maximum

    Example:
        >>> build_pattern(2, 6)
        '0.00####'
        >>> build_pattern(0, 0)
        '0'
    """
    if minimum_fraction_digits < 0 or maximum_fraction_digits < 0:
        msg = "fraction digit bounds must be non-negative"
        raise ValueError(msg)
    if minimum_fraction_digits > maximum_fraction_digits:
        msg = (
            f"minimum_fraction_digits ({minimum_fraction_digits}) exceeds "
            f"maximum_fraction_digits ({maximum_fraction_digits})"
        )
        raise ValueError(msg)

    integer_part = "#,##0" if use_grouping else "0"
    if maximum_fraction_digits == 0:
        return integer_part

    required = "0" * minimum_fraction_digits
    optional = "#" * (maximum_fraction_digits - minimum_fraction_digits)
    return f"{integer_part}.{required}{optional}"


def _to_decimal(value: str | Decimal | int) -> Decimal | None:
    """Convert a canonical value to a finite Decimal, or None if not canonical."""
    if isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        return value if value.is_finite() else None
    if isinstance(value, int):
        return Decimal(value)
    if not isinstance(value, str):
        return None
    text = value.strip()
    # Canonical form: optional sign, digits, optional '.' and digits.
    if not text or any(ch not in "0123456789.-+" for ch in text):
        return None
    try:
        result = Decimal(text)
    except InvalidOperation:
        return None
    return result if result.is_finite() else None


@dataclass(frozen=True, slots=True)
class LocaleNumberFormatter:
    """Immutable locale-bound formatter for amounts.

    Use LocaleNumberFormatter.create() to construct instances; it validates
    the locale and reuses cached instances.

    Examples:
        >>> formatter = LocaleNumberFormatter.create("de-DE")
        >>> formatter.format("9.99", minimum_fraction_digits=2)
        '9,99'
        >>> formatter.parse("9,99", Currency("EUR", 2))
        ('9.99', ())

        >>> # Invalid locales fall back to en_US with warning logged
        >>> formatter = LocaleNumberFormatter.create("invalid-locale")
        >>> formatter.is_fallback
        True

    Thread Safety:
        Instances are immutable and may be shared between threads. Cache
        operations are protected by RLock.
    """

    # OrderedDict provides LRU semantics with O(1) operations
    _cache: ClassVar[OrderedDict[str, "LocaleNumberFormatter"]] = OrderedDict()
    _cache_lock: ClassVar[RLock] = RLock()

    locale_code: str
    _babel_locale: Locale
    is_fallback: bool = False

    @classmethod
    def clear_cache(cls) -> None:
        """Clear the formatter cache. Thread-safe via RLock."""
        with cls._cache_lock:
            cls._cache.clear()

    @classmethod
    def cache_size(cls) -> int:
        """Get current number of cached formatter instances."""
        with cls._cache_lock:
            return len(cls._cache)

    @classmethod
    def create(cls, locale_code: str) -> "LocaleNumberFormatter":
        """Create formatter with graceful fallback for invalid locales.

        For unknown or invalid locales, logs a warning and falls back to
        en_US. This method always succeeds; use create_or_raise() for strict
        validation.

        Args:
            locale_code: BCP 47 or POSIX locale identifier

        Returns:
            LocaleNumberFormatter. For unknown locales the original
            locale_code is preserved for debugging.
        """
        # "en-US", "en_US" map to the same cache entry
        cache_key = normalize_locale(locale_code)

        with cls._cache_lock:
            if cache_key in cls._cache:
                cls._cache.move_to_end(cache_key)
                return cls._cache[cache_key]

        used_fallback = False
        try:
            babel_locale = Locale.parse(cache_key)
        except UnknownLocaleError as e:
            logger.warning(
                "Unknown locale '%s': %s. Falling back to %s", locale_code, e, DEFAULT_LOCALE
            )
            babel_locale = Locale.parse(DEFAULT_LOCALE)
            used_fallback = True
        except (ValueError, TypeError) as e:
            logger.warning(
                "Invalid locale format '%s': %s. Falling back to %s",
                locale_code, e, DEFAULT_LOCALE,
            )
            babel_locale = Locale.parse(DEFAULT_LOCALE)
            used_fallback = True

        formatter = cls(
            locale_code=locale_code, _babel_locale=babel_locale, is_fallback=used_fallback
        )

        with cls._cache_lock:
            if cache_key in cls._cache:
                return cls._cache[cache_key]

            if len(cls._cache) >= MAX_LOCALE_CACHE_SIZE:
                cls._cache.popitem(last=False)

            cls._cache[cache_key] = formatter
            return formatter

    @classmethod
    def create_or_raise(cls, locale_code: str) -> "LocaleNumberFormatter":
        """Create formatter or raise on validation failure.

        Raises:
            ValueError: If locale code is invalid or unknown
        """
        try:
            babel_locale = Locale.parse(normalize_locale(locale_code))
        except UnknownLocaleError as e:
            msg = f"Unknown locale identifier '{locale_code}': {e}"
            raise ValueError(msg) from None
        except (ValueError, TypeError) as e:
            msg = f"Invalid locale format '{locale_code}': {e}"
            raise ValueError(msg) from None
        return cls(locale_code=locale_code, _babel_locale=babel_locale)

    @property
    def babel_locale(self) -> Locale:
        """Pre-validated Babel Locale used for formatting and parsing."""
        return self._babel_locale

    @property
    def effective_locale(self) -> str:
        """POSIX identifier of the locale actually in use (e.g. 'de_DE')."""
        return str(self._babel_locale)

    @property
    def decimal_symbol(self) -> str:
        """Locale decimal separator ('.' for en_US, ',' for de_DE)."""
        return babel_numbers.get_decimal_symbol(self._babel_locale)

    def format(
        self,
        value: str | Decimal | int,
        *,
        minimum_fraction_digits: int = 0,
        maximum_fraction_digits: int = MAX_FRACTION_DIGITS,
        use_grouping: bool = False,
    ) -> str:
        """Format a canonical amount for display.

        Trailing zeros beyond minimum_fraction_digits are stripped; digits
        beyond maximum_fraction_digits are rounded half-even.

        Args:
            value: Canonical decimal string ("9.99"), Decimal or int
            minimum_fraction_digits: Minimum decimal places
            maximum_fraction_digits: Maximum decimal places (default: 6)
            use_grouping: Use thousands separator (default: False)

        Returns:
            Localized display string

        Raises:
            FormattingError: If value is not canonical or Babel rejects it.
                fallback_value holds str(value).

        Examples:
            >>> LocaleNumberFormatter.create("en-US").format("9.990", minimum_fraction_digits=0)
            '9.99'
            >>> LocaleNumberFormatter.create("de-DE").format("1234.5", minimum_fraction_digits=2)
            '1234,50'
        """
        number = _to_decimal(value)
        if number is None:
            raise FormattingError(ErrorTemplate.format_value_invalid(value), str(value))

        try:
            pattern = build_pattern(
                minimum_fraction_digits, maximum_fraction_digits, use_grouping=use_grouping
            )
            return str(
                babel_numbers.format_decimal(number, format=pattern, locale=self._babel_locale)
            )
        except (ValueError, TypeError, InvalidOperation, AttributeError, KeyError) as e:
            diagnostic = ErrorTemplate.format_failed(value, self.effective_locale, str(e))
            raise FormattingError(diagnostic, str(value)) from e

    def parse(
        self, text: str, currency: Currency
    ) -> tuple[str | None, tuple[ParseError, ...]]:
        """Parse a display string back to a canonical amount for a currency.

        Never raises for bad input; see priceinput.parsing.parse_amount.

        Args:
            text: User-typed amount
            currency: Selected currency; bounds accepted fraction digits

        Returns:
            Tuple of (canonical decimal string or None, errors)
        """
        return parse_amount(text, currency, self.effective_locale)


type FormatterFactory = Callable[[str], LocaleNumberFormatter]
"""Creates a formatter for a locale code. Default: LocaleNumberFormatter.create."""
