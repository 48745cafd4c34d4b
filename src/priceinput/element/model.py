"""Price input model: build, validate and reconcile a price element.

The model owns the single/multi-currency policy and the two conversions:

    build():    Price ("9.99", "EUR")  ->  FieldState ("9,99", select EUR)
    validate(): {"number": "9,99", "currency_code": "EUR"}  ->  Price("9.99", "EUR")

Display formatting uses the minimum fraction digits across the whole catalog
(the currency may not be chosen yet); parsing is scoped to the precision of
the currency actually selected.

Collaborators are injected: a CurrencyCatalog and a formatter factory. The
model holds no per-request state, so one instance can serve many requests.

Python 3.13+.
"""

from __future__ import annotations

import html
import logging
from collections.abc import Mapping
from typing import Any

from priceinput.catalog.currency import Currency, CurrencyCatalog
from priceinput.constants import (
    AMOUNT_FIELD,
    CURRENCY_FIELD,
    CURRENCY_SELECT_TITLE,
    MAX_FRACTION_DIGITS,
    PLACEHOLDER_EXAMPLE,
)
from priceinput.diagnostics import (
    ErrorTemplate,
    FieldError,
    FormattingError,
    ValidationOutcome,
)
from priceinput.enums import CurrencyMode, SubFieldType, TitleDisplay
from priceinput.formatting.locale_formatter import FormatterFactory, LocaleNumberFormatter
from priceinput.locale_utils import get_system_locale

from .types import (
    EMPTY_FIELD,
    AmountField,
    CurrencyField,
    EmptyField,
    FieldState,
    Price,
    PriceElementConfig,
    PriceLike,
    _coerce_default_value,
)

__all__ = ["PriceInputModel", "value_callback"]

logger = logging.getLogger(__name__)


def value_callback(raw: object) -> dict[str, Any] | None:
    """Reconcile raw submitted input with the element value.

    A mapping with a non-None "number" is passed through as a new dict, with
    an empty number normalized to "0". Anything else yields None, meaning
    "no value submitted" (the caller falls back to the default value).

    Never raises; never mutates raw.

    Example:
        >>> value_callback({"number": "", "currency_code": "USD"})
        {'number': '0', 'currency_code': 'USD'}
        >>> value_callback(None) is None
        True
    """
    if not isinstance(raw, Mapping) or raw.get(AMOUNT_FIELD) is None:
        return None
    value = dict(raw)
    if value[AMOUNT_FIELD] == "":
        value[AMOUNT_FIELD] = "0"
    return value


def _description_markup(description: str | None) -> str:
    if not description:
        return ""
    return f'<div class="description">{html.escape(description)}</div>'


class PriceInputModel:
    """Monetary amount input element.

    Args:
        catalog: Source of available currencies
        config: Element configuration (default: PriceElementConfig())
        formatter_factory: Creates the formatter for a locale code
            (default: LocaleNumberFormatter.create)
        locale_code: Display/input locale (default: detected from the
            environment, falling back to en_US)

    Example:
        >>> catalog = InMemoryCurrencyCatalog.from_fraction_digits({"USD": 2, "EUR": 2})
        >>> model = PriceInputModel(catalog, locale_code="de_DE")
        >>> state = model.build({"number": "9.99", "currency_code": "EUR"})
        >>> state.number_text, state.mode
        ('9,99', <CurrencyMode.MULTIPLE: 'multiple'>)
        >>> model.validate({"number": "9,99", "currency_code": "EUR"}).value
        Price(number='9.99', currency_code='EUR')
    """

    __slots__ = ("_catalog", "_config", "_formatter_factory", "_locale_code")

    def __init__(
        self,
        catalog: CurrencyCatalog,
        config: PriceElementConfig | None = None,
        *,
        formatter_factory: FormatterFactory = LocaleNumberFormatter.create,
        locale_code: str | None = None,
    ) -> None:
        self._catalog = catalog
        self._config = config if config is not None else PriceElementConfig()
        self._formatter_factory = formatter_factory
        self._locale_code = locale_code or get_system_locale()

    @property
    def catalog(self) -> CurrencyCatalog:
        return self._catalog

    @property
    def config(self) -> PriceElementConfig:
        return self._config

    @property
    def locale_code(self) -> str:
        return self._locale_code

    def formatter(self) -> LocaleNumberFormatter:
        """Formatter for this model's locale, from the injected factory."""
        return self._formatter_factory(self._locale_code)

    # ------------------------------------------------------------------
    # Build
    # ------------------------------------------------------------------

    def build(self, default_value: PriceLike | None = None) -> FieldState | EmptyField:
        """Build the renderable field state.

        Args:
            default_value: Initial value; None falls back to
                config.default_value.

        Returns:
            FieldState, or EMPTY_FIELD when the catalog has no currencies.

        Raises:
            ConfigurationError: If default_value lacks "number" or
                "currency_code". Checked before the catalog is read.
        """
        default = (
            self._config.default_value
            if default_value is None
            else _coerce_default_value(default_value)
        )

        currencies = self._catalog.list_all()
        if not currencies:
            logger.debug("No currencies available; price element renders nothing")
            return EMPTY_FIELD

        # Stored amounts are shown with no fewer digits than the least
        # precise currency, and never more than MAX_FRACTION_DIGITS.
        min_fraction_digits = min(
            min(currency.fraction_digits for currency in currencies), MAX_FRACTION_DIGITS
        )
        formatter = self.formatter()

        number_text = ""
        if default is not None and default.number != "":
            number_text = self._format_amount(formatter, default.number, min_fraction_digits)
        placeholder = self._format_amount(formatter, PLACEHOLDER_EXAMPLE, min_fraction_digits)

        description = _description_markup(self._config.description)
        amount_kwargs: dict[str, Any] = {
            "title": self._config.title,
            "default_value": number_text,
            "placeholder": placeholder,
            "required": self._config.required,
            "size": self._config.size,
            "max_length": self._config.max_length,
        }

        if len(currencies) == 1:
            code = currencies[0].code
            state = FieldState(
                amount=AmountField(**amount_kwargs, field_suffix=code + description),
                currency=CurrencyField(type=SubFieldType.HIDDEN, value=code),
                mode=CurrencyMode.SINGLE,
                min_fraction_digits=min_fraction_digits,
            )
        else:
            state = FieldState(
                amount=AmountField(**amount_kwargs),
                currency=CurrencyField(
                    type=SubFieldType.SELECT,
                    value=default.currency_code if default is not None else None,
                    options=tuple(currency.code for currency in currencies),
                    title=CURRENCY_SELECT_TITLE,
                    title_display=TitleDisplay.INVISIBLE,
                    field_suffix=description,
                ),
                mode=CurrencyMode.MULTIPLE,
                min_fraction_digits=min_fraction_digits,
            )

        logger.debug(
            "Built price element: mode=%s currencies=%d min_fraction_digits=%d locale=%s",
            state.mode, len(currencies), min_fraction_digits, self._locale_code,
        )
        return state

    @staticmethod
    def _format_amount(
        formatter: LocaleNumberFormatter, number: str, min_fraction_digits: int
    ) -> str:
        try:
            return formatter.format(
                number,
                minimum_fraction_digits=min_fraction_digits,
                maximum_fraction_digits=MAX_FRACTION_DIGITS,
                use_grouping=False,
            )
        except FormattingError as e:
            # A corrupt stored amount must not block rendering the form
            logger.warning("Showing stored amount unformatted: %s", e)
            return e.fallback_value

    # ------------------------------------------------------------------
    # Validate
    # ------------------------------------------------------------------

    def validate(self, submitted: Mapping[str, Any] | None) -> ValidationOutcome:
        """Convert submitted localized input back to a canonical Price.

        Args:
            submitted: Raw values keyed "number" and "currency_code"

        Returns:
            ValidationOutcome:
            - ok(None) when no amount was entered (required-field checks
              belong to the host)
            - ok(Price) on success
            - error on "currency_code" for an unknown currency
            - error on "number" ("<title> is not numeric.") when parsing fails;
              the title is HTML-escaped

        Never raises for user input.
        """
        if submitted is None:
            return ValidationOutcome.ok()

        number = submitted.get(AMOUNT_FIELD)
        if number is None:
            return ValidationOutcome.ok()
        text = number if isinstance(number, str) else str(number)
        if not text.strip():
            return ValidationOutcome.ok()

        currency = self._lookup(submitted.get(CURRENCY_FIELD))
        if currency is None:
            diagnostic = ErrorTemplate.currency_not_found(
                submitted.get(CURRENCY_FIELD), CURRENCY_FIELD
            )
            logger.warning("Rejected price submission: %s", diagnostic.format_error())
            return ValidationOutcome.error(FieldError.from_diagnostic(diagnostic))

        parsed, errors = self.formatter().parse(text, currency)
        if parsed is None:
            for error in errors:
                logger.debug("Amount parse failed: %s", error)
            # Message is markup, like the description
            diagnostic = ErrorTemplate.amount_not_numeric(
                html.escape(self._config.title), AMOUNT_FIELD
            )
            return ValidationOutcome.error(FieldError.from_diagnostic(diagnostic))

        return ValidationOutcome.ok(Price(number=parsed, currency_code=currency.code))

    def _lookup(self, code: object) -> Currency | None:
        if not isinstance(code, str) or not code:
            return None
        return self._catalog.lookup(code)

    # ------------------------------------------------------------------
    # Submission
    # ------------------------------------------------------------------

    @staticmethod
    def value_callback(raw: object) -> dict[str, Any] | None:
        """See module-level value_callback."""
        return value_callback(raw)

    def submit(self, raw: object) -> ValidationOutcome:
        """Reconcile and validate one raw submission.

        Runs value_callback() and then validate(). When no value was
        submitted, the configured default value is kept.

        Returns:
            ValidationOutcome; value.to_dict() is what the host writes back
            into its form state.
        """
        value = value_callback(raw)
        if value is None:
            return ValidationOutcome.ok(self._config.default_value)
        return self.validate(value)
