"""Value types for the price element.

Price is the canonical value exchanged with the host application; the
remaining types describe the render output (FieldState and its two
sub-fields) and the element configuration.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Final

from priceinput.constants import (
    AMOUNT_FIELD,
    CURRENCY_FIELD,
    DEFAULT_MAX_LENGTH,
    DEFAULT_SIZE,
    DEFAULT_TITLE,
    ELEMENT_CSS_CLASS,
)
from priceinput.diagnostics import ConfigurationError, ErrorTemplate
from priceinput.enums import CurrencyMode, SubFieldType, TitleDisplay

__all__ = [
    "EMPTY_FIELD",
    "AmountField",
    "CurrencyField",
    "EmptyField",
    "FieldState",
    "Price",
    "PriceElementConfig",
    "PriceLike",
    "validate_default_value",
]


@dataclass(frozen=True, slots=True)
class Price:
    """Canonical amount plus currency code.

    Attributes:
        number: Canonical decimal string ('.' separator, no grouping),
            e.g. "9.99". Never localized.
        currency_code: Currency code, e.g. "USD".
    """

    number: str
    currency_code: str

    @classmethod
    def from_mapping(cls, value: Mapping[str, Any]) -> Price:
        """Build from a {"number", "currency_code"} mapping.

        A None number becomes "" (no amount entered).

        Raises:
            KeyError: If either key is missing
        """
        number = value[AMOUNT_FIELD]
        return cls(
            number="" if number is None else str(number),
            currency_code=str(value[CURRENCY_FIELD]),
        )

    def to_dict(self) -> dict[str, str]:
        """Mapping shape written back into host form state."""
        return {AMOUNT_FIELD: self.number, CURRENCY_FIELD: self.currency_code}


type PriceLike = Price | Mapping[str, Any]
"""Accepted default value shapes: a Price or a mapping with both keys."""


def validate_default_value(default_value: object) -> bool:
    """Check that a default value supplies both "number" and "currency_code".

    Args:
        default_value: Candidate default value

    Returns:
        True if default_value is a Price or a mapping holding both keys.

    Example:
        >>> validate_default_value({"number": "9.99", "currency_code": "USD"})
        True
        >>> validate_default_value({"currency_code": "USD"})
        False
    """
    if isinstance(default_value, Price):
        return True
    if not isinstance(default_value, Mapping):
        return False
    return AMOUNT_FIELD in default_value and CURRENCY_FIELD in default_value


def _coerce_default_value(default_value: PriceLike | None) -> Price | None:
    """Normalize a default value to Price.

    Raises:
        ConfigurationError: If default_value is present but malformed
    """
    if default_value is None:
        return None
    if not validate_default_value(default_value):
        raise ConfigurationError(ErrorTemplate.default_value_invalid(default_value))
    if isinstance(default_value, Price):
        return default_value
    return Price.from_mapping(default_value)


@dataclass(frozen=True, slots=True)
class PriceElementConfig:
    """Immutable configuration of one price element.

    All fields have defaults; ``PriceElementConfig()`` is usable as is.
    Display hints are passed through to the rendered sub-fields without
    interpretation.

    Attributes:
        title: Element title; labels the amount field and prefixes
            validation messages (default: "Price").
        size: Width hint of the amount input (default: 10).
        max_length: Maximum input length of the amount input (default: 128).
        required: Whether the host should require an amount (default: False).
        description: Help text rendered after the last visible sub-field.
        default_value: Initial Price or {"number", "currency_code"} mapping.
            Normalized to Price at construction.

    Raises:
        ConfigurationError: If default_value lacks a required key, or size
            or max_length is not a positive integer.

    Example:
        >>> config = PriceElementConfig(
        ...     title="Amount",
        ...     default_value={"number": "99.99", "currency_code": "USD"},
        ...     required=True,
        ... )
        >>> config.default_value
        Price(number='99.99', currency_code='USD')
    """

    title: str = DEFAULT_TITLE
    size: int = DEFAULT_SIZE
    max_length: int = DEFAULT_MAX_LENGTH
    required: bool = False
    description: str | None = None
    default_value: PriceLike | None = None

    def __post_init__(self) -> None:
        for name in ("size", "max_length"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ConfigurationError(ErrorTemplate.config_value_invalid(name, value))
        # frozen: bypass __setattr__ to store the normalized default
        object.__setattr__(
            self, "default_value", _coerce_default_value(self.default_value)
        )


@dataclass(frozen=True, slots=True)
class AmountField:
    """Rendered amount sub-field (text input).

    Attributes:
        title: Label, taken from the element title
        default_value: Localized seed text ("" when no default)
        placeholder: Localized example amount ("9.99" / "9,99")
        required: Passed through from configuration
        size: Passed through from configuration
        max_length: Passed through from configuration
        field_suffix: Markup after the input (currency code, description)
        title_display: Title placement (visible label before the input)
    """

    title: str
    default_value: str
    placeholder: str
    required: bool
    size: int
    max_length: int
    field_suffix: str = ""
    name: str = AMOUNT_FIELD
    type: SubFieldType = SubFieldType.TEXTFIELD
    title_display: TitleDisplay = TitleDisplay.BEFORE


@dataclass(frozen=True, slots=True)
class CurrencyField:
    """Rendered currency sub-field (hidden value or select list).

    Attributes:
        type: HIDDEN for a single currency, SELECT otherwise
        value: Fixed code (HIDDEN) or pre-selected code (SELECT, may be None)
        options: Selectable codes in catalog order (SELECT only)
        title: Label (SELECT only)
        title_display: Title placement (SELECT renders it invisible)
        field_suffix: Markup after the select (description)
    """

    type: SubFieldType
    value: str | None
    options: tuple[str, ...] = ()
    title: str | None = None
    title_display: TitleDisplay = TitleDisplay.INVISIBLE
    field_suffix: str = ""
    name: str = CURRENCY_FIELD


@dataclass(frozen=True, slots=True)
class FieldState:
    """Renderable state of a price element.

    Constructed fresh per render and discarded after validation.

    Attributes:
        amount: Amount sub-field
        currency: Currency sub-field
        mode: SINGLE or MULTIPLE, derived from the catalog size
        min_fraction_digits: Catalog-wide minimum used for display
        css_classes: Classes for the element wrapper
    """

    amount: AmountField
    currency: CurrencyField
    mode: CurrencyMode
    min_fraction_digits: int
    css_classes: tuple[str, ...] = (ELEMENT_CSS_CLASS,)

    @property
    def number_text(self) -> str:
        """Localized amount text shown to the user."""
        return self.amount.default_value

    @property
    def currency_code(self) -> str | None:
        """Fixed or pre-selected currency code, None if nothing selected."""
        return self.currency.value

    @property
    def is_empty(self) -> bool:
        return False

    @property
    def last_visible_field(self) -> str:
        """Key of the sub-field that carries the description suffix."""
        return AMOUNT_FIELD if self.mode is CurrencyMode.SINGLE else CURRENCY_FIELD


@dataclass(frozen=True, slots=True)
class EmptyField:
    """Build result when no currencies are available: render nothing."""

    @property
    def is_empty(self) -> bool:
        return True


EMPTY_FIELD: Final = EmptyField()
