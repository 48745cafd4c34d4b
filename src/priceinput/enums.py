"""Enumerations for priceinput type-safe constants.

Uses StrEnum so members are strings themselves: values serialize directly
into whatever render structure the host application builds.

Python 3.13+.
"""

from enum import StrEnum


class CurrencyMode(StrEnum):
    """How the currency sub-field is presented.

    Derived from the catalog size, never stored.
    """

    SINGLE = "single"
    """Exactly one currency: fixed hidden value, code shown as amount suffix."""

    MULTIPLE = "multiple"
    """More than one currency: select list of all codes."""


class SubFieldType(StrEnum):
    """Widget type of a rendered sub-field."""

    TEXTFIELD = "textfield"
    """Free-text input (the amount)."""

    HIDDEN = "hidden"
    """Fixed value, not shown (single-currency code)."""

    SELECT = "select"
    """Select list (multi-currency code)."""


class TitleDisplay(StrEnum):
    """Where a sub-field title is rendered."""

    BEFORE = "before"
    """Visible label before the input."""

    INVISIBLE = "invisible"
    """Present for screen readers only."""


__all__ = [
    "CurrencyMode",
    "SubFieldType",
    "TitleDisplay",
]
