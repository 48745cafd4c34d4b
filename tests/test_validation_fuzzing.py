"""Fuzz tests: arbitrary submissions never escape as exceptions.

Marked fuzz; run with: pytest -m fuzz
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from priceinput.catalog import Currency, InMemoryCurrencyCatalog
from priceinput.element import PriceInputModel
from priceinput.parsing import count_fraction_digits, parse_amount
from tests.strategies import currencies, formatting_locales

pytestmark = pytest.mark.fuzz

_NUMERIC_TEXT = st.text(alphabet="0123456789.,-+   '$€", max_size=24)


class TestParseAmountFuzzing:
    """parse_amount over numeric-looking text."""

    @given(text=_NUMERIC_TEXT, currency=currencies(), locale_code=formatting_locales())
    def test_result_or_errors(self, text: str, currency: Currency, locale_code: str) -> None:
        """Property: accepted amounts are finite and within precision."""
        result, errors = parse_amount(text, currency, locale_code)
        if result is None:
            event("outcome=rejected")
            assert errors
        else:
            event("outcome=accepted")
            assert errors == ()
            value = Decimal(result)
            assert value.is_finite()
            assert count_fraction_digits(value) <= currency.fraction_digits


class TestValidateFuzzing:
    """PriceInputModel.validate over arbitrary mappings."""

    @given(
        number=st.one_of(st.none(), st.text(max_size=24), _NUMERIC_TEXT, st.integers()),
        currency_code=st.one_of(st.none(), st.sampled_from(["USD", "JPY", "GBP", ""])),
        locale_code=formatting_locales(),
    )
    def test_never_raises(
        self, number: object, currency_code: str | None, locale_code: str
    ) -> None:
        """Property: validate returns a value or field errors, never both."""
        catalog = InMemoryCurrencyCatalog.from_fraction_digits({"USD": 2, "JPY": 0})
        model = PriceInputModel(catalog, locale_code=locale_code)

        outcome = model.validate({"number": number, "currency_code": currency_code})

        if outcome.errors:
            event("outcome=error")
            assert outcome.value is None
            assert all(error.field in ("number", "currency_code") for error in outcome.errors)
        elif outcome.value is not None:
            event("outcome=price")
            assert outcome.value.currency_code in ("USD", "JPY")
        else:
            event("outcome=empty")
