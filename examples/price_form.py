"""Price Form Examples.

priceinput round-trips a monetary amount between storage and a form:
- Build: stored Price -> localized field state (PriceInputModel.build)
- Validate: submitted localized text -> canonical Price (PriceInputModel.validate)

API Notes:
- Configuration errors (malformed default value) raise ConfigurationError
- Validation never raises; errors come back attached to a sub-field
- Parse functions return tuple[result, tuple[ParseError, ...]] and never raise
"""

from priceinput import (
    FieldState,
    InMemoryCurrencyCatalog,
    IsoCurrencyCatalog,
    LocaleNumberFormatter,
    PriceElementConfig,
    PriceInputModel,
)


def example_single_currency() -> None:
    """Single currency: the code is shown next to the amount."""
    print("[Example 1] Single Currency (en_US)")
    print("-" * 60)

    catalog = InMemoryCurrencyCatalog.from_fraction_digits({"USD": 2})
    model = PriceInputModel(catalog, locale_code="en_US")

    state = model.build({"number": "10", "currency_code": "USD"})
    if isinstance(state, FieldState):
        print(f"Mode:        {state.mode}")
        print(f"Amount text: {state.number_text}")
        print(f"Placeholder: {state.amount.placeholder}")
        print(f"Suffix:      {state.amount.field_suffix}")


def example_multi_currency_form() -> None:
    """Multiple currencies in a comma-decimal locale."""
    print("\n[Example 2] Multi-Currency Form (German Locale)")
    print("-" * 60)

    catalog = IsoCurrencyCatalog.from_codes(["EUR", "USD", "JPY"])
    config = PriceElementConfig(title="Preis", description="Netto, ohne MwSt.")
    model = PriceInputModel(catalog, config, locale_code="de_DE")

    state = model.build({"number": "1234.50", "currency_code": "EUR"})
    if isinstance(state, FieldState):
        print(f"Options:     {state.currency.options}")
        print(f"Selected:    {state.currency_code}")
        print(f"Amount text: {state.number_text}  # JPY in scope: minimum 0 digits")

    submissions = [
        {"number": "1234,5", "currency_code": "EUR"},  # Valid
        {"number": "9.99", "currency_code": "EUR"},  # Misplaced grouping
        {"number": "9,99", "currency_code": "JPY"},  # Too precise for JPY
        {"number": "abc", "currency_code": "USD"},  # Not a number
        {"number": "5", "currency_code": "GBP"},  # Not in catalog
        {"number": "", "currency_code": "EUR"},  # Nothing entered
    ]

    for submitted in submissions:
        outcome = model.validate(submitted)
        print(f"\nSubmitted: {submitted}")
        if outcome.is_valid:
            print(f"  Stored: {outcome.value}")
        for error in outcome.errors:
            print(f"  Error on {error.field}: {error.message}")


def example_formatter() -> None:
    """Direct formatter use across locales."""
    print("\n[Example 3] Formatter (Multiple Locales)")
    print("-" * 60)

    for locale_code in ("en_US", "de_DE", "fr_FR", "lv_LV"):
        formatter = LocaleNumberFormatter.create(locale_code)
        text = formatter.format("1234.5", minimum_fraction_digits=2)
        print(f"{locale_code}: {text}")


if __name__ == "__main__":
    print("=" * 60)
    print("priceinput - Price Form Examples")
    print("=" * 60)

    example_single_currency()
    example_multi_currency_form()
    example_formatter()

    print("\n" + "=" * 60)
    print("[SUCCESS] All examples complete!")
    print("=" * 60)
