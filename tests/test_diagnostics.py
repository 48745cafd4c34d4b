"""Tests for diagnostics: codes, templates, formatter, errors, outcomes."""

import json

import pytest

from priceinput.diagnostics import (
    ConfigurationError,
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorTemplate,
    FieldError,
    FormattingError,
    OutputFormat,
    ParseError,
    PriceInputError,
    ValidationOutcome,
)
from priceinput.element import Price


class TestErrorTemplate:
    """Message templates."""

    def test_amount_not_numeric(self) -> None:
        """Message names the element title and the amount field."""
        diagnostic = ErrorTemplate.amount_not_numeric("Amount", "number")
        assert diagnostic.message == "Amount is not numeric."
        assert diagnostic.field == "number"
        assert diagnostic.code == DiagnosticCode.AMOUNT_NOT_NUMERIC

    def test_currency_not_found(self) -> None:
        """Submitted code is kept for logging."""
        diagnostic = ErrorTemplate.currency_not_found("GBP", "currency_code")
        assert diagnostic.field == "currency_code"
        assert diagnostic.input_value == "GBP"

    def test_precision_hint(self) -> None:
        """Hint states the allowed precision."""
        diagnostic = ErrorTemplate.parse_precision_exceeded("1.234", "USD", 2, "en_US")
        assert diagnostic.hint == "USD amounts use at most 2 fraction digits"

    def test_default_value_invalid(self) -> None:
        """Message names both required keys."""
        diagnostic = ErrorTemplate.default_value_invalid({"currency_code": "USD"})
        assert '"number"' in diagnostic.message
        assert '"currency_code"' in diagnostic.message


class TestDiagnosticFormatter:
    """Output styles."""

    def test_multiline(self) -> None:
        """Header plus field, locale and help lines."""
        diagnostic = Diagnostic(
            code=DiagnosticCode.PARSE_PRECISION_EXCEEDED,
            message="too precise",
            hint="use fewer digits",
            field="number",
            locale_code="en_US",
        )
        assert diagnostic.format_error() == (
            "error[PARSE_PRECISION_EXCEEDED]: too precise\n"
            "  --> field: number\n"
            "  = locale: en_US\n"
            "  = help: use fewer digits"
        )

    def test_simple(self) -> None:
        """Single line."""
        diagnostic = ErrorTemplate.parse_non_numeric("abc", "en_US")
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        assert formatter.format(diagnostic) == (
            "PARSE_NON_NUMERIC: 'abc' contains non-numeric characters"
        )

    def test_json(self) -> None:
        """JSON carries code, value and optional fields."""
        diagnostic = ErrorTemplate.parse_non_numeric("abc", "de_DE")
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        data = json.loads(formatter.format(diagnostic))
        assert data["code"] == "PARSE_NON_NUMERIC"
        assert data["code_value"] == DiagnosticCode.PARSE_NON_NUMERIC.value
        assert data["input_value"] == "abc"
        assert data["locale_code"] == "de_DE"
        assert "field" not in data

    def test_sanitize_truncates(self) -> None:
        """Long user input is truncated when sanitizing."""
        diagnostic = ErrorTemplate.parse_non_numeric("x" * 500, "en_US")
        formatter = DiagnosticFormatter(
            output_format=OutputFormat.SIMPLE, sanitize=True, max_content_length=20
        )
        assert formatter.format(diagnostic).endswith("...")

    def test_format_all(self) -> None:
        """Diagnostics separated by blank lines."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        diagnostics = [
            ErrorTemplate.parse_non_numeric("a", "en_US"),
            ErrorTemplate.parse_non_numeric("b", "en_US"),
        ]
        assert formatter.format_all(diagnostics).count("\n\n") == 1


class TestErrors:
    """Exception hierarchy."""

    def test_hierarchy(self) -> None:
        """All errors share PriceInputError."""
        assert issubclass(ConfigurationError, PriceInputError)
        assert issubclass(FormattingError, PriceInputError)
        assert issubclass(ParseError, PriceInputError)

    def test_diagnostic_message(self) -> None:
        """Diagnostic-backed errors render the formatted diagnostic."""
        error = ConfigurationError(ErrorTemplate.config_value_invalid("size", 0))
        assert error.diagnostic is not None
        assert "CONFIG_VALUE_INVALID" in str(error)

    def test_plain_message(self) -> None:
        """String messages carry no diagnostic."""
        error = PriceInputError("boom")
        assert error.diagnostic is None
        assert str(error) == "boom"

    def test_parse_error_context(self) -> None:
        """ParseError keeps its context."""
        error = ParseError("bad", input_value="x", locale_code="en_US", parse_type="amount")
        assert (error.input_value, error.locale_code, error.parse_type) == (
            "x", "en_US", "amount",
        )


class TestValidationOutcome:
    """Field-scoped outcomes."""

    def test_ok_with_value(self) -> None:
        """Valid outcome carrying a price."""
        outcome = ValidationOutcome.ok(Price("9.99", "USD"))
        assert outcome.is_valid
        assert outcome.value == Price("9.99", "USD")

    def test_ok_without_value(self) -> None:
        """Pass-through outcome."""
        outcome = ValidationOutcome.ok()
        assert outcome.is_valid
        assert outcome.value is None

    def test_error(self) -> None:
        """Errors are grouped by field."""
        outcome = ValidationOutcome.error(
            FieldError.from_diagnostic(ErrorTemplate.amount_not_numeric("Price", "number"))
        )
        assert not outcome.is_valid
        assert len(outcome.errors_for("number")) == 1
        assert outcome.errors_for("currency_code") == ()

    def test_value_and_errors_exclusive(self) -> None:
        """An outcome cannot be both valid and failed."""
        with pytest.raises(ValueError, match="both"):
            ValidationOutcome(value=Price("1", "USD"), errors=(FieldError("number", "x"),))

    def test_field_error_requires_field(self) -> None:
        """Only field-attached diagnostics become FieldErrors."""
        with pytest.raises(ValueError, match="not attached"):
            FieldError.from_diagnostic(ErrorTemplate.parse_non_numeric("x", "en_US"))
