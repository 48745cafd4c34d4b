"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Keeps messages testable and documents every error case in one place.
    """

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @staticmethod
    def default_value_invalid(default_value: object) -> Diagnostic:
        """Default value lacks the "number" or "currency_code" key.

        Args:
            default_value: The rejected default value

        Returns:
            Diagnostic for DEFAULT_VALUE_INVALID
        """
        msg = (
            "The default value for a price element must be a Price or a mapping "
            'with "number" and "currency_code" keys'
        )
        return Diagnostic(
            code=DiagnosticCode.DEFAULT_VALUE_INVALID,
            message=msg,
            hint=f"Got {type(default_value).__name__}: {default_value!r}",
        )

    @staticmethod
    def config_value_invalid(name: str, value: object) -> Diagnostic:
        """Element configuration hint out of range.

        Args:
            name: Configuration attribute name
            value: The rejected value

        Returns:
            Diagnostic for CONFIG_VALUE_INVALID
        """
        msg = f"Price element option '{name}' must be a positive integer, got {value!r}"
        return Diagnostic(code=DiagnosticCode.CONFIG_VALUE_INVALID, message=msg)

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    @staticmethod
    def format_value_invalid(value: object) -> Diagnostic:
        """Value passed to the formatter is not a canonical decimal.

        Args:
            value: The rejected value

        Returns:
            Diagnostic for FORMAT_VALUE_INVALID
        """
        msg = f"Cannot format '{value}': not a canonical decimal number"
        return Diagnostic(
            code=DiagnosticCode.FORMAT_VALUE_INVALID,
            message=msg,
            hint="Stored amounts use '.' as decimal separator and no grouping",
            input_value=str(value),
        )

    @staticmethod
    def format_failed(value: object, locale_code: str, reason: str) -> Diagnostic:
        """Babel rejected the value or pattern.

        Args:
            value: The value being formatted
            locale_code: Active locale
            reason: Underlying error text

        Returns:
            Diagnostic for FORMAT_FAILED
        """
        msg = f"Number formatting failed for '{value}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.FORMAT_FAILED,
            message=msg,
            input_value=str(value),
            locale_code=locale_code,
        )

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    @staticmethod
    def parse_locale_unknown(locale_code: str) -> Diagnostic:
        """Locale is not recognized by Babel.

        Args:
            locale_code: The unknown locale

        Returns:
            Diagnostic for PARSE_LOCALE_UNKNOWN
        """
        msg = f"Unknown locale: {locale_code}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_LOCALE_UNKNOWN,
            message=msg,
            hint="Use BCP 47 or POSIX locale codes such as 'en-US' or 'de_DE'",
            locale_code=locale_code,
        )

    @staticmethod
    def parse_decimal_failed(value: str, locale_code: str, reason: str) -> Diagnostic:
        """Babel could not parse the text as a decimal.

        Args:
            value: The rejected text
            locale_code: Active locale
            reason: Underlying error text

        Returns:
            Diagnostic for PARSE_DECIMAL_FAILED
        """
        msg = f"Failed to parse decimal '{value}' for locale '{locale_code}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_DECIMAL_FAILED,
            message=msg,
            hint="Use the decimal separator of the active locale and no grouping",
            input_value=value,
            locale_code=locale_code,
        )

    @staticmethod
    def parse_non_numeric(value: str, locale_code: str) -> Diagnostic:
        """Text contains letters after currency markers were removed.

        Args:
            value: The rejected text
            locale_code: Active locale

        Returns:
            Diagnostic for PARSE_NON_NUMERIC
        """
        msg = f"'{value}' contains non-numeric characters"
        return Diagnostic(
            code=DiagnosticCode.PARSE_NON_NUMERIC,
            message=msg,
            input_value=value,
            locale_code=locale_code,
        )

    @staticmethod
    def parse_precision_exceeded(
        value: str, currency_code: str, fraction_digits: int, locale_code: str
    ) -> Diagnostic:
        """Parsed amount has more significant fraction digits than the currency.

        Args:
            value: The rejected text
            currency_code: Selected currency
            fraction_digits: Fraction digits the currency allows
            locale_code: Active locale

        Returns:
            Diagnostic for PARSE_PRECISION_EXCEEDED
        """
        msg = f"'{value}' has more fraction digits than {currency_code} allows"
        return Diagnostic(
            code=DiagnosticCode.PARSE_PRECISION_EXCEEDED,
            message=msg,
            hint=f"{currency_code} amounts use at most {fraction_digits} fraction digits",
            input_value=value,
            locale_code=locale_code,
        )

    @staticmethod
    def parse_amount_not_finite(value: str, locale_code: str) -> Diagnostic:
        """Parsed amount is NaN or infinite.

        Args:
            value: The rejected text
            locale_code: Active locale

        Returns:
            Diagnostic for PARSE_AMOUNT_NOT_FINITE
        """
        msg = f"'{value}' is not a finite amount"
        return Diagnostic(
            code=DiagnosticCode.PARSE_AMOUNT_NOT_FINITE,
            message=msg,
            input_value=value,
            locale_code=locale_code,
        )

    # ------------------------------------------------------------------
    # Validation (user-facing)
    # ------------------------------------------------------------------

    @staticmethod
    def amount_not_numeric(title: str, field: str) -> Diagnostic:
        """Submitted amount failed to parse.

        Args:
            title: Element title shown to the user
            field: Sub-field key the error attaches to

        Returns:
            Diagnostic for AMOUNT_NOT_NUMERIC
        """
        msg = f"{title} is not numeric."
        return Diagnostic(code=DiagnosticCode.AMOUNT_NOT_NUMERIC, message=msg, field=field)

    @staticmethod
    def currency_not_found(currency_code: object, field: str) -> Diagnostic:
        """Submitted currency code is not in the catalog.

        Args:
            currency_code: The submitted code (may be None or non-string)
            field: Sub-field key the error attaches to

        Returns:
            Diagnostic for CURRENCY_NOT_FOUND
        """
        msg = "The selected currency is not available."
        return Diagnostic(
            code=DiagnosticCode.CURRENCY_NOT_FOUND,
            message=msg,
            hint=f"Submitted currency code: {currency_code!r}",
            field=field,
            input_value=None if currency_code is None else str(currency_code),
        )
