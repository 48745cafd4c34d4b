"""Exception hierarchy with structured diagnostics.

All exceptions optionally carry a Diagnostic for rich error information.
Only configuration and formatting errors are raised; parse errors are
returned in result tuples and validation errors travel inside
ValidationOutcome.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "ConfigurationError",
    "FormattingError",
    "ParseError",
    "PriceInputError",
]


class PriceInputError(Exception):
    """Base exception for all priceinput errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize PriceInputError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class ConfigurationError(PriceInputError):
    """Caller contract violation detected while configuring an element.

    Fatal and developer-facing: a default value without "number" or
    "currency_code", or a non-positive size hint. Never converted into a
    user-facing validation error.
    """


class FormattingError(PriceInputError):
    """Raised when locale-aware formatting fails.

    Carries a fallback_value so callers that must keep rendering can show
    the original value instead.

    Attributes:
        fallback_value: String to use in output when formatting fails
    """

    def __init__(self, message: str | Diagnostic, fallback_value: str) -> None:
        """Initialize FormattingError.

        Args:
            message: Error message string OR Diagnostic object
            fallback_value: Value to use in output when formatting fails
        """
        super().__init__(message)
        self.fallback_value = fallback_value


class ParseError(PriceInputError):
    """Error while parsing a localized amount back to canonical form.

    Returned, not raised, by the parsing functions.

    Attributes:
        input_value: The string that failed to parse
        locale_code: The locale used for parsing
        parse_type: Type of parsing attempted ('decimal' or 'amount')

    Example:
        >>> result, errors = parse_decimal("invalid", "en_US")
        >>> for error in errors:
        ...     print(f"Parse failed: {error.input_value} ({error.parse_type})")
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        input_value: str = "",
        locale_code: str = "",
        parse_type: str = "",
    ) -> None:
        """Initialize ParseError.

        Args:
            message: Error message string OR Diagnostic object
            input_value: The string that failed to parse
            locale_code: The locale used for parsing
            parse_type: Type of parsing ('decimal' or 'amount')
        """
        super().__init__(message)
        self.input_value = input_value
        self.locale_code = locale_code
        self.parse_type = parse_type
