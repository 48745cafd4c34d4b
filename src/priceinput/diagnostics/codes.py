"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages shared by configuration,
formatting, parsing and validation errors.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Configuration errors (caller contract violations)
        2000-2999: Formatting errors (canonical value -> display string)
        3000-3999: Parsing errors (display string -> canonical value)
        4000-4999: Validation errors (user-facing, attached to a sub-field)
    """

    # Configuration errors (1000-1999)
    DEFAULT_VALUE_INVALID = 1001
    CONFIG_VALUE_INVALID = 1002

    # Formatting errors (2000-2999)
    FORMAT_VALUE_INVALID = 2001
    FORMAT_FAILED = 2002

    # Parsing errors (3000-3999)
    PARSE_LOCALE_UNKNOWN = 3001
    PARSE_DECIMAL_FAILED = 3002
    PARSE_NON_NUMERIC = 3003
    PARSE_PRECISION_EXCEEDED = 3004
    PARSE_AMOUNT_NOT_FINITE = 3005

    # Validation errors (4000-4999)
    AMOUNT_NOT_NUMERIC = 4001
    CURRENCY_NOT_FOUND = 4002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Provides rich error information for both humans (form error display,
    logs) and tools (JSON output).

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        field: Sub-field the error is attached to (validation errors)
        input_value: Offending input, if any
        locale_code: Locale active when the error occurred
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    field: str | None = None
    input_value: str | None = None
    locale_code: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic in the default multi-line style.

        Example output:
            error[PARSE_PRECISION_EXCEEDED]: '1.234' has more fraction digits than USD allows
              --> field: number
              = locale: en_US
              = help: USD amounts use at most 2 fraction digits

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
