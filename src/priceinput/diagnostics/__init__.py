"""Diagnostic system for priceinput errors.

Provides structured error diagnostics with codes and hints, the exception
hierarchy, and field-scoped validation results.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import ConfigurationError, FormattingError, ParseError, PriceInputError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate
from .validation import FieldError, ValidationOutcome

__all__ = [
    "ConfigurationError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "FieldError",
    "FormattingError",
    "OutputFormat",
    "ParseError",
    "PriceInputError",
    "ValidationOutcome",
]
