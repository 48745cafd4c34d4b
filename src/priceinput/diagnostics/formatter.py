"""Diagnostic formatting service.

Centralizes diagnostic output formatting for logs and tooling.
Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    MULTILINE = "multiline"  # Header line plus indented detail lines (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for log aggregation


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Attributes:
        output_format: Output style (multiline, simple, json)
        sanitize: Truncate user-supplied text to prevent log flooding
        max_content_length: Maximum content length when sanitizing

    Example:
        >>> diagnostic = ErrorTemplate.parse_non_numeric("abc", "en_US")
        >>> print(DiagnosticFormatter().format(diagnostic))
        error[PARSE_NON_NUMERIC]: 'abc' contains non-numeric characters
          = locale: en_US

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostic))
        PARSE_NON_NUMERIC: 'abc' contains non-numeric characters
    """

    output_format: OutputFormat = OutputFormat.MULTILINE
    sanitize: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.MULTILINE:
                return self._format_multiline(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics separated by blank lines."""
        return "\n\n".join(self.format(d) for d in diagnostics)

    def _format_multiline(self, diagnostic: Diagnostic) -> str:
        parts = [
            f"{diagnostic.severity}[{diagnostic.code.name}]: "
            f"{self._maybe_sanitize(diagnostic.message)}"
        ]

        if diagnostic.field:
            parts.append(f"  --> field: {diagnostic.field}")

        if diagnostic.locale_code:
            parts.append(f"  = locale: {diagnostic.locale_code}")

        if diagnostic.hint:
            parts.append(f"  = help: {self._maybe_sanitize(diagnostic.hint)}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        message = self._maybe_sanitize(diagnostic.message)
        return f"{diagnostic.code.name}: {message}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        data: dict[str, str | int | None] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": self._maybe_sanitize(diagnostic.message),
            "severity": diagnostic.severity,
        }

        if diagnostic.field:
            data["field"] = diagnostic.field

        if diagnostic.input_value is not None:
            data["input_value"] = self._maybe_sanitize(diagnostic.input_value)

        if diagnostic.locale_code:
            data["locale_code"] = diagnostic.locale_code

        if diagnostic.hint:
            data["hint"] = self._maybe_sanitize(diagnostic.hint)

        return json.dumps(data, ensure_ascii=False)

    def _maybe_sanitize(self, text: str) -> str:
        """Truncate text if sanitization is enabled."""
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text
