"""Locale-aware amount formatting.

Public API:
    LocaleNumberFormatter - Cached, immutable formatter bound to one locale
    FormatterFactory - Callable[[str], LocaleNumberFormatter]
    build_pattern - CLDR pattern from fraction-digit bounds
"""

from .locale_formatter import FormatterFactory, LocaleNumberFormatter, build_pattern

__all__ = ["FormatterFactory", "LocaleNumberFormatter", "build_pattern"]
