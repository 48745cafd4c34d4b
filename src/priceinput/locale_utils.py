"""Locale utilities for BCP-47 to POSIX conversion.

Centralizes locale format normalization used by the formatter cache and the
parsing functions. Provides canonical locale handling to ensure consistent
cache keys and lookups.

Python 3.13+.
"""

from __future__ import annotations

import functools
import os
from typing import TYPE_CHECKING

from priceinput.constants import DEFAULT_LOCALE, MAX_LOCALE_CACHE_SIZE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "get_system_locale",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("de-DE")
        'de_DE'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def get_system_locale() -> str:
    """Detect the process locale from environment variables.

    Detection order: LC_ALL, LC_MESSAGES, LANG. Encoding suffixes
    (".UTF-8") are stripped and "C"/"POSIX" pseudo-locales ignored.

    Returns:
        Detected locale code in POSIX format, or DEFAULT_LOCALE.

    Example:
        >>> import os
        >>> os.environ["LANG"] = "de_DE.UTF-8"
        >>> get_system_locale()
        'de_DE'
    """
    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var)
        if value and value not in ("C", "POSIX"):
            locale_code = value.split(".")[0].split("@")[0]
            if locale_code and locale_code not in ("C", "POSIX"):
                return normalize_locale(locale_code)

    return DEFAULT_LOCALE
