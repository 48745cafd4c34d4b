"""Type guard functions for parsing result type narrowing.

Parse functions return tuple[result | None, tuple[ParseError, ...]].
Guards check the result component to narrow types for mypy.

Python 3.13+ with TypeIs support (PEP 742).

Note: All guards accept None and return False, so
`if not errors and is_valid_decimal(result)` reduces to `if is_valid_decimal(result)`.
"""

from decimal import Decimal
from typing import TypeIs

__all__ = ["is_valid_decimal"]


def is_valid_decimal(value: Decimal | None) -> TypeIs[Decimal]:
    """Type guard: Check if parsed decimal is valid (not None/NaN/Infinity).

    Args:
        value: Decimal from parse_decimal() result tuple (may be None on error)

    Returns:
        True if value is a finite Decimal, False otherwise

    Example:
        >>> result, errors = parse_decimal("1,234.56", "en_US")
        >>> if is_valid_decimal(result):
        ...     total = result.quantize(Decimal("0.01"))
    """
    return value is not None and value.is_finite()
