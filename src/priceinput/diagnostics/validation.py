"""Field-scoped validation results for submitted price input.

Validation errors are values, not exceptions: they are attached to the
sub-field they concern and surfaced by the host's error display.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .codes import Diagnostic

if TYPE_CHECKING:
    from priceinput.element.types import Price

__all__ = [
    "FieldError",
    "ValidationOutcome",
]


@dataclass(frozen=True, slots=True)
class FieldError:
    """User-facing error attached to one sub-field.

    Attributes:
        field: Sub-field key ("number" or "currency_code")
        message: Message shown next to the field
        diagnostic: Structured details for logging (optional)
    """

    field: str
    message: str
    diagnostic: Diagnostic | None = None

    @classmethod
    def from_diagnostic(cls, diagnostic: Diagnostic) -> FieldError:
        """Build a FieldError from a diagnostic carrying a field reference.

        Raises:
            ValueError: If the diagnostic has no field
        """
        if diagnostic.field is None:
            msg = f"Diagnostic {diagnostic.code.name} is not attached to a field"
            raise ValueError(msg)
        return cls(field=diagnostic.field, message=diagnostic.message, diagnostic=diagnostic)


@dataclass(frozen=True, slots=True)
class ValidationOutcome:
    """Result of validating one submitted price.

    Exactly one of three shapes:
    - valid with a Price (amount parsed)
    - valid with value None (nothing entered; pass-through)
    - invalid with one or more FieldErrors and value None

    Attributes:
        value: Reconciled Price, or None
        errors: Field errors (empty when valid)
    """

    value: Price | None = None
    errors: tuple[FieldError, ...] = ()

    def __post_init__(self) -> None:
        """Reject outcomes carrying both a value and errors.

        Raises:
            ValueError: If value and errors are both set
        """
        if self.value is not None and self.errors:
            msg = "ValidationOutcome cannot carry both a value and errors"
            raise ValueError(msg)

    @classmethod
    def ok(cls, value: Price | None = None) -> ValidationOutcome:
        """Successful outcome, optionally carrying the reconciled Price."""
        return cls(value=value)

    @classmethod
    def error(cls, *errors: FieldError) -> ValidationOutcome:
        """Failed outcome carrying the given field errors."""
        return cls(errors=errors)

    @property
    def is_valid(self) -> bool:
        """True if no field errors were recorded."""
        return not self.errors

    def errors_for(self, field: str) -> tuple[FieldError, ...]:
        """Field errors attached to the given sub-field key."""
        return tuple(error for error in self.errors if error.field == field)
