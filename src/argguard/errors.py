"""
Failure taxonomy for argguard checks.

Every check reports a violation through :func:`raise_violation`, which builds
one of the exception types below and raises it on the calling thread. The
exceptions subclass the builtins a caller would otherwise catch for bad
arguments, so ``except ValueError`` keeps working around guarded code.
"""

from __future__ import annotations

from enum import Enum
from typing import NoReturn, Type


class ViolationKind(Enum):
    """Category of a violated check."""
    ABSENCE = "absence"
    TYPE = "type"
    EQUALITY = "equality"
    BOOLEAN = "boolean"
    RANGE = "range"


class GuardViolation(ValueError):
    """Raised when a precondition check fails."""

    kind: ViolationKind

    def __init__(self, name: str, message: str) -> None:
        super().__init__(message)
        self.name = name
        self.message = message

    def __str__(self) -> str:
        return self.message

    def __reduce__(self):
        return (type(self), (self.name, self.message))


class AbsenceViolation(GuardViolation):
    """Raised when a value is None where it must not be, or the reverse."""
    kind = ViolationKind.ABSENCE


class TypeViolation(GuardViolation, TypeError):
    """Raised when a value has the wrong runtime type."""
    kind = ViolationKind.TYPE


class EqualityViolation(GuardViolation):
    """Raised when an equality, identity or bitwise check fails."""
    kind = ViolationKind.EQUALITY


class BooleanViolation(GuardViolation):
    """Raised when a value must be true or false and is not."""
    kind = ViolationKind.BOOLEAN


class RangeViolation(GuardViolation):
    """Raised when a value falls outside (or inside) a required range."""
    kind = ViolationKind.RANGE


def raise_violation(error_type: Type[GuardViolation], name: str, message: str) -> NoReturn:
    """
    Raise a guard failure for parameter ``name``.

    Args:
        error_type: GuardViolation subclass matching the check category
        name: Parameter name supplied by the caller, echoed verbatim
        message: Fully rendered failure message

    Raises:
        GuardViolation: Always, as an instance of ``error_type``
    """
    raise error_type(name, message)
