"""
argguard: precondition checks for function arguments.

Each check validates one condition and raises a ``GuardViolation`` subclass
the moment it is violated:

    import argguard as guard

    def resize(width, height):
        guard.is_greater_than(width, 0, "width")
        guard.is_in_range(height, 1, 4097, "height")
"""

from .errors import (
    AbsenceViolation,
    BooleanViolation,
    EqualityViolation,
    GuardViolation,
    RangeViolation,
    TypeViolation,
    ViolationKind,
    raise_violation,
)
from .presence import is_null, is_not_null
from .typecheck import is_of_type, is_assignable_to_type
from .equality import (
    is_equal_to,
    is_not_equal_to,
    is_reference_equal_to,
    is_reference_not_equal_to,
)
from .bitwise import is_bitwise_equal_to
from .boolean import is_true, is_false
from .ordering import (
    is_less_than,
    is_less_than_or_equal_to,
    is_greater_than,
    is_greater_than_or_equal_to,
    is_in_range,
    is_not_in_range,
    is_between,
    is_not_between,
    is_between_or_equal_to,
    is_not_between_or_equal_to,
)

__all__ = [
    "AbsenceViolation",
    "BooleanViolation",
    "EqualityViolation",
    "GuardViolation",
    "RangeViolation",
    "TypeViolation",
    "ViolationKind",
    "raise_violation",
    "is_null",
    "is_not_null",
    "is_of_type",
    "is_assignable_to_type",
    "is_equal_to",
    "is_not_equal_to",
    "is_reference_equal_to",
    "is_reference_not_equal_to",
    "is_bitwise_equal_to",
    "is_true",
    "is_false",
    "is_less_than",
    "is_less_than_or_equal_to",
    "is_greater_than",
    "is_greater_than_or_equal_to",
    "is_in_range",
    "is_not_in_range",
    "is_between",
    "is_not_between",
    "is_between_or_equal_to",
    "is_not_between_or_equal_to",
]
