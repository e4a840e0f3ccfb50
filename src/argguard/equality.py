"""Value equality and reference identity checks."""

from typing import Any

from .errors import EqualityViolation, raise_violation


def is_equal_to(value: Any, target: Any, name: str) -> None:
    """
    Assert that ``value == target`` under the value's own equality.

    Raises:
        EqualityViolation: If the values are not equal
    """
    if not value == target:
        raise_violation(EqualityViolation, name, f"Parameter {name} must be == {target}, was {value}")


def is_not_equal_to(value: Any, target: Any, name: str) -> None:
    """
    Assert that ``value`` is not equal to ``target``.

    Raises:
        EqualityViolation: If the values are equal
    """
    if value == target:
        raise_violation(EqualityViolation, name, f"Parameter {name} must be != {target}, was {value}")


def is_reference_equal_to(value: Any, target: Any, name: str) -> None:
    """
    Assert that ``value`` is the very same object as ``target``.

    Equal but distinct objects fail; ``__eq__`` is never consulted.

    Raises:
        EqualityViolation: If ``value is not target``
    """
    if value is not target:
        raise_violation(
            EqualityViolation, name, f"Parameter {name} must be the same instance as the target object"
        )


def is_reference_not_equal_to(value: Any, target: Any, name: str) -> None:
    """
    Assert that ``value`` is a different object from ``target``.

    Raises:
        EqualityViolation: If ``value is target``
    """
    if value is target:
        raise_violation(
            EqualityViolation, name, f"Parameter {name} must not be the same instance as the target object"
        )
