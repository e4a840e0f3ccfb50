"""Presence checks: a value must (or must not) be None."""

from typing import Any

from .errors import AbsenceViolation, raise_violation


def is_null(value: Any, name: str) -> None:
    """
    Assert that ``value`` is None.

    Args:
        value: The input value to test
        name: The name of the parameter being tested

    Raises:
        AbsenceViolation: If ``value`` is not None
    """
    if value is not None:
        raise_violation(AbsenceViolation, name, f"Parameter {name} must be null, was {value}")


def is_not_null(value: Any, name: str) -> None:
    """
    Assert that ``value`` is not None.

    Args:
        value: The input value to test
        name: The name of the parameter being tested

    Raises:
        AbsenceViolation: If ``value`` is None
    """
    if value is None:
        raise_violation(AbsenceViolation, name, f"Parameter {name} must be not null")
