from typing import Any

from .errors import BooleanViolation, raise_violation


def is_true(value: Any, name: str) -> None:
    """Assert that ``value`` is truthy."""
    if not value:
        raise_violation(BooleanViolation, name, f"Parameter {name} must be true, was false")


def is_false(value: Any, name: str) -> None:
    """Assert that ``value`` is falsy."""
    if value:
        raise_violation(BooleanViolation, name, f"Parameter {name} must be false, was true")
