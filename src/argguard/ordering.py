"""
Ordering and range checks.

Every check evaluates its success condition exactly as written, comparing
``value`` against each bound at most once. Values that are incomparable under
the type's own operators (NaN, for example) therefore fail both a range check
and its negation rather than being special-cased here.

Interval vocabulary:

- range: half-open, ``minimum <= value < maximum``
- between: open, ``minimum < value < maximum``
- between-or-equal: closed, ``minimum <= value <= maximum``
"""

from typing import Any, NoReturn

from .errors import RangeViolation, raise_violation


def _fail(name: str, relation: str, value: Any) -> NoReturn:
    raise_violation(RangeViolation, name, f"Parameter {name} must be {relation}, was {value}")


def is_less_than(value: Any, maximum: Any, name: str) -> None:
    """
    Assert that ``value < maximum``.

    Raises:
        RangeViolation: If ``value`` is not less than ``maximum``
    """
    if not value < maximum:
        _fail(name, f"< {maximum}", value)


def is_less_than_or_equal_to(value: Any, maximum: Any, name: str) -> None:
    """
    Assert that ``value <= maximum``.

    Raises:
        RangeViolation: If ``value`` is greater than ``maximum``
    """
    if not value <= maximum:
        _fail(name, f"<= {maximum}", value)


def is_greater_than(value: Any, minimum: Any, name: str) -> None:
    """
    Assert that ``value > minimum``.

    Raises:
        RangeViolation: If ``value`` is not greater than ``minimum``
    """
    if not value > minimum:
        _fail(name, f"> {minimum}", value)


def is_greater_than_or_equal_to(value: Any, minimum: Any, name: str) -> None:
    """
    Assert that ``value >= minimum``.

    Raises:
        RangeViolation: If ``value`` is less than ``minimum``
    """
    if not value >= minimum:
        _fail(name, f">= {minimum}", value)


def is_in_range(value: Any, minimum: Any, maximum: Any, name: str) -> None:
    """
    Assert that ``minimum <= value < maximum``.

    Args:
        value: The input value to test
        minimum: Inclusive lower bound
        maximum: Exclusive upper bound
        name: The name of the parameter being tested

    Raises:
        RangeViolation: If ``value`` is outside ``[minimum, maximum)``
    """
    if not (value >= minimum and value < maximum):
        _fail(name, f">= {minimum} and < {maximum}", value)


def is_not_in_range(value: Any, minimum: Any, maximum: Any, name: str) -> None:
    """
    Assert that ``value < minimum or value >= maximum``.

    Raises:
        RangeViolation: If ``value`` is inside ``[minimum, maximum)``
    """
    if not (value < minimum or value >= maximum):
        _fail(name, f"< {minimum} or >= {maximum}", value)


def is_between(value: Any, minimum: Any, maximum: Any, name: str) -> None:
    """
    Assert that ``minimum < value < maximum``.

    Raises:
        RangeViolation: If ``value`` is outside ``(minimum, maximum)``
    """
    if not (value > minimum and value < maximum):
        _fail(name, f"> {minimum} and < {maximum}", value)


def is_not_between(value: Any, minimum: Any, maximum: Any, name: str) -> None:
    """
    Assert that ``value <= minimum or value >= maximum``.

    Raises:
        RangeViolation: If ``value`` is inside ``(minimum, maximum)``
    """
    if not (value <= minimum or value >= maximum):
        _fail(name, f"<= {minimum} or >= {maximum}", value)


def is_between_or_equal_to(value: Any, minimum: Any, maximum: Any, name: str) -> None:
    """
    Assert that ``minimum <= value <= maximum``.

    Raises:
        RangeViolation: If ``value`` is outside ``[minimum, maximum]``
    """
    if not (value >= minimum and value <= maximum):
        _fail(name, f">= {minimum} and <= {maximum}", value)


def is_not_between_or_equal_to(value: Any, minimum: Any, maximum: Any, name: str) -> None:
    """
    Assert that ``value < minimum or value > maximum``.

    Raises:
        RangeViolation: If ``value`` is inside ``[minimum, maximum]``
    """
    if not (value < minimum or value > maximum):
        _fail(name, f"< {minimum} or > {maximum}", value)
