"""
Runtime type checks.

``is_of_type`` demands the exact runtime type, while ``is_assignable_to_type``
accepts anything ``isinstance`` accepts (subclasses, registered ABCs and
runtime-checkable protocols). The two are deliberately distinct.
"""

from __future__ import annotations

import builtins
from typing import Any, Tuple, Union

from .errors import TypeViolation, raise_violation

TypeSpec = Union[type, Tuple[type, ...]]


def type_name(type_: TypeSpec) -> str:
    """
    Render a type (or tuple of types) for a failure message.

    Builtins render bare (``int``); everything else as ``module.QualName``.
    """
    if isinstance(type_, tuple):
        return " | ".join(type_name(t) for t in type_)

    qualname = getattr(type_, "__qualname__", None) or repr(type_)
    module = getattr(type_, "__module__", None)
    if module in (None, builtins.__name__):
        return qualname
    return f"{module}.{qualname}"


def _require_type(type_: Any, allow_tuple: bool) -> None:
    if isinstance(type_, type):
        return
    if allow_tuple and isinstance(type_, tuple) and all(isinstance(t, type) for t in type_):
        return
    raise TypeError(f"Expected a type to check against, got {type_!r}")


def is_of_type(value: Any, type_: type, name: str) -> None:
    """
    Assert that the runtime type of ``value`` is exactly ``type_``.

    Instances of subclasses of ``type_`` do not satisfy this check.

    Args:
        value: The input value to test
        type_: The exact type to look for
        name: The name of the parameter being tested

    Raises:
        TypeViolation: If ``type(value)`` is not ``type_``
        TypeError: If ``type_`` is not a type
    """
    _require_type(type_, allow_tuple=False)
    actual = type(value)
    if actual is not type_:
        raise_violation(
            TypeViolation,
            name,
            f"Parameter {name} must be of type {type_name(type_)}, was {type_name(actual)}",
        )


def is_assignable_to_type(value: Any, type_: TypeSpec, name: str) -> None:
    """
    Assert that ``value`` is an instance of ``type_`` or of one of its subtypes.

    Args:
        value: The input value to test
        type_: A type, or tuple of types, as accepted by ``isinstance``
        name: The name of the parameter being tested

    Raises:
        TypeViolation: If ``isinstance(value, type_)`` is false
        TypeError: If ``type_`` is not a type or tuple of types
    """
    _require_type(type_, allow_tuple=True)
    if not isinstance(value, type_):
        raise_violation(
            TypeViolation,
            name,
            f"Parameter {name} must be assignable to type {type_name(type_)}, was {type_name(type(value))}",
        )
