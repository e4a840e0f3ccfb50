"""
Raw byte equality for fixed-layout values.

Two values of the same NumPy dtype are compared on their memory
representation, ignoring any equality the type itself defines (NaN payloads,
signed zeros, structured-record field semantics). The comparer for a dtype is
resolved once and cached:

- itemsize 1, 2, 4 or 8: the value is reinterpreted as the unsigned integer of
  the same width (native byte order) and compared in one step, so the whole
  value can be reported in hexadecimal;
- any other itemsize: the bytes are scanned in order and the first differing
  byte is reported.
"""

from __future__ import annotations

import functools
from typing import Any, Callable, Optional

import numpy as np

from .errors import EqualityViolation, raise_violation
from .logging import get_logger

logger = get_logger(__name__)

Comparer = Callable[[np.ndarray, np.ndarray, str], None]

_WORD_TYPES = {
    1: np.uint8,
    2: np.uint16,
    4: np.uint32,
    8: np.uint64,
}


def compare_words(value: np.ndarray, target: np.ndarray, name: str, word_type: type) -> None:
    """Compare two 0-d arrays reinterpreted as one unsigned word each."""
    value_word = int(value.view(word_type))
    target_word = int(target.view(word_type))

    if value_word != target_word:
        digits = 2 * np.dtype(word_type).itemsize
        raise_violation(
            EqualityViolation,
            name,
            f"Parameter {name} must be a bitwise match, "
            f"was 0x{value_word:0{digits}X} instead of 0x{target_word:0{digits}X}",
        )


def compare_bytes(value: np.ndarray, target: np.ndarray, name: str) -> None:
    """Compare two 0-d arrays byte by byte, reporting the first mismatch."""
    value_bytes = value.tobytes()
    target_bytes = target.tobytes()

    for index, (value_byte, target_byte) in enumerate(zip(value_bytes, target_bytes)):
        if value_byte != target_byte:
            raise_violation(
                EqualityViolation,
                name,
                f"Parameter {name} is not a bitwise match "
                f"(byte #{index} was 0x{value_byte:02X} instead of 0x{target_byte:02X})",
            )


@functools.lru_cache(maxsize=None)
def resolve_comparer(dtype: np.dtype) -> Comparer:
    """
    Select the comparison strategy for a dtype.

    Args:
        dtype: Fixed-layout dtype of both operands

    Returns:
        A callable ``(value, target, name)`` that raises on mismatch

    Raises:
        TypeError: If the dtype holds object references
    """
    if dtype.hasobject:
        raise TypeError(f"Bitwise comparison needs a fixed-layout dtype, got {dtype}")

    word_type = _WORD_TYPES.get(dtype.itemsize)
    if word_type is None:
        logger.debug(f"Bitwise comparer for {dtype}: byte scan over {dtype.itemsize} bytes")
        return compare_bytes

    logger.debug(f"Bitwise comparer for {dtype}: {np.dtype(word_type).name} fast path")
    return functools.partial(compare_words, word_type=word_type)


def _as_scalar_array(operand: Any, dtype: Optional[np.dtype], role: str) -> np.ndarray:
    try:
        array = np.asarray(operand, dtype=dtype)
    except (TypeError, ValueError, OverflowError) as exc:
        raise TypeError(f"Cannot represent {role} {operand!r} as {dtype}") from exc

    if array.ndim != 0:
        raise TypeError(f"Bitwise comparison needs scalar operands, {role} has shape {array.shape}")
    return array


def is_bitwise_equal_to(value: Any, target: Any, name: str, dtype: Any = None) -> None:
    """
    Assert that ``value`` and ``target`` share the same raw byte representation.

    Args:
        value: The input value to test (NumPy scalar, 0-d array or Python scalar)
        target: The value whose bytes ``value`` must match
        name: The name of the parameter being tested
        dtype: Layout to compare under; inferred from the operands when omitted,
            in which case both must infer the same dtype

    Raises:
        EqualityViolation: If any byte differs
        TypeError: If the operands are not fixed-layout scalars of one dtype
    """
    if dtype is not None:
        dtype = np.dtype(dtype)

    value_array = _as_scalar_array(value, dtype, "value")
    target_array = _as_scalar_array(target, dtype, "target")

    if value_array.dtype != target_array.dtype:
        raise TypeError(
            f"Bitwise comparison needs operands of one dtype, got {value_array.dtype} and {target_array.dtype}"
        )

    resolve_comparer(value_array.dtype)(value_array, target_array, name)
