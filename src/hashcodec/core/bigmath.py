"""Arbitrary-precision arithmetic on non-negative integers.

Operands are either plain ``int`` values or canonical decimal-digit strings
(the form large values take when they are handed back to callers).  Every
arithmetic result is normalised: values up to :data:`NATIVE_INT_MAX` come back
as ``int``, anything larger as its decimal string.  Crossing that boundary
never loses precision because the arithmetic itself runs on Python integers.
"""
from __future__ import annotations

import re
from typing import Union

from ..utils.constants import NATIVE_INT_MAX
from ..utils.errors import BigMathError

BigInt = Union[int, str]

_DIGITS_RE = re.compile(r"[0-9]+")


def _operand(value: BigInt) -> int:
    if isinstance(value, bool):
        raise BigMathError(f"expected an integer operand, got {value!r}")
    if isinstance(value, int):
        number = value
    elif isinstance(value, str):
        if not _DIGITS_RE.fullmatch(value):
            raise BigMathError(f"malformed decimal operand: {value!r}")
        number = int(value)
    else:
        raise BigMathError(f"expected an integer operand, got {type(value).__name__}")
    if number < 0:
        raise BigMathError(f"negative operand not supported: {number}")
    return number


def is_canonical(value: object) -> bool:
    """Return ``True`` when ``value`` is a non-negative ``int`` or digit string."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return value >= 0
    if isinstance(value, str):
        return bool(_DIGITS_RE.fullmatch(value))
    return False


def normalize(value: BigInt) -> BigInt:
    number = _operand(value)
    if number <= NATIVE_INT_MAX:
        return number
    return str(number)


def to_native_int(value: BigInt) -> int:
    return _operand(value)


def to_string(value: BigInt) -> str:
    return str(_operand(value))


def add(a: BigInt, b: BigInt) -> BigInt:
    return normalize(_operand(a) + _operand(b))


def multiply(a: BigInt, b: BigInt) -> BigInt:
    return normalize(_operand(a) * _operand(b))


def mod(a: BigInt, b: BigInt) -> BigInt:
    divisor = _operand(b)
    if divisor == 0:
        raise ZeroDivisionError("modulo by zero")
    return normalize(_operand(a) % divisor)


def divide(a: BigInt, b: BigInt) -> BigInt:
    """Integer division; truncation and flooring agree on non-negative operands."""
    divisor = _operand(b)
    if divisor == 0:
        raise ZeroDivisionError("division by zero")
    return normalize(_operand(a) // divisor)


def compare(a: BigInt, b: BigInt) -> int:
    left = _operand(a)
    right = _operand(b)
    return (left > right) - (left < right)


__all__ = [
    "BigInt",
    "add",
    "compare",
    "divide",
    "is_canonical",
    "mod",
    "multiply",
    "normalize",
    "to_native_int",
    "to_string",
]
