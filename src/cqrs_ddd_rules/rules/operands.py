"""
Operand kinds understood by the built-in rules.

Rules accept a closed set of operand kinds.  ``classify`` maps a value
to its kind (or ``None`` when unsupported) and ``magnitude`` reduces a
supported value to the number the comparison rules work with: numbers
keep their value, everything else is measured by its length.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence, Set, Sized
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from numbers import Real
from typing import Any, Union, cast

Magnitude = Union[int, float, Fraction]
Operand = Union[Magnitude, str, Sequence[Any], Set[Any], Mapping[Any, Any]]


class OperandKind(str, Enum):
    NUMBER = "number"
    TEXT = "text"
    SEQUENCE = "sequence"
    SET = "set"
    MAPPING = "mapping"


LENGTH_KINDS: frozenset[OperandKind] = frozenset(
    {OperandKind.TEXT, OperandKind.SEQUENCE, OperandKind.SET, OperandKind.MAPPING}
)


def classify(value: Any) -> OperandKind | None:
    """Return the operand kind of *value*, or ``None`` if unsupported.

    ``bool`` is not a number here even though it subclasses ``int``.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, Real):
        return OperandKind.NUMBER
    if isinstance(value, str):
        return OperandKind.TEXT
    if isinstance(value, Mapping):
        return OperandKind.MAPPING
    if isinstance(value, Set):
        return OperandKind.SET
    if isinstance(value, Sequence):
        return OperandKind.SEQUENCE
    return None


def magnitude(value: Operand, kind: OperandKind) -> Magnitude:
    """Reduce *value* of the given *kind* to a comparable number.

    Numbers are returned unchanged so that ints and fractions of any size
    compare exactly.
    """
    if kind is OperandKind.NUMBER:
        return cast(Magnitude, value)
    return len(cast(Sized, value))


def _as_float(value: Magnitude) -> float:
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def format_number(value: Magnitude) -> str:
    """Render a magnitude the way error messages show it.

    Shortest round-trip digits, switching to exponent form below 1e-4
    and from 1e6 on: ``6``, ``2.5``, ``1e+06``, ``1.5e-05``.  Values too
    large for a float render as ``+Inf`` / ``-Inf``.
    """
    number = _as_float(value)
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "+Inf" if number > 0 else "-Inf"

    shortest = Decimal(repr(number)).normalize()
    sign, digits, exponent = shortest.as_tuple()
    exponent = cast(int, exponent)
    decimal_exponent = len(digits) + exponent - 1
    if -4 <= decimal_exponent < 6:
        return format(shortest, "f")

    mantissa = str(digits[0])
    if len(digits) > 1:
        mantissa += "." + "".join(map(str, digits[1:]))
    return f"{'-' if sign else ''}{mantissa}e{decimal_exponent:+03d}"
