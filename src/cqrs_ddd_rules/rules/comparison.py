"""Comparison rules: greaterThan, lessThan.

Both take a comparer followed by one or more operands.  The comparer and
each operand are reduced to a magnitude (numbers by value, text,
sequences, sets and mappings by length) and every operand must compare
strictly against the comparer.
"""

from __future__ import annotations

import operator
from typing import TYPE_CHECKING, Any

from ..exceptions import RuleArgumentError
from ..rule import Rule
from ..violation import RuleViolation
from .names import BuiltinRule
from .operands import classify, format_number, magnitude

if TYPE_CHECKING:
    from collections.abc import Callable

    from .operands import Magnitude


class _ComparisonRule(Rule):
    _compare: Callable[[Magnitude, Magnitude], bool]
    _relation: str

    def __call__(self, *args: Any) -> RuleViolation | None:
        if len(args) < 2:
            raise RuleArgumentError(
                self.name, f"expected at least 2 parameters, got {len(args)}"
            )

        comparer, operands = args[0], args[1:]
        kind = classify(comparer)
        if kind is None:
            return self._violation(
                f"unsupported type {type(comparer).__name__} for comparer"
            )
        threshold = magnitude(comparer, kind)

        # position 1 is the comparer
        for position, arg in enumerate(operands, start=2):
            kind = classify(arg)
            if kind is None:
                return self._violation(
                    f"unsupported type {type(arg).__name__} at position {position}"
                )
            value = magnitude(arg, kind)
            if not self._compare(value, threshold):
                return self._violation(
                    f"parameter at position {position} "
                    f"(= {format_number(value)}) is not {self._relation} "
                    f"{format_number(threshold)}"
                )
        return None

    def _violation(self, detail: str) -> RuleViolation:
        return RuleViolation(f"{self.name}: {detail}", rule=self.name)


class GreaterThanRule(_ComparisonRule):
    _compare = staticmethod(operator.gt)
    _relation = "greater than"

    @property
    def name(self) -> str:
        return BuiltinRule.GREATER_THAN.value


class LessThanRule(_ComparisonRule):
    _compare = staticmethod(operator.lt)
    _relation = "less than"

    @property
    def name(self) -> str:
        return BuiltinRule.LESS_THAN.value
