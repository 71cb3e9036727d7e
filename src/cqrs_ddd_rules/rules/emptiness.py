"""Emptiness rule: notEmpty."""

from __future__ import annotations

from typing import Any

from ..rule import Rule
from ..violation import RuleViolation
from .names import BuiltinRule
from .operands import LENGTH_KINDS, OperandKind, classify

REQUIRED_FAILED = "rule required failed"


def _length(value: Any) -> int:
    kind = classify(value)
    if kind is OperandKind.TEXT:
        return len(value.strip())
    if kind in LENGTH_KINDS:
        return len(value)
    # numbers, None and foreign objects have no length to speak of
    return 0


class NotEmptyRule(Rule):
    """Every argument must have a non-zero length.

    Strings are measured after stripping surrounding whitespace.
    Arguments that are not text, sequences, sets or mappings always
    fail.
    """

    @property
    def name(self) -> str:
        return BuiltinRule.NOT_EMPTY.value

    def __call__(self, *args: Any) -> RuleViolation | None:
        for arg in args:
            if _length(arg) == 0:
                return RuleViolation(REQUIRED_FAILED, rule=self.name)
        return None
