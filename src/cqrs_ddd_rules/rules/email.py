"""Email rule: isEmail.

A coarse well-formedness check done in one pass over the characters.
It is not RFC 5322 validation.
"""

from __future__ import annotations

from typing import Any

from ..exceptions import RuleArgumentError
from ..rule import Rule
from ..violation import RuleViolation
from .names import BuiltinRule

INVALID_EMAIL = "invalid email"

_FORBIDDEN = frozenset(" ,")


def is_well_formed_email(value: str) -> bool:
    """Scan *value* left to right and report whether it looks like an email.

    Requires exactly one ``@`` with at least one character before it, a
    ``.`` somewhere after it, at least one non-dot character after the
    last dot, and no spaces or commas anywhere.
    """
    at_count = 0
    local_length = 0
    dot_after_at = False
    tail_length = 0  # characters since the last dot after "@"

    for char in value:
        if char in _FORBIDDEN:
            return False
        if char == "@":
            at_count += 1
            if at_count > 1:
                return False
            continue
        if at_count == 0:
            local_length += 1
        elif char == ".":
            dot_after_at = True
            tail_length = 0
        else:
            tail_length += 1

    return at_count == 1 and local_length > 0 and dot_after_at and tail_length > 0


class IsEmailRule(Rule):
    @property
    def name(self) -> str:
        return BuiltinRule.IS_EMAIL.value

    def __call__(self, *args: Any) -> RuleViolation | None:
        if len(args) != 1:
            raise RuleArgumentError(
                self.name, f"expected exactly 1 parameter, got {len(args)}"
            )
        value = args[0]
        if not isinstance(value, str):
            raise RuleArgumentError(
                self.name, f"expected a string, got {type(value).__name__}"
            )
        if is_well_formed_email(value):
            return None
        return RuleViolation(INVALID_EMAIL, rule=self.name)
