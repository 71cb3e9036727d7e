"""RuleViolation — the value a failed rule returns."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any


@dataclass(frozen=True, slots=True)
class RuleViolation:
    """A single validation failure.

    Violations are returned, not raised.  ``rule`` names the rule that
    produced the failure and is ``None`` for ad-hoc ``must`` checks.

    Usage::

        RuleViolation("rule required failed", rule="notEmpty")
    """

    message: str
    rule: str | None = None

    def with_message(self, message: str) -> RuleViolation:
        """Return a copy carrying *message* instead of the current text."""
        return replace(self, message=message)

    def with_rule(self, rule: str) -> RuleViolation:
        return replace(self, rule=rule)

    def to_dict(self) -> dict[str, Any]:
        return {"message": self.message, "rule": self.rule}

    def __str__(self) -> str:
        return self.message
