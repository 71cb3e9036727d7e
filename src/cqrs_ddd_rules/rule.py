"""
Class-based rule strategy.

Plain functions are enough for most rules.  Subclass :class:`Rule` when a
rule wants to carry its own name so it can be installed with
:meth:`RuleRegistry.register_rule`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .violation import RuleViolation


class Rule(ABC):
    """
    Strategy interface for a named validation rule.

    Instances are callables, so a registry stores them exactly like
    plain rule functions.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """The name the rule is registered under."""
        ...

    @abstractmethod
    def __call__(self, *args: Any) -> RuleViolation | None:
        """
        Evaluate the rule.

        Args:
            *args: The arguments passed to ``ValidationContext.check``.

        Returns:
            ``None`` if the arguments pass, otherwise the violation.
        """
        ...

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"
