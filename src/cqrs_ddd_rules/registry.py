"""
Rule registry: maps rule names to rule functions.

A rule is any callable that accepts the positional arguments given to
:meth:`ValidationContext.check` and returns ``None`` when they pass or a
:class:`~cqrs_ddd_rules.violation.RuleViolation` when they do not.

New rules are added via ``register()`` or the ``rule()`` decorator::

    registry = RuleRegistry()

    @registry.rule("isPositive")
    def is_positive(value):
        return None if value > 0 else RuleViolation("must be positive")
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar

from .exceptions import RegistrySealedError, RuleNotFoundError
from .rule import Rule

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from .violation import RuleViolation

logger = logging.getLogger(__name__)

RuleFunc = Callable[..., "RuleViolation | str | None"]
F = TypeVar("F", bound=RuleFunc)


class RuleRegistry:
    """
    Registry of rule functions keyed by name.

    Re-registering a name replaces the previous rule.  Once sealed the
    registry is read-only and safe to share between threads.

    Usage::

        registry = RuleRegistry()
        registry.register("notBlank", not_blank)

        fn = registry.resolve("notBlank")
    """

    def __init__(self) -> None:
        self._rules: dict[str, RuleFunc] = {}
        self._sealed = False

    # -- registration --------------------------------------------------------

    def register(self, name: str, fn: RuleFunc) -> None:
        """Register *fn* under *name*, replacing any existing rule."""
        if self._sealed:
            raise RegistrySealedError("RuleRegistry", name)
        if name in self._rules:
            logger.debug("Replacing rule %s", name)
        self._rules[name] = fn
        logger.debug("Registered rule %s -> %s", name, _callable_name(fn))

    def register_rule(self, rule: Rule) -> None:
        """Register a class-based rule under its own ``name``."""
        self.register(rule.name, rule)

    def register_all(self, *rules: Rule | Mapping[str, RuleFunc]) -> None:
        """Register multiple rule instances or name → function mappings."""
        for item in rules:
            if isinstance(item, Rule):
                self.register_rule(item)
            else:
                for name, fn in item.items():
                    self.register(name, fn)

    def rule(self, name: str) -> Callable[[F], F]:
        """Decorator form of :meth:`register`."""

        def decorator(fn: F) -> F:
            self.register(name, fn)
            return fn

        return decorator

    def seal(self) -> None:
        """Freeze the registry.  Further registration raises."""
        if not self._sealed:
            self._sealed = True
            logger.debug("Sealed rule registry with %d rules", len(self._rules))

    @property
    def is_sealed(self) -> bool:
        return self._sealed

    # -- look-up -------------------------------------------------------------

    def get(self, name: str) -> RuleFunc | None:
        """Return the registered rule or ``None``."""
        return self._rules.get(name)

    def has(self, name: str) -> bool:
        return name in self._rules

    def resolve(self, name: str) -> RuleFunc:
        """
        Look up a rule that must exist.

        Raises:
            RuleNotFoundError: If *name* was never registered.
        """
        fn = self._rules.get(name)
        if fn is None:
            raise RuleNotFoundError(name, list(self._rules))
        return fn

    @property
    def names(self) -> set[str]:
        return set(self._rules)

    def copy(self) -> RuleRegistry:
        """Return an unsealed registry holding the same rules."""
        clone = RuleRegistry()
        clone._rules = dict(self._rules)
        return clone

    def __contains__(self, name: object) -> bool:
        return name in self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)


def _callable_name(fn: Any) -> str:
    return getattr(fn, "__qualname__", None) or type(fn).__name__


__all__ = ["RuleFunc", "RuleRegistry"]
