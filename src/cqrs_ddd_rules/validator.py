"""
Validator — the entry point tying rules, type handlers and contexts together.

Usage::

    validator = Validator()

    @validator.handles(Person)
    def validate_person(person: Person, ctx: ValidationContext) -> None:
        ctx.check("notEmpty", person.name).message("name required")
        ctx.check("greaterThan", 0, person.age).message("age must be positive")

    validator.validate(Person(name="", age=5))
    # → RuleViolation(message="name required", rule="notEmpty")
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeVar

from .config import ValidatorConfig
from .context import ValidationContext
from .exceptions import ValidationError
from .handlers import TypeHandlerRegistry
from .registry import RuleRegistry
from .rules import install_builtin_rules

if TYPE_CHECKING:
    from collections.abc import Callable

    from .registry import RuleFunc
    from .violation import RuleViolation

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Validator:
    """Owns a rule registry and a type-handler registry.

    Every instance is independent: rules and handlers registered on one
    validator are invisible to any other.  Build one during application
    start-up, register everything, optionally :meth:`seal` it, then share
    it freely.

    Args:
        config: Behaviour switches; defaults to :class:`ValidatorConfig`.
        rules: Use this rule registry instead of creating one.  Built-in
            rules are only installed into registries the validator
            creates itself.
        handlers: Use this type-handler registry instead of creating one.
    """

    def __init__(
        self,
        config: ValidatorConfig | None = None,
        *,
        rules: RuleRegistry | None = None,
        handlers: TypeHandlerRegistry | None = None,
    ) -> None:
        self._config = config or ValidatorConfig()
        if rules is None:
            rules = RuleRegistry()
            if self._config.install_builtins:
                install_builtin_rules(rules)
        self._rules = rules
        self._handlers = handlers if handlers is not None else TypeHandlerRegistry()

    @property
    def config(self) -> ValidatorConfig:
        return self._config

    @property
    def rules(self) -> RuleRegistry:
        return self._rules

    @property
    def handlers(self) -> TypeHandlerRegistry:
        return self._handlers

    # ── Registration ─────────────────────────────────────────────

    def register_rule(self, name: str, fn: RuleFunc) -> None:
        self._rules.register(name, fn)

    def rule(self, name: str) -> Callable[[RuleFunc], RuleFunc]:
        """Decorator registering a rule function under *name*."""
        return self._rules.rule(name)

    def register_type(
        self,
        type_: type[T],
        handler: Callable[[T, ValidationContext], None],
    ) -> None:
        self._handlers.register(type_, handler)

    def handles(
        self, type_: type[T]
    ) -> Callable[
        [Callable[[T, ValidationContext], None]],
        Callable[[T, ValidationContext], None],
    ]:
        """Decorator registering a handler for exactly *type_*."""
        return self._handlers.handles(type_)

    def seal(self) -> None:
        """Make both registries read-only."""
        self._rules.seal()
        self._handlers.seal()

    @property
    def is_sealed(self) -> bool:
        return self._rules.is_sealed and self._handlers.is_sealed

    # ── Validation ───────────────────────────────────────────────

    def validate(self, value: Any) -> RuleViolation | None:
        """Run the handler registered for ``type(value)``.

        Returns:
            The first rule violation, or ``None`` if *value* is valid.

        Raises:
            HandlerNotFoundError: If ``type(value)`` has no handler.
            ContractViolationError: Any misuse raised by the handler's
                checks propagates unchanged.
        """
        if self._config.seal_on_first_validate and not self.is_sealed:
            self.seal()

        handler = self._handlers.resolve(value)
        ctx = ValidationContext(self._rules)
        handler(value, ctx)

        error = ctx.result()
        if error is not None and self._config.log_violations:
            logger.debug(
                "Validation of %s failed: %s (rule=%s)",
                type(value).__qualname__,
                error.message,
                error.rule,
            )
        return error

    def validate_or_raise(self, value: Any) -> None:
        """Like :meth:`validate` but raise on violation.

        Raises:
            ValidationError: Carrying the first violation.
        """
        error = self.validate(value)
        if error is not None:
            raise ValidationError(error)

    def is_valid(self, value: Any) -> bool:
        return self.validate(value) is None

    # ── Introspection ────────────────────────────────────────────

    def copy(self) -> Validator:
        """Return an unsealed validator with the same rules and handlers."""
        return Validator(
            self._config,
            rules=self._rules.copy(),
            handlers=self._handlers.copy(),
        )

    def snapshot(self) -> dict[str, Any]:
        """Return registered rule names and handler types (for debugging)."""
        return {
            "rules": sorted(self._rules.names),
            "types": sorted(t.__qualname__ for t in self._handlers.types),
            "sealed": self.is_sealed,
        }


__all__ = ["Validator"]
