"""
Per-call validation context with fail-fast chaining.

A handler expresses its checks as one fluent chain::

    def validate_person(person: Person, ctx: ValidationContext) -> None:
        (
            ctx.check("notEmpty", person.name)
            .message("name is required")
            .check("greaterThan", 0, person.age)
            .message("age must be positive")
        )

The first failing check is kept.  Every later call is a no-op, so the
handler never needs explicit early returns.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .violation import RuleViolation

if TYPE_CHECKING:
    from collections.abc import Callable

    from .registry import RuleRegistry

RULE_FAILED = "rule failed"


class ValidationContext:
    """
    Accumulates the first rule violation of a single ``validate`` call.

    Two states: OK (``error is None``) and failed.  Failed is terminal:
    ``check``, ``must`` and ``must_err`` stop doing anything.  ``message``
    may rewrite the text of the failure produced by the call right before
    it; once a later call has been skipped the violation is frozen.

    Contexts are created by :class:`~cqrs_ddd_rules.validator.Validator`
    and must not be shared between validations.
    """

    __slots__ = ("_amendable", "_error", "_rules")

    def __init__(self, rules: RuleRegistry) -> None:
        self._rules = rules
        self._error: RuleViolation | None = None
        # True only between a failing call and the next skipped one
        self._amendable = False

    # -- chaining ------------------------------------------------------------

    def check(self, rule: str, *args: Any) -> ValidationContext:
        """Run the registered rule *rule* against *args*.

        A rule may return a plain string instead of a
        :class:`RuleViolation`; it becomes the violation message.

        Raises:
            RuleNotFoundError: If *rule* is not registered and the
                context has not failed yet.
        """
        if self._error is not None:
            self._amendable = False
            return self
        fn = self._rules.resolve(rule)
        violation = fn(*args)
        if isinstance(violation, str):
            violation = RuleViolation(violation, rule=rule)
        if violation is not None:
            if violation.rule is None:
                violation = violation.with_rule(rule)
            self._fail(violation)
        return self

    def must(self, predicate: Callable[[], bool]) -> ValidationContext:
        """Fail with ``"rule failed"`` when *predicate* returns falsy."""
        return self.must_err(
            lambda: None if predicate() else RuleViolation(RULE_FAILED)
        )

    def must_err(
        self, fn: Callable[[], RuleViolation | str | None]
    ) -> ValidationContext:
        """Fail with whatever *fn* returns, unless it returns ``None``.

        A plain string is wrapped in a :class:`RuleViolation`.
        """
        if self._error is not None:
            self._amendable = False
            return self
        outcome = fn()
        if isinstance(outcome, str):
            outcome = RuleViolation(outcome)
        if outcome is not None:
            self._fail(outcome)
        return self

    def message(self, text: str) -> ValidationContext:
        """Replace the text of the failure the previous call produced.

        No effect while OK, and no effect once a later call has been
        skipped, so only the message attached to the failing check wins.
        """
        if self._error is not None and self._amendable:
            self._error = self._error.with_message(text)
        return self

    def _fail(self, violation: RuleViolation) -> None:
        self._error = violation
        self._amendable = True

    # -- result --------------------------------------------------------------

    @property
    def error(self) -> RuleViolation | None:
        return self._error

    @property
    def failed(self) -> bool:
        return self._error is not None

    def result(self) -> RuleViolation | None:
        """Return the first violation, or ``None`` if every check passed."""
        return self._error

    def __repr__(self) -> str:
        state = "OK" if self._error is None else f"Failed({self._error.message!r})"
        return f"<ValidationContext {state}>"
