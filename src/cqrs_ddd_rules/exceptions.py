"""
Rules exception hierarchy with fuzzy-match suggestions.

Two families live here:

* ``ValidationError`` is raised only by
  :meth:`~cqrs_ddd_rules.validator.Validator.validate_or_raise` and wraps
  a data-dependent :class:`~cqrs_ddd_rules.violation.RuleViolation`.
* ``ContractViolationError`` and its subclasses signal registry or
  handler-author misuse.  The engine never converts them into
  violations.

All exceptions inherit from ``RulesError`` and provide ``to_dict()``
for API-friendly error responses.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .violation import RuleViolation


class RulesError(Exception):
    """Base exception for all rules errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class ValidationError(RulesError):
    """A validated value broke one of its rules.

    Carries structured errors: ``{"__root__": [message]}``.
    """

    def __init__(self, violation: RuleViolation) -> None:
        self.violation = violation
        self.errors: dict[str, list[str]] = {"__root__": [violation.message]}
        super().__init__(violation.message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "VALIDATION_ERROR",
            "message": self.violation.message,
            "rule": self.violation.rule,
            "errors": self.errors,
        }


class ContractViolationError(RulesError):
    """Base class for misuse of the rules engine by calling code."""


class RuleNotFoundError(ContractViolationError):
    """
    A rule name was checked but never registered.

    Provides fuzzy-matched suggestions for likely intended rules.
    """

    def __init__(self, rule: str, valid_rules: list[str]) -> None:
        self.rule = rule
        self.valid_rules = valid_rules
        self.suggestions = get_close_matches(rule, valid_rules, n=3, cutoff=0.6)

        message = f"Rule '{rule}' has not been registered."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        if valid_rules:
            message += f" Registered rules: {', '.join(sorted(valid_rules)[:10])}"
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "RULE_NOT_FOUND",
            "rule": self.rule,
            "suggestions": self.suggestions,
            "valid_rules": sorted(self.valid_rules),
        }


class HandlerNotFoundError(ContractViolationError):
    """
    A value was validated whose exact type has no registered handler.

    Dispatch is exact-type, so a handler registered for a base class
    does not cover its subclasses.  Close type names are suggested.
    """

    def __init__(self, value_type: type[Any], registered: list[type[Any]]) -> None:
        self.value_type = value_type
        self.registered = registered
        names = [t.__qualname__ for t in registered]
        self.suggestions = get_close_matches(
            value_type.__qualname__, names, n=3, cutoff=0.6
        )

        message = (
            f"Type '{value_type.__qualname__}' has not been registered "
            f"with register_type."
        )
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "HANDLER_NOT_FOUND",
            "type": self.value_type.__qualname__,
            "suggestions": self.suggestions,
            "registered_types": sorted(t.__qualname__ for t in self.registered),
        }


class RuleArgumentError(ContractViolationError):
    """A rule was called with arguments it cannot accept at all.

    Raised for arity mistakes and wrongly-typed arguments, e.g. a
    comparison with no operand or ``isEmail`` given a non-string.
    """

    def __init__(self, rule: str, reason: str) -> None:
        self.rule = rule
        self.reason = reason
        super().__init__(f"{rule}: {reason}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "RULE_ARGUMENT_ERROR",
            "rule": self.rule,
            "reason": self.reason,
        }


class RegistrySealedError(ContractViolationError):
    """Registration was attempted after the registry was sealed."""

    def __init__(self, registry_name: str, key: str) -> None:
        self.registry_name = registry_name
        self.key = key
        super().__init__(
            f"Cannot register '{key}': {registry_name} is sealed. "
            f"Finish registration before validating concurrently."
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "REGISTRY_SEALED",
            "registry": self.registry_name,
            "key": self.key,
        }
