"""
Process-wide default validator.

Opt-in convenience for applications that want one shared validator
instead of passing a :class:`Validator` around::

    from cqrs_ddd_rules import default

    default.register_type(Person, validate_person)
    default.validate(person)

The instance is created on first use.  Tests should prefer their own
``Validator()`` or call :func:`reset_default_validator` between cases.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Any, TypeVar

from .validator import Validator

if TYPE_CHECKING:
    from collections.abc import Callable

    from .context import ValidationContext
    from .registry import RuleFunc
    from .violation import RuleViolation

T = TypeVar("T")

_default_validator: Validator | None = None
_default_validator_lock = threading.Lock()


def get_default_validator() -> Validator:
    """Return the shared validator, creating it on first use."""
    global _default_validator
    if _default_validator is None:
        with _default_validator_lock:
            if _default_validator is None:
                _default_validator = Validator()
    return _default_validator


def reset_default_validator() -> None:
    """Drop the default validator; the next use creates a fresh one."""
    global _default_validator
    with _default_validator_lock:
        _default_validator = None


def register_rule(name: str, fn: RuleFunc) -> None:
    get_default_validator().register_rule(name, fn)


def register_type(
    type_: type[T], handler: Callable[[T, ValidationContext], None]
) -> None:
    get_default_validator().register_type(type_, handler)


def validate(value: Any) -> RuleViolation | None:
    return get_default_validator().validate(value)


__all__ = [
    "get_default_validator",
    "register_rule",
    "register_type",
    "reset_default_validator",
    "validate",
]
