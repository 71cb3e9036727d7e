"""
Built-in rule implementations.

Provides the concrete rules every validator starts with and factory
functions to install them.

Usage::

    from cqrs_ddd_rules.rules import build_default_registry

    registry = build_default_registry()
    registry.resolve("greaterThan")(0, 5)  # -> None
"""

from __future__ import annotations

from ..registry import RuleRegistry
from .comparison import GreaterThanRule, LessThanRule
from .email import IsEmailRule, is_well_formed_email
from .emptiness import NotEmptyRule
from .names import BuiltinRule
from .operands import Operand, OperandKind, classify, magnitude


def install_builtin_rules(registry: RuleRegistry) -> RuleRegistry:
    """Register every built-in rule into *registry* and return it."""
    registry.register_all(
        NotEmptyRule(),
        GreaterThanRule(),
        LessThanRule(),
        IsEmailRule(),
    )
    return registry


def build_default_registry() -> RuleRegistry:
    """
    Create a registry with all built-in rules.

    Each call returns a fresh, unsealed instance, so callers can add
    their own rules without affecting anyone else.

    Example:
        >>> registry = build_default_registry()
        >>> sorted(registry.names)
        ['greaterThan', 'isEmail', 'lessThan', 'notEmpty']
    """
    return install_builtin_rules(RuleRegistry())


__all__ = [
    "BuiltinRule",
    "GreaterThanRule",
    "IsEmailRule",
    "LessThanRule",
    "NotEmptyRule",
    "Operand",
    "OperandKind",
    "build_default_registry",
    "classify",
    "install_builtin_rules",
    "is_well_formed_email",
    "magnitude",
]
