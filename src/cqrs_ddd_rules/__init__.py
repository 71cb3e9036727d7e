from .config import ValidatorConfig
from .context import ValidationContext
from .default import get_default_validator, reset_default_validator
from .exceptions import (
    ContractViolationError,
    HandlerNotFoundError,
    RegistrySealedError,
    RuleArgumentError,
    RuleNotFoundError,
    RulesError,
    ValidationError,
)
from .handlers import TypeHandlerRegistry
from .registry import RuleRegistry
from .rule import Rule
from .rules import (
    BuiltinRule,
    OperandKind,
    build_default_registry,
    install_builtin_rules,
)
from .validator import Validator
from .violation import RuleViolation

__all__ = [
    # Core types
    "Rule",
    "RuleViolation",
    "ValidationContext",
    # Registries
    "RuleRegistry",
    "TypeHandlerRegistry",
    # Entry point
    "Validator",
    "ValidatorConfig",
    "get_default_validator",
    "reset_default_validator",
    # Built-in rules
    "BuiltinRule",
    "OperandKind",
    "build_default_registry",
    "install_builtin_rules",
    # Exceptions
    "RulesError",
    "ValidationError",
    "ContractViolationError",
    "RuleNotFoundError",
    "HandlerNotFoundError",
    "RuleArgumentError",
    "RegistrySealedError",
]
