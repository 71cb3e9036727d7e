from enum import Enum


class BuiltinRule(str, Enum):
    """Names under which the built-in rules are registered."""

    NOT_EMPTY = "notEmpty"
    GREATER_THAN = "greaterThan"
    LESS_THAN = "lessThan"
    IS_EMAIL = "isEmail"
