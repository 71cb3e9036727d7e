"""Shared fixtures for rules tests."""

from __future__ import annotations

import pytest

from cqrs_ddd_rules import ValidationContext, Validator, reset_default_validator
from cqrs_ddd_rules.rules import build_default_registry


@pytest.fixture
def registry():
    """Fresh rule registry holding the built-in rules."""
    return build_default_registry()


@pytest.fixture
def ctx(registry) -> ValidationContext:
    return ValidationContext(registry)


@pytest.fixture
def validator() -> Validator:
    return Validator()


@pytest.fixture(autouse=True)
def _isolate_default_validator():
    reset_default_validator()
    yield
    reset_default_validator()
