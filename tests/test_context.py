"""Tests for the fail-fast ValidationContext chain."""

from __future__ import annotations

import pytest

from cqrs_ddd_rules import RuleRegistry, RuleViolation, ValidationContext
from cqrs_ddd_rules.context import RULE_FAILED
from cqrs_ddd_rules.exceptions import RuleNotFoundError


class CountingRule:
    """Rule stub recording how often it was invoked."""

    def __init__(self, violation: RuleViolation | None = None) -> None:
        self.calls: list[tuple] = []
        self.violation = violation

    def __call__(self, *args):
        self.calls.append(args)
        return self.violation


@pytest.fixture
def passing() -> CountingRule:
    return CountingRule()


@pytest.fixture
def failing() -> CountingRule:
    return CountingRule(RuleViolation("first failure"))


@pytest.fixture
def counting_ctx(passing, failing) -> ValidationContext:
    registry = RuleRegistry()
    registry.register("pass", passing)
    registry.register("fail", failing)
    return ValidationContext(registry)


def test_new_context_is_ok(counting_ctx) -> None:
    assert counting_ctx.error is None
    assert counting_ctx.result() is None
    assert counting_ctx.failed is False
    assert repr(counting_ctx) == "<ValidationContext OK>"


def test_check_passes_arguments_through(counting_ctx, passing) -> None:
    result = counting_ctx.check("pass", 1, "two", [3])

    assert result is counting_ctx
    assert passing.calls == [(1, "two", [3])]
    assert counting_ctx.error is None


def test_check_failure_is_stored_and_stamped_with_rule(counting_ctx) -> None:
    counting_ctx.check("fail")

    assert counting_ctx.failed
    assert counting_ctx.error == RuleViolation("first failure", rule="fail")


def test_check_wraps_string_returned_by_rule() -> None:
    registry = RuleRegistry()
    registry.register("short", lambda value: "too short" if len(value) < 3 else None)

    ctx = ValidationContext(registry).check("short", "abc").check("short", "a")
    assert ctx.error == RuleViolation("too short", rule="short")

    ctx = ValidationContext(registry).check("short", "a").message("name too short")
    assert ctx.error == RuleViolation("name too short", rule="short")


def test_failed_context_skips_later_checks(counting_ctx, passing, failing) -> None:
    counting_ctx.check("fail").check("pass").check("fail")

    assert passing.calls == []
    assert len(failing.calls) == 1


def test_failed_context_is_absorbing(counting_ctx) -> None:
    counting_ctx.check("fail")
    first = counting_ctx.error

    (
        counting_ctx.check("pass")
        .must(lambda: False)
        .must(lambda: True)
        .must_err(lambda: RuleViolation("second failure"))
        .must_err(lambda: None)
    )

    assert counting_ctx.error == first


def test_unknown_rule_is_fatal_while_ok(counting_ctx) -> None:
    with pytest.raises(RuleNotFoundError):
        counting_ctx.check("missing")


def test_unknown_rule_is_skipped_once_failed(counting_ctx) -> None:
    counting_ctx.check("fail").check("missing")

    assert counting_ctx.error.message == "first failure"


class TestMust:
    def test_true_predicate_keeps_ok(self, counting_ctx) -> None:
        assert counting_ctx.must(lambda: True).error is None

    def test_false_predicate_fails_with_generic_message(self, counting_ctx) -> None:
        counting_ctx.must(lambda: False)

        assert counting_ctx.error == RuleViolation(RULE_FAILED)
        assert str(counting_ctx.error) == "rule failed"

    def test_predicate_not_evaluated_after_failure(self, counting_ctx) -> None:
        evaluated = []
        counting_ctx.check("fail").must(lambda: evaluated.append(1) or True)

        assert evaluated == []


class TestMustErr:
    def test_none_keeps_ok(self, counting_ctx) -> None:
        assert counting_ctx.must_err(lambda: None).error is None

    def test_violation_is_stored(self, counting_ctx) -> None:
        violation = RuleViolation("custom", rule="business")

        counting_ctx.must_err(lambda: violation)

        assert counting_ctx.error is violation

    def test_string_is_wrapped(self, counting_ctx) -> None:
        counting_ctx.must_err(lambda: "too late")

        assert counting_ctx.error == RuleViolation("too late")


class TestMessage:
    def test_message_on_ok_context_is_noop(self, counting_ctx) -> None:
        counting_ctx.check("pass").message("never shown")

        assert counting_ctx.error is None

    def test_message_replaces_text_of_failure(self, counting_ctx) -> None:
        counting_ctx.check("fail").message("name is required")

        assert counting_ctx.error == RuleViolation("name is required", rule="fail")
        assert repr(counting_ctx) == "<ValidationContext Failed('name is required')>"

    def test_repeated_message_on_same_failure_keeps_last(self, counting_ctx) -> None:
        counting_ctx.check("fail").message("first").message("second")

        assert counting_ctx.error.message == "second"

    def test_message_of_skipped_check_does_not_rewrite(self, counting_ctx) -> None:
        (
            counting_ctx.check("fail")
            .message("name is required")
            .check("pass")
            .message("age must be positive")
            .must(lambda: False)
            .message("never applies")
        )

        assert counting_ctx.error == RuleViolation("name is required", rule="fail")

    def test_message_applies_to_must_failure(self, counting_ctx) -> None:
        counting_ctx.check("pass").must(lambda: False).message("too young")

        assert counting_ctx.error == RuleViolation("too young")
