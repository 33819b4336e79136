import pytest
from pydantic import ValidationError

from ryandata_data_errors import (
    PACKAGE_NAME,
    DataErrorsArgumentError,
    PropertyErrorRule,
    PropertyRules,
    add_rule,
    add_rules,
    any_fails,
)
from tests.models import Counter


def test_rule_exposes_predicate_and_message() -> None:
    """PropertyErrorRule should carry its predicate and message unchanged."""
    predicate = Counter(result=True)
    rule = PropertyErrorRule(predicate, "broken")

    assert rule.fail_with is predicate
    assert rule.message == "broken"
    assert rule.fails() is True
    assert predicate.calls == 1


def test_rule_accepts_keywords_and_empty_message() -> None:
    rule = PropertyErrorRule(fail_with=lambda: False, message="")
    assert rule.message == ""
    assert rule.fails() is False


@pytest.mark.parametrize(
    ("fail_with", "message", "argument"),
    [
        (None, "msg", "fail_with"),
        (lambda: True, None, "message"),
        (None, None, "fail_with"),
    ],
)
def test_rule_rejects_missing_arguments(fail_with, message, argument) -> None:
    """Missing predicate or message should raise an argument error."""
    with pytest.raises(DataErrorsArgumentError) as exc_info:
        PropertyErrorRule(fail_with, message)

    assert exc_info.value.type == "argument_error"
    assert exc_info.value.argument == argument
    assert exc_info.value.context["package"] == PACKAGE_NAME


def test_argument_error_is_value_error() -> None:
    with pytest.raises(ValueError, match="Rule message can not be null."):
        PropertyErrorRule(lambda: True, None)


def test_rule_rejects_non_callable_predicate() -> None:
    with pytest.raises(ValidationError):
        PropertyErrorRule("not callable", "msg")


def test_rule_is_immutable() -> None:
    rule = PropertyErrorRule(lambda: True, "msg")
    with pytest.raises(ValidationError):
        rule.message = "other"


def test_rule_predicate_exception_propagates() -> None:
    def boom() -> bool:
        raise RuntimeError("predicate failed")

    rule = PropertyErrorRule(boom, "msg")
    with pytest.raises(RuntimeError, match="predicate failed"):
        rule.fails()


def test_add_rule_appends_and_chains() -> None:
    rules = PropertyRules()
    returned = rules.add_rule(lambda: True, "first").add_rule(lambda: False, "second")

    assert returned is rules
    assert [rule.message for rule in rules] == ["first", "second"]


def test_add_rule_function_works_on_plain_list() -> None:
    rules: list[PropertyErrorRule] = []
    assert add_rule(rules, lambda: True, "msg") is rules
    assert len(rules) == 1


@pytest.mark.parametrize(("fail_with", "message"), [(None, "msg"), (lambda: True, None)])
def test_add_rule_rejects_missing_arguments_without_mutation(fail_with, message) -> None:
    """A rejected rule must leave the list untouched."""
    rules = PropertyRules().add_rule(lambda: True, "existing")

    with pytest.raises(DataErrorsArgumentError):
        rules.add_rule(fail_with, message)

    assert [rule.message for rule in rules] == ["existing"]


def test_add_rules_appends_batch_in_order() -> None:
    rules = PropertyRules().add_rule(lambda: False, "a")
    batch = [PropertyErrorRule(lambda: True, "b"), PropertyErrorRule(lambda: True, "c")]

    assert rules.add_rules(batch) is rules
    assert [rule.message for rule in rules] == ["a", "b", "c"]


def test_add_rules_accepts_generator() -> None:
    rules = PropertyRules()
    add_rules(rules, (PropertyErrorRule(lambda: True, str(i)) for i in range(3)))
    assert [rule.message for rule in rules] == ["0", "1", "2"]


def test_add_rules_empty_batch_is_noop() -> None:
    rules = PropertyRules().add_rule(lambda: True, "a")
    assert rules.add_rules([]) is rules
    assert len(rules) == 1


def test_add_rules_rejects_none_batch() -> None:
    rules = PropertyRules()
    with pytest.raises(DataErrorsArgumentError, match="Set of rules can not be null."):
        rules.add_rules(None)
    assert rules == []


def test_add_rules_rejects_foreign_items_without_mutation() -> None:
    rules = PropertyRules()
    batch = [PropertyErrorRule(lambda: True, "ok"), "not a rule"]

    with pytest.raises(DataErrorsArgumentError) as exc_info:
        rules.add_rules(batch)

    assert exc_info.value.context["index"] == 1
    assert rules == []


def test_any_fails_stops_at_first_failure() -> None:
    """any_fails should not evaluate rules after the first failure."""
    first = Counter(result=False)
    second = Counter(result=True)
    third = Counter(result=True)
    rules = PropertyRules().add_rule(first, "1").add_rule(second, "2").add_rule(third, "3")

    assert rules.any_fails() is True
    assert (first.calls, second.calls, third.calls) == (1, 1, 0)


def test_any_fails_empty_is_false() -> None:
    assert any_fails([]) is False
    assert PropertyRules().any_fails() is False


def test_failing_messages_evaluates_each_rule_once() -> None:
    predicates = [Counter(result=r) for r in (True, False, True)]
    rules = PropertyRules()
    for i, predicate in enumerate(predicates):
        rules.add_rule(predicate, f"m{i}")

    assert rules.failing_messages() == ["m0", "m2"]
    assert [p.calls for p in predicates] == [1, 1, 1]
