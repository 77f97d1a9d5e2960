"""Authoring-time logic validation tests."""

import pytest

from formlogic.errors import LogicValidationError
from formlogic.validation import LogicIssue, raise_for_issues, validate_logic
from helpers.builders import question, rule


def _codes(issues):
    return [i.code for i in issues]


def test_clean_fixture_forms(feedback_form, signup_form):
    """The shipped fixture forms have no logic issues."""
    assert validate_logic(feedback_form) == []
    assert validate_logic(signup_form) == []


def test_dangling_source_and_target():
    qs = [
        question("a", rules=[
            rule("gone", "a", rule_id="r1"),
            rule("a", "missing", rule_id="r2"),
        ]),
    ]
    issues = validate_logic(qs)
    assert _codes(issues) == ["dangling_source", "dangling_target"]
    assert [i.rule_id for i in issues] == ["r1", "r2"]
    assert all(i.severity == "error" for i in issues)
    assert all(i.question_id == "a" for i in issues)


def test_self_reference_is_warning():
    issues = validate_logic([question("a", rules=[rule("a", "a")])])
    assert _codes(issues) == ["self_reference"]
    assert issues[0].severity == "warning"
    raise_for_issues(issues)  # warnings alone do not raise


def test_non_numeric_value():
    qs = [
        question("n", "number", rules=[rule("n", "m", "greaterThan", "lots")]),
        question("m"),
    ]
    assert _codes(validate_logic(qs)) == ["non_numeric_value"]


def test_numeric_string_value_is_fine():
    qs = [
        question("n", "number", rules=[rule("n", "m", "lessThan", "10")]),
        question("m"),
    ]
    assert validate_logic(qs) == []


def test_statement_source():
    qs = [
        question("s", "statement", rules=[rule("s", "m")]),
        question("m"),
    ]
    issues = validate_logic(qs)
    assert _codes(issues) == ["statement_source"]
    assert issues[0].severity == "warning"


def test_duplicate_question_ids():
    issues = validate_logic([question("a"), question("a")])
    assert _codes(issues) == ["duplicate_question_id"]


def test_raise_for_issues():
    issues = validate_logic([question("a", rules=[rule("a", "zz")])])
    with pytest.raises(LogicValidationError) as exc:
        raise_for_issues(issues)
    assert exc.value.issues == issues
    assert "dangling_target" in str(exc.value)


def test_logic_validation_error_is_value_error():
    issue = LogicIssue(code="x", severity="error", message="m", question_id="q")
    with pytest.raises(ValueError):
        raise_for_issues([issue])


def test_unknown_option():
    qs = [
        question("c", "multipleChoice", options=["Yes", "No"], rules=[
            rule("c", "m", "equals", "no", rule_id="r1"),
            rule("c", "m", "notEquals", "No", rule_id="r2"),
        ]),
        question("m"),
    ]
    issues = validate_logic(qs)
    assert _codes(issues) == ["unknown_option"]
    assert issues[0].rule_id == "r1"
    assert issues[0].severity == "warning"


def test_unknown_option_only_for_choice_questions():
    """Free-text sources and choice questions without options are not checked."""
    qs = [
        question("t", rules=[rule("t", "m", "equals", "anything")]),
        question("c", "checkbox", rules=[rule("c", "m", "contains", "anything")]),
        question("m"),
    ]
    assert validate_logic(qs) == []
