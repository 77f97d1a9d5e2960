"""Authoring-time logic validation.

The engine skips broken rules silently so a live form never crashes.  This
module is where those problems are surfaced instead: the authoring UI runs
:func:`validate_logic` before saving a form and shows the issues next to
the offending rules.

Issue codes:
  - duplicate_question_id (error): two questions share an id
  - dangling_source (error): rule tests a question that is not in the form
  - dangling_target (error): rule shows/hides a question not in the form
  - non_numeric_value (error): greaterThan/lessThan with a non-numeric value
  - self_reference (warning): rule tests the question it shows/hides
  - statement_source (warning): rule tests a statement, which has no answer
  - unknown_option (warning): rule compares a choice question against text
    that is not one of its options
"""

from __future__ import annotations

import logging
from typing import Literal, Sequence

from pydantic import BaseModel

from formlogic.constants import NUMERIC_CONDITIONS, TEXT_CONDITIONS
from formlogic.errors import LogicValidationError
from formlogic.evaluator import stringify, to_number
from formlogic.models.form import Form
from formlogic.models.question import Question
from formlogic.models.rule import LogicRule

logger = logging.getLogger(__name__)


class LogicIssue(BaseModel):
    """A single problem found in a form's logic."""

    code: str
    severity: Literal["error", "warning"]
    message: str
    question_id: str
    rule_id: str | None = None


def validate_logic(form: Form | Sequence[Question]) -> list[LogicIssue]:
    """Check every rule in ``form`` for referential and type problems.

    Returns issues in form order; an empty list means the logic is clean.
    """
    questions = form.questions if isinstance(form, Form) else list(form)
    issues: list[LogicIssue] = []

    by_id: dict[str, Question] = {}
    for q in questions:
        if q.id in by_id:
            issues.append(LogicIssue(
                code="duplicate_question_id",
                severity="error",
                message=f"Question id {q.id!r} is used more than once",
                question_id=q.id,
            ))
        by_id[q.id] = q

    for q in questions:
        for rule in q.rules:
            issues.extend(_check_rule(q, rule, by_id))

    if issues:
        logger.info(
            "Logic validation found %d issue(s) (%d error(s))",
            len(issues), sum(1 for i in issues if i.severity == "error"),
        )
    return issues


def _check_rule(owner: Question, rule: LogicRule, by_id: dict[str, Question]) -> list[LogicIssue]:
    issues: list[LogicIssue] = []

    def add(code: str, severity: str, message: str) -> None:
        issues.append(LogicIssue(
            code=code,
            severity=severity,
            message=message,
            question_id=owner.id,
            rule_id=rule.id,
        ))

    src = rule.source_question_id
    source = by_id.get(src)
    if source is None:
        add("dangling_source", "error", f"Rule {rule.id} tests unknown question {src!r}")
    elif not source.collects_answer:
        add("statement_source", "warning", f"Rule {rule.id} tests statement {src!r}, which is never answered")

    if rule.target_question_id not in by_id:
        add(
            "dangling_target", "error",
            f"Rule {rule.id} targets unknown question {rule.target_question_id!r}",
        )

    if rule.is_self_reference:
        add("self_reference", "warning", f"Rule {rule.id} shows/hides its own source question {src!r}")

    if rule.condition in NUMERIC_CONDITIONS and to_number(rule.value) is None:
        add(
            "non_numeric_value", "error",
            f"Rule {rule.id} uses {rule.condition} with non-numeric value {rule.value!r}",
        )

    if (
        source is not None
        and source.is_choice
        and source.options
        and rule.condition in TEXT_CONDITIONS
        and stringify(rule.value) not in source.options
    ):
        add(
            "unknown_option", "warning",
            f"Rule {rule.id} compares {src!r} with {rule.value!r}, which is not one of its options",
        )

    return issues


def raise_for_issues(issues: Sequence[LogicIssue]) -> None:
    """Raise :class:`LogicValidationError` if any issue has error severity."""
    errors = [i for i in issues if i.severity == "error"]
    if errors:
        raise LogicValidationError(errors)
