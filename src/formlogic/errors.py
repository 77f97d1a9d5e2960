"""Domain exceptions raised at the edges of the SDK.

The engine and evaluator never raise for bad answers or dangling rules.
These exceptions are raised by the runtime navigator and the authoring-time
validator, where the caller is expected to handle them.  They subclass
``ValueError`` so that callers which already map ``ValueError`` to a client
error keep working.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from formlogic.validation import LogicIssue


class FormLogicError(ValueError):
    """Base class for formlogic domain errors."""


class UnknownQuestionError(FormLogicError):
    """A question id was not found in the form."""

    def __init__(self, question_id: str) -> None:
        super().__init__(f"Question {question_id!r} not found in form")
        self.question_id = question_id


class MissingRequiredAnswersError(FormLogicError):
    """One or more visible required questions have no answer."""

    def __init__(self, question_ids: list[str]) -> None:
        joined = ", ".join(question_ids)
        super().__init__(f"Required questions not answered: {joined}")
        self.question_ids = list(question_ids)


class LogicValidationError(FormLogicError):
    """Authoring-time logic validation found error-severity issues."""

    def __init__(self, issues: list["LogicIssue"]) -> None:
        lines = "; ".join(f"[{i.code}] {i.message}" for i in issues)
        super().__init__(f"{len(issues)} logic error(s): {lines}")
        self.issues = list(issues)
