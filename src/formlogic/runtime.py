"""FormNavigator - walks a form for the runtime renderer.

Stateless helper: every call recomputes visibility from the answers it is
given, so the renderer can keep answers wherever it likes and call in after
each change.  Hidden questions are skipped when moving forward or back, and
a hidden required question never blocks advancing or submitting.

Step types:
  - QuestionStep: render this question next
  - CompletedStep: no visible question remains; the form can be submitted
"""

from __future__ import annotations

import logging
from typing import Any, Literal, Mapping, Sequence

from pydantic import BaseModel

from formlogic.engine import VisibilityEngine
from formlogic.errors import MissingRequiredAnswersError, UnknownQuestionError
from formlogic.models.answer import is_answered, parse_answer
from formlogic.models.form import Form
from formlogic.models.question import Question
from formlogic.models.visibility import VisibilityResult

logger = logging.getLogger(__name__)


class QuestionStep(BaseModel):
    """Navigator step: present ``question`` to the respondent."""

    type: Literal["question"] = "question"
    index: int
    total: int
    question: Question
    visibility: VisibilityResult


class CompletedStep(BaseModel):
    """Navigator step: every visible question has been passed."""

    type: Literal["completed"] = "completed"
    visibility: VisibilityResult


# Callers can match on step.type to dispatch rendering logic.
Step = QuestionStep | CompletedStep


class FormNavigator:
    """Computes first / next / previous steps through a form.

    Args:
        form: a :class:`Form` or its ordered question list
        engine: visibility engine to use; a fresh one if omitted
    """

    def __init__(
        self,
        form: Form | Sequence[Question],
        engine: VisibilityEngine | None = None,
    ) -> None:
        questions = form.questions if isinstance(form, Form) else form
        self._questions: list[Question] = list(questions)
        self._index = {q.id: i for i, q in enumerate(self._questions)}
        self._engine = engine or VisibilityEngine()

    @property
    def questions(self) -> list[Question]:
        return list(self._questions)

    # ==================================================================
    # Steps
    # ==================================================================

    def first_step(self, answers: Mapping[str, Any] | None = None) -> Step:
        """First visible question, or completion if nothing is visible."""
        visibility = self._engine.compute_visibility(self._questions, answers)
        return self._scan(0, 1, visibility)

    def next_step(self, current_qid: str, answers: Mapping[str, Any] | None = None) -> Step:
        """Advance past ``current_qid``.

        Raises:
            UnknownQuestionError: ``current_qid`` is not in the form
            MissingRequiredAnswersError: the current question is visible,
                required and unanswered
        """
        answers = answers or {}
        pos = self._position(current_qid)
        visibility = self._engine.compute_visibility(self._questions, answers)

        current = self._questions[pos]
        if visibility[current.id] and self._is_missing(current, answers):
            raise MissingRequiredAnswersError([current.id])

        return self._scan(pos + 1, 1, visibility)

    def previous_step(self, current_qid: str, answers: Mapping[str, Any] | None = None) -> Step:
        """Step back to the nearest visible question before ``current_qid``.

        At the start of the form the current question is returned again.
        """
        pos = self._position(current_qid)
        visibility = self._engine.compute_visibility(self._questions, answers)
        step = self._scan(pos - 1, -1, visibility)
        if isinstance(step, CompletedStep):
            return QuestionStep(
                index=pos,
                total=len(self._questions),
                question=self._questions[pos],
                visibility=visibility,
            )
        return step

    # ==================================================================
    # Submission
    # ==================================================================

    def missing_required(self, answers: Mapping[str, Any] | None = None) -> list[str]:
        """Ids of visible required questions without an answer, in form order."""
        answers = answers or {}
        visibility = self._engine.compute_visibility(self._questions, answers)
        return self._missing(visibility, answers)

    def validate_submission(self, answers: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """Check a submission and return the answers to persist.

        Answers to questions that are hidden at submission time are dropped.

        Raises:
            MissingRequiredAnswersError: a visible required question has no
                answer
        """
        answers = answers or {}
        visibility = self._engine.compute_visibility(self._questions, answers)
        missing = self._missing(visibility, answers)
        if missing:
            raise MissingRequiredAnswersError(missing)

        submitted = {
            qid: value for qid, value in answers.items()
            if visibility.get(qid, False)
        }
        dropped = len(answers) - len(submitted)
        if dropped:
            logger.debug("Dropped %d answer(s) to hidden or unknown questions", dropped)
        return submitted

    # ==================================================================
    # Internal helpers
    # ==================================================================

    def _position(self, qid: str) -> int:
        try:
            return self._index[qid]
        except KeyError:
            raise UnknownQuestionError(qid) from None

    def _scan(self, start: int, direction: int, visibility: VisibilityResult) -> Step:
        """Find the first visible question from ``start`` moving ``direction``."""
        i = start
        while 0 <= i < len(self._questions):
            q = self._questions[i]
            if visibility[q.id]:
                return QuestionStep(
                    index=i,
                    total=len(self._questions),
                    question=q,
                    visibility=visibility,
                )
            i += direction
        return CompletedStep(visibility=visibility)

    def _missing(self, visibility: VisibilityResult, answers: Mapping[str, Any]) -> list[str]:
        return [
            q.id for q in self._questions
            if visibility[q.id] and self._is_missing(q, answers)
        ]

    @staticmethod
    def _is_missing(question: Question, answers: Mapping[str, Any]) -> bool:
        if not question.required or not question.collects_answer:
            return False
        value = parse_answer(question.type, answers.get(question.id))
        return not is_answered(value)
