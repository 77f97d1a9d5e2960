"""VisibilityEngine - decides which questions of a form are currently shown.

Pure function of (questions, rules, answers): no I/O and no dependence on
earlier calls.  The renderer calls it on every answer change; the authoring
UI calls it with preview answers to live-check the logic.

Evaluation order:
    1. every question starts at its own ``visible`` flag (static override)
    2. questions are walked in form order, and each question's rules in
       list order
    3. a rule whose condition holds sets its target to ``action == "show"``;
       a rule whose condition fails contributes nothing
    4. later rules win when several fire for the same target

Rules that reference a question id not in the form are skipped.  Referential
integrity is checked at authoring time (see :mod:`formlogic.validation`);
a dangling reference must never break a live form.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Mapping, Sequence

from formlogic.evaluator import ConditionEvaluator
from formlogic.models.question import Question
from formlogic.models.visibility import VisibilityChange, VisibilityResult

logger = logging.getLogger(__name__)

VisibilityHook = Callable[[VisibilityChange], None]


class VisibilityEngine:
    """Computes the visibility of every question in a form.

    Args:
        on_visibility_change: optional hook invoked once per
            :meth:`compute_visibility` call with the full result and the ids
            that changed since the previous call it saw

    The computation itself keeps no state.  With a hook, the engine tracks the
    last result it delivered, so share a hooked engine only among calls for
    the same form session; a lock keeps concurrent calls from interleaving
    their deltas.
    """

    def __init__(self, on_visibility_change: VisibilityHook | None = None) -> None:
        self._evaluator = ConditionEvaluator()
        self._hook = on_visibility_change
        # Last result delivered to the hook; only used to compute deltas.
        self._last_notified: VisibilityResult | None = None
        self._lock = threading.Lock()

    def compute_visibility(
        self,
        questions: Sequence[Question],
        answers: Mapping[str, Any] | None = None,
    ) -> VisibilityResult:
        """Return ``{question_id: visible}`` for every question.

        Args:
            questions: the full, ordered question list of one form
            answers: answers collected so far, keyed by question id; may be
                     partial or None

        Never raises for dangling rule references or mismatched answers.
        """
        answers = answers or {}
        result: VisibilityResult = {q.id: q.visible for q in questions}
        question_types = {q.id: q.type for q in questions}

        for q in questions:
            for rule in q.rules:
                if rule.source_question_id not in result:
                    logger.debug(
                        "Skipping rule %s on %s: unknown source %s",
                        rule.id, q.id, rule.source_question_id,
                    )
                    continue
                if rule.target_question_id not in result:
                    logger.debug(
                        "Skipping rule %s on %s: unknown target %s",
                        rule.id, q.id, rule.target_question_id,
                    )
                    continue
                if self._evaluator.evaluate(rule, answers, question_types):
                    result[rule.target_question_id] = rule.action == "show"

        if self._hook is not None:
            self._notify(result)
        return result

    def visible_questions(
        self,
        questions: Sequence[Question],
        answers: Mapping[str, Any] | None = None,
    ) -> list[Question]:
        """The questions that are currently visible, in form order."""
        visibility = self.compute_visibility(questions, answers)
        return [q for q in questions if visibility[q.id]]

    # ------------------------------------------------------------------
    # Notification
    # ------------------------------------------------------------------

    def _notify(self, result: VisibilityResult) -> None:
        # Held across the hook call so subscribers see deltas in order.
        with self._lock:
            previous = self._last_notified
            if previous is None:
                shown = [qid for qid, vis in result.items() if vis]
                hidden: list[str] = []
            else:
                shown = [qid for qid, vis in result.items() if vis and not previous.get(qid, False)]
                hidden = [qid for qid, vis in result.items() if not vis and previous.get(qid, True)]
            self._last_notified = dict(result)

            change = VisibilityChange(visibility=dict(result), shown=shown, hidden=hidden)
            try:
                self._hook(change)
            except Exception:
                # A failing subscriber must not break form filling.
                logger.exception("on_visibility_change hook failed")


def compute_visibility(
    questions: Sequence[Question],
    answers: Mapping[str, Any] | None = None,
    on_visibility_change: VisibilityHook | None = None,
) -> VisibilityResult:
    """One-shot helper around :meth:`VisibilityEngine.compute_visibility`."""
    return VisibilityEngine(on_visibility_change).compute_visibility(questions, answers)
