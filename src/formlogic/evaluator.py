"""ConditionEvaluator - decides whether a single logic rule's condition holds.

Answers come in several shapes depending on the source question type
(string, number, boolean, list of options, list of files, contact object).
Rather than leaning on implicit coercion, every condition converts both
operands explicitly:

  - **equals / notEquals**: compare the string forms of answer and value
    (so numeric ``5`` and string ``"5"`` are equal)
  - **contains / notContains**: list answers test membership, scalar
    answers test substring, contact answers test each filled field
  - **greaterThan / lessThan**: both sides must coerce to finite numbers,
    otherwise the condition is False

An unanswered source never satisfies any condition, including the negated
ones.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Mapping

from formlogic.constants import LIST_SEPARATOR, NUMERIC_CONDITIONS
from formlogic.models.answer import ContactAnswer, FileAnswer, parse_answer
from formlogic.models.rule import LogicRule

logger = logging.getLogger(__name__)


class ConditionEvaluator:
    """Evaluates rule conditions against the current answers."""

    def evaluate(
        self,
        rule: LogicRule,
        answers: Mapping[str, Any],
        question_types: Mapping[str, str] | None = None,
    ) -> bool:
        """Return True if ``rule``'s condition holds for ``answers``.

        Args:
            rule: the rule to test
            answers: raw answers keyed by question id
            question_types: question id -> question type, used to read the
                            source answer in its typed form (optional)

        Returns:
            True if the condition is satisfied, False otherwise (including
            when the source question has not been answered).
        """
        answer = answers.get(rule.source_question_id)
        if answer is None:
            return False

        if question_types:
            qtype = question_types.get(rule.source_question_id)
            if qtype is not None:
                answer = parse_answer(qtype, answer)

        return self.compare(rule.condition, answer, rule.value)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    @classmethod
    def compare(cls, condition: str, answer: Any, value: Any) -> bool:
        """Apply ``condition`` to an answer and a comparison value."""
        if answer is None:
            return False

        if condition == "equals":
            return cls._equals(answer, value)

        if condition == "notEquals":
            return not cls._equals(answer, value)

        if condition == "contains":
            return cls._contains(answer, value)

        if condition == "notContains":
            return not cls._contains(answer, value)

        # --- Numeric comparisons ---
        if condition in NUMERIC_CONDITIONS:
            ans_num = to_number(answer)
            val_num = to_number(value)
            if ans_num is None or val_num is None:
                return False
            if condition == "greaterThan":
                return ans_num > val_num
            return ans_num < val_num

        logger.warning("Unknown rule condition: %s", condition)
        return False

    @staticmethod
    def _equals(answer: Any, value: Any) -> bool:
        expected = stringify(value)
        if isinstance(answer, ContactAnswer):
            return expected in answer.filled_values()
        return stringify(answer) == expected

    @staticmethod
    def _contains(answer: Any, value: Any) -> bool:
        needle = stringify(value)
        if isinstance(answer, (list, tuple)):
            return needle in [stringify(item) for item in answer]
        if isinstance(answer, ContactAnswer):
            return any(needle in v for v in answer.filled_values())
        return needle in stringify(answer)


# ----------------------------------------------------------------------
# Explicit coercions
# ----------------------------------------------------------------------


def stringify(value: Any) -> str:
    """Canonical string form of an answer or comparison value.

    Booleans become ``"true"``/``"false"``, integral floats drop their
    fractional part (``5.0 -> "5"``), lists join their elements with a comma,
    uploaded files use their name and contact answers join their filled
    fields with a space.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer():
            return str(int(value))
        return str(value)
    if isinstance(value, int):
        try:
            return str(value)
        except ValueError:
            # Beyond the interpreter's decimal digit limit; hex is not limited
            # and can never equal a decimal comparison value.
            return hex(value)
    if isinstance(value, str):
        return value
    if isinstance(value, FileAnswer):
        return value.name
    if isinstance(value, ContactAnswer):
        return " ".join(value.filled_values())
    if isinstance(value, (list, tuple)):
        return LIST_SEPARATOR.join(stringify(v) for v in value)
    if isinstance(value, dict):
        # Raw file dicts carry a name; anything else is flattened by value.
        if "name" in value:
            return stringify(value["name"])
        return " ".join(stringify(v) for v in value.values() if v is not None)
    return str(value)


def to_number(value: Any) -> float | None:
    """Coerce ``value`` to a finite float, or None if it is not numeric.

    Booleans, blank strings, lists, objects and integers beyond the float
    range are never numeric.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            num = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            num = float(text)
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(num):
        return None
    return num
