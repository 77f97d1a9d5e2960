"""Public model re-exports for formlogic.

Consumers should import from ``formlogic.models`` rather than reaching into
sub-modules directly.
"""

# --- Rules ---
from formlogic.models.rule import Condition, LogicRule, RuleAction

# --- Questions / forms ---
from formlogic.models.question import (
    ContactFields,
    FileUploadConfig,
    Question,
    QuestionType,
)
from formlogic.models.form import Form

# --- Answers ---
from formlogic.models.answer import (
    AnswerMap,
    AnswerValue,
    ContactAnswer,
    FileAnswer,
    is_answered,
    parse_answer,
)

# --- Visibility ---
from formlogic.models.visibility import VisibilityChange, VisibilityResult

__all__ = [
    # Rules
    "Condition",
    "LogicRule",
    "RuleAction",
    # Questions / forms
    "ContactFields",
    "FileUploadConfig",
    "Form",
    "Question",
    "QuestionType",
    # Answers
    "AnswerMap",
    "AnswerValue",
    "ContactAnswer",
    "FileAnswer",
    "is_answered",
    "parse_answer",
    # Visibility
    "VisibilityChange",
    "VisibilityResult",
]
