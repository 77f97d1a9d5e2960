"""formlogic - conditional visibility logic for multi-question forms.

Public API:
    VisibilityEngine    - computes which questions are visible for an answer map
    compute_visibility  - one-shot helper around VisibilityEngine
    ConditionEvaluator  - evaluates a single rule condition
    FormNavigator       - first / next / previous steps and submission checks
    FormStore           - loads form definitions from YAML/JSON files
    load_form           - loads a single form definition file
    validate_logic      - authoring-time referential checks for rules

Step models:
    QuestionStep        - navigator step: render this question
    CompletedStep       - navigator step: nothing visible remains
    Step                - union of both step types

Errors:
    FormLogicError, UnknownQuestionError, MissingRequiredAnswersError,
    LogicValidationError
"""

from formlogic.engine import VisibilityEngine, compute_visibility
from formlogic.errors import (
    FormLogicError,
    LogicValidationError,
    MissingRequiredAnswersError,
    UnknownQuestionError,
)
from formlogic.evaluator import ConditionEvaluator
from formlogic.models import (
    Form,
    LogicRule,
    Question,
    VisibilityChange,
    VisibilityResult,
)
from formlogic.runtime import CompletedStep, FormNavigator, QuestionStep, Step
from formlogic.store import FormStore, load_form
from formlogic.validation import LogicIssue, raise_for_issues, validate_logic

__all__ = [
    # Engine
    "ConditionEvaluator",
    "VisibilityEngine",
    "compute_visibility",
    # Runtime
    "CompletedStep",
    "FormNavigator",
    "QuestionStep",
    "Step",
    # Store
    "FormStore",
    "load_form",
    # Validation
    "LogicIssue",
    "raise_for_issues",
    "validate_logic",
    # Models
    "Form",
    "LogicRule",
    "Question",
    "VisibilityChange",
    "VisibilityResult",
    # Errors
    "FormLogicError",
    "LogicValidationError",
    "MissingRequiredAnswersError",
    "UnknownQuestionError",
]
