"""Logic rule model - one conditional-visibility clause.

A rule reads: if the SOURCE question's answer satisfies CONDITION against
VALUE, then apply ACTION (show / hide) to the TARGET question.

Rules are stored on whichever question they were authored on, but they act
on ``target_question_id``, which may be a different question.  The
authoring store persists the source id under ``questionId``; the longer
``sourceQuestionId`` spelling is accepted as well.
"""

from typing import Literal, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

Condition = Literal[
    "equals", "notEquals", "contains", "notContains", "greaterThan", "lessThan",
]

RuleAction = Literal["show", "hide"]


class LogicRule(BaseModel):
    """A single show/hide rule.

    Conditions:
      - equals, notEquals: loose equality on the string forms
      - contains, notContains: list membership or substring
      - greaterThan, lessThan: numeric comparison
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    source_question_id: str = Field(
        validation_alias=AliasChoices("questionId", "sourceQuestionId", "source_question_id"),
        serialization_alias="questionId",
    )
    condition: Condition
    value: Union[str, int, float] = Field(
        validation_alias=AliasChoices("value", "comparisonValue"),
    )
    action: RuleAction
    target_question_id: str = Field(
        validation_alias=AliasChoices("targetQuestionId", "target_question_id"),
        serialization_alias="targetQuestionId",
    )

    @field_validator("value", mode="before")
    @classmethod
    def _bool_value_as_text(cls, v):
        # Booleans would otherwise be coerced to 0/1; keep the string form
        # that boolean answers compare against.
        if isinstance(v, bool):
            return "true" if v else "false"
        return v

    @property
    def is_self_reference(self) -> bool:
        """True if the rule tests the same question it shows or hides."""
        return self.source_question_id == self.target_question_id
