"""Question model for forms.

Each question type maps to one input component in the form renderer:

  Answer-collecting:
    - text, longText, email, url, date, signature: free text input
    - number: numeric input
    - multipleChoice, singleSelect: pick one option
    - checkbox: pick one or more options
    - fileUpload: one or more uploaded files
    - contactInfo: structured contact sub-fields

  Display only:
    - statement: a block of text, never answered

Field names follow the authoring store (``fileUploadConfig``,
``contactFields``).  Rules are persisted under ``logic``; presentation keys
such as ``image`` are ignored.
"""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from formlogic.constants import CHOICE_TYPES, DISPLAY_ONLY_TYPES

from .rule import LogicRule

QuestionType = Literal[
    "text",
    "longText",
    "number",
    "multipleChoice",
    "checkbox",
    "date",
    "email",
    "signature",
    "statement",
    "url",
    "singleSelect",
    "fileUpload",
    "contactInfo",
]


class FileUploadConfig(BaseModel):
    """Upload limits for fileUpload questions."""

    maxFiles: Optional[int] = None
    maxFileSize: Optional[int] = None
    acceptedFileTypes: Optional[List[str]] = None


class ContactFields(BaseModel):
    """Which contact sub-fields a contactInfo question asks for."""

    firstName: bool = True
    lastName: bool = True
    email: bool = True
    phone: bool = False
    company: bool = False


class Question(BaseModel):
    """A single form question with its visibility settings and logic rules."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    type: QuestionType
    question: str = ""
    options: Optional[List[str]] = None
    statement: Optional[str] = None
    fileUploadConfig: Optional[FileUploadConfig] = None
    contactFields: Optional[ContactFields] = None
    required: bool = False
    # Static override: False hides the question until a rule shows it.
    visible: bool = True
    rules: List[LogicRule] = Field(
        default_factory=list,
        validation_alias=AliasChoices("logic", "rules"),
        serialization_alias="logic",
    )

    @property
    def is_choice(self) -> bool:
        return self.type in CHOICE_TYPES

    @property
    def collects_answer(self) -> bool:
        return self.type not in DISPLAY_ONLY_TYPES
