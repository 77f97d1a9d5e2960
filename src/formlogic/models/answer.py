"""Answer value models.

The shape of an answer depends on the type of the question it answers:

    text, longText, email, url, date,
    signature, multipleChoice, singleSelect  -> str
    number                                   -> int | float (or numeric str)
    checkbox                                 -> list[str]
    fileUpload                               -> list[FileAnswer]
    contactInfo                              -> ContactAnswer

Answers reach the engine as a raw ``AnswerMap`` (whatever the renderer
collected); the engine never validates them.  ``parse_answer`` turns a raw
value into its typed form when the source question type is known.
"""

from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, ValidationError

from formlogic.constants import CONTACT_FIELDS


class ContactAnswer(BaseModel):
    """Structured answer to a contactInfo question."""

    model_config = ConfigDict(extra="ignore")

    firstName: Optional[str] = None
    lastName: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    company: Optional[str] = None

    def filled_values(self) -> list[str]:
        """Non-blank field values in display order."""
        values = []
        for name in CONTACT_FIELDS:
            v = getattr(self, name)
            if v is not None and str(v).strip():
                values.append(str(v))
        return values


class FileAnswer(BaseModel):
    """Metadata of one uploaded file (fileUpload questions)."""

    model_config = ConfigDict(extra="ignore")

    name: str
    size: Optional[int] = None
    url: Optional[str] = None
    type: Optional[str] = None


AnswerValue = Union[str, int, float, bool, list[str], list[FileAnswer], ContactAnswer]

# Raw answers keyed by question id, exactly as the renderer collected them.
AnswerMap = dict[str, Any]


def parse_answer(question_type: str, raw: Any) -> Any:
    """Convert a raw answer into its typed form for ``question_type``.

    Values that do not fit the expected shape are returned unchanged; the
    evaluator then treats them by their runtime shape.
    """
    if raw is None:
        return None
    if question_type == "contactInfo" and isinstance(raw, dict):
        try:
            return ContactAnswer.model_validate(raw)
        except ValidationError:
            return raw
    if question_type == "fileUpload" and isinstance(raw, list):
        files = []
        for item in raw:
            if isinstance(item, dict):
                try:
                    files.append(FileAnswer.model_validate(item))
                except ValidationError:
                    files.append(item)
            else:
                files.append(item)
        return files
    return raw


def is_answered(value: Any) -> bool:
    """True if ``value`` counts as an answer for the required check.

    ``None``, blank strings, empty lists/dicts and contact answers with every
    field blank are unanswered.  ``0`` and ``False`` are answers.
    """
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, ContactAnswer):
        return bool(value.filled_values())
    if isinstance(value, dict):
        return any(v is not None and str(v).strip() for v in value.values())
    if isinstance(value, (list, tuple)):
        return len(value) > 0
    return True
