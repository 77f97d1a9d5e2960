"""Form model - an ordered list of questions plus form-level metadata.

Only the fields the logic layer needs are typed.  Presentation settings
(colours, thank-you page, notifications) are accepted and ignored.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, model_validator

from .question import Question


class Form(BaseModel):
    """A form definition as persisted by the authoring store."""

    model_config = ConfigDict(extra="ignore")

    id: str
    title: str = ""
    description: Optional[str] = None
    questions: List[Question] = []

    @model_validator(mode="after")
    def _chk_unique_ids(self):
        seen: set[str] = set()
        dupes: list[str] = []
        for q in self.questions:
            if q.id in seen:
                dupes.append(q.id)
            seen.add(q.id)
        if dupes:
            raise ValueError(f"duplicate question ids: {', '.join(sorted(set(dupes)))}")
        return self

    @property
    def question_ids(self) -> list[str]:
        return [q.id for q in self.questions]

    def get_question(self, qid: str) -> Question | None:
        """Look up a question by id.  Returns None if absent."""
        for q in self.questions:
            if q.id == qid:
                return q
        return None
