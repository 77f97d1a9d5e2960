"""Visibility result models."""

from pydantic import BaseModel

# Computed show/hide state for every question in a form.
VisibilityResult = dict[str, bool]


class VisibilityChange(BaseModel):
    """Payload passed to the visibility-change hook after each recomputation.

    ``shown`` and ``hidden`` list the question ids whose state differs from
    the previous result the hook received.  On the first call every visible
    id is reported as shown.
    """

    visibility: VisibilityResult
    shown: list[str] = []
    hidden: list[str] = []

    @property
    def changed(self) -> bool:
        return bool(self.shown or self.hidden)
