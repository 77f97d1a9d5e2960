"""FormStore - loads form definitions from YAML or JSON files into typed models.

The authoring store persists forms with camelCase keys (``questionId``,
``targetQuestionId``, ``logic``); the models accept those names directly,
so an exported form can be loaded as-is.

Usage::

    store = FormStore("forms/")     # defaults to FORMLOGIC_FORMS_DIR
    store.load()                    # parse every *.yaml / *.yml / *.json

    form = store.get("customer-feedback")
    visibility = compute_visibility(form.questions, answers)
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any

import yaml

from formlogic.constants import DEFAULT_FORMS_DIR, FORM_FILE_SUFFIXES
from formlogic.models.form import Form

logger = logging.getLogger(__name__)

_BOOL_TAG = "tag:yaml.org,2002:bool"


class FormLoader(yaml.SafeLoader):
    """SafeLoader that reads only true/false as booleans.

    YAML 1.1 also resolves yes/no/on/off to booleans, which turns choice
    options and rule values such as ``value: No`` into ``False``.  Form
    files keep those scalars as text.
    """


FormLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _BOOL_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
FormLoader.add_implicit_resolver(
    _BOOL_TAG,
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


def load_document(path: Path | str) -> Any:
    """Load a single YAML or JSON file and return the parsed contents."""
    if isinstance(path, str):
        path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Missing form file: {path}")
    with path.open("r", encoding="utf-8") as f:
        if path.suffix.lower() == ".json":
            return json.load(f)
        return yaml.load(f, Loader=FormLoader)


def load_form(path: Path | str) -> Form:
    """Parse one form definition file into a :class:`Form`.

    Raises ``FileNotFoundError`` if the file is missing and pydantic's
    ``ValidationError`` if the definition is malformed.
    """
    form = Form.model_validate(load_document(path))
    logger.info(
        "Loaded form %s: %d questions, %d rules",
        form.id,
        len(form.questions),
        sum(len(q.rules) for q in form.questions),
    )
    return form


class FormStore:
    """Loads every form file in a directory and provides lookup by id.

    Attributes populated after :meth:`load`:

        forms - dict[form_id, Form]
    """

    def __init__(self, forms_dir: str | Path | None = None) -> None:
        self._base = Path(forms_dir if forms_dir is not None else DEFAULT_FORMS_DIR)
        self.forms: dict[str, Form] = {}

    @property
    def base_dir(self) -> Path:
        return self._base

    def load(self) -> None:
        """Parse all form files under the store directory.

        Raises ``FileNotFoundError`` if the directory does not exist and
        ``ValueError`` if two files define the same form id.
        """
        if not self._base.is_dir():
            raise FileNotFoundError(f"Missing forms directory: {self._base}")

        self.forms = {}
        for path in sorted(self._base.iterdir()):
            if path.suffix.lower() not in FORM_FILE_SUFFIXES:
                continue
            form = load_form(path)
            if form.id in self.forms:
                raise ValueError(f"Form {form.id!r} already exists (duplicate in {path.name})")
            self.forms[form.id] = form

        logger.info("FormStore loaded %d forms from %s", len(self.forms), self._base)

    def get(self, form_id: str) -> Form:
        """Look up a form by id.  Raises ``KeyError`` if not loaded."""
        try:
            return self.forms[form_id]
        except KeyError:
            raise KeyError(f"Form {form_id!r} not found") from None

    def __contains__(self, form_id: object) -> bool:
        return form_id in self.forms

    def __len__(self) -> int:
        return len(self.forms)
