"""Constants shared across the formlogic SDK.

These values are referenced by the models, evaluator, engine and store.
They mirror the vocabulary persisted by the form authoring store.

The default form directory can be overridden via an environment variable so
that deployments can point the store elsewhere without code changes.
"""

import os

# Types that pick from ``options``.
CHOICE_TYPES: set[str] = {"multipleChoice", "checkbox", "singleSelect"}

# Types that display content only and never collect an answer.
DISPLAY_ONLY_TYPES: set[str] = {"statement"}

# Conditions that require both operands to be numeric.
NUMERIC_CONDITIONS: set[str] = {"greaterThan", "lessThan"}

# Conditions that compare string forms, so a choice value can be checked
# against the question options.
TEXT_CONDITIONS: set[str] = {"equals", "notEquals", "contains", "notContains"}

# Contact sub-fields in display order; also the order used when a contact
# answer is flattened to a string.
CONTACT_FIELDS: tuple[str, ...] = ("firstName", "lastName", "email", "phone", "company")

# Separator used when a list answer is flattened to its string form.
LIST_SEPARATOR = ","

# Default directory scanned by FormStore when none is given.
# Overridable via FORMLOGIC_FORMS_DIR env var.
DEFAULT_FORMS_DIR = os.getenv("FORMLOGIC_FORMS_DIR", "forms")

# File suffixes FormStore recognises as form definitions.
FORM_FILE_SUFFIXES: set[str] = {".yaml", ".yml", ".json"}
