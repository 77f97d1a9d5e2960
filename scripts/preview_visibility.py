#!/usr/bin/env python3
"""Preview a form's conditional logic from the command line.

Loads a form definition (YAML or JSON), applies an answers file, and prints
which questions are visible, any authoring-time logic issues, and the path
the runtime navigator would take through the form.

Usage::

    # Visibility with no answers (static defaults only)
    python scripts/preview_visibility.py tests/fixtures/feedback.yaml

    # Apply answers from a JSON file
    python scripts/preview_visibility.py tests/fixtures/feedback.yaml -a answers.json

    # Inline answers, plus the navigator walk
    python scripts/preview_visibility.py form.yaml --set q_recommend=No --walk
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.table import Table

_REPO_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(_REPO_ROOT / "src"))

from formlogic.engine import VisibilityEngine  # noqa: E402
from formlogic.errors import MissingRequiredAnswersError  # noqa: E402
from formlogic.models.form import Form  # noqa: E402
from formlogic.models.visibility import VisibilityChange  # noqa: E402
from formlogic.runtime import FormNavigator, QuestionStep  # noqa: E402
from formlogic.store import load_document, load_form  # noqa: E402
from formlogic.validation import validate_logic  # noqa: E402

console = Console()


def parse_assignment(raw: str) -> tuple[str, Any]:
    """Parse ``qid=value``; the value is read as JSON when possible."""
    if "=" not in raw:
        raise argparse.ArgumentTypeError(f"expected qid=value, got {raw!r}")
    qid, value = raw.split("=", 1)
    try:
        return qid, json.loads(value)
    except json.JSONDecodeError:
        return qid, value


def print_issues(form: Form) -> None:
    issues = validate_logic(form)
    if not issues:
        console.print("  [green]✓[/] No logic issues")
        return
    for issue in issues:
        colour = "red" if issue.severity == "error" else "yellow"
        console.print(f"  [{colour}]{issue.severity.upper()}[/] [{issue.code}] {issue.message}")


def print_visibility(form: Form, answers: dict[str, Any], change: VisibilityChange) -> None:
    table = Table(title=f"{form.title or form.id} - visibility", show_lines=False)
    table.add_column("#", style="dim", width=4)
    table.add_column("Question", min_width=16)
    table.add_column("Type", width=15)
    table.add_column("Req", width=4)
    table.add_column("Rules", width=6)
    table.add_column("Visible", width=8)
    table.add_column("Answer", min_width=16)

    for i, q in enumerate(form.questions, 1):
        visible = change.visibility[q.id]
        answer = answers.get(q.id)
        table.add_row(
            str(i),
            q.id,
            q.type,
            "*" if q.required else "",
            str(len(q.rules)) if q.rules else "-",
            "[green]yes[/]" if visible else "[red]no[/]",
            json.dumps(answer, ensure_ascii=False) if answer is not None else "-",
        )
    console.print(table)


def print_walk(form: Form, answers: dict[str, Any]) -> None:
    nav = FormNavigator(form)
    step = nav.first_step(answers)
    path: list[str] = []
    while isinstance(step, QuestionStep):
        path.append(step.question.id)
        try:
            step = nav.next_step(step.question.id, answers)
        except MissingRequiredAnswersError as exc:
            console.print(f"  Path: {' → '.join(path)}")
            console.print(f"  [red]✗[/] Blocked: {exc}")
            return
    console.print(f"  Path: {' → '.join(path) or '(nothing visible)'}")
    console.print("  [green]✓[/] Completed")

    missing = nav.missing_required(answers)
    if missing:
        console.print(f"  [yellow]Missing required:[/] {', '.join(missing)}")


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Preview which questions of a form are visible for a set of answers.",
    )
    parser.add_argument("form", type=Path, help="Form definition file (.yaml, .yml or .json)")
    parser.add_argument(
        "-a", "--answers",
        type=Path,
        help="JSON or YAML file with answers keyed by question id",
    )
    parser.add_argument(
        "--set",
        dest="assignments",
        action="append",
        default=[],
        type=parse_assignment,
        metavar="QID=VALUE",
        help="Set a single answer (value parsed as JSON when possible); repeatable",
    )
    parser.add_argument(
        "--walk",
        action="store_true",
        help="Also print the navigator path through the form",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging (shows skipped rules)",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    form = load_form(args.form)
    answers: dict[str, Any] = dict(load_document(args.answers) or {}) if args.answers else {}
    answers.update(dict(args.assignments))

    changes: list[VisibilityChange] = []
    VisibilityEngine(on_visibility_change=changes.append).compute_visibility(form.questions, answers)

    console.rule(f"[bold]{form.id}")
    print_issues(form)
    console.print()
    print_visibility(form, answers, changes[-1])

    if args.walk:
        console.print()
        console.rule("[bold]Navigator walk")
        print_walk(form, answers)


if __name__ == "__main__":
    main()
