"""FormNavigator tests - walking a form the way the renderer does.

The navigator skips hidden questions in both directions, enforces the
required gate only on visible questions, and drops answers to hidden
questions on submission.
"""

import pytest

from formlogic.errors import MissingRequiredAnswersError, UnknownQuestionError
from formlogic.runtime import CompletedStep, FormNavigator, QuestionStep
from helpers.builders import question, rule


@pytest.fixture
def nav(feedback_form):
    return FormNavigator(feedback_form)


def _walk(nav, answers):
    """Advance from the first step to completion, returning visited qids."""
    visited = []
    step = nav.first_step(answers)
    while isinstance(step, QuestionStep):
        visited.append(step.question.id)
        step = nav.next_step(step.question.id, answers)
        assert len(visited) < 50, "walk did not terminate"
    return visited


# =====================================================================
# Forward / backward navigation
# =====================================================================


class TestNavigation:

    def test_first_step(self, nav):
        step = nav.first_step({})
        assert isinstance(step, QuestionStep)
        assert step.type == "question"
        assert step.question.id == "q_name"
        assert step.index == 0
        assert step.total == 9

    def test_first_step_skips_hidden(self):
        nav = FormNavigator([question("a", visible=False), question("b")])
        assert nav.first_step({}).question.id == "b"

    def test_first_step_nothing_visible(self):
        nav = FormNavigator([question("a", visible=False)])
        step = nav.first_step({})
        assert isinstance(step, CompletedStep)
        assert step.visibility == {"a": False}

    def test_next_skips_hidden_branch(self, nav):
        answers = {"q_name": "Ada", "q_recommend": "Yes"}
        step = nav.next_step("q_recommend", answers)
        assert step.question.id == "q_score"

    def test_next_enters_shown_branch(self, nav):
        answers = {"q_name": "Ada", "q_recommend": "No"}
        step = nav.next_step("q_recommend", answers)
        assert step.question.id == "q_why_not"
        assert step.index == 2

    def test_walk_happy_path(self, nav):
        answers = {"q_name": "Ada", "q_recommend": "Yes", "q_score": 5}
        assert _walk(nav, answers) == [
            "q_name", "q_recommend", "q_score", "q_features", "q_contact", "q_thanks",
        ]

    def test_walk_all_branches(self, nav):
        answers = {
            "q_name": "Ada",
            "q_recommend": "No",
            "q_why_not": "Faster support",
            "q_score": 10,
            "q_features": ["API"],
        }
        assert _walk(nav, answers) == [
            "q_name", "q_recommend", "q_why_not", "q_score", "q_testimonial",
            "q_features", "q_api_details", "q_contact", "q_thanks",
        ]

    def test_last_question_completes(self, nav):
        step = nav.next_step("q_thanks", {"q_name": "Ada", "q_recommend": "Yes"})
        assert isinstance(step, CompletedStep)
        assert step.type == "completed"

    def test_previous_skips_hidden(self, nav):
        step = nav.previous_step("q_score", {"q_recommend": "Yes"})
        assert step.question.id == "q_recommend"

    def test_previous_at_start_stays(self, nav):
        step = nav.previous_step("q_name", {})
        assert isinstance(step, QuestionStep)
        assert step.question.id == "q_name"

    def test_unknown_question(self, nav):
        with pytest.raises(UnknownQuestionError, match="nope"):
            nav.next_step("nope", {})
        with pytest.raises(UnknownQuestionError):
            nav.previous_step("nope", {})

    def test_step_carries_visibility(self, nav):
        step = nav.first_step({"q_recommend": "No"})
        assert step.visibility["q_why_not"] is True


# =====================================================================
# Required gate
# =====================================================================


class TestRequired:

    def test_required_blocks_next(self, nav):
        with pytest.raises(MissingRequiredAnswersError) as exc:
            nav.next_step("q_name", {})
        assert exc.value.question_ids == ["q_name"]

    @pytest.mark.parametrize("blank", ["", "   ", None, []])
    def test_blank_answers_are_missing(self, nav, blank):
        with pytest.raises(MissingRequiredAnswersError):
            nav.next_step("q_name", {"q_name": blank})

    def test_zero_counts_as_answer(self):
        nav = FormNavigator([question("n", "number", required=True), question("m")])
        assert nav.next_step("n", {"n": 0}).question.id == "m"

    def test_optional_question_does_not_block(self, nav):
        answers = {"q_name": "Ada", "q_recommend": "Yes"}
        assert nav.next_step("q_score", answers).question.id == "q_features"

    def test_hidden_required_does_not_block(self):
        """Advancing from a required question that rules have hidden is allowed."""
        qs = [
            question("a", rules=[rule("a", "b", "equals", "skip", "hide")]),
            question("b", required=True),
            question("c"),
        ]
        nav = FormNavigator(qs)
        assert nav.next_step("b", {"a": "skip"}).question.id == "c"

    def test_required_contact_with_blank_fields(self):
        nav = FormNavigator([question("c", "contactInfo", required=True)])
        with pytest.raises(MissingRequiredAnswersError):
            nav.next_step("c", {"c": {"firstName": "", "email": "  "}})
        assert isinstance(nav.next_step("c", {"c": {"email": "a@b.co"}}), CompletedStep)


# =====================================================================
# Submission
# =====================================================================


class TestSubmission:

    def test_missing_required_lists_visible_only(self, nav):
        assert nav.missing_required({}) == ["q_name", "q_recommend"]
        assert nav.missing_required({"q_recommend": "No"}) == ["q_name", "q_why_not"]

    def test_hidden_required_exempt(self, nav):
        answers = {"q_name": "Ada", "q_recommend": "Yes"}
        assert nav.missing_required(answers) == []

    def test_validate_submission_raises(self, nav):
        with pytest.raises(MissingRequiredAnswersError) as exc:
            nav.validate_submission({"q_name": "Ada", "q_recommend": "No"})
        assert exc.value.question_ids == ["q_why_not"]
        assert "q_why_not" in str(exc.value)

    def test_validate_submission_drops_hidden_answers(self, nav):
        answers = {
            "q_name": "Ada",
            "q_recommend": "Yes",
            # left over from an earlier "No" answer; now hidden
            "q_why_not": "Slow",
            "stray": "value",
        }
        assert nav.validate_submission(answers) == {"q_name": "Ada", "q_recommend": "Yes"}

    def test_navigator_accepts_question_list(self, feedback_form):
        nav = FormNavigator(feedback_form.questions)
        assert nav.questions[0].id == "q_name"
