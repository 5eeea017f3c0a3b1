"""
Schema validation tests for ReactPrep.

Tests the catalog and progress Pydantic models.
"""

import pytest
from pydantic import ValidationError

from reactprep.schemas import (
    # Catalog
    Difficulty,
    HighlightedQuestion,
    Mistake,
    Question,
    QuestionBankFile,
    Severity,
    Topic,
    TopicsFile,
    count_lines,
    # Progress
    HydrationStatus,
    ProgressState,
)

from conftest import make_question


class TestLineCounting:
    """Test the line counting helper."""

    def test_single_line(self):
        assert count_lines("const x = 1;") == 1

    def test_multi_line(self):
        assert count_lines("a\nb\nc") == 3

    def test_trailing_newline_counts_empty_line(self):
        assert count_lines("a\nb\n") == 3


class TestTopicSchemas:
    """Test topic schemas."""

    def test_topic_valid(self):
        topic = Topic(id="hooks", slug="react-hooks", name="React Hooks", description="Hooks", icon="Anchor")
        assert topic.slug == "react-hooks"
        assert topic.icon == "Anchor"

    def test_topic_default_icon(self):
        topic = Topic(id="hooks", slug="react-hooks", name="React Hooks", description="Hooks")
        assert topic.icon == "HelpCircle"

    def test_topic_empty_slug(self):
        with pytest.raises(ValidationError):
            Topic(id="hooks", slug="", name="React Hooks", description="Hooks")

    def test_topics_file(self):
        data = {"topics": [{"id": "a", "slug": "a", "name": "A", "description": "First"}]}
        assert TopicsFile.model_validate(data).topics[0].id == "a"


class TestMistakeSchema:
    """Test mistake annotations."""

    def test_mistake_defaults_to_warning(self):
        mistake = Mistake(id="m1", line_number=3, message="Missing dependency")
        assert mistake.severity == Severity.WARNING

    def test_mistake_severity_from_string(self):
        mistake = Mistake(id="m1", line_number=3, message="Bad", severity="error")
        assert mistake.severity == Severity.ERROR

    def test_mistake_invalid_severity(self):
        with pytest.raises(ValidationError):
            Mistake(id="m1", line_number=3, message="Bad", severity="fatal")

    def test_mistake_line_zero(self):
        with pytest.raises(ValidationError):
            Mistake(id="m1", line_number=0, message="Bad")


class TestQuestionSchema:
    """Test question validation."""

    def test_question_valid(self):
        question = Question.model_validate(make_question("h1"))
        assert question.difficulty == Difficulty.EASY
        assert question.line_count == 4
        assert question.mistakes[0].line_number == 2

    def test_question_optional_lists_default_empty(self):
        data = make_question("h1")
        for key in ("mistakes", "pro_tips", "hints", "explanation"):
            del data[key]
        question = Question.model_validate(data)
        assert question.mistakes == []
        assert question.hints == []
        assert question.explanation == ""

    def test_question_invalid_difficulty(self):
        with pytest.raises(ValidationError):
            Question.model_validate(make_question("h1", difficulty="EXPERT"))

    def test_question_lowercase_difficulty_rejected(self):
        with pytest.raises(ValidationError):
            Question.model_validate(make_question("h1", difficulty="easy"))

    def test_mistake_on_last_line_allowed(self):
        question = Question.model_validate(make_question("h1", line_number=4))
        assert question.mistakes[0].line_number == question.line_count

    def test_mistake_past_last_line(self):
        with pytest.raises(ValidationError, match="only 4 lines"):
            Question.model_validate(make_question("h1", line_number=5))

    def test_duplicate_mistake_ids(self):
        data = make_question("h1")
        data["mistakes"] = [
            {"id": "m1", "line_number": 1, "message": "First"},
            {"id": "m1", "line_number": 2, "message": "Second"},
        ]
        with pytest.raises(ValidationError, match="Duplicate mistake id"):
            Question.model_validate(data)

    def test_blank_code_rejected(self):
        with pytest.raises(ValidationError):
            Question.model_validate(make_question("h1", correct_code="   "))

    def test_line_count_in_dump(self):
        question = Question.model_validate(make_question("h1"))
        assert question.model_dump()["line_count"] == 4

    def test_question_bank_file(self):
        bank = QuestionBankFile.model_validate({"topic": "hooks", "questions": [make_question("h1")]})
        assert bank.topic == "hooks"
        assert len(bank.questions) == 1


class TestHighlightedQuestion:
    """Test pre-rendered questions."""

    def test_from_question(self):
        question = Question.model_validate(make_question("h1"))
        highlighted = HighlightedQuestion.from_question(question, "<pre>a</pre>", "<pre>b</pre>")
        assert highlighted.id == "h1"
        assert highlighted.preview_html == "<pre>a</pre>"
        assert highlighted.solution_html == "<pre>b</pre>"
        assert highlighted.mistakes == question.mistakes
        assert highlighted.line_count == question.line_count


class TestProgressSchemas:
    """Test progress-related schemas."""

    def test_progress_state_defaults(self):
        state = ProgressState()
        assert state.completed == []
        assert state.saved == []

    def test_progress_state_dedupes(self):
        state = ProgressState(completed=["h1", "h2", "h1"], saved=["p1", "p1"])
        assert state.completed == ["h1", "h2"]
        assert state.saved == ["p1"]

    def test_progress_state_json_shape(self):
        state = ProgressState(completed=["h1"])
        assert state.model_dump() == {"completed": ["h1"], "saved": []}

    def test_progress_state_rejects_non_string_lists(self):
        with pytest.raises(ValidationError):
            ProgressState(completed="h1")

    def test_hydration_status_values(self):
        assert HydrationStatus.UNINITIALIZED.value == "uninitialized"
        assert HydrationStatus.READY.value == "ready"
