"""Tests for QuestionBankNavigator and list filtering."""

import pytest

from reactprep.questionbank import (
    ALL_DIFFICULTIES,
    QuestionBankNavigator,
    SAVED_PATH,
    TOPICS_PATH,
    filter_questions,
    topic_path,
)
from reactprep.questionbank.navigator import humanize_segment


@pytest.fixture
def navigator(loader, progress):
    return QuestionBankNavigator(loader, progress)


class TestFilter:
    """Difficulty filtering."""

    def test_all_keeps_everything(self, loader):
        questions = loader.get_questions_for_topic("hooks")
        assert filter_questions(questions, ALL_DIFFICULTIES) == questions
        assert filter_questions(questions, None) == questions

    def test_single_level(self, loader):
        questions = loader.get_questions_for_topic("hooks")
        assert [q.id for q in filter_questions(questions, "HARD")] == ["h2"]

    def test_no_matches(self, loader):
        assert filter_questions(loader.get_questions_for_topic("hooks"), "MEDIUM") == []

    def test_unknown_level_matches_nothing(self, loader):
        assert filter_questions(loader.get_questions_for_topic("hooks"), "EXTREME") == []

    def test_count_by_difficulty(self, navigator):
        assert navigator.count_by_difficulty("hooks") == {"ALL": 2, "EASY": 1, "MEDIUM": 0, "HARD": 1}


class TestProgress:
    """Progress derived from the store."""

    def test_topic_progress(self, navigator, progress):
        assert navigator.get_topic_progress("hooks") == 0
        progress.toggle_completed("h1")
        assert navigator.get_topic_progress("hooks") == 50
        assert navigator.get_topic_progress_map() == {"hooks": 50, "performance": 0}

    def test_topic_progress_unknown_topic(self, navigator):
        assert navigator.get_topic_progress("missing") == 0

    def test_unknown_completed_ids_ignored(self, navigator, progress):
        progress.toggle_completed("removed-question")
        assert navigator.get_progress_summary()["completed"] == 0

    def test_progress_summary(self, navigator, progress):
        progress.toggle_completed("h1")
        progress.toggle_saved("p1")
        summary = navigator.get_progress_summary()
        assert summary["total_questions"] == 3
        assert summary["completed"] == 1
        assert summary["saved"] == 1
        assert summary["completion_percent"] == 33.3
        assert summary["topics"][0] == {"id": "hooks", "name": "React Hooks", "completed": 1, "total": 2}

    def test_saved_questions(self, navigator, progress):
        progress.toggle_saved("p1")
        progress.toggle_saved("h2")
        assert [q.id for q in navigator.get_saved_questions()] == ["h2", "p1"]


class TestNavigation:
    """Sidebar items and breadcrumbs."""

    def test_paths(self):
        assert topic_path("react-hooks") == "/topics/react-hooks"
        assert TOPICS_PATH == "/topics"
        assert SAVED_PATH == "/saved"

    def test_sidebar_items(self, navigator):
        items = navigator.get_sidebar_items("/topics/react-hooks")
        assert [i.title for i in items] == ["All Topics", "React Hooks", "Performance", "Saved Questions"]
        assert [i.title for i in items if i.is_active] == ["React Hooks"]
        assert items[1].icon == "Anchor"

    def test_breadcrumbs_for_topic(self, navigator):
        crumbs = navigator.get_breadcrumbs("/topics/react-hooks")
        assert [(c.name, c.href) for c in crumbs] == [
            ("Question Bank", "/topics"),
            ("React Hooks", "/topics/react-hooks"),
        ]
        assert crumbs[-1].is_current
        assert not crumbs[0].is_current

    def test_breadcrumbs_for_root(self, navigator):
        crumbs = navigator.get_breadcrumbs(TOPICS_PATH)
        assert len(crumbs) == 1
        assert crumbs[0].is_current

    def test_breadcrumbs_for_saved(self, navigator):
        assert navigator.get_breadcrumbs(SAVED_PATH)[-1].name == "Saved Questions"

    def test_humanize_segment(self):
        assert humanize_segment("use-memo") == "Use Memo"
