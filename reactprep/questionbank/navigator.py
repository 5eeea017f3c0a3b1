"""
Navigator - Topic progress, list filtering, sidebar and breadcrumbs.

Provides:
- Per-topic completion percentages for the topic grid
- Progress summary for the sidebar
- Difficulty filtering of question lists
- Sidebar navigation items and breadcrumb trails
"""

from dataclasses import dataclass
from typing import Optional

from reactprep.schemas import Difficulty, Question

from .loader import QuestionBankLoader
from .progress import ProgressStore

ALL_DIFFICULTIES = "ALL"
TOPICS_PATH = "/topics"
SAVED_PATH = "/saved"
ROOT_CRUMB_NAME = "Question Bank"

# Static route segments with fixed display names
STATIC_SEGMENT_NAMES = {
    "question-bank": "Question Bank",
    "topics": "Topics",
    "saved": "Saved Questions",
}


@dataclass
class NavItem:
    """Sidebar entry."""
    title: str
    url: str
    icon: str
    is_active: bool = False


@dataclass
class Breadcrumb:
    """Breadcrumb entry; the last one in a trail is the current page."""
    name: str
    href: str
    is_current: bool = False


def topic_path(slug: str) -> str:
    return f"{TOPICS_PATH}/{slug}"


def filter_questions(questions: list[Question], difficulty: Optional[str] = ALL_DIFFICULTIES) -> list[Question]:
    """
    Filter questions by difficulty.

    ALL (or None) keeps every question. Unknown values match nothing.
    """
    if not difficulty or difficulty == ALL_DIFFICULTIES:
        return list(questions)
    return [q for q in questions if q.difficulty.value == difficulty]


def humanize_segment(segment: str) -> str:
    """Fallback display name for a path segment: "use-memo" -> "Use Memo"."""
    return " ".join(word[:1].upper() + word[1:] for word in segment.split("-"))


class QuestionBankNavigator:
    """
    Combine QuestionBankLoader (content) with ProgressStore (user state).
    """

    def __init__(self, loader: QuestionBankLoader, progress: ProgressStore):
        """
        Initialize navigator.

        Args:
            loader: QuestionBankLoader instance for content access
            progress: ProgressStore instance for user progress
        """
        self.loader = loader
        self.progress = progress

    # -------------------------------------------------------------------------
    # Progress
    # -------------------------------------------------------------------------

    def get_topic_progress(self, topic_id: str) -> int:
        """Percentage (0-100) of a topic's questions marked completed."""
        questions = self.loader.get_questions_for_topic(topic_id)
        if not questions:
            return 0
        done = sum(1 for q in questions if self.progress.is_completed(q.id))
        return round(done / len(questions) * 100)

    def get_topic_progress_map(self) -> dict[str, int]:
        """Topic ID -> completion percentage, for the topic grid."""
        return {topic.id: self.get_topic_progress(topic.id) for topic in self.loader.get_topics()}

    def get_progress_summary(self) -> dict:
        """Get progress summary for display."""
        questions = self.loader.get_all_questions()
        total = len(questions)
        completed = sum(1 for q in questions if self.progress.is_completed(q.id))
        saved = sum(1 for q in questions if self.progress.is_saved(q.id))

        topic_stats = []
        for topic in self.loader.get_topics():
            topic_questions = self.loader.get_questions_for_topic(topic.id)
            topic_stats.append({
                "id": topic.id,
                "name": topic.name,
                "completed": sum(1 for q in topic_questions if self.progress.is_completed(q.id)),
                "total": len(topic_questions),
            })

        return {
            "total_questions": total,
            "completed": completed,
            "saved": saved,
            "completion_percent": round(completed / total * 100, 1) if total > 0 else 0,
            "topics": topic_stats,
        }

    def get_saved_questions(self) -> list[Question]:
        """Saved questions in catalog order."""
        return [q for q in self.loader.get_all_questions() if self.progress.is_saved(q.id)]

    # -------------------------------------------------------------------------
    # Sidebar & Breadcrumbs
    # -------------------------------------------------------------------------

    def get_sidebar_items(self, current_path: str = TOPICS_PATH) -> list[NavItem]:
        """Sidebar entries: All Topics, one per topic, then Saved Questions."""
        items = [NavItem(title="All Topics", url=TOPICS_PATH, icon="Layout")]
        for topic in self.loader.get_topics():
            items.append(NavItem(title=topic.name, url=topic_path(topic.slug), icon=topic.icon))
        items.append(NavItem(title="Saved Questions", url=SAVED_PATH, icon="Bookmark"))
        for item in items:
            item.is_active = item.url == current_path
        return items

    def get_breadcrumb_name(self, segment: str) -> str:
        topic = self.loader.find_topic_by_slug(segment)
        if topic:
            return topic.name
        if segment in STATIC_SEGMENT_NAMES:
            return STATIC_SEGMENT_NAMES[segment]
        return humanize_segment(segment)

    def get_breadcrumbs(self, path: str) -> list[Breadcrumb]:
        """
        Build a breadcrumb trail for a path like "/topics/react-hooks".

        The trail starts at "Question Bank" (which stands for /topics), so the
        "topics" segment itself is skipped.
        """
        segments = [s for s in path.split("/") if s]
        crumbs = [Breadcrumb(name=ROOT_CRUMB_NAME, href=TOPICS_PATH)]
        for index, segment in enumerate(segments):
            if segment == "topics":
                continue
            href = "/" + "/".join(segments[:index + 1])
            crumbs.append(Breadcrumb(name=self.get_breadcrumb_name(segment), href=href))
        crumbs[-1].is_current = True
        return crumbs

    def count_by_difficulty(self, topic_id: str) -> dict[str, int]:
        """Question counts per difficulty (plus ALL) for filter labels."""
        questions = self.loader.get_questions_for_topic(topic_id)
        counts = {ALL_DIFFICULTIES: len(questions)}
        for level in Difficulty:
            counts[level.value] = sum(1 for q in questions if q.difficulty == level)
        return counts
