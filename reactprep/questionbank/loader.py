"""
QuestionBankLoader - Load the question catalog from YAML content files.

Content layout:
- content/topics.yaml: ordered list of topics
- content/questions/<topic_id>.yaml: questions for one topic

Content is static. It is read once on first access and cached for the
lifetime of the loader.
"""

import logging
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import ValidationError

from reactprep.config import CONTENT_DIR
from reactprep.errors import CatalogError, TopicNotFoundError
from reactprep.schemas import Question, QuestionBankFile, Topic, TopicsFile

logger = logging.getLogger(__name__)

TOPICS_FILE = "topics.yaml"
QUESTIONS_DIR = "questions"


def read_yaml(path: Path) -> Any:
    """Parse a YAML content file, wrapping I/O and syntax errors in CatalogError."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f)
    except FileNotFoundError as e:
        raise CatalogError(f"Content file not found: {path}") from e
    except yaml.YAMLError as e:
        raise CatalogError(f"Invalid YAML in {path}: {e}") from e


def load_topics_file(path: Path) -> TopicsFile:
    """Load and validate content/topics.yaml."""
    try:
        return TopicsFile.model_validate(read_yaml(path))
    except ValidationError as e:
        raise CatalogError(f"Invalid topics file {path}: {e}") from e


def load_question_file(path: Path) -> QuestionBankFile:
    """Load and validate one content/questions/<topic>.yaml file."""
    try:
        return QuestionBankFile.model_validate(read_yaml(path))
    except ValidationError as e:
        raise CatalogError(f"Invalid question file {path}: {e}") from e


class QuestionBankLoader:
    """
    Read-only access to topics and questions.

    Topics keep the order of topics.yaml; questions keep file order.
    """

    def __init__(self, content_dir: Optional[str | Path] = None):
        """
        Initialize loader.

        Args:
            content_dir: Directory holding topics.yaml and questions/
                (default: the packaged content)
        """
        self.content_dir = Path(content_dir) if content_dir else CONTENT_DIR
        self._topics: Optional[list[Topic]] = None
        self._questions_by_topic: dict[str, list[Question]] = {}
        self._question_index: dict[str, Question] = {}
        self._question_topic: dict[str, str] = {}

    def _ensure_loaded(self):
        if self._topics is not None:
            return

        topics = load_topics_file(self.content_dir / TOPICS_FILE).topics
        questions_by_topic: dict[str, list[Question]] = {}
        for path in sorted((self.content_dir / QUESTIONS_DIR).glob("*.yaml")):
            bank = load_question_file(path)
            questions_by_topic.setdefault(bank.topic, []).extend(bank.questions)

        question_index = {}
        question_topic = {}
        for topic_id, questions in questions_by_topic.items():
            for question in questions:
                if question.id in question_index:
                    raise CatalogError(f"Duplicate question id: {question.id}")
                question_index[question.id] = question
                question_topic[question.id] = topic_id

        self._topics = topics
        self._questions_by_topic = questions_by_topic
        self._question_index = question_index
        self._question_topic = question_topic
        logger.info(f"Loaded {len(topics)} topics and {len(question_index)} questions from {self.content_dir}")

    # -------------------------------------------------------------------------
    # Topics
    # -------------------------------------------------------------------------

    def get_topics(self) -> list[Topic]:
        """Get all topics in catalog order."""
        self._ensure_loaded()
        return list(self._topics)

    def get_topic(self, topic_id: str) -> Optional[Topic]:
        """Get a single topic by ID."""
        for topic in self.get_topics():
            if topic.id == topic_id:
                return topic
        return None

    def find_topic_by_slug(self, slug: str) -> Optional[Topic]:
        """Get a topic by URL slug, or None."""
        for topic in self.get_topics():
            if topic.slug == slug:
                return topic
        return None

    def get_topic_by_slug(self, slug: str) -> Topic:
        """
        Get a topic by URL slug.

        Raises:
            TopicNotFoundError: If no topic has this slug
        """
        topic = self.find_topic_by_slug(slug)
        if topic is None:
            raise TopicNotFoundError(slug)
        return topic

    # -------------------------------------------------------------------------
    # Questions
    # -------------------------------------------------------------------------

    def get_questions_for_topic(self, topic_id: str) -> list[Question]:
        """Get questions for a topic (empty list for unknown topics)."""
        self._ensure_loaded()
        return list(self._questions_by_topic.get(topic_id, []))

    def get_question(self, question_id: str) -> Optional[Question]:
        """Get a single question by ID."""
        self._ensure_loaded()
        return self._question_index.get(question_id)

    def get_topic_for_question(self, question_id: str) -> Optional[Topic]:
        """Get the topic a question belongs to."""
        self._ensure_loaded()
        topic_id = self._question_topic.get(question_id)
        return self.get_topic(topic_id) if topic_id else None

    def get_all_questions(self) -> list[Question]:
        """Get every question, grouped by topic in catalog order."""
        result = []
        for topic in self.get_topics():
            result.extend(self.get_questions_for_topic(topic.id))
        return result

    def get_question_count(self, topic_id: Optional[str] = None) -> int:
        """Count questions, optionally for one topic."""
        if topic_id is not None:
            return len(self.get_questions_for_topic(topic_id))
        return len(self.get_all_questions())
