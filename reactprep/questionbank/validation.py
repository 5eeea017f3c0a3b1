"""
Authoring-time validation for question bank content.

Unlike QuestionBankLoader, which stops at the first bad file, this pass
checks every file and collects all problems so content authors can fix
them in one go.
"""

from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from reactprep.config import CONTENT_DIR
from reactprep.errors import CatalogError

from .loader import QUESTIONS_DIR, TOPICS_FILE, load_question_file, load_topics_file


@dataclass
class CatalogIssue:
    """One problem found in the content directory."""
    level: str  # "error" or "warning"
    path: str
    message: str

    def __str__(self) -> str:
        return f"[{self.level}] {self.path}: {self.message}"


def find_catalog_issues(content_dir: Optional[str | Path] = None) -> list[CatalogIssue]:
    """
    Validate all content files.

    Checks:
    - topics.yaml and each question file parse and match the schemas
      (including mistake line numbers within the flawed code)
    - question IDs are unique across the catalog, slugs unique per topic
    - every question file names a known topic
    - every topic has at least one question (warning)
    """
    root = Path(content_dir) if content_dir else CONTENT_DIR
    issues: list[CatalogIssue] = []

    topics_path = root / TOPICS_FILE
    try:
        topics = load_topics_file(topics_path).topics
    except CatalogError as e:
        issues.append(CatalogIssue("error", str(topics_path), str(e)))
        topics = []

    for field in ("id", "slug"):
        counts = Counter(getattr(t, field) for t in topics)
        for value, n in counts.items():
            if n > 1:
                issues.append(CatalogIssue("error", str(topics_path), f"Duplicate topic {field}: {value}"))
    topic_ids = {t.id for t in topics}

    question_ids: Counter = Counter()
    topics_with_questions: set[str] = set()
    for path in sorted((root / QUESTIONS_DIR).glob("*.yaml")):
        try:
            bank = load_question_file(path)
        except CatalogError as e:
            issues.append(CatalogIssue("error", str(path), str(e)))
            continue

        if topics and bank.topic not in topic_ids:
            issues.append(CatalogIssue("error", str(path), f"Unknown topic: {bank.topic}"))
        if bank.questions:
            topics_with_questions.add(bank.topic)

        slugs = Counter(q.slug for q in bank.questions)
        for slug, n in slugs.items():
            if n > 1:
                issues.append(CatalogIssue("error", str(path), f"Duplicate question slug: {slug}"))
        question_ids.update(q.id for q in bank.questions)

    for question_id, n in question_ids.items():
        if n > 1:
            issues.append(CatalogIssue("error", str(root), f"Duplicate question id: {question_id}"))

    for topic in topics:
        if topic.id not in topics_with_questions:
            issues.append(CatalogIssue("warning", str(topics_path), f"Topic has no questions: {topic.id}"))

    return issues


def has_errors(issues: list[CatalogIssue]) -> bool:
    return any(issue.level == "error" for issue in issues)
