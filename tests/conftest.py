"""Shared fixtures for ReactPrep tests."""

from pathlib import Path

import pytest
import yaml

from reactprep.questionbank import MemoryStorage, ProgressStore, QuestionBankLoader

SAMPLE_TOPICS = [
    {
        "id": "hooks",
        "slug": "react-hooks",
        "name": "React Hooks",
        "description": "Master useEffect, useCallback, and custom hooks.",
        "icon": "Anchor",
    },
    {
        "id": "performance",
        "slug": "performance-optimization",
        "name": "Performance",
        "description": "Rendering cycles, memoization, and profiling.",
        "icon": "Zap",
    },
]


def make_question(question_id: str, difficulty: str = "EASY", line_number: int = 2, **overrides) -> dict:
    """Raw question dict as it appears in a content file."""
    question = {
        "id": question_id,
        "slug": f"{question_id}-slug",
        "title": f"Question {question_id}",
        "difficulty": difficulty,
        "description": "Spot the bug.",
        "suboptimal_code": "function A() {\n  const [x] = useState(0);\n  return x;\n}",
        "correct_code": "function A() {\n  return 0;\n}",
        "mistakes": [
            {"id": f"m-{question_id}", "line_number": line_number, "message": "Unused state", "severity": "warning"},
        ],
        "pro_tips": ["Derive values during render."],
        "hints": ["Is the state ever updated?"],
        "explanation": "The state never changes, so it can be a constant.",
    }
    question.update(overrides)
    return question


def write_content(root: Path, topics: list[dict], banks: dict[str, list[dict]]) -> Path:
    """Write topics.yaml and questions/<topic>.yaml under root."""
    (root / "questions").mkdir(parents=True, exist_ok=True)
    with open(root / "topics.yaml", "w", encoding="utf-8") as f:
        yaml.safe_dump({"topics": topics}, f, sort_keys=False)
    for topic_id, questions in banks.items():
        with open(root / "questions" / f"{topic_id}.yaml", "w", encoding="utf-8") as f:
            yaml.safe_dump({"topic": topic_id, "questions": questions}, f, sort_keys=False)
    return root


@pytest.fixture
def content_dir(tmp_path):
    """Small catalog: two hooks questions, one performance question."""
    return write_content(
        tmp_path / "content",
        SAMPLE_TOPICS,
        {
            "hooks": [make_question("h1", "EASY"), make_question("h2", "HARD")],
            "performance": [make_question("p1", "MEDIUM")],
        },
    )


@pytest.fixture
def loader(content_dir):
    return QuestionBankLoader(content_dir)


@pytest.fixture
def packaged_loader():
    return QuestionBankLoader()


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def progress(storage):
    """Loaded progress store over empty in-memory storage."""
    store = ProgressStore(storage)
    store.load()
    return store
