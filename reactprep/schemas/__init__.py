"""
ReactPrep Schemas - Pydantic models for the question bank.

This module exports all schema classes for:
- Catalog: topics, questions, mistakes, highlighted questions
- Progress: persisted completed/saved state
"""

# Catalog schemas
from .catalog import (
    Difficulty,
    Severity,
    Topic,
    TopicsFile,
    Mistake,
    Question,
    QuestionBankFile,
    HighlightedQuestion,
    count_lines,
)

# Progress schemas
from .progress import (
    HydrationStatus,
    ProgressState,
)

__all__ = [
    # Catalog
    'Difficulty',
    'Severity',
    'Topic',
    'TopicsFile',
    'Mistake',
    'Question',
    'QuestionBankFile',
    'HighlightedQuestion',
    'count_lines',
    # Progress
    'HydrationStatus',
    'ProgressState',
]
