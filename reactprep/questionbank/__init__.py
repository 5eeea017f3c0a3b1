"""
ReactPrep Question Bank - Runtime components for content and progress.

This module provides:
- QuestionBankLoader: Load topics and questions from YAML content
- ProgressStore: Track completed/saved questions in local storage
- QuestionBankNavigator: Topic progress, filters, sidebar and breadcrumbs
- find_catalog_issues: Authoring-time content validation
"""

from .loader import (
    QuestionBankLoader,
    load_question_file,
    load_topics_file,
)

from .storage import (
    KeyValueStorage,
    MemoryStorage,
    SqliteStorage,
)

from .progress import (
    ProgressStore,
    load_progress,
    open_progress_store,
    parse_progress,
    scoped_storage_key,
)

from .navigator import (
    ALL_DIFFICULTIES,
    Breadcrumb,
    NavItem,
    QuestionBankNavigator,
    SAVED_PATH,
    TOPICS_PATH,
    filter_questions,
    topic_path,
)

from .validation import (
    CatalogIssue,
    find_catalog_issues,
    has_errors,
)

__all__ = [
    # Loader
    "QuestionBankLoader",
    "load_question_file",
    "load_topics_file",
    # Storage
    "KeyValueStorage",
    "MemoryStorage",
    "SqliteStorage",
    # Progress
    "ProgressStore",
    "load_progress",
    "open_progress_store",
    "parse_progress",
    "scoped_storage_key",
    # Navigator
    "ALL_DIFFICULTIES",
    "Breadcrumb",
    "NavItem",
    "QuestionBankNavigator",
    "SAVED_PATH",
    "TOPICS_PATH",
    "filter_questions",
    "topic_path",
    # Validation
    "CatalogIssue",
    "find_catalog_issues",
    "has_errors",
]
