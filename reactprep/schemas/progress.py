"""
Progress tracking schemas for ReactPrep.

Defines Pydantic models for the persisted progress blob:
- Completed question IDs
- Saved (bookmarked) question IDs
- Hydration status of a progress store
"""

from enum import Enum

from pydantic import BaseModel, Field, field_validator


class HydrationStatus(str, Enum):
    UNINITIALIZED = "uninitialized"  # persisted state not read yet
    READY = "ready"


def _dedupe(ids: list[str]) -> list[str]:
    """Drop repeated IDs, keeping first-occurrence order."""
    return list(dict.fromkeys(ids))


class ProgressState(BaseModel):
    """
    Persisted as {"completed": [...], "saved": [...]}.

    Both fields have set semantics; lists keep the order in which IDs were
    first added.
    """
    completed: list[str] = Field(default_factory=list)
    saved: list[str] = Field(default_factory=list)

    @field_validator('completed', 'saved')
    @classmethod
    def unique_ids(cls, v):
        return _dedupe(v)
