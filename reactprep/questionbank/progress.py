"""
ProgressStore - Track completed and saved questions in local storage.

The whole state is one JSON blob under a single storage key:
    {"completed": ["h1", ...], "saved": ["p3", ...]}

A store starts UNINITIALIZED and renders as empty progress until load()
reads the persisted blob. This keeps the first render identical to a
render that has no access to storage at all; the second render after
load() shows real progress.

Only one writer is expected per storage. A second writer on the same key
silently overwrites the first (last write wins, no merge). The server-side
SQLite database is shared by every session, so sessions are told apart only
by a per-user key (see scoped_storage_key).
"""

import json
import logging
from typing import Optional

from pydantic import ValidationError

from reactprep.config import PROGRESS_STORAGE_KEY
from reactprep.errors import ProgressParseError
from reactprep.schemas import HydrationStatus, ProgressState

from .storage import KeyValueStorage, SqliteStorage

logger = logging.getLogger(__name__)


def parse_progress(raw: str) -> ProgressState:
    """
    Parse a persisted progress blob.

    Raises:
        ProgressParseError: If the blob is not JSON or has the wrong shape
    """
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, TypeError) as e:
        raise ProgressParseError(f"Progress blob is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ProgressParseError(f"Progress blob must be an object, got {type(data).__name__}")
    try:
        return ProgressState.model_validate(data)
    except ValidationError as e:
        raise ProgressParseError(f"Progress blob has wrong shape: {e}") from e


def scoped_storage_key(user_id: Optional[str] = None, key: str = PROGRESS_STORAGE_KEY) -> str:
    """
    Storage key for one user's progress.

    Without a user identity every session shares the base key, which suits a
    single local user only.
    """
    if not user_id:
        return key
    return f"{key}:{user_id}"


def load_progress(storage: KeyValueStorage, key: str = PROGRESS_STORAGE_KEY) -> ProgressState:
    """Read progress from storage. Missing or corrupt blobs yield empty progress."""
    raw = storage.get_item(key)
    if raw is None:
        return ProgressState()
    try:
        return parse_progress(raw)
    except ProgressParseError as e:
        logger.warning(f"Discarding unreadable progress under {key!r}: {e}")
        return ProgressState()


class ProgressStore:
    """
    Completed/saved flags per question, persisted on every toggle.

    Before load() every query answers False and toggles are ignored.
    """

    def __init__(self, storage: KeyValueStorage, key: str = PROGRESS_STORAGE_KEY):
        """
        Initialize progress store.

        Args:
            storage: Backing key/value storage
            key: Storage key holding the JSON blob
        """
        self.storage = storage
        self.key = key
        self.status = HydrationStatus.UNINITIALIZED
        self._state = ProgressState()

    @property
    def is_ready(self) -> bool:
        return self.status == HydrationStatus.READY

    def load(self) -> ProgressState:
        """Read persisted progress and mark the store ready. Safe to call again to re-read."""
        self._state = load_progress(self.storage, self.key)
        self.status = HydrationStatus.READY
        return self.state

    @property
    def state(self) -> ProgressState:
        """Current progress as seen by renderers (empty until loaded)."""
        if not self.is_ready:
            return ProgressState()
        return self._state.model_copy(deep=True)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @property
    def completed_ids(self) -> list[str]:
        return list(self._state.completed) if self.is_ready else []

    @property
    def saved_ids(self) -> list[str]:
        return list(self._state.saved) if self.is_ready else []

    def is_completed(self, question_id: str) -> bool:
        return self.is_ready and question_id in self._state.completed

    def is_saved(self, question_id: str) -> bool:
        return self.is_ready and question_id in self._state.saved

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def toggle_completed(self, question_id: str) -> bool:
        """Flip completed membership. Returns the new membership."""
        return self._toggle("completed", question_id)

    def toggle_saved(self, question_id: str) -> bool:
        """Flip saved membership. Returns the new membership."""
        return self._toggle("saved", question_id)

    def reset(self):
        """Clear all progress."""
        if not self.is_ready:
            logger.debug("Ignoring reset before progress is loaded")
            return
        self._update(ProgressState())

    def _toggle(self, field: str, question_id: str) -> bool:
        if not self.is_ready:
            logger.debug(f"Ignoring toggle of {field} for {question_id!r} before progress is loaded")
            return False

        ids: list[str] = getattr(self._state, field)
        if question_id in ids:
            updated = [i for i in ids if i != question_id]
        else:
            updated = [*ids, question_id]
        self._update(self._state.model_copy(update={field: updated}))
        return question_id in updated

    def _update(self, new_state: ProgressState):
        """Replace state and persist it with a single write."""
        self._state = new_state
        self.storage.set_item(self.key, new_state.model_dump_json())

    def __repr__(self) -> str:
        return (
            f"ProgressStore(key={self.key!r}, status={self.status.value}, "
            f"completed={len(self.completed_ids)}, saved={len(self.saved_ids)})"
        )


def open_progress_store(
    storage: Optional[KeyValueStorage] = None,
    user_id: Optional[str] = None,
    key: str = PROGRESS_STORAGE_KEY,
) -> ProgressStore:
    """
    Create an unloaded store over SQLite storage at the configured path.

    Args:
        storage: Backing storage (default: SqliteStorage at PROGRESS_DB_PATH)
        user_id: Signed-in user, when known; progress is kept per user
        key: Base storage key
    """
    if storage is None:
        storage = SqliteStorage()
    return ProgressStore(storage, scoped_storage_key(user_id, key))
