"""Typed access to the two stored records.

Hides the storage key names and the serialization of progress and session
identity from the conversation layer.
"""

from uuid import uuid4

from ..progress import Progress
from .base import KeyValueStore

PROGRESS_KEY = "fc-progress"
SESSION_KEY = "fc-session-id"


class ProgressRepository:
    """Loads and saves progress and the session identity through a store."""

    def __init__(self, store: KeyValueStore):
        self._store = store

    @property
    def store(self) -> KeyValueStore:
        return self._store

    def load_progress(self) -> Progress:
        """Read progress fresh from the store, defaulting malformed fields."""
        return Progress.from_json(self._store.get(PROGRESS_KEY))

    def save_progress(self, progress: Progress) -> None:
        self._store.set(PROGRESS_KEY, progress.to_json())

    def load_session_id(self) -> str:
        """Return the stored session id, generating and saving one if absent."""
        session_id = self._store.get(SESSION_KEY)
        if not session_id:
            session_id = str(uuid4())
            self._store.set(SESSION_KEY, session_id)
        return session_id
