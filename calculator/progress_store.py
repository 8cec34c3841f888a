"""
Wizard progress cache.

The calculator wizard saves partially completed answers so a visitor can
resume later. Storage sits behind the ProgressStore interface; the default
implementation keeps entries in process memory only and forgets anything
older than the configured maximum age.
"""

import copy
import logging
import os
import threading
from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, Optional

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

PROGRESS_MAX_AGE_DAYS = int(os.getenv("PROGRESS_MAX_AGE_DAYS", "7"))


class SavedProgress(BaseModel):
    data: Dict[str, Any] = Field(default_factory=dict)
    step: int = Field(ge=0, le=3)
    saved_at: datetime
    age: timedelta = timedelta(0)


class ProgressStore(ABC):
    """Storage port for in-progress wizard answers."""

    @abstractmethod
    def put(self, session_id: str, data: Dict[str, Any], step: int) -> SavedProgress:
        ...

    @abstractmethod
    def get(self, session_id: str) -> Optional[SavedProgress]:
        ...

    @abstractmethod
    def clear(self, session_id: str) -> bool:
        ...


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryProgressStore(ProgressStore):
    def __init__(
        self,
        max_age: timedelta = timedelta(days=PROGRESS_MAX_AGE_DAYS),
        clock: Callable[[], datetime] = _utcnow,
    ):
        self.max_age = max_age
        self._clock = clock
        self._entries: Dict[str, SavedProgress] = {}
        self._lock = threading.Lock()

    def put(self, session_id: str, data: Dict[str, Any], step: int) -> SavedProgress:
        entry = SavedProgress(data=copy.deepcopy(data), step=step, saved_at=self._clock())
        with self._lock:
            self._evict_expired(entry.saved_at)
            self._entries[session_id] = entry
        return entry

    def get(self, session_id: str) -> Optional[SavedProgress]:
        with self._lock:
            entry = self._entries.get(session_id)
            if entry is None:
                return None
            age = self._clock() - entry.saved_at
            if age >= self.max_age:
                logger.info(f"Discarding expired wizard progress for session {session_id}")
                del self._entries[session_id]
                return None
        return entry.model_copy(update={"age": age}, deep=True)

    def clear(self, session_id: str) -> bool:
        with self._lock:
            return self._entries.pop(session_id, None) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _evict_expired(self, now: datetime) -> None:
        # Caller holds the lock
        expired = [sid for sid, e in self._entries.items() if now - e.saved_at >= self.max_age]
        for sid in expired:
            del self._entries[sid]
        if expired:
            logger.info(f"Evicted {len(expired)} expired wizard progress entries")
