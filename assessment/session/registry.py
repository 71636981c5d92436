from __future__ import annotations

import time
from dataclasses import dataclass, field
from threading import Lock

from assessment.interview.session import InterviewSession


@dataclass
class RegistryEntry:
    session: InterviewSession
    created_at: float = field(default_factory=time.time)
    updated_at: float = field(default_factory=time.time)
    finished: bool = False

    def idle_for(self, now_ts: float) -> float:
        return now_ts - self.updated_at


class SessionRegistry:
    """
    In-memory map of interview sessions served over HTTP.

    There is no disconnect event over plain HTTP, so any session whose last
    request is older than the TTL is evicted, finished or not. A session
    with an answer still being evaluated is never evicted.
    """

    def __init__(self):
        self._lock = Lock()
        self._entries: dict[str, RegistryEntry] = {}

    def register(self, session: InterviewSession) -> None:
        with self._lock:
            self._entries[session.session_id] = RegistryEntry(session=session)

    def get(self, session_id: str) -> RegistryEntry | None:
        with self._lock:
            return self._entries.get(session_id)

    def get_session(self, session_id: str) -> InterviewSession | None:
        entry = self.get(session_id)
        return entry.session if entry else None

    def touch(self, session_id: str) -> None:
        with self._lock:
            entry = self._entries.get(session_id)
            if entry is not None:
                entry.updated_at = time.time()

    def mark_finished(self, session_id: str) -> None:
        with self._lock:
            entry = self._entries.get(session_id)
            if entry is not None:
                entry.finished = True
                entry.updated_at = time.time()

    def cleanup_stale(self, ttl_sec: float, now_ts: float | None = None) -> int:
        now_value = time.time() if now_ts is None else float(now_ts)
        ttl = max(30.0, float(ttl_sec or 900.0))
        with self._lock:
            stale_ids = [
                session_id
                for session_id, entry in self._entries.items()
                if entry.idle_for(now_value) >= ttl and not entry.session.is_evaluating
            ]
            for session_id in stale_ids:
                del self._entries[session_id]
        return len(stale_ids)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


session_registry = SessionRegistry()
