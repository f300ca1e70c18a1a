"""
In-memory table of alignment sessions.

Each uploading client gets its own ``MSA`` instance, addressed by a session
id. The ``MSA`` objects do no locking themselves, so every access goes
through ``SessionStore.use``, which holds that session's lock. The table
lock only guards lookups and changes to the table itself.
"""

import logging
import threading
from collections import OrderedDict
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator
from uuid import uuid4

from msavalidator import MSA

logger = logging.getLogger(__name__)


class UnknownSessionError(KeyError):
    """Raised when a session id is not (or no longer) in the store."""

    def __init__(self, session_id: str):
        self.session_id = session_id
        super().__init__(session_id)

    def __str__(self) -> str:
        return f"Unknown session: {self.session_id}"


@dataclass
class _Session:
    msa: MSA = field(default_factory=MSA)
    lock: threading.Lock = field(default_factory=threading.Lock)


class SessionStore:
    """Bounded mapping of session id to ``MSA``, evicting the oldest first."""

    def __init__(self, max_sessions: int = 256):
        if max_sessions < 1:
            raise ValueError("max_sessions must be at least 1")
        self.max_sessions = max_sessions
        self._sessions: "OrderedDict[str, _Session]" = OrderedDict()
        self._lock = threading.Lock()

    def create(self) -> str:
        session_id = uuid4().hex
        with self._lock:
            while len(self._sessions) >= self.max_sessions:
                evicted, _ = self._sessions.popitem(last=False)
                logger.info("Evicted session %s", evicted)
            self._sessions[session_id] = _Session()
        logger.debug("Created session %s", session_id)
        return session_id

    @contextmanager
    def use(self, session_id: str) -> Iterator[MSA]:
        """Yield the session's ``MSA`` while holding only that session's lock."""
        with self._lock:
            session = self._sessions.get(session_id)
        if session is None:
            raise UnknownSessionError(session_id)
        with session.lock:
            yield session.msa

    def delete(self, session_id: str) -> None:
        with self._lock:
            if self._sessions.pop(session_id, None) is None:
                raise UnknownSessionError(session_id)
        logger.debug("Deleted session %s", session_id)

    def __contains__(self, session_id: object) -> bool:
        with self._lock:
            return session_id in self._sessions

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
