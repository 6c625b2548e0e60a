"""
In-memory store of per-browser page controllers.

Each browser gets a session id cookie; the store keeps that session's
`ContractViewController` so the loaded contract survives between the lookup
post and the signing post. Nothing is written to disk and entries expire
after `ttl_seconds` of inactivity.
"""

from __future__ import annotations

import logging
import time
import uuid
from typing import Callable, Dict, Optional, Tuple

from src.portal.controller import ContractViewController

logger = logging.getLogger(__name__)


class ViewSessionStore:
    def __init__(
        self,
        factory: Callable[[], ContractViewController],
        ttl_seconds: int = 1800,
        max_sessions: int = 10_000,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._factory = factory
        self._ttl = ttl_seconds
        self._max_sessions = max_sessions
        self._clock = clock
        # session_id -> (last_seen, controller)
        self._sessions: Dict[str, Tuple[float, ContractViewController]] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def get_or_create(self, session_id: Optional[str]) -> Tuple[str, ContractViewController]:
        """Return the controller for `session_id`, creating a session if needed."""
        now = self._clock()
        self._expire(now)

        entry = self._sessions.get(session_id) if session_id else None
        if entry is None:
            session_id = str(uuid.uuid4())
            controller = self._factory()
            if len(self._sessions) >= self._max_sessions:
                oldest = min(self._sessions, key=lambda k: self._sessions[k][0])
                self._sessions.pop(oldest, None)
            logger.debug("Created portal session %s", session_id)
        else:
            controller = entry[1]

        self._sessions[session_id] = (now, controller)
        return session_id, controller

    def delete(self, session_id: str) -> None:
        self._sessions.pop(session_id, None)

    def _expire(self, now: float) -> None:
        stale = [sid for sid, (seen, _) in self._sessions.items() if now - seen > self._ttl]
        for sid in stale:
            self._sessions.pop(sid, None)
        if stale:
            logger.debug("Expired %d portal sessions", len(stale))
