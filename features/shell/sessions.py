"""
In-memory session store — one Shell per UI session, nothing persisted.

Sessions are created on first use. The store holds at most
``config.MAX_SESSIONS`` shells; the least recently used one is disposed
when a new session would exceed the cap.
"""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from typing import Callable

import config
from features.shell.shell import Shell

log = logging.getLogger(__name__)


class SessionStore:
    def __init__(self, factory: Callable[[], Shell] = Shell, max_sessions: int | None = None):
        self._factory = factory
        self.max_sessions = config.MAX_SESSIONS if max_sessions is None else max_sessions
        self._shells: OrderedDict[str, Shell] = OrderedDict()
        self._lock = threading.Lock()

    def get(self, session_id: str) -> Shell:
        """Return the session's shell, creating it on first use."""
        evicted: list[tuple[str, Shell]] = []
        with self._lock:
            shell = self._shells.get(session_id)
            if shell is not None:
                self._shells.move_to_end(session_id)
                return shell
            shell = self._factory()
            self._shells[session_id] = shell
            log.info("Created session %s", session_id)
            while len(self._shells) > self.max_sessions:
                evicted.append(self._shells.popitem(last=False))

        for old_id, old_shell in evicted:
            old_shell.dispose()
            log.info("Evicted idle session %s", old_id)
        return shell

    def drop(self, session_id: str) -> bool:
        with self._lock:
            shell = self._shells.pop(session_id, None)
        if shell is None:
            return False
        shell.dispose()
        log.info("Dropped session %s", session_id)
        return True

    def __len__(self) -> int:
        return len(self._shells)
