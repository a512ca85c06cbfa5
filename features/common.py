"""
Shared controller behavior for the four accessibility features.

Every controller owns transient UI state (inputs, result, loading flag,
error banner) and runs at most one remote call at a time.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Generic, TypeVar

from pydantic import BaseModel

from services.errors import AnalysisError

log = logging.getLogger(__name__)

R = TypeVar("R", bound=BaseModel)

UNKNOWN_ERROR = "An unknown error occurred."


class FeatureController(Generic[R]):
    """Base class: result/loading/error state and the guarded submit runner."""

    name: str = ""

    def __init__(self) -> None:
        self.result: R | None = None
        self.is_loading = False
        self.error: str | None = None
        self._submit_lock = threading.Lock()

    @property
    def can_submit(self) -> bool:
        return not self.is_loading

    def clear_error(self) -> None:
        self.error = None

    def submit(self) -> R | None:
        raise NotImplementedError

    def handle_voice_command(self, transcript: str) -> None:
        """React to a transcript forwarded by the shell."""
        raise NotImplementedError

    def _run(self, call: Callable[[], R]) -> R | None:
        """Run one remote call, storing its result or a user-facing error.

        The loading flag is set for exactly the duration of ``call`` and is
        cleared on every exit path.
        """
        with self._submit_lock:
            if self.is_loading:
                log.warning("[%s] Submit ignored: a request is already in flight", self.name)
                return None
            self.is_loading = True

        self.error = None
        self.result = None
        try:
            self.result = call()
            log.info("[%s] Analysis complete", self.name)
        except AnalysisError as e:
            self.error = str(e)
        except Exception as e:
            log.error("[%s] Analysis failed: %s", self.name, e, exc_info=True)
            self.error = UNKNOWN_ERROR
        finally:
            self.is_loading = False
        return self.result

    def state(self) -> dict[str, Any]:
        """Snapshot for rendering."""
        return {
            "result": self.result.model_dump(by_alias=True) if self.result else None,
            "isLoading": self.is_loading,
            "error": self.error,
            "canSubmit": self.can_submit,
        }
