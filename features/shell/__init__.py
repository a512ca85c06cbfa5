"""
Shell feature — feature routing, voice dispatch and per-session state.

Public API:
    from features.shell import Shell, SessionStore
"""

from features.shell.sessions import SessionStore
from features.shell.shell import Shell

__all__ = ["SessionStore", "Shell"]
