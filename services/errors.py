"""
Errors raised by the remote analysis services.
"""

from __future__ import annotations


class AnalysisError(Exception):
    """A remote analysis call failed; the message is safe to show to the user."""
