"""Domain helpers for greeting composition and the default greeting holder."""
from __future__ import annotations

import threading

DEFAULT_WHO = "World"


def format_message(greeting: str, who: str) -> str:
    """Return ``"<greeting> <who>!"``."""
    return f"{greeting} {who}!"


class GreetingProvider:
    """Process-wide default greeting, readable and writable by any request."""

    def __init__(self, message: str) -> None:
        self._message = message
        self._lock = threading.Lock()

    @property
    def message(self) -> str:
        with self._lock:
            return self._message

    def set_message(self, message: str) -> None:
        # last write wins
        with self._lock:
            self._message = message
