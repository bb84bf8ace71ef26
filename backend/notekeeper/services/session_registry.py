"""
NoteKeeper Backend — Session Registry
=======================================

What:  Process-lifetime map from session token to the email used at login.
How:   A plain dict guarded by a `threading.Lock`. Tokens come from
       `security.generate_session_token()`.
Who:   AuthService writes on login and reads on every authenticated request.

Lifecycle:
    - Entries are created by `create_session()` and never removed: there is
      no logout and no expiry. A restart forgets every session.
    - The registry maps to the email, not the user id; the owning user is
      looked up again on each request, so a deleted user's token stops
      working even though it still resolves here.

Thread Safety:
    Route handlers run on the event loop, but anything executed in the
    threadpool (sync dependencies, tests driving threads directly) may touch
    the registry concurrently, so every read and write takes the lock.
"""

import logging
import threading
from typing import Dict

from notekeeper.exceptions import UnauthorizedError
from notekeeper.security import generate_session_token

logger = logging.getLogger(__name__)


def _mask(token: str) -> str:
    """First few characters of a token, for logs."""
    return f"{token[:6]}…" if token else "<empty>"


class SessionRegistry:
    """In-memory token → email registry."""

    def __init__(self) -> None:
        self._sessions: Dict[str, str] = {}
        self._lock = threading.Lock()

    def create_session(self, email: str) -> str:
        """Issue a new token for `email` and remember it."""
        token = generate_session_token()
        with self._lock:
            self._sessions[token] = email
        logger.info("Session created: %s", _mask(token))
        return token

    def resolve_session(self, token: str) -> str:
        """
        Return the email a token was issued for.

        Raises:
            UnauthorizedError: token was never issued by this process
        """
        with self._lock:
            email = self._sessions.get(token)
        if email is None:
            logger.debug("Invalid session token: %s", _mask(token))
            raise UnauthorizedError(reason="invalid_session")
        logger.debug("Session %s resolved", _mask(token))
        return email

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)


# ── Singleton Instance ────────────────────────────────────────────────────
session_registry = SessionRegistry()


def get_session_registry() -> SessionRegistry:
    """FastAPI dependency returning the process-wide registry."""
    return session_registry
