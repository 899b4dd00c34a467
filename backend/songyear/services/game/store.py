import random
import string
import threading
from typing import Dict

from songyear.errors import SessionNotFound
from songyear.models import GuessSession
from .rounds import new_session


def generate_session_code(existing, length=4):
    """Generate a short session code not already in ``existing``."""
    while True:
        code = ''.join(random.choices(string.ascii_uppercase + string.digits, k=length))
        if code not in existing:
            return code


class SessionStore:
    """Process-memory registry of sessions. Lost on restart."""

    def __init__(self):
        self._sessions: Dict[str, GuessSession] = {}
        self._lock = threading.Lock()

    def create(self, search_term: str) -> GuessSession:
        with self._lock:
            code = generate_session_code(self._sessions)
            session = new_session(code, search_term)
            self._sessions[code] = session
        return session

    def get(self, code: str) -> GuessSession:
        session = self._sessions.get(code.upper())
        if session is None:
            raise SessionNotFound(f'Session {code} not found')
        return session

    def update(self, code: str, transition) -> GuessSession:
        """Apply ``transition`` to the latest snapshot and store the result.

        If ``transition`` raises, the stored snapshot is left as it was.
        """
        with self._lock:
            current = self._sessions.get(code.upper())
            if current is None:
                raise SessionNotFound(f'Session {code} not found')
            updated = transition(current)
            self._sessions[current.code] = updated
        return updated

    def discard(self, code: str) -> None:
        with self._lock:
            self._sessions.pop(code.upper(), None)
