"""Error taxonomy shared by the game services and the HTTP layer.

Everything here is recoverable at the session level. Routes translate these
into JSON ``{'error': ...}`` payloads; nothing is process-fatal.
"""


class SongYearError(Exception):
    """Base class for game errors."""


class UpstreamUnavailable(SongYearError):
    """The catalog fetch failed or returned a non-success status."""

    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.status = status


class EmptyPoolError(SongYearError):
    """The catalog answered, but with zero usable tracks."""


class InvalidGuessInput(SongYearError):
    """The guess does not look like a 4-digit year."""


class GuessRejected(SongYearError):
    """A guess arrived when the round is not accepting one."""


class SessionNotFound(SongYearError):
    pass
