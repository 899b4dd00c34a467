from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple


@dataclass(frozen=True)
class Track:
    title: str
    artist: str
    album: str
    cover: str
    preview: str
    release_date: str

    @classmethod
    def from_itunes(cls, item: dict) -> 'Track':
        """Project one iTunes search result onto the fields the game uses."""
        return cls(
            title=item.get('trackName') or '',
            artist=item.get('artistName') or '',
            album=item.get('collectionName') or '',
            cover=item.get('artworkUrl100') or '',
            preview=item.get('previewUrl') or '',
            release_date=item.get('releaseDate') or '',
        )

    def to_dict(self):
        return {
            'title': self.title,
            'artist': self.artist,
            'album': self.album,
            'cover': self.cover,
            'preview': self.preview,
            'releaseDate': self.release_date,
        }


@dataclass(frozen=True)
class YearResult:
    year: int
    was_fallback: bool = False


class RoundStage(str, Enum):
    IDLE = 'idle'
    LOADING = 'loading'
    AWAITING_GUESS = 'awaiting_guess'
    REVEALED = 'revealed'


@dataclass(frozen=True)
class GuessSession:
    """Immutable snapshot of one player's game.

    Transitions live in ``songyear.services.game.rounds`` and always return a
    new snapshot. ``revealed`` is true exactly when ``last_round_score`` is set,
    which is exactly when ``stage`` is ``REVEALED``.
    """
    code: str
    search_term: str
    track_pool: Tuple[Track, ...] = ()
    current_track: Optional[Track] = None
    current_year: Optional[YearResult] = None
    guessed_year: Optional[int] = None
    cumulative_score: int = 0
    last_round_score: Optional[int] = None
    revealed: bool = False
    stage: RoundStage = RoundStage.IDLE
    # Bumped every time a pool fetch starts; late fetches for an older
    # generation are discarded.
    generation: int = 0
    rounds_played: int = 0
    last_error: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        track = None
        if self.current_track is not None:
            if self.revealed:
                track = self.current_track.to_dict()
            else:
                # Face-down card: the cover often gives the answer away
                track = {'preview': self.current_track.preview}
        correct_year = None
        year_was_fallback = None
        if self.revealed and self.current_year is not None:
            correct_year = self.current_year.year
            year_was_fallback = self.current_year.was_fallback

        return {
            'session_code': self.code,
            'search_term': self.search_term,
            'stage': self.stage.value,
            'revealed': self.revealed,
            'current_track': track,
            'correct_year': correct_year,
            'year_was_fallback': year_was_fallback,
            'guessed_year': self.guessed_year,
            'last_round_score': self.last_round_score,
            'cumulative_score': self.cumulative_score,
            'rounds_played': self.rounds_played,
            'pool_size': len(self.track_pool),
            'last_error': self.last_error,
        }
