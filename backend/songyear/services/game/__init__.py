"""Game domain services: year extraction, selection, scoring, rounds.

This package contains pure(ish) domain logic that should be imported by
HTTP routes and socket handlers, keeping transport concerns separated
from core game mechanics.
"""

from .engine import RoundEngine
from .guesses import parse_year_guess
from .scoring import score_guess
from .selection import pick_track
from .store import SessionStore
from .years import extract_year

__all__ = [
    'RoundEngine',
    'SessionStore',
    'extract_year',
    'parse_year_guess',
    'pick_track',
    'score_guess',
]
