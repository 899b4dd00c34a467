"""Round lifecycle as pure transitions over ``GuessSession``.

idle -> loading -> awaiting_guess -> revealed -> (next round) loading|awaiting_guess

Each function takes a snapshot and returns a new one; nothing here touches the
network or the session store, so the state machine is testable on its own.
"""

import logging
from dataclasses import replace
from typing import Sequence

from songyear.errors import EmptyPoolError, GuessRejected
from songyear.models import GuessSession, RoundStage, Track
from .scoring import score_guess
from .selection import pick_track
from .years import extract_year

log = logging.getLogger(__name__)


def new_session(code: str, search_term: str) -> GuessSession:
    return GuessSession(code=code, search_term=search_term)


def _clear_round(session: GuessSession) -> GuessSession:
    return replace(
        session,
        current_track=None,
        current_year=None,
        guessed_year=None,
        last_round_score=None,
        revealed=False,
        last_error=None,
    )


def _deal(session: GuessSession, rng=None) -> GuessSession:
    track = pick_track(session.track_pool, rng)
    return replace(
        session,
        current_track=track,
        current_year=extract_year(track.release_date),
        stage=RoundStage.AWAITING_GUESS,
    )


def start_round(session: GuessSession, rng=None) -> GuessSession:
    """Begin a new round.

    Reuses the existing pool when there is one; played tracks stay in it, so
    repeats are possible. With an empty pool the session moves to LOADING and
    the caller is expected to fetch and call ``install_pool`` with the new
    generation.
    """
    session = _clear_round(session)
    if session.track_pool:
        return _deal(session, rng)
    return replace(session, stage=RoundStage.LOADING, generation=session.generation + 1)


def _is_stale(session: GuessSession, generation: int) -> bool:
    return session.stage != RoundStage.LOADING or session.generation != generation


def install_pool(session: GuessSession, generation: int, tracks: Sequence[Track], rng=None) -> GuessSession:
    """Install a fetched pool and deal the round's track.

    A result for an older generation is discarded and ``session`` is returned
    unchanged. An empty result raises EmptyPoolError without installing
    anything.
    """
    if _is_stale(session, generation):
        log.info(
            f"[pool-stale] session={session.code} fetched_generation={generation} "
            f"current_generation={session.generation} stage={session.stage.value}"
        )
        return session
    if not tracks:
        raise EmptyPoolError(f"No tracks found for '{session.search_term}'")
    return _deal(replace(session, track_pool=tuple(tracks)), rng)


def fail_loading(session: GuessSession, generation: int, message: str) -> GuessSession:
    """Return a failed fetch to IDLE with the pool left empty."""
    if _is_stale(session, generation):
        return session
    return replace(
        _clear_round(session),
        track_pool=(),
        stage=RoundStage.IDLE,
        last_error=message,
    )


def submit_guess(session: GuessSession, guessed_year: int) -> GuessSession:
    """Score the round's single guess and reveal the track."""
    if session.stage == RoundStage.REVEALED:
        raise GuessRejected('Already guessed this round')
    if session.stage != RoundStage.AWAITING_GUESS or session.current_track is None:
        raise GuessRejected('No track to guess yet')

    score = score_guess(session.current_year.year, guessed_year)
    return replace(
        session,
        guessed_year=guessed_year,
        last_round_score=score,
        cumulative_score=session.cumulative_score + score,
        revealed=True,
        stage=RoundStage.REVEALED,
        rounds_played=session.rounds_played + 1,
    )
