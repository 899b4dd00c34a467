import logging
from dataclasses import replace

from songyear.errors import EmptyPoolError, UpstreamUnavailable
from songyear.models import GuessSession, RoundStage
from . import rounds
from .store import SessionStore

log = logging.getLogger(__name__)


class RoundEngine:
    """Drives sessions through their rounds.

    The catalog fetch is the only blocking step and runs outside the store
    lock. Results are applied to whatever the session looks like when the
    fetch returns; the generation counter drops results that a newer round
    request has made stale.
    """

    def __init__(self, store: SessionStore, catalog, query, rng=None):
        self.store = store
        self.catalog = catalog
        self.query = query
        self.rng = rng

    def create_session(self, term=None) -> GuessSession:
        session = self.store.create(term or self.query.term)
        log.info(f"[session-create] session={session.code} term={session.search_term!r}")
        return session

    def get_session(self, code: str) -> GuessSession:
        return self.store.get(code)

    def end_session(self, code: str) -> None:
        self.store.get(code)
        self.store.discard(code)
        log.info(f"[session-end] session={code.upper()}")

    def next_round(self, code: str) -> GuessSession:
        """Start the next round, fetching a pool first if the session has none.

        Raises UpstreamUnavailable or EmptyPoolError after returning the
        session to IDLE with an empty pool.
        """
        session = self.store.update(code, lambda s: rounds.start_round(s, self.rng))
        if session.stage != RoundStage.LOADING:
            log.info(f"[round-start] session={session.code} pool={len(session.track_pool)} reused")
            return session

        generation = session.generation
        log.info(f"[pool-fetch] session={session.code} generation={generation} term={session.search_term!r}")
        try:
            tracks = self.catalog.search(replace(self.query, term=session.search_term))
            session = self.store.update(
                code, lambda s: rounds.install_pool(s, generation, tracks, self.rng)
            )
        except (UpstreamUnavailable, EmptyPoolError) as exc:
            log.warning(f"[pool-fail] session={session.code} generation={generation} error={exc}")
            self.store.update(code, lambda s: rounds.fail_loading(s, generation, str(exc)))
            raise
        if session.generation == generation and session.stage == RoundStage.AWAITING_GUESS:
            log.info(f"[round-start] session={session.code} pool={len(session.track_pool)} fetched")
        return session

    def guess(self, code: str, guessed_year: int) -> GuessSession:
        session = self.store.update(code, lambda s: rounds.submit_guess(s, guessed_year))
        log.info(
            f"[guess] session={session.code} guessed={guessed_year} correct={session.current_year.year} "
            f"score={session.last_round_score} total={session.cumulative_score}"
        )
        return session
