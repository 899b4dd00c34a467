import random

import pytest

from conftest import make_track
from songyear.errors import EmptyPoolError
from songyear.services.game.selection import pick_track


def test_pick_returns_member_of_pool():
    pool = [make_track(f'Song{i}', 1980 + i) for i in range(7)]
    rng = random.Random(7)
    for _ in range(50):
        assert pick_track(pool, rng) in pool


def test_single_track_pool_always_returns_it():
    track = make_track('Only', 2000)
    assert pick_track([track]) is track


def test_seeded_picks_are_reproducible():
    pool = [make_track(f'Song{i}', 1980 + i) for i in range(10)]
    first = [pick_track(pool, random.Random(42)) for _ in range(3)]
    second = [pick_track(pool, random.Random(42)) for _ in range(3)]
    assert first == second


def test_pick_covers_whole_pool():
    pool = [make_track(f'Song{i}', 1980 + i) for i in range(4)]
    rng = random.Random(0)
    seen = {pick_track(pool, rng).title for _ in range(200)}
    assert seen == {t.title for t in pool}


@pytest.mark.parametrize('pool', [[], ()])
def test_empty_pool_raises(pool):
    with pytest.raises(EmptyPoolError):
        pick_track(pool)
