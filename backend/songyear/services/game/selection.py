import random
from typing import Sequence

from songyear.errors import EmptyPoolError
from songyear.models import Track


def pick_track(pool: Sequence[Track], rng=None) -> Track:
    """Pick one track uniformly at random.

    ``rng`` may be a seeded ``random.Random`` for reproducible picks.
    """
    if not pool:
        raise EmptyPoolError('No tracks available to pick from')
    rng = rng or random
    return pool[rng.randrange(len(pool))]
