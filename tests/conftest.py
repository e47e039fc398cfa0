import random
from datetime import datetime, timedelta, timezone
from itertools import count

import pytest

from swissdraw.models import Competitor, MatchRecord

BASE_TIME = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


class IdentityRandom(random.Random):
    """Random source whose shuffle leaves the order untouched."""

    def shuffle(self, x, *args, **kwargs):
        return None


@pytest.fixture
def identity_rng():
    return IdentityRandom()


@pytest.fixture
def make_match():
    """Build match records with increasing timestamps."""
    ids = count(1)

    def _make(winner, loser, minutes=None):
        number = next(ids)
        offset = number if minutes is None else minutes
        return MatchRecord(
            id=f"m{number}",
            player_a=winner,
            player_b=loser,
            winner=winner,
            loser=loser,
            timestamp=BASE_TIME + timedelta(minutes=offset),
        )

    return _make


@pytest.fixture
def scenario_pool():
    return [
        Competitor(id="1", name="Ada", score=0),
        Competitor(id="2", name="Bo", score=1),
        Competitor(id="3", name="Cy", score=5),
    ]
