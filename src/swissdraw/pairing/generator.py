"""Round generation: greedy randomized matching over a competitor pool."""

# SwissDraw
# Copyright (C) 2025  SwissDraw developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import random
from typing import List, Optional, Sequence, Set

from swissdraw.constants import DEFAULT_MARGIN
from swissdraw.models.competitor import Competitor
from swissdraw.models.pairing import Pairing, PairingDetails, PairingStats
from swissdraw.pairing.eligibility import can_play, head_to_head
from swissdraw.pairing.opponents import pair_counts, ranked_opponents
from swissdraw.type_hints import History, Pool
from swissdraw.utils import setup_logger
from swissdraw.utils.validation import validate_margin_strict

logger = setup_logger(__name__)


def shuffle_pool(pool: Pool, rng: Optional[random.Random] = None) -> List[Competitor]:
    """Return a uniformly random permutation of the pool.

    ``random.Random.shuffle`` is a Fisher-Yates shuffle, so every ordering is
    equally likely. Pass a seeded ``rng`` for reproducible rounds.
    """
    shuffled = list(pool)
    (rng if rng is not None else random.Random()).shuffle(shuffled)
    return shuffled


def _greedy_pairings(
    visit_order: Sequence[Competitor],
    pool: Pool,
    history: History,
    margin: int,
) -> List[Pairing]:
    """Pair competitors greedily in ``visit_order``.

    Each unpaired competitor takes its best still-unpaired opponent. The
    choice is re-checked with :func:`can_play` before it is accepted.
    """
    counts = pair_counts(history)
    used: Set[str] = set()
    pairings: List[Pairing] = []

    for competitor in visit_order:
        if competitor.id in used:
            continue

        available = [c for c in pool if c.id not in used]
        opponents = ranked_opponents(competitor, available, history, margin, counts)
        if not opponents:
            logger.debug(f"No available opponent for {competitor.name}")
            continue

        opponent = opponents[0]
        if not can_play(competitor.id, opponent.id, history):
            logger.debug(
                f"Rejected {competitor.name} vs {opponent.name} on re-validation"
            )
            continue

        pairings.append(Pairing.between(competitor, opponent))
        used.add(competitor.id)
        used.add(opponent.id)

    logger.debug(
        f"Paired {len(used)} of {len(pool)} competitors into {len(pairings)} matches"
    )
    return pairings


def generate_round(
    pool: Pool,
    history: History,
    margin: int = DEFAULT_MARGIN,
    rng: Optional[random.Random] = None,
) -> List[Pairing]:
    """Generate one round of disjoint pairings from a shuffled pool.

    The pool is shuffled and every competitor, in that order, takes its best
    still-unpaired eligible opponent. The result is not a maximum matching,
    but no competitor appears twice and every competitor is equally likely
    to be visited early across repeated calls.

    Args:
        pool: Competitors available this round
        history: All recorded matches
        margin: Maximum score difference allowed in a pairing
        rng: Random source for the shuffle; a fresh one if omitted

    Returns:
        Pairings in the order they were made

    Raises:
        InvalidMarginException: If margin is negative
    """
    validate_margin_strict(margin)
    if len(pool) < 2:
        return []
    return _greedy_pairings(shuffle_pool(pool, rng), pool, history, margin)


def generate_round_sorted(
    pool: Pool,
    history: History,
    margin: int = DEFAULT_MARGIN,
) -> List[Pairing]:
    """Generate one round visiting the strongest competitors first.

    Deterministic counterpart of :func:`generate_round`: the pool is ordered
    by descending score (ties keep their pool order) instead of shuffled.

    Raises:
        InvalidMarginException: If margin is negative
    """
    validate_margin_strict(margin)
    if len(pool) < 2:
        return []
    visit_order = sorted(pool, key=lambda c: -c.score)
    return _greedy_pairings(visit_order, pool, history, margin)


def generate_round_with_details(
    pool: Pool,
    history: History,
    margin: int = DEFAULT_MARGIN,
    rng: Optional[random.Random] = None,
) -> List[PairingDetails]:
    """:func:`generate_round` with head-to-head metadata for each pairing."""
    detailed = []
    for pairing in generate_round(pool, history, margin, rng):
        meetings = head_to_head(pairing.player_a.id, pairing.player_b.id, history)
        detailed.append(
            PairingDetails(
                player_a=pairing.player_a,
                player_b=pairing.player_b,
                score_difference=pairing.score_difference,
                match_count=len(meetings),
                last_played=meetings[0].timestamp if meetings else None,
            )
        )
    return detailed


def has_any_possible_pairing(
    pool: Pool,
    history: History,
    margin: int = DEFAULT_MARGIN,
) -> bool:
    """Check whether at least one competitor has an eligible opponent.

    Raises:
        InvalidMarginException: If margin is negative
    """
    validate_margin_strict(margin)
    if len(pool) < 2:
        return False

    counts = pair_counts(history)
    return any(
        ranked_opponents(competitor, pool, history, margin, counts)
        for competitor in pool
    )


def pairing_stats(
    pool: Pool,
    history: History,
    margin: int = DEFAULT_MARGIN,
) -> PairingStats:
    """Aggregate eligibility over the whole pool.

    Pairs are counted from both sides, so an eligible A-B pair contributes
    two to ``possible_pairs`` and twice to the score-difference average.

    Raises:
        InvalidMarginException: If margin is negative
    """
    validate_margin_strict(margin)
    if len(pool) < 2:
        return PairingStats(total_competitors=len(pool))

    counts = pair_counts(history)
    with_opponents = 0
    possible_pairs = 0
    total_difference = 0

    for competitor in pool:
        opponents = ranked_opponents(competitor, pool, history, margin, counts)
        if not opponents:
            continue
        with_opponents += 1
        possible_pairs += len(opponents)
        total_difference += sum(competitor.score_difference(o) for o in opponents)

    return PairingStats(
        total_competitors=len(pool),
        competitors_with_opponents=with_opponents,
        possible_pairs=possible_pairs,
        average_score_difference=(
            total_difference / possible_pairs if possible_pairs else 0
        ),
    )
