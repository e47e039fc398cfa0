"""Opponent finding for a single competitor.

Opponents are filtered by score margin and repeat-play eligibility, then
ranked closest score first, fewest previous meetings second and by name last.
That ranking backs both the best-opponent and the top-N recommendation
queries, and the round generator picks from it too.
"""

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

from collections import Counter
from typing import Dict, Iterable, List, Optional

from swissdraw.constants import (
    DEFAULT_MARGIN,
    DEFAULT_RECOMMENDATION_LIMIT,
    MAX_HEAD_TO_HEAD,
)
from swissdraw.models.competitor import Competitor
from swissdraw.models.pairing import OpponentAvailability, OpponentDetails
from swissdraw.pairing.eligibility import (
    can_play,
    head_to_head,
    head_to_head_count,
    is_best_of_three_decider,
)
from swissdraw.type_hints import History, Pool
from swissdraw.utils.validation import require_in_pool, validate_margin_strict

__all__ = [
    "eligible_opponents",
    "eligible_opponents_with_details",
    "best_opponent",
    "opponent_recommendations",
    "has_eligible_opponents",
    "opponent_availability",
    "head_to_head",
]


def pair_counts(history: History) -> Dict[frozenset, int]:
    """Count previous meetings per unordered pair of competitor ids."""
    return Counter(match.pair_key for match in history)


def is_within_margin(first: Competitor, second: Competitor, margin: int) -> bool:
    return first.score_difference(second) <= margin


def ranked_opponents(
    competitor: Competitor,
    candidates: Iterable[Competitor],
    history: History,
    margin: int,
    counts: Optional[Dict[frozenset, int]] = None,
) -> List[Competitor]:
    """Filter and order candidates for ``competitor`` without validating inputs.

    Args:
        competitor: The competitor looking for an opponent
        candidates: Competitors to consider (may include ``competitor``)
        history: All recorded matches
        margin: Maximum allowed score difference, already validated
        counts: Pre-computed meeting counts, see :func:`pair_counts`

    Returns:
        Eligible candidates ordered by score difference, meeting count, name
    """
    if counts is None:
        counts = pair_counts(history)

    eligible = [
        candidate
        for candidate in candidates
        if candidate.id != competitor.id
        and is_within_margin(competitor, candidate, margin)
        and can_play(competitor.id, candidate.id, history)
    ]

    return sorted(
        eligible,
        key=lambda candidate: (
            competitor.score_difference(candidate),
            counts.get(frozenset({competitor.id, candidate.id}), 0),
            candidate.name,
        ),
    )


def eligible_opponents(
    competitor: Competitor,
    pool: Pool,
    history: History,
    margin: int = DEFAULT_MARGIN,
) -> List[Competitor]:
    """Get every legal opponent for a competitor, best first.

    Args:
        competitor: The competitor looking for opponents
        pool: All competitors available this round
        history: All recorded matches
        margin: Maximum score difference allowed

    Returns:
        Eligible opponents ordered by score difference, then number of
        previous meetings, then name

    Raises:
        InvalidMarginException: If margin is negative
        CompetitorNotFoundException: If competitor is not in the pool
    """
    validate_margin_strict(margin)
    require_in_pool(competitor.id, pool)
    return ranked_opponents(competitor, pool, history, margin)


def eligible_opponents_with_details(
    competitor: Competitor,
    pool: Pool,
    history: History,
    margin: int = DEFAULT_MARGIN,
) -> List[OpponentDetails]:
    """Same ordering as :func:`eligible_opponents`, with head-to-head metadata."""
    details = []
    for opponent in eligible_opponents(competitor, pool, history, margin):
        meetings = head_to_head(competitor.id, opponent.id, history)
        details.append(
            OpponentDetails(
                competitor=opponent,
                match_count=len(meetings),
                score_difference=competitor.score_difference(opponent),
                last_played=meetings[0].timestamp if meetings else None,
            )
        )
    return details


def best_opponent(
    competitor: Competitor,
    pool: Pool,
    history: History,
    margin: int = DEFAULT_MARGIN,
) -> Optional[Competitor]:
    """The top recommended opponent, or None if nobody is eligible."""
    opponents = eligible_opponents(competitor, pool, history, margin)
    return opponents[0] if opponents else None


def opponent_recommendations(
    competitor: Competitor,
    pool: Pool,
    history: History,
    margin: int = DEFAULT_MARGIN,
    limit: int = DEFAULT_RECOMMENDATION_LIMIT,
) -> List[Competitor]:
    """Up to ``limit`` opponents in recommendation order."""
    return eligible_opponents(competitor, pool, history, margin)[: max(limit, 0)]


def has_eligible_opponents(
    competitor: Competitor,
    pool: Pool,
    history: History,
    margin: int = DEFAULT_MARGIN,
) -> bool:
    return bool(eligible_opponents(competitor, pool, history, margin))


def opponent_availability(
    competitor: Competitor,
    pool: Pool,
    history: History,
    margin: int = DEFAULT_MARGIN,
) -> OpponentAvailability:
    """Explain how the rest of the pool splits for one competitor.

    Every other competitor is either outside the score margin or within it;
    those within it are either eligible or blocked by the head-to-head limit.

    Raises:
        InvalidMarginException: If margin is negative
        CompetitorNotFoundException: If competitor is not in the pool
    """
    validate_margin_strict(margin)
    require_in_pool(competitor.id, pool)

    within_margin = 0
    excluded_by_score = 0
    excluded_by_match_limit = 0

    for opponent in pool:
        if opponent.id == competitor.id:
            continue
        if not is_within_margin(competitor, opponent, margin):
            excluded_by_score += 1
            continue

        within_margin += 1
        if (
            head_to_head_count(competitor.id, opponent.id, history) >= MAX_HEAD_TO_HEAD
            and not is_best_of_three_decider(competitor.id, opponent.id, history)
        ):
            excluded_by_match_limit += 1

    return OpponentAvailability(
        total_competitors=len(pool) - 1,
        eligible_opponents=within_margin - excluded_by_match_limit,
        within_margin=within_margin,
        excluded_by_match_limit=excluded_by_match_limit,
        excluded_by_score=excluded_by_score,
    )
