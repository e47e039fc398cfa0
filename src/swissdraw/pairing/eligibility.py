"""Repeat-play rules deciding whether two competitors may meet again."""

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

from typing import List

from swissdraw.constants import DECIDER_WINS, MAX_HEAD_TO_HEAD
from swissdraw.models.match_record import MatchRecord
from swissdraw.type_hints import History


def _records_between(first_id: str, second_id: str, history: History) -> List[MatchRecord]:
    key = frozenset({first_id, second_id})
    return [match for match in history if match.pair_key == key]


def head_to_head(first_id: str, second_id: str, history: History) -> List[MatchRecord]:
    """All matches between two competitors, most recent first."""
    return sorted(
        _records_between(first_id, second_id, history),
        key=lambda match: match.timestamp,
        reverse=True,
    )


def head_to_head_count(first_id: str, second_id: str, history: History) -> int:
    """Number of matches already played between two competitors."""
    if first_id == second_id:
        return 0
    return len(_records_between(first_id, second_id, history))


def matches_for_competitor(competitor_id: str, history: History) -> List[MatchRecord]:
    """Every match the competitor took part in, in history order."""
    return [match for match in history if match.involves(competitor_id)]


def _is_decider(first_id: str, second_id: str, records: List[MatchRecord]) -> bool:
    """Exactly MAX_HEAD_TO_HEAD meetings and exactly one side on DECIDER_WINS."""
    if len(records) != MAX_HEAD_TO_HEAD:
        return False
    first_wins = sum(1 for match in records if match.winner == first_id)
    second_wins = sum(1 for match in records if match.winner == second_id)
    return (first_wins == DECIDER_WINS) != (second_wins == DECIDER_WINS)


def is_best_of_three_decider(first_id: str, second_id: str, history: History) -> bool:
    """Check whether the pair has split a three-match series 2-1.

    Such a pair is allowed one more meeting to settle the series.
    """
    if first_id == second_id:
        return False
    return _is_decider(first_id, second_id, _records_between(first_id, second_id, history))


def can_play(first_id: str, second_id: str, history: History) -> bool:
    """Decide whether two competitors may be paired this round.

    Rules:
    - A competitor never plays themselves.
    - Fewer than three previous meetings: eligible.
    - Exactly three meetings: eligible only as a best-of-three decider,
      i.e. one side has won exactly two of them.
    - More than three meetings: never eligible.

    The predicate is symmetric and only reads ``history``.

    Args:
        first_id: ID of the first competitor
        second_id: ID of the second competitor
        history: All recorded matches

    Returns:
        True if the two may be paired
    """
    if first_id == second_id:
        return False

    records = _records_between(first_id, second_id, history)
    if len(records) < MAX_HEAD_TO_HEAD:
        return True
    return _is_decider(first_id, second_id, records)
