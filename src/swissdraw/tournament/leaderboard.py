"""Leaderboard calculation for tournaments.

This module derives win/loss statistics and the standings order from the
recorded match history.
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

from typing import List, Optional

from swissdraw.constants import DEFAULT_LEADERBOARD_LIMIT, RANK_NOT_FOUND
from swissdraw.models.standings import CompetitorStats, LeaderboardEntry
from swissdraw.type_hints import History, Pool


def competitor_stats(competitor_id: str, history: History) -> CompetitorStats:
    """Calculate win/loss statistics for one competitor.

    Args:
        competitor_id: ID of the competitor
        history: All recorded matches

    Returns:
        CompetitorStats with wins, losses, total matches and win rate
        (a percentage, 0 when no matches were played)
    """
    wins = 0
    losses = 0

    for match in history:
        if not match.involves(competitor_id):
            continue
        if match.winner == competitor_id:
            wins += 1
        else:
            losses += 1

    total = wins + losses
    win_rate = (wins / total) * 100 if total > 0 else 0.0
    return CompetitorStats(wins=wins, losses=losses, total_matches=total, win_rate=win_rate)


def _standings_key(entry: LeaderboardEntry):
    return (
        -entry.competitor.score,
        -entry.win_rate,
        -entry.total_matches,
        entry.competitor.name,
    )


def rank(pool: Pool, history: History) -> List[LeaderboardEntry]:
    """Build the leaderboard.

    Sorted by score descending, then win rate descending, then total matches
    descending, then name ascending.

    Args:
        pool: All competitors
        history: All recorded matches

    Returns:
        One LeaderboardEntry per competitor, best first
    """
    entries = [
        LeaderboardEntry.from_stats(competitor, competitor_stats(competitor.id, history))
        for competitor in pool
    ]
    return sorted(entries, key=_standings_key)


def top_competitors(
    pool: Pool, history: History, limit: int = DEFAULT_LEADERBOARD_LIMIT
) -> List[LeaderboardEntry]:
    """The first ``limit`` rows of the leaderboard."""
    return rank(pool, history)[: max(limit, 0)]


def rank_of(competitor_id: str, pool: Pool, history: History) -> Optional[int]:
    """1-based leaderboard position of a competitor, or None if absent."""
    for position, entry in enumerate(rank(pool, history), start=1):
        if entry.competitor.id == competitor_id:
            return position
    return RANK_NOT_FOUND


def format_win_rate(win_rate: float) -> str:
    """Format a win-rate percentage with one decimal, e.g. ``66.7%``."""
    return f"{win_rate:.1f}%"
