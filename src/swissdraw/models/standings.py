"""Data models for the leaderboard."""

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

from dataclasses import dataclass
from typing import Any, Dict

from swissdraw.models.competitor import Competitor


@dataclass(frozen=True)
class CompetitorStats:
    """Win/loss record of one competitor.

    Attributes
    ----------
    wins : int
        Matches won.
    losses : int
        Matches lost.
    total_matches : int
        ``wins + losses``.
    win_rate : float
        Percentage in ``[0, 100]``, 0 when no matches were played.
    """

    wins: int = 0
    losses: int = 0
    total_matches: int = 0
    win_rate: float = 0.0


@dataclass(frozen=True)
class LeaderboardEntry:
    """One row of the leaderboard."""

    competitor: Competitor
    wins: int
    losses: int
    total_matches: int
    win_rate: float

    @classmethod
    def from_stats(
        cls, competitor: Competitor, stats: CompetitorStats
    ) -> "LeaderboardEntry":
        return cls(
            competitor=competitor,
            wins=stats.wins,
            losses=stats.losses,
            total_matches=stats.total_matches,
            win_rate=stats.win_rate,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize leaderboard entry to dictionary."""
        return {
            "competitor": self.competitor.to_dict(),
            "wins": self.wins,
            "losses": self.losses,
            "total_matches": self.total_matches,
            "win_rate": self.win_rate,
        }
