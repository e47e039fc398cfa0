"""Data classes produced by the pairing engine."""

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
from datetime import datetime
from typing import Any, Dict, Optional, Tuple

from swissdraw.models.competitor import Competitor


@dataclass(frozen=True)
class Pairing:
    """A recommended match between two competitors for one round.

    Attributes
    ----------
    player_a : Competitor
        The competitor processed first when the pairing was made.
    player_b : Competitor
        The opponent selected for ``player_a``.
    score_difference : int
        ``|player_a.score - player_b.score|``.
    """

    player_a: Competitor
    player_b: Competitor
    score_difference: int

    @classmethod
    def between(cls, player_a: Competitor, player_b: Competitor) -> "Pairing":
        """Build a pairing, deriving the score difference."""
        return cls(player_a, player_b, player_a.score_difference(player_b))

    @property
    def ids(self) -> Tuple[str, str]:
        return (self.player_a.id, self.player_b.id)

    def involves(self, competitor_id: str) -> bool:
        return competitor_id in self.ids

    def to_dict(self) -> Dict[str, Any]:
        """Serialize pairing to dictionary."""
        return {
            "player_a": self.player_a.to_dict(),
            "player_b": self.player_b.to_dict(),
            "score_difference": self.score_difference,
        }


@dataclass(frozen=True)
class PairingDetails(Pairing):
    """A pairing annotated with the pair's head-to-head history."""

    match_count: int = 0
    last_played: Optional[datetime] = None


@dataclass(frozen=True)
class OpponentDetails:
    """An eligible opponent together with the metadata used to rank it."""

    competitor: Competitor
    match_count: int
    score_difference: int
    last_played: Optional[datetime] = None


@dataclass(frozen=True)
class PairingStats:
    """Aggregate view of how pairable a pool currently is.

    Attributes
    ----------
    total_competitors : int
        Size of the pool.
    competitors_with_opponents : int
        Competitors with at least one eligible opponent.
    possible_pairs : int
        Sum of eligible-opponent counts. Each unordered pair counts twice.
    average_score_difference : float
        Mean score difference over the same directed pairs, 0 when none.
    """

    total_competitors: int = 0
    competitors_with_opponents: int = 0
    possible_pairs: int = 0
    average_score_difference: float = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_competitors": self.total_competitors,
            "competitors_with_opponents": self.competitors_with_opponents,
            "possible_pairs": self.possible_pairs,
            "average_score_difference": self.average_score_difference,
        }


@dataclass(frozen=True)
class OpponentAvailability:
    """Breakdown of why other competitors are or are not available."""

    total_competitors: int = 0
    eligible_opponents: int = 0
    within_margin: int = 0
    excluded_by_match_limit: int = 0
    excluded_by_score: int = 0
