"""Competitor data class."""

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

from dataclasses import dataclass, replace
from typing import Any, Dict

from swissdraw.constants import STARTING_SCORE
from swissdraw.exceptions import InvalidCompetitorDataException


@dataclass(frozen=True)
class Competitor:
    """A participant in the tournament, as seen by the pairing engine.

    Instances are immutable snapshots. The roster owns the live record and
    hands out a fresh snapshot whenever the score changes.

    Attributes
    ----------
    id : str
        Unique identifier.
    name : str
        Display name, also the final tie-break when ordering opponents.
    score : int
        Current score (+1 per win, -1 per loss on top of the starting score).
    """

    id: str
    name: str
    score: int = STARTING_SCORE

    def with_score(self, score: int) -> "Competitor":
        """Return a copy of this snapshot carrying a new score."""
        return replace(self, score=score)

    def score_difference(self, other: "Competitor") -> int:
        """Absolute score difference to another competitor."""
        return abs(self.score - other.score)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize competitor to dictionary."""
        return {"id": self.id, "name": self.name, "score": self.score}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Competitor":
        """Deserialize competitor from dictionary."""
        try:
            return cls(
                id=str(data["id"]),
                name=data["name"],
                score=int(data.get("score", STARTING_SCORE)),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidCompetitorDataException(
                f"Invalid competitor data {data!r}: {e}"
            ) from e
