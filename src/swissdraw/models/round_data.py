"""Data models for tournament round."""

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

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Set

from swissdraw.models.pairing import Pairing


@dataclass
class RoundData:
    """Container for all data related to a single tournament round.

    Attributes
    ----------
    round_number : int
        Round number (1-indexed).
    pairings : list of Pairing
        Pairings generated for the round.
    match_ids : list of str
        IDs of the match records created from this round's results.
    is_completed : bool
        Indicates whether the round's results have been recorded.
    """

    round_number: int
    pairings: List[Pairing] = field(default_factory=list)
    match_ids: List[str] = field(default_factory=list)
    is_completed: bool = False

    @property
    def paired_ids(self) -> Set[str]:
        """IDs of every competitor paired this round."""
        return {cid for pairing in self.pairings for cid in pairing.ids}

    def find_pairing(self, first_id: str, second_id: str) -> Optional[Pairing]:
        """Find the pairing between two competitors, in either order."""
        key = {first_id, second_id}
        for pairing in self.pairings:
            if set(pairing.ids) == key:
                return pairing
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize round data to dictionary."""
        return {
            "round_number": self.round_number,
            "pairings": [p.to_dict() for p in self.pairings],
            "match_ids": list(self.match_ids),
            "is_completed": self.is_completed,
        }
