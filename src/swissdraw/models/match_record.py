"""Match record data class."""

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
from datetime import datetime, timezone
from typing import Any, Dict

from dateutil import parser as date_parser

from swissdraw.exceptions import InvalidMatchRecordException


@dataclass(frozen=True)
class MatchRecord:
    """Represents the result of a single played match.

    Attributes
    ----------
    id : str
        Unique identifier of the record.
    player_a : str
        ID of the first player.
    player_b : str
        ID of the second player.
    winner : str
        ID of the winner, either ``player_a`` or ``player_b``.
    loser : str
        ID of the loser, the other player.
    timestamp : datetime
        When the result was recorded. Naive values are stored as UTC.
    """

    id: str
    player_a: str
    player_b: str
    winner: str
    loser: str
    timestamp: datetime

    def __post_init__(self) -> None:
        players = {self.player_a, self.player_b}
        if self.player_a == self.player_b:
            raise InvalidMatchRecordException(
                f"Match {self.id}: a competitor cannot play themselves"
            )
        if self.winner not in players or self.loser not in players:
            raise InvalidMatchRecordException(
                f"Match {self.id}: winner and loser must be "
                f"{self.player_a!r} or {self.player_b!r}"
            )
        if self.winner == self.loser:
            raise InvalidMatchRecordException(
                f"Match {self.id}: winner and loser must differ"
            )
        if self.timestamp.tzinfo is None:
            # Naive timestamps are read as UTC
            object.__setattr__(
                self, "timestamp", self.timestamp.replace(tzinfo=timezone.utc)
            )

    @property
    def pair_key(self) -> frozenset:
        """Unordered key identifying the two players."""
        return frozenset({self.player_a, self.player_b})

    def involves(self, competitor_id: str) -> bool:
        """Check whether the competitor played in this match."""
        return competitor_id in (self.player_a, self.player_b)

    def is_between(self, first_id: str, second_id: str) -> bool:
        """Check whether this match was played between the two competitors."""
        return self.pair_key == frozenset({first_id, second_id})

    def opponent_of(self, competitor_id: str) -> str:
        """Return the other player's id."""
        return self.player_b if competitor_id == self.player_a else self.player_a

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match record to dictionary."""
        return {
            "id": self.id,
            "player_a": self.player_a,
            "player_b": self.player_b,
            "winner": self.winner,
            "loser": self.loser,
            "timestamp": self.timestamp.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MatchRecord":
        """Deserialize match record from dictionary.

        Accepts ``timestamp`` (or the older ``date`` key) either as a
        ``datetime`` or as an ISO-8601 string.
        """
        raw_timestamp = data.get("timestamp", data.get("date"))
        if raw_timestamp is None:
            raise InvalidMatchRecordException(f"Match data has no timestamp: {data!r}")
        if isinstance(raw_timestamp, datetime):
            timestamp = raw_timestamp
        else:
            try:
                timestamp = date_parser.isoparse(str(raw_timestamp))
            except ValueError as e:
                raise InvalidMatchRecordException(
                    f"Invalid match timestamp {raw_timestamp!r}"
                ) from e

        try:
            return cls(
                id=str(data["id"]),
                player_a=str(data["player_a"]),
                player_b=str(data["player_b"]),
                winner=str(data["winner"]),
                loser=str(data["loser"]),
                timestamp=timestamp,
            )
        except KeyError as e:
            raise InvalidMatchRecordException(
                f"Match data is missing field {e}: {data!r}"
            ) from e
