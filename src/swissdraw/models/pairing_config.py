"""Pairing configuration settings."""

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
from dataclasses import dataclass
from typing import Any, Dict, Optional

from swissdraw.constants import (
    DEFAULT_LEADERBOARD_LIMIT,
    DEFAULT_MARGIN,
    DEFAULT_RECOMMENDATION_LIMIT,
)
from swissdraw.exceptions import InvalidConfigurationException
from swissdraw.utils.validation import validate_margin


@dataclass
class PairingConfig:
    """Settings a tournament runner threads into the pairing engine.

    The engine functions never read this object themselves; callers pass
    ``config.margin`` and ``config.make_rng()`` explicitly.

    Attributes
    ----------
    margin : int
        Maximum allowed score difference between opponents.
    seed : int, optional
        Seed for the shuffle; ``None`` draws fresh randomness each round.
    sorted_order : bool
        Use the deterministic strongest-first generator instead of shuffling.
    recommendation_limit : int
        Number of opponents returned by ranked recommendation queries.
    leaderboard_limit : int
        Number of rows returned by top-of-leaderboard queries.
    """

    margin: int = DEFAULT_MARGIN
    seed: Optional[int] = None
    sorted_order: bool = False
    recommendation_limit: int = DEFAULT_RECOMMENDATION_LIMIT
    leaderboard_limit: int = DEFAULT_LEADERBOARD_LIMIT

    def __post_init__(self) -> None:
        result = validate_margin(self.margin)
        if not result:
            raise InvalidConfigurationException(result.error_message)
        for name in ("recommendation_limit", "leaderboard_limit"):
            value = getattr(self, name)
            if not isinstance(value, int) or value < 1:
                raise InvalidConfigurationException(
                    f"{name} must be a positive integer, got {value!r}"
                )

    def make_rng(self) -> random.Random:
        """Create the random source for round generation."""
        return random.Random(self.seed) if self.seed is not None else random.Random()

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "margin": self.margin,
            "seed": self.seed,
            "sorted_order": self.sorted_order,
            "recommendation_limit": self.recommendation_limit,
            "leaderboard_limit": self.leaderboard_limit,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PairingConfig":
        """Deserialize configuration from dictionary."""
        return cls(
            margin=data.get("margin", DEFAULT_MARGIN),
            seed=data.get("seed"),
            sorted_order=data.get("sorted_order", False),
            recommendation_limit=data.get(
                "recommendation_limit", DEFAULT_RECOMMENDATION_LIMIT
            ),
            leaderboard_limit=data.get("leaderboard_limit", DEFAULT_LEADERBOARD_LIMIT),
        )
