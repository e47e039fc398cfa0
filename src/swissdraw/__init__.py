"""SwissDraw: eligibility and pairing engine for score-based tournaments."""

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

__version__ = "0.1.0"

from swissdraw.models import Competitor, MatchRecord, Pairing, PairingConfig
from swissdraw.pairing import (
    best_opponent,
    can_play,
    eligible_opponents,
    generate_round,
    generate_round_sorted,
    has_any_possible_pairing,
    head_to_head,
    opponent_recommendations,
    pairing_stats,
)
from swissdraw.tournament import rank, rank_of

__all__ = [
    "Competitor",
    "MatchRecord",
    "Pairing",
    "PairingConfig",
    "can_play",
    "head_to_head",
    "eligible_opponents",
    "best_opponent",
    "opponent_recommendations",
    "generate_round",
    "generate_round_sorted",
    "has_any_possible_pairing",
    "pairing_stats",
    "rank",
    "rank_of",
]
