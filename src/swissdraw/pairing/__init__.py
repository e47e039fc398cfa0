"""Eligibility rules, opponent finding and round generation."""

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

from swissdraw.pairing.eligibility import (
    can_play,
    head_to_head,
    head_to_head_count,
    is_best_of_three_decider,
    matches_for_competitor,
)
from swissdraw.pairing.generator import (
    generate_round,
    generate_round_sorted,
    generate_round_with_details,
    has_any_possible_pairing,
    pairing_stats,
)
from swissdraw.pairing.opponents import (
    best_opponent,
    eligible_opponents,
    eligible_opponents_with_details,
    has_eligible_opponents,
    opponent_availability,
    opponent_recommendations,
)

__all__ = [
    "can_play",
    "head_to_head",
    "head_to_head_count",
    "is_best_of_three_decider",
    "matches_for_competitor",
    "eligible_opponents",
    "eligible_opponents_with_details",
    "best_opponent",
    "opponent_recommendations",
    "has_eligible_opponents",
    "opponent_availability",
    "generate_round",
    "generate_round_sorted",
    "generate_round_with_details",
    "has_any_possible_pairing",
    "pairing_stats",
]
