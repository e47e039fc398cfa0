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

# --- Constants ---
# Score adjustments applied when a match is recorded
WIN_POINTS = 1
LOSS_POINTS = -1
STARTING_SCORE = 0

# Pairing defaults
DEFAULT_MARGIN = 1  # Maximum score difference between opponents
DEFAULT_RECOMMENDATION_LIMIT = 5
DEFAULT_LEADERBOARD_LIMIT = 10

# Repeat-play limits
MAX_HEAD_TO_HEAD = 3  # Meetings allowed before the decider rule applies
DECIDER_WINS = 2  # Wins one side needs out of MAX_HEAD_TO_HEAD for a decider

# Returned by rank_of when the competitor is not in the pool
RANK_NOT_FOUND = None
