"""Round management for tournaments.

This module handles round generation, result entry and round history for a
single tournament, and keeps at most one round open at a time so rounds are
never generated from a stale snapshot.
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

from typing import List, Optional, Sequence, Set

from swissdraw.controllers.match_recorder import MatchRecorder
from swissdraw.exceptions import (
    CompetitorNotFoundException,
    InvalidResultException,
    RepeatPairingException,
    RoundInProgressException,
    RoundNotFoundException,
)
from swissdraw.models.pairing import Pairing
from swissdraw.models.pairing_config import PairingConfig
from swissdraw.models.round_data import RoundData
from swissdraw.pairing.eligibility import can_play
from swissdraw.pairing.generator import generate_round, generate_round_sorted
from swissdraw.type_hints import ResultEntry
from swissdraw.utils import setup_logger

logger = setup_logger(__name__)


class RoundManager:
    """Manages round progression and pairing generation for a tournament.

    This class is responsible for:
    - Generating pairings from a fresh snapshot of the recorder
    - Refusing to open a new round while one still awaits results
    - Recording a round's results through the recorder
    - Undoing the last round
    """

    def __init__(self, recorder: MatchRecorder, config: Optional[PairingConfig] = None):
        """Initialize the round manager.

        Args:
            recorder: Roster and match ledger the rounds are played against
            config: Pairing settings; defaults to ``PairingConfig()``
        """
        self.recorder = recorder
        self.config = config if config is not None else PairingConfig()
        self.rounds: List[RoundData] = []
        self._rng = self.config.make_rng()

    @property
    def current_round_number(self) -> int:
        """The number of the latest round, or 0 if none was created."""
        return len(self.rounds)

    @property
    def current_round(self) -> Optional[RoundData]:
        """The open round awaiting results, if any."""
        if self.rounds and not self.rounds[-1].is_completed:
            return self.rounds[-1]
        return None

    def get_round(self, round_number: int) -> RoundData:
        """Get data for a specific round.

        Args:
            round_number: The round number (1-indexed)

        Raises:
            RoundNotFoundException: If the round does not exist
        """
        if 1 <= round_number <= len(self.rounds):
            return self.rounds[round_number - 1]
        raise RoundNotFoundException(f"Round {round_number} does not exist")

    def create_next_round(self) -> List[Pairing]:
        """Generate pairings for the next round.

        Returns:
            The new round's pairings

        Raises:
            RoundInProgressException: If the previous round has no results yet
        """
        if self.current_round is not None:
            raise RoundInProgressException(
                f"Round {self.current_round_number} is still awaiting results"
            )

        pool = self.recorder.competitors()
        history = self.recorder.history()
        round_number = len(self.rounds) + 1

        logger.info(f"Creating round {round_number} with {len(pool)} competitors")

        if self.config.sorted_order:
            pairings = generate_round_sorted(pool, history, self.config.margin)
        else:
            pairings = generate_round(pool, history, self.config.margin, self._rng)

        unpaired = len(pool) - 2 * len(pairings)
        if unpaired:
            logger.info(f"Round {round_number}: {unpaired} competitors left unpaired")

        round_data = RoundData(round_number=round_number, pairings=pairings)
        self.rounds.append(round_data)
        return pairings

    def _validate_results(
        self, round_data: RoundData, results: Sequence[ResultEntry]
    ) -> None:
        history = self.recorder.history()
        seen: Set[frozenset] = set()
        for winner_id, loser_id in results:
            if round_data.find_pairing(winner_id, loser_id) is None:
                raise InvalidResultException(
                    f"{winner_id} vs {loser_id} is not paired in round "
                    f"{round_data.round_number}"
                )
            key = frozenset({winner_id, loser_id})
            if key in seen:
                raise InvalidResultException(
                    f"Result for {winner_id} vs {loser_id} entered twice"
                )
            seen.add(key)

            for competitor_id in (winner_id, loser_id):
                if self.recorder.get_competitor(competitor_id) is None:
                    raise CompetitorNotFoundException(
                        f"{competitor_id} is no longer on the roster"
                    )
            # Pairings in a round are disjoint, so entries cannot affect each other
            if not can_play(winner_id, loser_id, history):
                raise RepeatPairingException(
                    f"{winner_id} and {loser_id} cannot play another match"
                )

    def record_round_results(self, results: Sequence[ResultEntry]) -> List[str]:
        """Record the results of the open round.

        Every entry is checked against the round's pairings before anything
        is recorded, so a bad entry leaves the ledger untouched.

        Args:
            results: (winner_id, loser_id) per played pairing

        Returns:
            IDs of the created match records

        Raises:
            RoundNotFoundException: If no round is open
            InvalidResultException: If an entry is not a pairing of the round
            CompetitorNotFoundException: If a competitor left the roster
            RepeatPairingException: If a pair was exhausted since the round opened
        """
        round_data = self.current_round
        if round_data is None:
            raise RoundNotFoundException("No open round to record results for")

        self._validate_results(round_data, results)

        for winner_id, loser_id in results:
            record = self.recorder.record_match(winner_id, loser_id)
            round_data.match_ids.append(record.id)

        missing = len(round_data.pairings) - len(results)
        if missing:
            logger.warning(
                f"Round {round_data.round_number}: {missing} pairings have no result"
            )

        round_data.is_completed = True
        logger.info(f"Round {round_data.round_number} marked as completed")
        return list(round_data.match_ids)

    def undo_round_results(self) -> bool:
        """Delete the last completed round's matches and reopen it.

        Returns:
            True if successful, False if the last round is not completed
        """
        if not self.rounds or not self.rounds[-1].is_completed:
            logger.warning("Cannot undo results: last round is not completed")
            return False

        round_data = self.rounds[-1]
        recorded = {record.id for record in self.recorder.history()}
        for match_id in reversed(round_data.match_ids):
            if match_id not in recorded:
                logger.warning(f"Match {match_id} was already deleted, skipping")
                continue
            self.recorder.delete_match(match_id)
        round_data.match_ids.clear()
        round_data.is_completed = False

        logger.info(f"Undid results for round {round_data.round_number}")
        return True

    def undo_last_round(self) -> bool:
        """Remove the last round if it hasn't been completed.

        Returns:
            True if successful, False if no rounds or last round is completed
        """
        if not self.rounds:
            logger.warning("Cannot undo: no rounds exist")
            return False

        last_round = self.rounds[-1]
        if last_round.is_completed:
            logger.warning(f"Cannot undo completed round {last_round.round_number}")
            return False

        self.rounds.pop()
        logger.info(f"Undid round {last_round.round_number}")
        return True
