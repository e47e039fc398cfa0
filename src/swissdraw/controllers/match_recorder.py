"""In-memory roster and match ledger.

This module holds the competitor records and the append-only match history
that the pairing engine reads. Recording a match appends the record and
adjusts both scores in a single step.
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

from datetime import datetime, timezone
from typing import Callable, Dict, Iterable, List, Optional

from swissdraw.constants import LOSS_POINTS, STARTING_SCORE, WIN_POINTS
from swissdraw.exceptions import (
    CompetitorNotFoundException,
    InvalidCompetitorDataException,
    MatchNotFoundException,
    RepeatPairingException,
)
from swissdraw.models.competitor import Competitor
from swissdraw.models.match_record import MatchRecord
from swissdraw.pairing.eligibility import can_play
from swissdraw.utils import generate_id, setup_logger
from swissdraw.utils.validation import validate_name_strict

logger = setup_logger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class MatchRecorder:
    """Owns the roster and the match history for one tournament.

    This class is responsible for:
    - Adding, editing and removing competitors
    - Recording match results and applying the score changes
    - Deleting matches and reverting the score changes
    - Handing out immutable snapshots to the pairing engine

    It is not thread-safe; callers serialize access.
    """

    def __init__(
        self,
        competitors: Optional[Iterable[Competitor]] = None,
        history: Optional[Iterable[MatchRecord]] = None,
        clock: Callable[[], datetime] = _utc_now,
    ):
        """Initialize the recorder.

        Args:
            competitors: Initial roster
            history: Initial match history; scores are taken as given
            clock: Source of timestamps for new match records
        """
        self._competitors: Dict[str, Competitor] = {}
        self._history: List[MatchRecord] = []
        self._clock = clock

        for competitor in competitors or []:
            if competitor.id in self._competitors:
                raise InvalidCompetitorDataException(
                    f"Duplicate competitor id: {competitor.id}"
                )
            self._competitors[competitor.id] = competitor
        self._history.extend(history or [])

    # ========== Snapshots ==========

    def competitors(self) -> List[Competitor]:
        """Current roster, in insertion order."""
        return list(self._competitors.values())

    def competitors_by_score(self, ascending: bool = False) -> List[Competitor]:
        return sorted(
            self._competitors.values(),
            key=lambda c: c.score,
            reverse=not ascending,
        )

    def history(self) -> List[MatchRecord]:
        """All recorded matches, oldest first."""
        return list(self._history)

    def get_competitor(self, competitor_id: str) -> Optional[Competitor]:
        return self._competitors.get(competitor_id)

    def _require(self, competitor_id: str) -> Competitor:
        competitor = self._competitors.get(competitor_id)
        if competitor is None:
            logger.error(f"Cannot find competitor: {competitor_id}")
            raise CompetitorNotFoundException(f"Unknown competitor: {competitor_id}")
        return competitor

    # ========== Roster ==========

    def add_competitor(self, name: str, score: int = STARTING_SCORE) -> Competitor:
        """Add a new competitor to the roster.

        Raises:
            InvalidCompetitorDataException: If the name is empty
        """
        competitor = Competitor(
            id=generate_id("competitor"), name=validate_name_strict(name), score=score
        )
        self._competitors[competitor.id] = competitor
        logger.info(f"Added competitor {competitor.name} (score {score})")
        return competitor

    def update_competitor(
        self,
        competitor_id: str,
        name: Optional[str] = None,
        score: Optional[int] = None,
    ) -> Competitor:
        """Edit a competitor's name and/or score.

        Raises:
            CompetitorNotFoundException: If the competitor does not exist
        """
        competitor = self._require(competitor_id)
        updated = Competitor(
            id=competitor.id,
            name=validate_name_strict(name) if name is not None else competitor.name,
            score=score if score is not None else competitor.score,
        )
        self._competitors[competitor_id] = updated
        return updated

    def remove_competitor(self, competitor_id: str) -> Competitor:
        """Remove a competitor together with every match they played.

        Opponents get their score changes from those matches reverted.
        """
        competitor = self._require(competitor_id)
        self.delete_matches_for(competitor_id)
        del self._competitors[competitor_id]
        logger.info(f"Removed competitor {competitor.name}")
        return competitor

    def _adjust_score(self, competitor_id: str, delta: int) -> None:
        competitor = self._competitors.get(competitor_id)
        if competitor is None:
            logger.warning(
                f"Score change for unknown competitor {competitor_id} skipped"
            )
            return
        self._competitors[competitor_id] = competitor.with_score(competitor.score + delta)

    # ========== Matches ==========

    def record_match(
        self,
        winner_id: str,
        loser_id: str,
        timestamp: Optional[datetime] = None,
    ) -> MatchRecord:
        """Record a match result.

        Appends the record and applies +1 to the winner and -1 to the loser.

        Args:
            winner_id: ID of the winning competitor
            loser_id: ID of the losing competitor
            timestamp: When the match was played; defaults to now

        Returns:
            The new MatchRecord

        Raises:
            CompetitorNotFoundException: If either competitor does not exist
            RepeatPairingException: If the two may not play another match
        """
        winner = self._require(winner_id)
        loser = self._require(loser_id)

        if not can_play(winner_id, loser_id, self._history):
            logger.error(f"{winner.name} and {loser.name} cannot play another match")
            raise RepeatPairingException(
                f"{winner.name} and {loser.name} cannot play another match"
            )

        record = MatchRecord(
            id=generate_id("match"),
            player_a=winner_id,
            player_b=loser_id,
            winner=winner_id,
            loser=loser_id,
            timestamp=timestamp if timestamp is not None else self._clock(),
        )
        self._history.append(record)
        self._adjust_score(winner_id, WIN_POINTS)
        self._adjust_score(loser_id, LOSS_POINTS)

        logger.info(f"Recorded: {winner.name} beat {loser.name}")
        return record

    def delete_match(self, match_id: str) -> MatchRecord:
        """Delete a match and revert its score changes.

        Raises:
            MatchNotFoundException: If no match has the id
        """
        for index, record in enumerate(self._history):
            if record.id == match_id:
                break
        else:
            logger.error(f"Cannot find match: {match_id}")
            raise MatchNotFoundException(f"Unknown match: {match_id}")

        del self._history[index]
        self._adjust_score(record.winner, -WIN_POINTS)
        self._adjust_score(record.loser, -LOSS_POINTS)
        logger.info(f"Deleted match {match_id}")
        return record

    def delete_matches_for(self, competitor_id: str) -> List[MatchRecord]:
        """Delete every match involving a competitor.

        Only the opponents' scores are reverted; the competitor's own score is
        left alone since this is used when the competitor leaves the roster.

        Returns:
            The deleted records
        """
        removed = [r for r in self._history if r.involves(competitor_id)]
        if not removed:
            return []

        self._history = [r for r in self._history if not r.involves(competitor_id)]
        for record in removed:
            opponent_id = record.opponent_of(competitor_id)
            if record.winner == opponent_id:
                self._adjust_score(opponent_id, -WIN_POINTS)
            else:
                self._adjust_score(opponent_id, -LOSS_POINTS)

        logger.info(f"Deleted {len(removed)} matches for {competitor_id}")
        return removed

    def clear_history(self) -> None:
        """Forget every match. Scores are left as they are."""
        self._history.clear()
        logger.info("Cleared match history")
