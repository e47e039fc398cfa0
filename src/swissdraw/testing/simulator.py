"""Random Tournament Simulator - internal testing system for the pairing engine.

This module plays out whole tournaments with seeded randomness: it builds a
roster, generates rounds through the RoundManager, decides every match and
records it through the MatchRecorder. The output is used to check pairing
invariants over many rounds.
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

import math
import random
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from swissdraw.constants import DEFAULT_MARGIN, STARTING_SCORE
from swissdraw.controllers.match_recorder import MatchRecorder
from swissdraw.controllers.round_manager import RoundManager
from swissdraw.models.competitor import Competitor
from swissdraw.models.match_record import MatchRecord
from swissdraw.models.pairing import Pairing
from swissdraw.models.pairing_config import PairingConfig
from swissdraw.models.round_data import RoundData
from swissdraw.models.standings import LeaderboardEntry
from swissdraw.pairing.generator import pairing_stats
from swissdraw.tournament.leaderboard import rank
from swissdraw.utils import setup_logger

logger = setup_logger(__name__)

SIMULATION_EPOCH = datetime(2025, 1, 1, tzinfo=timezone.utc)


class ResultPattern(Enum):
    """Result generation patterns for simulated matches."""

    REALISTIC = "realistic"
    PREDICTABLE = "predictable"
    RANDOM = "random"


@dataclass
class SimulationConfig:
    """Configuration for the tournament simulator."""

    num_competitors: int
    num_rounds: int
    margin: int = DEFAULT_MARGIN
    result_pattern: ResultPattern = ResultPattern.REALISTIC
    seed: Optional[int] = None
    score_range: Tuple[int, int] = (STARTING_SCORE, STARTING_SCORE)
    sorted_order: bool = False

    def pairing_config(self) -> PairingConfig:
        return PairingConfig(
            margin=self.margin, seed=self.seed, sorted_order=self.sorted_order
        )


@dataclass
class SimulationResult:
    """Everything a simulated tournament produced."""

    competitors: List[Competitor]
    history: List[MatchRecord]
    rounds: List[RoundData]
    leaderboard: List[LeaderboardEntry]
    starting_scores: Dict[str, int] = field(default_factory=dict)

    @property
    def round_pairings(self) -> List[List[Pairing]]:
        return [round_data.pairings for round_data in self.rounds]

    def summary(self) -> Dict[str, Any]:
        matches_per_round = [len(r.pairings) for r in self.rounds]
        return {
            "competitors": len(self.competitors),
            "rounds_played": len(self.rounds),
            "matches": len(self.history),
            "matches_per_round": matches_per_round,
            "leader": self.leaderboard[0].competitor.name if self.leaderboard else None,
        }


class SimulatedClock:
    """Deterministic timestamps, one minute apart."""

    def __init__(self, start: datetime = SIMULATION_EPOCH):
        self._next = start

    def __call__(self) -> datetime:
        current = self._next
        self._next = current + timedelta(minutes=1)
        return current


class ResultSimulator:
    """Decides the winner of simulated matches."""

    def __init__(self, config: SimulationConfig, rng: random.Random):
        self.config = config
        self.random = rng
        self.strengths: Dict[str, float] = {}

    def assign_strength(self, competitor: Competitor) -> None:
        self.strengths[competitor.id] = self.random.gauss(0.0, 1.0)

    def play(self, pairing: Pairing) -> Tuple[str, str]:
        """Return (winner_id, loser_id) for a pairing."""
        a_id, b_id = pairing.ids
        if self.config.result_pattern == ResultPattern.RANDOM:
            a_wins = self.random.random() < 0.5
        elif self.config.result_pattern == ResultPattern.PREDICTABLE:
            a_wins = self.strengths[a_id] >= self.strengths[b_id]
        else:
            difference = self.strengths[a_id] - self.strengths[b_id]
            a_wins = self.random.random() < 1.0 / (1.0 + math.exp(-2.0 * difference))
        return (a_id, b_id) if a_wins else (b_id, a_id)


class TournamentSimulator:
    """Plays out complete tournaments for testing the pairing engine."""

    def __init__(self, config: SimulationConfig):
        if config.num_competitors < 0 or config.num_rounds < 0:
            raise ValueError("Competitor and round counts must be non-negative")
        self.config = config
        self.random = (
            random.Random(config.seed) if config.seed is not None else random.Random()
        )
        self.results = ResultSimulator(config, self.random)

    def _build_recorder(self) -> MatchRecorder:
        recorder = MatchRecorder(clock=SimulatedClock())
        low, high = self.config.score_range
        for number in range(1, self.config.num_competitors + 1):
            competitor = recorder.add_competitor(
                f"Competitor-{number:03d}", score=self.random.randint(low, high)
            )
            self.results.assign_strength(competitor)
        logger.info(f"Created {self.config.num_competitors} competitors")
        return recorder

    def run(self) -> SimulationResult:
        """Play every round and return the final state.

        Stops early when a round produces no pairings.
        """
        recorder = self._build_recorder()
        starting_scores = {c.id: c.score for c in recorder.competitors()}
        manager = RoundManager(recorder, self.config.pairing_config())

        for round_number in range(1, self.config.num_rounds + 1):
            pairings = manager.create_next_round()
            if not pairings:
                manager.undo_last_round()
                stats = pairing_stats(
                    recorder.competitors(), recorder.history(), self.config.margin
                )
                logger.info(
                    f"Stopping before round {round_number}: no pairings possible "
                    f"({stats.possible_pairs} possible pairs)"
                )
                break
            manager.record_round_results([self.results.play(p) for p in pairings])

        competitors = recorder.competitors()
        history = recorder.history()
        return SimulationResult(
            competitors=competitors,
            history=history,
            rounds=list(manager.rounds),
            leaderboard=rank(competitors, history),
            starting_scores=starting_scores,
        )


def simulate_tournament(
    num_competitors: int,
    num_rounds: int,
    seed: Optional[int] = None,
    **kwargs: Any,
) -> SimulationResult:
    """Convenience wrapper building a SimulationConfig and running it."""
    config = SimulationConfig(
        num_competitors=num_competitors, num_rounds=num_rounds, seed=seed, **kwargs
    )
    return TournamentSimulator(config).run()
