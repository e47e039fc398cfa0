from swissdraw.models.competitor import Competitor
from swissdraw.models.match_record import MatchRecord
from swissdraw.models.pairing import (
    OpponentAvailability,
    OpponentDetails,
    Pairing,
    PairingDetails,
    PairingStats,
)
from swissdraw.models.pairing_config import PairingConfig
from swissdraw.models.round_data import RoundData
from swissdraw.models.standings import CompetitorStats, LeaderboardEntry

__all__ = [
    "Competitor",
    "MatchRecord",
    "Pairing",
    "PairingDetails",
    "OpponentDetails",
    "PairingStats",
    "OpponentAvailability",
    "PairingConfig",
    "RoundData",
    "CompetitorStats",
    "LeaderboardEntry",
]
