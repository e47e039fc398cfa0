from swissdraw.controllers.match_recorder import MatchRecorder
from swissdraw.controllers.round_manager import RoundManager

__all__ = ["MatchRecorder", "RoundManager"]
