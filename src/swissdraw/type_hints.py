"""Type hints used in SwissDraw."""

from typing import List, Optional, Sequence, Tuple

# Competitors and matches are identified by opaque strings
CompetitorId = str
MatchId = str

# Snapshot of the roster handed to the pairing engine
Pool = Sequence["Competitor"]
# Append-only match log handed to the pairing engine
History = Sequence["MatchRecord"]
# Unordered head-to-head key
PairKey = frozenset
# (winner_id, loser_id) as entered after a round is played
ResultEntry = Tuple[CompetitorId, CompetitorId]
RoundPairings = List["Pairing"]
MaybeCompetitor = Optional["Competitor"]

#  LocalWords:  CompetitorId RoundPairings
