"""Type hints used in TT Playthrough."""

from typing import Callable, Dict, List, Tuple

# A player is identified by a small non-negative int
Player = int
# Ordered roster of players
Roster = Tuple[Player, ...]
# (left player, right player) as proposed by a caller
Matchup = Tuple[Player, Player]
# Windowed appearance count per player
AppearanceCounts = Dict[Player, int]
# Pool the random driver samples from
MatchupPool = List[Matchup]
# Signature of a rule predicate: (proposal, history, config) -> legal
RulePredicate = Callable[..., bool]

#  LocalWords:  Matchup MatchupPool
