"""MatchRecord data class."""

# TT Playthrough
# Copyright (C) 2025  TT Playthrough developers
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

from dataclasses import dataclass
from typing import Any, Dict, FrozenSet

from ttplaythrough.exceptions import InvalidMatchException
from ttplaythrough.type_hints import Matchup, Player


@dataclass(frozen=True)
class MatchRecord:
    """One played matchup with its seat assignment.

    Attributes
    ----------
    left : int
        Player sitting on the left side of the table.
    right : int
        Player sitting on the right side of the table.

    Seat order is meaningful, ``MatchRecord(0, 1)`` and ``MatchRecord(1, 0)``
    are different records of the same pair.
    """

    left: Player
    right: Player

    def __post_init__(self):
        if self.left == self.right:
            raise InvalidMatchException(
                f"Player {self.left} cannot play against themselves"
            )

    @classmethod
    def from_matchup(cls, matchup: Matchup) -> "MatchRecord":
        """Build a record from a ``(left, right)`` tuple."""
        left, right = matchup
        return cls(left, right)

    @property
    def players(self) -> FrozenSet[Player]:
        """The unordered pair of players in this match."""
        return frozenset((self.left, self.right))

    def shares_players_with(self, player1: Player, player2: Player) -> bool:
        """Check if the two given players are exactly the players of this match."""
        return frozenset((player1, player2)) == self.players

    def as_matchup(self) -> Matchup:
        return (self.left, self.right)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the record to dictionary."""
        return {"left": self.left, "right": self.right}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MatchRecord":
        """Deserialize a record from dictionary."""
        return cls(left=int(data["left"]), right=int(data["right"]))

    def __str__(self) -> str:
        return f"| {self.left} - {self.right} |"
