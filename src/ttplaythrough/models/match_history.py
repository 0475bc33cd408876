"""Data model for the matches played so far."""

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

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from ttplaythrough.models.match_record import MatchRecord


@dataclass
class MatchHistory:
    """
    Append-only, chronological record of the matches of a playthrough.

    Attributes
    ----------
    matches : list of MatchRecord
        Played matches, oldest first. Records are never removed or replaced,
        the whole history can only be emptied through ``clear``.
    """

    matches: List[MatchRecord] = field(default_factory=list)

    def append(self, record: MatchRecord) -> None:
        """Record a match. The record must already have passed the rules."""
        self.matches.append(record)

    def last(self) -> Optional[MatchRecord]:
        """Most recent match, or None if nothing was played yet."""
        return self.matches[-1] if self.matches else None

    def last_n(self, n: int) -> List[MatchRecord]:
        """The last ``min(n, len)`` matches, oldest of the window first."""
        if n <= 0:
            return []
        return self.matches[-n:]

    def reverse_view(self) -> List[MatchRecord]:
        """All matches, most recent first."""
        return self.matches[::-1]

    def clear(self) -> None:
        """Forget every match, used when restarting a playthrough."""
        self.matches.clear()

    @property
    def records(self) -> Tuple[MatchRecord, ...]:
        """Read-only snapshot of the history."""
        return tuple(self.matches)

    def format_matches(self) -> str:
        """Human readable dump of every match plus the total count."""
        formatted_matches = "".join(f"{m}\n" for m in self.matches)
        return f"MATCHES: \n{formatted_matches}\n\ntotal: {len(self.matches)}"

    def __len__(self) -> int:
        return len(self.matches)

    def __iter__(self) -> Iterator[MatchRecord]:
        return iter(self.matches)

    def __reversed__(self) -> Iterator[MatchRecord]:
        return reversed(self.matches)

    def __bool__(self) -> bool:
        return bool(self.matches)
