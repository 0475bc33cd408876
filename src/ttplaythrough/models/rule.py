"""Identifiers for the matchup rules."""

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

from enum import IntEnum
from typing import FrozenSet, Iterable

from ttplaythrough.constants import RULE_NAMES


class Rule(IntEnum):
    """Matchup rules, valued by their rule number.

    The value is also the evaluation order.
    """

    NO_IMMEDIATE_REMATCH = 1
    FATIGUE_CAP = 2
    SIDE_ALTERNATION = 3
    FIXED_SIDE_REMATCH = 4

    @property
    def display_name(self) -> str:
        return RULE_NAMES[self.value]

    @classmethod
    def parse(cls, value) -> "Rule":
        """Accept a Rule, its number or its name (case insensitive)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            if value.isdigit():
                return cls(int(value))
            return cls[value.strip().upper()]
        return cls(int(value))


ALL_RULES: FrozenSet[Rule] = frozenset(Rule)


def parse_rules(values: Iterable) -> FrozenSet[Rule]:
    """Parse an iterable of rule identifiers into a frozenset of Rule."""
    return frozenset(Rule.parse(v) for v in values)
