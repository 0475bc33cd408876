"""Matchup rules for TT Playthrough."""

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

from ttplaythrough.rules.rule_engine import (
    DEFAULT_PREDICATES,
    RuleEngine,
    RuleVerdict,
    check_fatigue_cap,
    check_fixed_side_rematch,
    check_no_immediate_rematch,
    check_side_alternation,
    windowed_appearance_counts,
)

__all__ = [
    "RuleEngine",
    "RuleVerdict",
    "DEFAULT_PREDICATES",
    "check_no_immediate_rematch",
    "check_fatigue_cap",
    "check_side_alternation",
    "check_fixed_side_rematch",
    "windowed_appearance_counts",
]
