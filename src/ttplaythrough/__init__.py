"""Fair two-player matchup scheduling for a fixed roster.

TT Playthrough decides, given the matches played so far, whether a proposed
matchup is legal under the fairness rules, and can pick the next matchup
itself.
"""

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

from ttplaythrough.controllers import Scheduler
from ttplaythrough.exceptions import (
    InvalidMatchException,
    NoEligiblePlayersException,
    TtPlaythroughException,
)
from ttplaythrough.models import MatchHistory, MatchRecord, PlaythroughConfig, Rule
from ttplaythrough.rules import RuleEngine, RuleVerdict

__version__ = "0.1.0"

__all__ = [
    "Scheduler",
    "MatchRecord",
    "MatchHistory",
    "PlaythroughConfig",
    "Rule",
    "RuleEngine",
    "RuleVerdict",
    "TtPlaythroughException",
    "InvalidMatchException",
    "NoEligiblePlayersException",
]
