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

# Default roster and the ordered matchups it allows
DEFAULT_ROSTER = (0, 1, 2)
DEFAULT_MATCHUPS = ((0, 1), (0, 2), (1, 0), (1, 2), (2, 0), (2, 1))

# How many of the most recent matches are inspected for fatigue
DEFAULT_FATIGUE_WINDOW = 2

# Games sampled by the random driver
DEFAULT_GAMES_TOTAL = 10**5

# Rule display names, keyed by rule number
RULE_NAMES = {
    1: "No immediate rematch",
    2: "Fatigue cap",
    3: "Side alternation",
    4: "No fixed-side rematch",
}

# Logging
LOG_LEVEL_ENV_VAR = "TT_PLAYTHROUGH_LOG_LEVEL"
LOG_FILE_NAME = "tt-playthrough.log"
LOG_FOLDER_NAME = "TT Playthrough"
