"""Exceptions for use in TT Playthrough"""

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

from typing import Dict, Optional


# ========== Base Application Exception ==========


class TtPlaythroughException(Exception):
    """Base exception for all TT Playthrough errors.

    All custom exceptions in the application should inherit from this class.
    This enables catching all application-specific errors with a single except clause.
    """

    pass


# ========== Match Exceptions ==========


class MatchException(TtPlaythroughException):
    """Base exception for matchup-related errors."""

    pass


class InvalidMatchException(MatchException):
    """Raised when a proposed or computed matchup is malformed.

    This covers a player facing themselves, a player who is not on the
    roster, and an automatic selection that would repeat the previous pair.
    """

    pass


class NoEligiblePlayersException(MatchException):
    """Raised when automatic selection cannot find two rested players.

    Attributes
    ----------
    counts : dict of int to int
        Appearance count of every roster player over the fatigue window at
        the moment selection gave up.
    """

    def __init__(self, counts: Dict[int, int], message: Optional[str] = None):
        self.counts = dict(counts)
        if message is None:
            message = f"Fewer than two eligible players, window counts: {self.counts}"
        super().__init__(message)


# ========== Configuration Exceptions ==========


class ConfigurationException(TtPlaythroughException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass


class MissingConfigurationException(ConfigurationException):
    """Raised when required configuration is missing."""

    pass
