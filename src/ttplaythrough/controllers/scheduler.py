"""Match scheduling for a playthrough.

This module owns the match history of a playthrough and decides, through the
rule engine, which proposed matchups may be played. It can also pick the next
matchup itself by rotating in the least used players.
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

import random
from threading import RLock
from typing import List, Optional, Tuple

from ttplaythrough.exceptions import InvalidMatchException, NoEligiblePlayersException
from ttplaythrough.models import MatchHistory, MatchRecord, PlaythroughConfig
from ttplaythrough.rules import RuleEngine, RuleVerdict, windowed_appearance_counts
from ttplaythrough.type_hints import AppearanceCounts, Matchup, Player
from ttplaythrough.utils import setup_logger

logger = setup_logger(__name__)


class Scheduler:
    """Schedules the matches of one playthrough.

    This class is responsible for:
    - Owning the match history, nobody else appends to it
    - Checking proposed matchups against the enabled rules
    - Playing a proposal only when it is legal
    - Selecting the next matchup automatically

    Checking and appending happen under one lock, so a verdict is never
    applied to a history that changed after it was computed.
    """

    def __init__(
        self,
        config: Optional[PlaythroughConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        """Initialize the scheduler.

        Args:
            config: Roster, fatigue window and enabled rules. Defaults apply when omitted.
            rng: Random source for the coin flip of automatic selection. When
                omitted one is created from ``config.seed``.
        """
        self.config = config if config is not None else PlaythroughConfig()
        if rng is not None:
            self.random = rng
        elif self.config.seed is not None:
            self.random = random.Random(self.config.seed)
        else:
            self.random = random.Random()
        self.rule_engine = RuleEngine(self.config)
        self._history = MatchHistory()
        self._lock = RLock()

    @property
    def roster(self) -> Tuple[Player, ...]:
        return self.config.roster

    @property
    def history(self) -> Tuple[MatchRecord, ...]:
        """Snapshot of the matches played so far, oldest first."""
        with self._lock:
            return self._history.records

    @property
    def is_empty(self) -> bool:
        with self._lock:
            return not self._history

    def __len__(self) -> int:
        with self._lock:
            return len(self._history)

    # ------------------------------------------------------------------
    # public interface
    # ------------------------------------------------------------------

    def evaluate(self, players: Matchup) -> RuleVerdict:
        """Evaluate a proposal and report which rule, if any, blocks it.

        A proposal naming a player outside the roster is malformed, the same
        as a player facing themselves. It is refused before any rule runs,
        rather than being answered with a rejecting verdict. The same applies
        to ``check_match_possible``, ``play_if_possible`` and ``play_verdict``.

        Args:
            players: (left player, right player)

        Returns:
            RuleVerdict for the proposal against the current history

        Raises:
            InvalidMatchException: If a player faces themselves or is not on the roster
        """
        proposal = self._make_record(players)
        with self._lock:
            return self.rule_engine.evaluate(proposal, self._history)

    def check_match_possible(self, players: Matchup) -> bool:
        """Check if a proposal is legal without playing it."""
        return self.evaluate(players).allowed

    def play_if_possible(self, players: Matchup) -> bool:
        """Play a proposal if it is legal.

        Args:
            players: (left player, right player)

        Returns:
            True if the match was appended to the history

        Raises:
            InvalidMatchException: If a player faces themselves or is not on the roster
        """
        return self.play_verdict(players).allowed

    def play_verdict(self, players: Matchup) -> RuleVerdict:
        """Like ``play_if_possible`` but returns the full verdict."""
        proposal = self._make_record(players)
        with self._lock:
            verdict = self.rule_engine.evaluate(proposal, self._history)
            if verdict.allowed:
                self._history.append(proposal)
                logger.debug("Played %s", proposal)
            return verdict

    def select_next(self) -> MatchRecord:
        """Pick, play and return the next matchup.

        The first match pairs the first two roster players. Afterwards the two
        least used players of the fatigue window are paired and seated so the
        player who just had the left seat does not keep it.

        Returns:
            The appended MatchRecord

        Raises:
            NoEligiblePlayersException: If fewer than two players are under the fatigue cap
            InvalidMatchException: If the selection would repeat the previous pair
        """
        with self._lock:
            last_match = self._history.last()
            if last_match is None:
                record = MatchRecord(self.roster[0], self.roster[1])
                self._history.append(record)
                logger.info("Opening match %s", record)
                return record

            counts = self.appearance_counts()
            eligible = self._eligible_players(counts)
            if len(eligible) < 2:
                logger.warning(
                    "No eligible players in the last %s games: %s",
                    self.config.fatigue_window,
                    counts,
                )
                raise NoEligiblePlayersException(counts)

            if len(eligible) == 2:
                first, second = eligible
            else:
                # stable sort, ties keep roster order
                by_count = sorted(self.roster, key=lambda p: counts[p])
                first, second = by_count[0], by_count[1]
                if self.random.random() < 0.5:
                    first, second = second, first

            if last_match.left == first:
                first, second = second, first

            if last_match.shares_players_with(first, second):
                raise InvalidMatchException(
                    f"Selected players {first} and {second} just played {last_match}"
                )

            record = MatchRecord(first, second)
            self._history.append(record)
            logger.debug("Selected %s from window counts %s", record, counts)
            return record

    def appearance_counts(self) -> AppearanceCounts:
        """Appearances of every roster player in the last ``fatigue_window`` matches."""
        with self._lock:
            return windowed_appearance_counts(
                self._history, self.roster, self.config.fatigue_window
            )

    def clear(self) -> None:
        """Restart the playthrough, the configuration is kept."""
        with self._lock:
            played = len(self._history)
            self._history.clear()
        logger.info("Cleared %s matches", played)

    def format_matches(self) -> str:
        with self._lock:
            return self._history.format_matches()

    def log_matches_so_far(self) -> None:
        """Log every match played so far and the total."""
        logger.info(self.format_matches())

    # ------------------------------------------------------------------
    # internal methods
    # ------------------------------------------------------------------

    def _make_record(self, players: Matchup) -> MatchRecord:
        left, right = players
        for player in (left, right):
            if player not in self.roster:
                raise InvalidMatchException(
                    f"Player {player} is not on the roster {list(self.roster)}"
                )
        return MatchRecord(left, right)

    def _eligible_players(self, counts: AppearanceCounts) -> List[Player]:
        """Roster players still allowed to be picked, in roster order."""
        window = self.config.fatigue_window
        if self.config.lenient_eligibility:
            return [p for p in self.roster if counts[p] <= window]
        return [p for p in self.roster if counts[p] < window]
