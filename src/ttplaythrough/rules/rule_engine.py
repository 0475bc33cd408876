"""Fairness and variety rules for proposed matchups.

Every rule is a pure predicate over the proposed match, the history played so
far and the playthrough configuration. A proposal is legal when every enabled
rule holds. The engine never raises for a failing rule, it only answers.
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

from dataclasses import dataclass
from typing import Dict, Iterable, Mapping, Optional

from ttplaythrough.models import MatchHistory, MatchRecord, PlaythroughConfig, Rule
from ttplaythrough.type_hints import AppearanceCounts, Player, RulePredicate
from ttplaythrough.utils import setup_logger

logger = setup_logger(__name__)


def windowed_appearance_counts(
    history: MatchHistory, roster: Iterable[Player], window: int
) -> AppearanceCounts:
    """Count how often each player appears in the last ``window`` matches.

    Every roster player starts at zero. A player is counted once per match,
    whichever seat they had.
    """
    counts: Dict[Player, int] = {p: 0 for p in roster}
    for m in history.last_n(window):
        counts[m.left] = counts.get(m.left, 0) + 1
        counts[m.right] = counts.get(m.right, 0) + 1
    return counts


# ========== Rules ==========


def check_no_immediate_rematch(
    proposal: MatchRecord, history: MatchHistory, config: PlaythroughConfig
) -> bool:
    """Rule 1: the same two players may not meet twice in a row."""
    last_match = history.last()
    if last_match is None:
        return True
    if last_match.shares_players_with(proposal.left, proposal.right):
        logger.debug(
            "Players %s and %s just played %s",
            proposal.left,
            proposal.right,
            last_match,
        )
        return False
    return True


def check_fatigue_cap(
    proposal: MatchRecord, history: MatchHistory, config: PlaythroughConfig
) -> bool:
    """Rule 2: nobody plays every one of the last ``fatigue_window`` matches."""
    window = config.fatigue_window
    counts = windowed_appearance_counts(history, config.roster, window)
    logger.debug("Checking last %s games: %s", window, counts)

    for player in (proposal.left, proposal.right):
        played = counts.get(player, 0)
        if played >= window:
            logger.debug(
                "Player %s played %s times in the last %s games already.",
                player,
                played,
                window,
            )
            return False
    return True


def check_side_alternation(
    proposal: MatchRecord, history: MatchHistory, config: PlaythroughConfig
) -> bool:
    """Rule 3: don't play on the same side of the table as in the last match."""
    last_match = history.last()
    if last_match is None:
        return True
    if last_match.left == proposal.left:
        logger.debug("Player %s sat on the left in %s", proposal.left, last_match)
        return False
    if last_match.right == proposal.right:
        logger.debug("Player %s sat on the right in %s", proposal.right, last_match)
        return False
    return True


def check_fixed_side_rematch(
    proposal: MatchRecord, history: MatchHistory, config: PlaythroughConfig
) -> bool:
    """Rule 4: when two players meet again, at least one of them switches sides."""
    for previous in reversed(history):
        if not previous.shares_players_with(proposal.left, proposal.right):
            continue
        if previous.left == proposal.left or previous.right == proposal.right:
            logger.debug(
                "Players %s and %s last met as %s, proposal %s keeps a side",
                proposal.left,
                proposal.right,
                previous,
                proposal,
            )
            return False
        return True
    return True


DEFAULT_PREDICATES: Dict[Rule, RulePredicate] = {
    Rule.NO_IMMEDIATE_REMATCH: check_no_immediate_rematch,
    Rule.FATIGUE_CAP: check_fatigue_cap,
    Rule.SIDE_ALTERNATION: check_side_alternation,
    Rule.FIXED_SIDE_REMATCH: check_fixed_side_rematch,
}


# ========== Engine ==========


@dataclass(frozen=True)
class RuleVerdict:
    """Outcome of evaluating a proposal.

    Attributes
    ----------
    allowed : bool
        True when every enabled rule holds.
    failed_rule : Rule or None
        First rule, in evaluation order, that rejected the proposal.
    reason : str
        Short description for logs and reports.
    """

    allowed: bool
    failed_rule: Optional[Rule] = None
    reason: str = ""

    def __bool__(self) -> bool:
        return self.allowed


class RuleEngine:
    """Evaluates the enabled rules of a configuration against a history."""

    def __init__(
        self,
        config: PlaythroughConfig,
        predicates: Optional[Mapping[Rule, RulePredicate]] = None,
    ):
        self.config = config
        self.predicates: Dict[Rule, RulePredicate] = dict(
            DEFAULT_PREDICATES if predicates is None else predicates
        )

    @property
    def active_rules(self):
        """Enabled rules that have a predicate, in evaluation order."""
        return sorted(r for r in self.config.enabled_rules if r in self.predicates)

    def evaluate(self, proposal: MatchRecord, history: MatchHistory) -> RuleVerdict:
        """Run the active rules in order and stop at the first failure."""
        for rule in self.active_rules:
            if not self.predicates[rule](proposal, history, self.config):
                reason = f"Rule {rule.value} ({rule.display_name}) rejects {proposal}"
                logger.debug(reason)
                return RuleVerdict(allowed=False, failed_rule=rule, reason=reason)
        return RuleVerdict(allowed=True, reason=f"{proposal} is allowed")

    def is_allowed(self, proposal: MatchRecord, history: MatchHistory) -> bool:
        return self.evaluate(proposal, history).allowed
