"""PlaythroughConfig data class."""

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
from typing import Any, Dict, FrozenSet, Optional

from ttplaythrough.constants import DEFAULT_FATIGUE_WINDOW, DEFAULT_ROSTER
from ttplaythrough.exceptions import InvalidConfigurationException
from ttplaythrough.models.rule import ALL_RULES, Rule, parse_rules
from ttplaythrough.type_hints import Roster


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class PlaythroughConfig:
    """Playthrough configuration settings.

    Attributes
    ----------
    roster : tuple of int
        Ordered, unique players taking part. At least two.
    fatigue_window : int
        Number of most recent matches inspected when checking how often a
        player has played.
    enabled_rules : frozenset of Rule
        Rules a proposal has to pass. All four by default.
    lenient_eligibility : bool
        When True, automatic selection treats a player whose window count
        equals ``fatigue_window`` as eligible. When False, only players
        strictly below the cap are eligible, the same bound the fatigue rule
        applies.
    seed : int or None
        Seed for the coin flip of automatic selection.
    """

    roster: Roster = DEFAULT_ROSTER
    fatigue_window: int = DEFAULT_FATIGUE_WINDOW
    enabled_rules: FrozenSet[Rule] = field(default_factory=lambda: ALL_RULES)
    lenient_eligibility: bool = False
    seed: Optional[int] = None

    def __post_init__(self):
        try:
            roster = tuple(self.roster)
            rules = parse_rules(self.enabled_rules)
        except (TypeError, ValueError, KeyError) as e:
            raise InvalidConfigurationException(f"Invalid configuration: {e}") from e
        if not all(_is_int(p) for p in roster):
            raise InvalidConfigurationException(
                f"Players are non-negative integers, got {list(roster)}"
            )
        # normalise in place, the dataclass is frozen
        object.__setattr__(self, "roster", roster)
        object.__setattr__(self, "enabled_rules", rules)

        if len(roster) < 2:
            raise InvalidConfigurationException(
                f"Roster needs at least two players, got {list(roster)}"
            )
        if len(set(roster)) != len(roster):
            raise InvalidConfigurationException(
                f"Roster players must be unique, got {list(roster)}"
            )
        if any(p < 0 for p in roster):
            raise InvalidConfigurationException(
                f"Players are non-negative integers, got {list(roster)}"
            )
        if not _is_int(self.fatigue_window) or self.fatigue_window < 1:
            raise InvalidConfigurationException(
                f"fatigue_window must be a positive integer, got {self.fatigue_window!r}"
            )
        if not isinstance(self.lenient_eligibility, bool):
            raise InvalidConfigurationException(
                f"lenient_eligibility must be true or false, got {self.lenient_eligibility!r}"
            )
        if self.seed is not None and not _is_int(self.seed):
            raise InvalidConfigurationException(
                f"seed must be an integer or None, got {self.seed!r}"
            )

    @property
    def allow_rule_4(self) -> bool:
        """True when repeated fixed sides against the same opponent are allowed."""
        return Rule.FIXED_SIDE_REMATCH not in self.enabled_rules

    def is_enabled(self, rule: Rule) -> bool:
        return rule in self.enabled_rules

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "roster": list(self.roster),
            "fatigue_window": self.fatigue_window,
            "enabled_rules": sorted(int(r) for r in self.enabled_rules),
            "lenient_eligibility": self.lenient_eligibility,
            "seed": self.seed,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlaythroughConfig":
        """Deserialize configuration from dictionary.

        ``allow_rule_4`` is accepted as a shorthand, when true it removes the
        fixed-side rule from ``enabled_rules``.
        """
        try:
            roster = tuple(data.get("roster", DEFAULT_ROSTER))
        except TypeError as e:
            raise InvalidConfigurationException(f"Invalid roster: {e}") from e
        try:
            rules = set(parse_rules(data.get("enabled_rules", ALL_RULES)))
        except (TypeError, ValueError, KeyError) as e:
            raise InvalidConfigurationException(f"Invalid enabled_rules: {e}") from e
        if data.get("allow_rule_4", False):
            rules.discard(Rule.FIXED_SIDE_REMATCH)
        return cls(
            roster=roster,
            fatigue_window=data.get("fatigue_window", DEFAULT_FATIGUE_WINDOW),
            enabled_rules=frozenset(rules),
            lenient_eligibility=data.get("lenient_eligibility", False),
            seed=data.get("seed"),
        )
