"""Audit of a finished playthrough against the matchup rules."""

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
from enum import Enum
from typing import Any, Dict, List, Sequence, Union

from ttplaythrough.models import MatchHistory, MatchRecord, PlaythroughConfig, Rule
from ttplaythrough.rules import DEFAULT_PREDICATES, windowed_appearance_counts
from ttplaythrough.utils import setup_logger

logger = setup_logger(__name__)

FATIGUE_BOUND = "fatigue_bound"


class CriterionStatus(Enum):
    """Status of a criterion over a whole playthrough."""

    COMPLIANT = "COMPLIANT"
    VIOLATION = "VIOLATION"
    NOT_APPLICABLE = "NOT_APPLICABLE"


@dataclass
class CriterionResult:
    """Result of auditing a single criterion."""

    criterion: str
    status: CriterionStatus
    description: str = ""
    details: Dict[str, object] = field(default_factory=dict)

    @property
    def is_violation(self) -> bool:
        return self.status == CriterionStatus.VIOLATION


@dataclass
class ValidationReport:
    """Complete audit report for a playthrough."""

    total_matches: int
    criteria_results: List[CriterionResult]

    @property
    def violations(self) -> List[CriterionResult]:
        return [r for r in self.criteria_results if r.is_violation]

    @property
    def compliant_count(self) -> int:
        return sum(
            1 for r in self.criteria_results if r.status == CriterionStatus.COMPLIANT
        )

    @property
    def overall_status(self) -> CriterionStatus:
        if self.violations:
            return CriterionStatus.VIOLATION
        return CriterionStatus.COMPLIANT

    @property
    def compliance_percentage(self) -> float:
        """Share of applicable criteria without violations."""
        applicable = [
            r
            for r in self.criteria_results
            if r.status != CriterionStatus.NOT_APPLICABLE
        ]
        if not applicable:
            return 100.0
        return (self.compliant_count / len(applicable)) * 100.0

    @property
    def summary(self) -> str:
        if not self.violations:
            return f"{self.total_matches} matches, all criteria satisfied"
        failed = ", ".join(r.criterion for r in self.violations)
        return f"{self.total_matches} matches, violated: {failed}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_matches": self.total_matches,
            "overall_status": self.overall_status.value,
            "compliance_percentage": self.compliance_percentage,
            "summary": self.summary,
            "criteria": [
                {
                    "criterion": r.criterion,
                    "status": r.status.value,
                    "description": r.description,
                    "details": r.details,
                }
                for r in self.criteria_results
            ],
        }


Matches = Sequence[Union[MatchRecord, Dict[str, Any]]]


class PlaythroughValidator:
    """Replays a playthrough and checks every match against what preceded it."""

    def __init__(self, config: PlaythroughConfig):
        self.config = config

    def validate(self, matches: Matches) -> ValidationReport:
        """Audit the given matches, oldest first.

        Each enabled rule is re-evaluated for every match against the
        history before it. The fatigue bound is checked after every match.
        """
        records = [
            m if isinstance(m, MatchRecord) else MatchRecord.from_dict(m)
            for m in matches
        ]
        results = [self._check_rule(rule, records) for rule in sorted(Rule)]
        results.append(self._check_fatigue_bound(records))

        report = ValidationReport(total_matches=len(records), criteria_results=results)
        logger.info("Playthrough validation: %s", report.summary)
        return report

    def _check_rule(self, rule: Rule, records: List[MatchRecord]) -> CriterionResult:
        criterion = f"R{rule.value}"
        if not self.config.is_enabled(rule):
            return CriterionResult(
                criterion=criterion,
                status=CriterionStatus.NOT_APPLICABLE,
                description=f"{rule.display_name} is disabled",
            )

        predicate = DEFAULT_PREDICATES[rule]
        history = MatchHistory()
        offending = []
        for index, record in enumerate(records):
            if not predicate(record, history, self.config):
                offending.append({"index": index, "match": record.to_dict()})
            history.append(record)

        if offending:
            return CriterionResult(
                criterion=criterion,
                status=CriterionStatus.VIOLATION,
                description=f"{rule.display_name} broken {len(offending)} times",
                details={"matches": offending},
            )
        return CriterionResult(
            criterion=criterion,
            status=CriterionStatus.COMPLIANT,
            description=f"{rule.display_name} holds for every match",
        )

    def _check_fatigue_bound(self, records: List[MatchRecord]) -> CriterionResult:
        window = self.config.fatigue_window
        history = MatchHistory()
        offending = []
        for index, record in enumerate(records):
            history.append(record)
            counts = windowed_appearance_counts(history, self.config.roster, window)
            over = {p: c for p, c in counts.items() if c > window}
            if over:
                offending.append({"index": index, "counts": over})

        if offending:
            return CriterionResult(
                criterion=FATIGUE_BOUND,
                status=CriterionStatus.VIOLATION,
                description=f"Window counts above {window}",
                details={"matches": offending},
            )
        return CriterionResult(
            criterion=FATIGUE_BOUND,
            status=CriterionStatus.COMPLIANT,
            description=f"No player above {window} appearances in any window",
        )


def create_playthrough_validator(config: PlaythroughConfig) -> PlaythroughValidator:
    """Create and configure a playthrough validator instance."""
    return PlaythroughValidator(config)


def validate_playthrough(
    matches: Matches, config: PlaythroughConfig
) -> ValidationReport:
    """Quick validation function for a list of matches."""
    return create_playthrough_validator(config).validate(matches)
