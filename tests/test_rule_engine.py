import logging

import pytest

from ttplaythrough.models import MatchHistory, MatchRecord, PlaythroughConfig, Rule
from ttplaythrough.rules import (
    RuleEngine,
    check_fatigue_cap,
    check_fixed_side_rematch,
    check_no_immediate_rematch,
    check_side_alternation,
    windowed_appearance_counts,
)

TEST_PLAYERS = (0, 1, 2)
ALL_MATCHUPS = [(0, 1), (0, 2), (1, 0), (2, 0), (1, 2), (2, 1)]


def _history(*matchups):
    history = MatchHistory()
    for left, right in matchups:
        history.append(MatchRecord(left, right))
    return history


def _verdicts(predicate, history, config):
    return {
        matchup: predicate(MatchRecord(*matchup), history, config)
        for matchup in ALL_MATCHUPS
    }


def test_window_counts_start_at_zero_for_every_player():
    counts = windowed_appearance_counts(MatchHistory(), TEST_PLAYERS, 2)
    assert counts == {0: 0, 1: 0, 2: 0}


def test_window_counts_only_look_at_the_window():
    history = _history((0, 1), (0, 2))
    assert windowed_appearance_counts(history, TEST_PLAYERS, 2) == {0: 2, 1: 1, 2: 1}

    history.append(MatchRecord(1, 2))
    assert windowed_appearance_counts(history, TEST_PLAYERS, 2) == {0: 1, 1: 1, 2: 2}

    history.append(MatchRecord(1, 0))
    assert windowed_appearance_counts(history, TEST_PLAYERS, 2) == {0: 1, 1: 2, 2: 1}


def test_no_immediate_rematch():
    config = PlaythroughConfig(roster=TEST_PLAYERS)
    assert all(_verdicts(check_no_immediate_rematch, MatchHistory(), config).values())

    history = _history((0, 1), (0, 2))
    assert _verdicts(check_no_immediate_rematch, history, config) == {
        (0, 1): True,
        (0, 2): False,
        (1, 0): True,
        (2, 0): False,
        (1, 2): True,
        (2, 1): True,
    }


def test_side_alternation():
    config = PlaythroughConfig(roster=TEST_PLAYERS)
    history = _history((0, 1), (0, 2))

    assert _verdicts(check_side_alternation, history, config) == {
        (0, 1): False,
        (0, 2): False,
        (1, 0): True,
        (2, 0): True,
        (1, 2): False,
        (2, 1): True,
    }


def test_fatigue_cap():
    config = PlaythroughConfig(roster=TEST_PLAYERS, fatigue_window=2)
    history = _history((0, 1), (0, 2))

    assert _verdicts(check_fatigue_cap, history, config) == {
        (0, 1): False,
        (0, 2): False,
        (1, 0): False,
        (2, 0): False,
        (1, 2): True,
        (2, 1): True,
    }

    history.append(MatchRecord(1, 2))
    assert _verdicts(check_fatigue_cap, history, config) == {
        (0, 1): True,
        (0, 2): False,
        (1, 0): True,
        (2, 0): False,
        (1, 2): False,
        (2, 1): False,
    }


def test_fatigue_cap_logs_the_counts(caplog):
    caplog.set_level(logging.DEBUG, logger="ttplaythrough.rules.rule_engine")
    config = PlaythroughConfig(roster=TEST_PLAYERS, fatigue_window=2)

    check_fatigue_cap(MatchRecord(0, 1), _history((0, 1), (0, 2)), config)

    assert "Player 0 played 2 times in the last 2 games already." in caplog.text


def test_fixed_side_rematch_looks_at_last_meeting():
    config = PlaythroughConfig(roster=TEST_PLAYERS)
    history = _history((2, 1), (0, 2), (1, 0))

    # 2 and 1 last met as (2, 1)
    assert check_fixed_side_rematch(MatchRecord(2, 1), history, config) is False
    assert check_fixed_side_rematch(MatchRecord(1, 2), history, config) is True
    # 0 and 2 last met as (0, 2)
    assert check_fixed_side_rematch(MatchRecord(2, 0), history, config) is True
    assert check_fixed_side_rematch(MatchRecord(0, 2), history, config) is False


def test_fixed_side_rematch_uses_most_recent_meeting_only():
    config = PlaythroughConfig(roster=TEST_PLAYERS)
    history = _history((0, 1), (2, 0), (1, 0), (2, 1))

    assert check_fixed_side_rematch(MatchRecord(0, 1), history, config) is True
    assert check_fixed_side_rematch(MatchRecord(1, 0), history, config) is False


def test_fixed_side_rematch_stops_at_the_last_meeting():
    class CountingHistory(MatchHistory):
        visited = 0

        def __reversed__(self):
            for record in super().__reversed__():
                CountingHistory.visited += 1
                yield record

        def reverse_view(self):
            raise AssertionError("full reversed copy built")

    config = PlaythroughConfig(roster=TEST_PLAYERS)
    history = CountingHistory()
    for _ in range(1000):
        history.append(MatchRecord(0, 2))
    history.append(MatchRecord(1, 2))
    history.append(MatchRecord(0, 1))

    assert check_fixed_side_rematch(MatchRecord(1, 0), history, config) is True
    assert CountingHistory.visited == 1


def test_fixed_side_rematch_passes_without_prior_meeting():
    config = PlaythroughConfig(roster=TEST_PLAYERS)
    assert check_fixed_side_rematch(MatchRecord(0, 1), _history((1, 2)), config)


def test_engine_reports_first_failing_rule():
    engine = RuleEngine(PlaythroughConfig(roster=TEST_PLAYERS))
    history = _history((0, 1), (0, 2))

    verdict = engine.evaluate(MatchRecord(2, 0), history)
    assert not verdict
    assert verdict.failed_rule == Rule.NO_IMMEDIATE_REMATCH

    verdict = engine.evaluate(MatchRecord(0, 1), history)
    assert verdict.failed_rule == Rule.FATIGUE_CAP
    assert "Fatigue cap" in verdict.reason

    verdict = engine.evaluate(MatchRecord(2, 1), history)
    assert verdict.allowed
    assert verdict.failed_rule is None


def test_engine_skips_disabled_rules():
    config = PlaythroughConfig(
        roster=TEST_PLAYERS, enabled_rules={Rule.SIDE_ALTERNATION}
    )
    engine = RuleEngine(config)
    history = _history((0, 1), (0, 2))

    # rematch and fatigue are off, only the seats matter
    assert engine.is_allowed(MatchRecord(2, 0), history)
    assert not engine.is_allowed(MatchRecord(0, 1), history)


def test_engine_accepts_custom_predicates():
    calls = []

    def never_player_two(proposal, history, config):
        calls.append(proposal)
        return 2 not in proposal.players

    engine = RuleEngine(
        PlaythroughConfig(roster=TEST_PLAYERS, enabled_rules={Rule.FATIGUE_CAP}),
        predicates={Rule.FATIGUE_CAP: never_player_two},
    )

    assert engine.is_allowed(MatchRecord(0, 1), MatchHistory())
    assert not engine.is_allowed(MatchRecord(2, 1), MatchHistory())
    assert len(calls) == 2


def test_rules_do_not_mutate_history():
    config = PlaythroughConfig(roster=TEST_PLAYERS)
    history = _history((2, 1), (0, 2))
    before = history.records

    for predicate in (
        check_no_immediate_rematch,
        check_fatigue_cap,
        check_side_alternation,
        check_fixed_side_rematch,
    ):
        _verdicts(predicate, history, config)

    assert history.records == before


@pytest.mark.parametrize("window", [1, 2, 3])
@pytest.mark.parametrize("allow_rule_4", [False, True])
def test_rematch_of_last_pair_is_never_possible(window, allow_rule_4):
    config = PlaythroughConfig.from_dict(
        {"roster": [0, 1, 2, 3], "fatigue_window": window, "allow_rule_4": allow_rule_4}
    )
    engine = RuleEngine(config)
    history = _history((3, 1))

    assert not engine.is_allowed(MatchRecord(3, 1), history)
    assert not engine.is_allowed(MatchRecord(1, 3), history)
