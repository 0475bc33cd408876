import pytest

from ttplaythrough.constants import DEFAULT_MATCHUPS
from ttplaythrough.exceptions import InvalidMatchException
from ttplaythrough.models import Rule
from ttplaythrough.testing import (
    DriveMode,
    RandomPlaythroughGenerator,
    RPGConfig,
    generate_playthrough,
)


def test_default_pool_is_every_ordered_pair():
    assert RPGConfig().matchup_pool() == list(DEFAULT_MATCHUPS)


def test_random_mode_accounts_for_every_attempt():
    config = RPGConfig(
        roster=(0, 1, 2, 3),
        fatigue_window=2,
        num_games=500,
        seed=123,
        validate=True,
    )
    summary = generate_playthrough(config)

    assert summary.mode == DriveMode.RANDOM
    assert summary.games_attempted == 500
    assert summary.games_played + summary.games_rejected == 500
    assert summary.games_played > 0
    assert summary.validation is not None
    assert summary.validation.violations == []


def test_random_mode_is_reproducible_with_seed():
    config = RPGConfig(roster=(0, 1, 2, 3, 4), fatigue_window=3, num_games=300, seed=9)

    first = generate_playthrough(config)
    second = generate_playthrough(config)

    assert first.records == second.records
    assert first.rejections == second.rejections


def test_random_mode_rejects_illegal_samples():
    config = RPGConfig(num_games=2000, seed=5)
    summary = RandomPlaythroughGenerator(config).run()

    assert summary.games_played < 2000
    assert set(summary.rejections) <= set(Rule)


def test_custom_matchup_pool():
    config = RPGConfig(num_games=50, matchups=[(0, 1), (1, 0)], seed=1)
    summary = generate_playthrough(config)

    # once (0, 1) is played the only other option is its rematch
    assert [r.as_matchup() for r in summary.records] in ([(0, 1)], [(1, 0)])
    assert summary.rejections[Rule.NO_IMMEDIATE_REMATCH] == 49


def test_empty_pool_is_refused():
    with pytest.raises(InvalidMatchException):
        generate_playthrough(RPGConfig(num_games=5, matchups=[]))


def test_auto_mode_runs_until_players_run_out():
    config = RPGConfig(
        roster=(0, 1), fatigue_window=1, num_games=10, mode=DriveMode.AUTO
    )
    summary = generate_playthrough(config)

    assert [r.as_matchup() for r in summary.records] == [(0, 1)]
    assert summary.stopped_by == "NoEligiblePlayersException"
    assert summary.games_attempted == 2


def test_auto_mode_three_player_cycle_breaks_only_fixed_sides():
    config = RPGConfig(num_games=9, mode=DriveMode.AUTO, seed=3, validate=True)
    summary = generate_playthrough(config)

    assert summary.games_played == 9
    assert summary.stopped_by is None
    assert [r.criterion for r in summary.validation.violations] == ["R4"]


def test_summary_dict_names_rules():
    config = RPGConfig(num_games=100, seed=2)
    data = generate_playthrough(config).to_dict()

    assert data["mode"] == "random"
    assert data["games_played"] + data["games_rejected"] == 100
    assert set(data["rejections"]) <= {rule.display_name for rule in Rule}
