import logging
from datetime import timedelta

import pytest

from sleeper_insights.config import (
    DEFAULT_RULES,
    get_rules,
    iter_rules,
    classify_position,
    parallel_jobs,
    player_refresh_interval,
)


def test_get_rules_is_case_insensitive():
    rules = get_rules("Standard")
    assert rules is DEFAULT_RULES
    assert rules.imbalance_positions == ("RB", "WR")
    assert rules.min_starters == 8
    assert rules.min_flex_depth == 4
    assert rules.max_risk_messages == 2
    assert rules.swap_positions == frozenset({"RB", "WR", "TE"})


def test_get_rules_missing_raises():
    with pytest.raises(KeyError):
        get_rules("superflex")


def test_iter_rules_includes_default():
    assert DEFAULT_RULES in list(iter_rules())


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("QB", "QB"),
        ("DST", "DEF"),
        ("DEF", "DEF"),
        ("qb", None),
        (" QB ", None),
        ("D/ST", None),
        ("LB", None),
        ("", None),
        (None, None),
    ],
)
def test_classify_position_is_exact(raw, expected):
    assert classify_position(raw) == expected


def test_player_refresh_interval_defaults_to_six_hours(monkeypatch):
    monkeypatch.delenv("SLEEPER_INSIGHTS_PLAYER_TTL_HOURS", raising=False)
    assert player_refresh_interval() == timedelta(hours=6)


def test_player_refresh_interval_reads_environment(monkeypatch):
    monkeypatch.setenv("SLEEPER_INSIGHTS_PLAYER_TTL_HOURS", "1.5")
    assert player_refresh_interval() == timedelta(hours=1.5)


def test_invalid_environment_value_falls_back(monkeypatch, caplog):
    monkeypatch.setenv("SLEEPER_INSIGHTS_PARALLEL_JOBS", "many")
    with caplog.at_level(logging.WARNING):
        assert parallel_jobs() == 1
    assert "SLEEPER_INSIGHTS_PARALLEL_JOBS" in caplog.text


def test_parallel_jobs_clamps_to_one(monkeypatch):
    monkeypatch.setenv("SLEEPER_INSIGHTS_PARALLEL_JOBS", "0")
    assert parallel_jobs() == 1
