import pytest

from termrunner.difficulty import Difficulty
from termrunner.models import RunnerConfig


def test_initial_values_come_from_config() -> None:
    d = Difficulty(RunnerConfig())
    assert d.score == 0
    assert d.tick_interval_ms == 100.0
    assert d.tick_seconds == pytest.approx(0.1)
    assert d.max_air_time == 7


def test_speeds_up_exactly_at_score_interval() -> None:
    config = RunnerConfig()
    d = Difficulty(config)
    for _ in range(config.score_interval - 1):
        d.advance()
    assert d.tick_interval_ms == config.initial_tick_ms

    d.advance()
    assert d.score == config.score_interval
    assert d.tick_interval_ms == pytest.approx(config.initial_tick_ms * config.speed_decay)


def test_progression_is_monotonic_and_floored() -> None:
    config = RunnerConfig(score_interval=10)
    d = Difficulty(config)
    prev_tick = d.tick_interval_ms
    prev_air = d.max_air_time
    for _ in range(5000):
        d.advance()
        assert d.tick_interval_ms <= prev_tick
        assert d.max_air_time >= prev_air
        assert d.tick_interval_ms >= config.min_tick_ms
        assert d.max_air_time <= config.max_air_time_ceiling
        prev_tick = d.tick_interval_ms
        prev_air = d.max_air_time

    assert d.tick_interval_ms == config.min_tick_ms
    assert d.max_air_time > config.initial_air_time


def test_no_change_once_at_floor() -> None:
    config = RunnerConfig(score_interval=1)
    d = Difficulty(config)
    for _ in range(100):
        d.advance()
    tick, air = d.tick_interval_ms, d.max_air_time
    for _ in range(100):
        d.advance()
    assert (d.tick_interval_ms, d.max_air_time) == (tick, air)


def test_air_time_follows_speed_fraction() -> None:
    config = RunnerConfig(
        visible_width=120, score_interval=1, speed_decay=0.5, min_tick_ms=10.0
    )
    d = Difficulty(config)
    d.advance()
    # 7 + int(7 * (1 - 0.5))
    assert d.tick_interval_ms == pytest.approx(50.0)
    assert d.max_air_time == 10
    d.advance()
    # 7 + int(10 * (1 - 0.25))
    assert d.max_air_time == 14
