import random

from termrunner.bot import autoplay, should_jump
from termrunner.models import PlayerState, RunnerConfig
from termrunner.player import Player
from termrunner.terrain import TerrainBuffer, TerrainUnit

CONFIG = RunnerConfig()
B = CONFIG.baseline_row
PX = CONFIG.player_column
AIR = CONFIG.initial_air_time


def terrain_with_obstacle_at(*columns: int) -> TerrainBuffer:
    terrain = TerrainBuffer(CONFIG, random.Random(0))
    for col in columns:
        terrain.units[col] = TerrainUnit.flat(B, obstacle=True)
    return terrain


def test_no_jump_on_clear_ground() -> None:
    assert not should_jump(terrain_with_obstacle_at(), AIR)


def test_no_jump_when_obstacle_on_landing_column() -> None:
    assert not should_jump(terrain_with_obstacle_at(PX + AIR), AIR)


def test_jumps_when_obstacle_one_column_before_landing() -> None:
    assert should_jump(terrain_with_obstacle_at(PX + AIR - 1), AIR)


def test_jumps_for_obstacle_just_ahead() -> None:
    assert should_jump(terrain_with_obstacle_at(PX + 1), AIR)


def test_no_jump_when_run_continues_onto_landing() -> None:
    assert not should_jump(terrain_with_obstacle_at(PX + AIR - 1, PX + AIR), AIR)


def test_no_jump_off_a_slope() -> None:
    terrain = terrain_with_obstacle_at(PX + 3)
    terrain.units[PX] = TerrainUnit.up(B)
    assert not should_jump(terrain, AIR)


def test_window_scales_with_air_time() -> None:
    air = 12
    assert should_jump(terrain_with_obstacle_at(PX + air - 1), air)
    assert not should_jump(terrain_with_obstacle_at(PX + air), air)


def test_autoplay_makes_a_running_player_jump() -> None:
    terrain = terrain_with_obstacle_at(PX + 4)
    p = Player.new(CONFIG)
    p.start()
    autoplay(p, terrain, AIR)
    assert p.state is PlayerState.JUMPING


def test_autoplay_leaves_player_alone_on_clear_ground() -> None:
    terrain = terrain_with_obstacle_at()
    p = Player.new(CONFIG)
    p.start()
    autoplay(p, terrain, AIR)
    assert p.state is PlayerState.RUNNING
