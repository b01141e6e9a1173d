import random

import pytest

from termrunner.models import PlayerState, RunnerConfig
from termrunner.player import Player
from termrunner.terrain import TerrainBuffer, TerrainUnit

CONFIG = RunnerConfig()
B = CONFIG.baseline_row
PX = CONFIG.player_column
AIR = CONFIG.initial_air_time


def flat_terrain() -> TerrainBuffer:
    # The initial prefix is flat and obstacle-free; nothing here scrolls it.
    return TerrainBuffer(CONFIG, random.Random(0))


def running_player() -> Player:
    p = Player.new(CONFIG)
    p.start()
    return p


def test_new_player_is_idle_on_baseline() -> None:
    p = Player.new(CONFIG)
    assert p.state is PlayerState.IDLE
    assert p.row == B
    assert p.air_distance == 0
    assert not p.pending_jump


def test_jump_is_ignored_until_running() -> None:
    terrain = flat_terrain()
    p = Player.new(CONFIG)
    p.jump(terrain.unit_at_player_column())
    assert p.state is PlayerState.IDLE

    p.start()
    assert p.state is PlayerState.RUNNING


def test_full_jump_arc_on_flat_ground() -> None:
    terrain = flat_terrain()
    p = running_player()

    p.jump(terrain.unit_at_player_column())
    assert p.state is PlayerState.JUMPING

    for _ in range(CONFIG.ascent_distance):
        p.update(terrain, AIR)
    assert p.state is PlayerState.MAX_HEIGHT
    assert p.row == B - CONFIG.ascent_distance

    # The air counter includes the ascent.
    for _ in range(AIR - CONFIG.ascent_distance - 1):
        p.update(terrain, AIR)
        assert p.state is PlayerState.MAX_HEIGHT
    p.update(terrain, AIR)
    assert p.state is PlayerState.FALLING
    assert p.air_distance == AIR

    ticks = 0
    while p.state is PlayerState.FALLING:
        previous_row = p.row
        p.update(terrain, AIR)
        ticks += 1
        assert ticks < 20
    assert p.state is PlayerState.RUNNING
    assert previous_row == B
    assert p.row == B
    assert p.air_distance == 0
    assert ticks == CONFIG.ascent_distance + 1


def test_jump_on_up_slope_is_deferred_until_flat() -> None:
    terrain = flat_terrain()
    p = running_player()
    terrain.units[PX] = TerrainUnit.up(B)

    p.jump(terrain.unit_at_player_column())
    assert p.pending_jump
    assert p.state is PlayerState.RUNNING

    p.update(terrain, AIR)
    assert p.state is PlayerState.RUNNING
    assert p.pending_jump

    terrain.units[PX] = TerrainUnit.flat(B)
    p.update(terrain, AIR)
    assert p.state is PlayerState.JUMPING
    assert not p.pending_jump
    assert p.row == B

    p.update(terrain, AIR)
    assert p.row == B - 1


def test_pending_jump_is_consumed_once() -> None:
    terrain = flat_terrain()
    p = running_player()
    terrain.units[PX] = TerrainUnit.up(B)
    p.jump(terrain.unit_at_player_column())
    terrain.units[PX] = TerrainUnit.flat(B)

    p.update(terrain, AIR)
    assert p.state is PlayerState.JUMPING
    while p.state is not PlayerState.RUNNING:
        p.update(terrain, AIR)
    p.update(terrain, AIR)
    assert p.state is PlayerState.RUNNING
    assert not p.pending_jump


def test_jump_while_airborne_is_ignored() -> None:
    terrain = flat_terrain()
    p = running_player()
    p.jump(terrain.unit_at_player_column())
    p.update(terrain, AIR)
    p.jump(terrain.unit_at_player_column())
    assert p.state is PlayerState.JUMPING
    assert not p.pending_jump
    assert p.air_distance == 1


def test_running_snaps_to_ground_row() -> None:
    terrain = flat_terrain()
    p = running_player()
    terrain.pending_offset = 2
    p.update(terrain, AIR)
    assert p.row == B - 2


def test_short_hop_lands_when_ground_rises() -> None:
    terrain = flat_terrain()
    p = running_player()
    p.jump(terrain.unit_at_player_column())
    terrain.pending_offset = 1
    p.update(terrain, AIR)
    assert p.row == B - 1
    assert p.state is PlayerState.RUNNING
    assert p.air_distance == 0


@pytest.mark.parametrize(
    "state,row",
    [
        (PlayerState.RUNNING, B),
        (PlayerState.FALLING, B - 1),
        (PlayerState.MAX_HEIGHT, B),
        (PlayerState.JUMPING, B + 1),
    ],
)
def test_collision_kills_on_the_same_tick(state: PlayerState, row: int) -> None:
    terrain = flat_terrain()
    terrain.units[PX] = TerrainUnit.flat(B, obstacle=True)
    p = Player.new(CONFIG)
    p.state = state
    p.row = row

    p.update(terrain, AIR)
    assert p.state is PlayerState.DEAD
    assert not p.alive


def test_no_collision_while_above_obstacle() -> None:
    terrain = flat_terrain()
    terrain.units[PX] = TerrainUnit.flat(B, obstacle=True)
    p = Player.new(CONFIG)
    p.state = PlayerState.MAX_HEIGHT
    p.row = B - 3
    p.air_distance = 3

    p.update(terrain, AIR)
    assert p.state is PlayerState.MAX_HEIGHT


def test_collision_uses_settled_offset() -> None:
    terrain = flat_terrain()
    terrain.settled_offset = 1
    terrain.units[PX] = TerrainUnit.flat(B - 1, obstacle=True)
    p = running_player()

    p.update(terrain, AIR)
    assert p.state is PlayerState.DEAD


def test_dead_is_terminal() -> None:
    terrain = flat_terrain()
    p = running_player()
    p.state = PlayerState.DEAD
    p.jump(terrain.unit_at_player_column())
    p.update(terrain, AIR)
    assert p.state is PlayerState.DEAD
    assert p.row == B
