# -*- coding: utf-8 -*-
"""Autoplay: jump timing without human input (demo mode)."""
from __future__ import annotations

from .player import Player
from .terrain import SlopeType, TerrainBuffer


def should_jump(terrain: TerrainBuffer, max_air_time: int) -> bool:
    """Jump when an obstacle lies under the coming arc but not on the landing spot.

    A heuristic, not a solver: long obstacle runs right after a slope can
    still end the run.
    """
    px = terrain.config.player_column
    if terrain.unit_at(px).slope is not SlopeType.FLAT:
        return False

    landing = px + max_air_time
    if landing >= len(terrain) or terrain.unit_at(landing).obstacle:
        return False

    half = max_air_time // 2
    center = px + half
    lo = max(0, center - half)
    hi = min(len(terrain) - 1, center + half)
    return any(terrain.unit_at(col).obstacle for col in range(lo, hi + 1))


def autoplay(player: Player, terrain: TerrainBuffer, max_air_time: int) -> None:
    if should_jump(terrain, max_air_time):
        player.jump(terrain.unit_at_player_column())
