# -*- coding: utf-8 -*-
"""Procedural terrain: unit model, noise-driven generator and scroll buffer.

Rows follow screen coordinates: a smaller row is higher up. An UP unit is
drawn on its predecessor's exit row and lifts every following unit by one;
a DOWN unit is drawn one row below its predecessor.
"""
from __future__ import annotations

import enum
import logging
import random
from collections import deque
from dataclasses import dataclass, replace
from typing import Optional

from .constants import DOWN_GLYPHS, FLAT_GLYPHS, MARKER_FILL, UP_GLYPHS
from .models import PlayerState, RunnerConfig
from .noise import Perlin

logger = logging.getLogger(__name__)


class SlopeType(enum.Enum):
    FLAT = "flat"
    UP = "up"
    DOWN = "down"


def slope_delta(slope: SlopeType) -> int:
    """Height change a slope owes the player: +1 climbing, -1 descending."""
    if slope is SlopeType.UP:
        return 1
    if slope is SlopeType.DOWN:
        return -1
    return 0


@dataclass(frozen=True)
class TerrainUnit:
    slope: SlopeType
    row: int
    obstacle: bool = False
    glyphs: tuple[str, str, str] = FLAT_GLYPHS
    marker: bool = False

    @classmethod
    def flat(cls, row: int, obstacle: bool = False) -> "TerrainUnit":
        return cls(SlopeType.FLAT, row, obstacle, FLAT_GLYPHS)

    @classmethod
    def up(cls, row: int) -> "TerrainUnit":
        return cls(SlopeType.UP, row, False, UP_GLYPHS)

    @classmethod
    def down(cls, row: int) -> "TerrainUnit":
        return cls(SlopeType.DOWN, row, False, DOWN_GLYPHS)

    @property
    def exit_row(self) -> int:
        """Row the next unit builds on."""
        return self.row - 1 if self.slope is SlopeType.UP else self.row

    def with_marker(self) -> "TerrainUnit":
        return replace(self, glyphs=(self.glyphs[0], MARKER_FILL, MARKER_FILL), marker=True)


class TerrainGenerator:
    """Turns noise plus run-length bookkeeping into terrain units.

    All state carries over between ``generate`` calls, so the output does not
    depend on how a stretch of terrain is split into chunks.
    """

    def __init__(self, config: RunnerConfig, rng: random.Random) -> None:
        self.config = config
        self.rng = rng
        self.perlin = Perlin(rng)
        self.noise_offset = rng.random()

        self.position = 0
        self.incline_free = 0
        self.obstacle_free = 0
        self.obstacle_run = 0
        self.last_incline: Optional[SlopeType] = None
        self.run_target = 0
        self.distance_target = 0
        self._reroll_targets()

    def _reroll_targets(self) -> None:
        cfg = self.config
        self.run_target = self.rng.randint(cfg.min_obstacle_length, cfg.max_obstacle_length)
        self.distance_target = self.rng.randint(cfg.min_obstacle_distance, cfg.max_obstacle_distance)

    def _sample(self, i: int) -> float:
        cfg = self.config
        return self.perlin.get(
            cfg.x_step * i + self.noise_offset,
            cfg.y_step * i + self.noise_offset,
        )

    def _incline_allowed(self, slope: SlopeType) -> bool:
        if self.obstacle_run > 0:
            return False
        if self.last_incline is None or self.last_incline is slope:
            return True
        # Opposite slopes never touch, whatever the configured distance.
        return self.incline_free >= max(1, self.config.min_incline_distance)

    def _classify(self, value: float) -> SlopeType:
        if value <= self.config.min_flat and self._incline_allowed(SlopeType.DOWN):
            return SlopeType.DOWN
        if value >= self.config.max_flat and self._incline_allowed(SlopeType.UP):
            return SlopeType.UP
        return SlopeType.FLAT

    def _place_obstacle(self) -> bool:
        cfg = self.config
        obstacle = False
        if (
            self.obstacle_free > self.distance_target
            and self.incline_free > cfg.min_incline_distance
            and self.obstacle_run < self.run_target
        ):
            obstacle = True
            self.obstacle_run += 1
        elif self.obstacle_run >= self.run_target:
            self.obstacle_run = 0
            self.obstacle_free = 0
            self._reroll_targets()
        self.obstacle_free += 1
        self.incline_free += 1
        return obstacle

    def next_unit(self, predecessor: TerrainUnit) -> TerrainUnit:
        slope = self._classify(self._sample(self.position))
        self.position += 1
        base = predecessor.exit_row

        if slope is SlopeType.FLAT:
            return TerrainUnit.flat(base, self._place_obstacle())

        self.incline_free = 0
        self.obstacle_free += 1
        self.last_incline = slope
        if slope is SlopeType.UP:
            return TerrainUnit.up(base)
        return TerrainUnit.down(base + 1)

    def generate(self, predecessor: TerrainUnit, count: int) -> list[TerrainUnit]:
        units: list[TerrainUnit] = []
        last = predecessor
        for _ in range(count):
            last = self.next_unit(last)
            units.append(last)
        return units


class TerrainBuffer:
    """Sliding window of terrain under a fixed player column.

    Also owns the vertical easing offsets: ``pending_offset`` is slope height
    the player has crossed but the screen has not caught up with yet, drained
    into ``settled_offset`` one row per tick while the player is running.
    """

    def __init__(
        self,
        config: RunnerConfig,
        rng: Optional[random.Random] = None,
        highscore: int = 0,
    ) -> None:
        self.config = config
        if rng is None:
            rng = random.Random(config.seed)
        self.generator = TerrainGenerator(config, rng)

        self.units: deque[TerrainUnit] = deque(
            TerrainUnit.flat(config.baseline_row) for _ in range(config.buffer_size)
        )
        self.settled_offset = 0
        self.pending_offset = 0
        self.scroll_distance = 0
        self.scrolled = 0

        self.marker_index: Optional[int] = None
        if highscore > 0:
            self.marker_index = highscore + config.player_column
            if self.marker_index < len(self.units):
                self.units[self.marker_index] = self.units[self.marker_index].with_marker()

    def __len__(self) -> int:
        return len(self.units)

    def scroll_tick(self) -> None:
        self.units.popleft()
        self.scrolled += 1
        self.scroll_distance += 1

        chunk = self.config.chunk_size
        if self.scroll_distance >= chunk:
            first_index = self.scrolled + len(self.units)
            new_units = self.generator.generate(self.units[-1], chunk)
            if self.marker_index is not None:
                j = self.marker_index - first_index
                if 0 <= j < len(new_units):
                    new_units[j] = new_units[j].with_marker()
            self.units.extend(new_units)
            self.scroll_distance = 0
            logger.debug(
                "generated %d units at index %d (buffer=%d)", chunk, first_index, len(self.units)
            )

    def unit_at(self, column: int) -> TerrainUnit:
        return self.units[column]

    def unit_at_player_column(self) -> TerrainUnit:
        return self.units[self.config.player_column]

    def visible_units(self) -> list[TerrainUnit]:
        return [self.units[i] for i in range(min(self.config.visible_width, len(self.units)))]

    def ground_row(self) -> int:
        """Row the player stands on when running."""
        return self.config.baseline_row - self.pending_offset

    def surface_row(self, unit: TerrainUnit) -> int:
        """On-screen row of a unit's surface glyph."""
        return unit.row + self.settled_offset

    def offset(self, player_state: PlayerState) -> None:
        if player_state is PlayerState.RUNNING and self.pending_offset != 0:
            d = 1 if self.pending_offset > 0 else -1
            self.settled_offset += d
            self.pending_offset -= d

    def roffset(self) -> None:
        self.pending_offset += slope_delta(self.unit_at_player_column().slope)
