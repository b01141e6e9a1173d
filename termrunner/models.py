# -*- coding: utf-8 -*-
"""Core data models (runner configuration, player state, UI settings)."""
from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Optional

from .constants import (
    ASCENT_DISTANCE,
    BASELINE_ROW,
    INITIAL_AIR_TIME,
    INITIAL_TICK_MS,
    MAX_FLAT,
    MAX_OBST_DIST,
    MAX_OBST_LENGTH,
    MIN_FLAT,
    MIN_INCL_DIST,
    MIN_OBST_DIST,
    MIN_OBST_LENGTH,
    MIN_TICK_MS,
    PLAYER_COLUMN,
    SCORE_INTERVAL,
    SPEED_DECAY,
    VISIBLE_WIDTH,
    X_STEP,
    Y_STEP,
    Hud,
    Mode,
    OnOffAuto,
)


class PlayerState(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    JUMPING = "jumping"
    MAX_HEIGHT = "max_height"
    FALLING = "falling"
    DEAD = "dead"


class ConfigError(ValueError):
    """Raised when a RunnerConfig cannot produce well-formed terrain."""


@dataclass(frozen=True)
class RunnerConfig:
    """Every tunable of the simulation core.

    Validated on construction; an invalid combination raises ConfigError
    instead of producing malformed terrain later on.
    """

    visible_width: int = VISIBLE_WIDTH
    lookahead: Optional[int] = None  # defaults to a third of the visible width
    baseline_row: int = BASELINE_ROW
    player_column: int = PLAYER_COLUMN

    initial_tick_ms: float = INITIAL_TICK_MS
    min_tick_ms: float = MIN_TICK_MS
    speed_decay: float = SPEED_DECAY
    score_interval: int = SCORE_INTERVAL

    initial_air_time: int = INITIAL_AIR_TIME
    ascent_distance: int = ASCENT_DISTANCE

    min_flat: float = MIN_FLAT
    max_flat: float = MAX_FLAT
    x_step: float = X_STEP
    y_step: float = Y_STEP

    min_obstacle_length: int = MIN_OBST_LENGTH
    max_obstacle_length: int = MAX_OBST_LENGTH
    min_obstacle_distance: int = MIN_OBST_DIST
    max_obstacle_distance: int = MAX_OBST_DIST
    min_incline_distance: int = MIN_INCL_DIST

    seed: Optional[int] = None

    def __post_init__(self) -> None:
        self.validate()

    @property
    def chunk_size(self) -> int:
        """Units generated per regeneration, and units kept past the visible width."""
        if self.lookahead is not None:
            return self.lookahead
        return max(1, self.visible_width // 3)

    @property
    def buffer_size(self) -> int:
        return self.visible_width + self.chunk_size

    @property
    def max_air_time_ceiling(self) -> int:
        """Upper bound of the difficulty-scaled air time.

        The air time recurrence m' = a + m * (1 - f) converges to a / f, where
        f is the smallest reachable fraction of the initial tick interval.
        """
        fraction = self.min_tick_ms / self.initial_tick_ms
        return int(math.ceil(self.initial_air_time / fraction))

    def validate(self) -> None:
        if self.visible_width < 1:
            raise ConfigError(f"visible_width must be positive, got {self.visible_width}")
        if self.lookahead is not None and self.lookahead < 1:
            raise ConfigError(f"lookahead must be positive, got {self.lookahead}")
        if not 0 <= self.player_column < self.visible_width:
            raise ConfigError(
                f"player_column {self.player_column} outside visible width {self.visible_width}"
            )
        if self.initial_tick_ms <= 0 or self.min_tick_ms <= 0:
            raise ConfigError("tick intervals must be positive")
        if self.min_tick_ms > self.initial_tick_ms:
            raise ConfigError(
                f"min_tick_ms {self.min_tick_ms} exceeds initial_tick_ms {self.initial_tick_ms}"
            )
        if not 0.0 < self.speed_decay < 1.0:
            raise ConfigError(f"speed_decay must be in (0, 1), got {self.speed_decay}")
        if self.score_interval < 1:
            raise ConfigError(f"score_interval must be positive, got {self.score_interval}")
        if self.ascent_distance < 1 or self.initial_air_time < self.ascent_distance:
            raise ConfigError(
                f"initial_air_time {self.initial_air_time} must cover "
                f"ascent_distance {self.ascent_distance} (>= 1)"
            )
        if self.baseline_row < self.ascent_distance:
            raise ConfigError(
                f"baseline_row {self.baseline_row} leaves no room for a jump of "
                f"{self.ascent_distance} rows"
            )
        if self.player_column + self.max_air_time_ceiling >= self.visible_width:
            raise ConfigError(
                f"visible_width {self.visible_width} too small: lookahead needs "
                f"{self.player_column + self.max_air_time_ceiling + 1} columns"
            )
        if self.min_flat >= self.max_flat:
            raise ConfigError(f"min_flat {self.min_flat} must be below max_flat {self.max_flat}")
        if self.min_obstacle_length < 1:
            raise ConfigError("min_obstacle_length must be positive")
        if self.min_obstacle_length > self.max_obstacle_length:
            raise ConfigError(
                f"obstacle length bounds inverted: "
                f"{self.min_obstacle_length} > {self.max_obstacle_length}"
            )
        if self.min_obstacle_distance < 0:
            raise ConfigError("min_obstacle_distance must not be negative")
        if self.min_obstacle_distance > self.max_obstacle_distance:
            raise ConfigError(
                f"obstacle distance bounds inverted: "
                f"{self.min_obstacle_distance} > {self.max_obstacle_distance}"
            )
        if self.min_incline_distance < 0:
            raise ConfigError("min_incline_distance must not be negative")


@dataclass
class Settings:
    mode: Mode = "play"
    language: str = "en"

    colors: OnOffAuto = "auto"
    unicode: OnOffAuto = "auto"
    hud: Hud = "on"
