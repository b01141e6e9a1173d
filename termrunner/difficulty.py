# -*- coding: utf-8 -*-
"""Score-driven speed and air-time progression."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .models import RunnerConfig

logger = logging.getLogger(__name__)


@dataclass
class Difficulty:
    config: RunnerConfig
    score: int = 0
    tick_interval_ms: float = field(init=False)
    max_air_time: int = field(init=False)

    def __post_init__(self) -> None:
        self.tick_interval_ms = self.config.initial_tick_ms
        self.max_air_time = self.config.initial_air_time

    @property
    def tick_seconds(self) -> float:
        return self.tick_interval_ms / 1000.0

    @property
    def speed_fraction(self) -> float:
        """Current tick interval as a fraction of the initial one."""
        return self.tick_interval_ms / self.config.initial_tick_ms

    def advance(self) -> None:
        """Count one tick of survival and tighten the pace every score interval."""
        cfg = self.config
        self.score += 1
        if self.score % cfg.score_interval != 0 or self.tick_interval_ms <= cfg.min_tick_ms:
            return

        self.tick_interval_ms = max(cfg.min_tick_ms, self.tick_interval_ms * cfg.speed_decay)
        # Air time grows as the tick interval shrinks.
        self.max_air_time = cfg.initial_air_time + int(
            self.max_air_time * (1.0 - self.speed_fraction)
        )
        logger.info(
            "score %d: tick %.1f ms, max air time %d",
            self.score,
            self.tick_interval_ms,
            self.max_air_time,
        )
