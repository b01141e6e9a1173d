# -*- coding: utf-8 -*-
"""One run of the game: the owned terrain/player/difficulty aggregate and its tick.

A tick always runs in this order:
- input: apply queued events (jump sees the terrain before it scrolls)
- update: scroll terrain, ease the vertical offset, move the player
- snapshot: capture what the renderer draws
- advance: account the slope just reached, then score and difficulty
"""
from __future__ import annotations

import enum
import random
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional

from .bot import autoplay as autoplay_step
from .difficulty import Difficulty
from .models import PlayerState, RunnerConfig
from .player import Player
from .terrain import TerrainBuffer


class InputEvent(enum.Enum):
    JUMP = "jump"
    TOGGLE_PAUSE = "pause"
    QUIT = "quit"


@dataclass(frozen=True)
class VisibleUnit:
    row: int
    column: int
    glyphs: tuple[str, str, str]
    obstacle: bool
    marker: bool


@dataclass(frozen=True)
class Snapshot:
    units: tuple[VisibleUnit, ...]
    player_row: int
    player_column: int
    player_state: PlayerState
    score: int
    paused: bool
    tick_interval_ms: float


@dataclass
class World:
    config: RunnerConfig
    terrain: TerrainBuffer
    player: Player
    difficulty: Difficulty
    autoplay: bool = False
    paused: bool = False

    @classmethod
    def new(
        cls,
        config: RunnerConfig,
        highscore: int = 0,
        autoplay: bool = False,
        rng: Optional[random.Random] = None,
    ) -> "World":
        return cls(
            config=config,
            terrain=TerrainBuffer(config, rng=rng, highscore=highscore),
            player=Player.new(config),
            difficulty=Difficulty(config),
            autoplay=autoplay,
        )

    @property
    def score(self) -> int:
        return self.difficulty.score

    @property
    def alive(self) -> bool:
        return self.player.alive

    @property
    def running(self) -> bool:
        return self.player.state is not PlayerState.IDLE and self.alive and not self.paused

    def start(self) -> None:
        self.player.start()

    def handle(self, event: InputEvent) -> bool:
        """Apply one input event. Returns True when the event asks to quit."""
        if event is InputEvent.QUIT:
            return True
        if event is InputEvent.TOGGLE_PAUSE:
            if self.alive:
                self.paused = not self.paused
        elif event is InputEvent.JUMP and not self.paused:
            self.player.jump(self.terrain.unit_at_player_column())
        return False

    def tick(self, events: Iterable[InputEvent] = ()) -> Snapshot:
        for event in events:
            self.handle(event)

        if not self.running:
            return self.snapshot()

        if self.autoplay:
            autoplay_step(self.player, self.terrain, self.difficulty.max_air_time)

        self.terrain.scroll_tick()
        self.terrain.offset(self.player.state)
        self.player.update(self.terrain, self.difficulty.max_air_time)

        snap = self.snapshot()

        self.terrain.roffset()
        if self.alive:
            self.difficulty.advance()
        return snap

    def snapshot(self) -> Snapshot:
        terrain = self.terrain
        units = tuple(
            VisibleUnit(
                row=terrain.surface_row(unit),
                column=col,
                glyphs=unit.glyphs,
                obstacle=unit.obstacle,
                marker=unit.marker,
            )
            for col, unit in enumerate(terrain.visible_units())
        )
        return Snapshot(
            units=units,
            player_row=self.player.row,
            player_column=self.config.player_column,
            player_state=self.player.state,
            score=self.difficulty.score,
            paused=self.paused,
            tick_interval_ms=self.difficulty.tick_interval_ms,
        )
