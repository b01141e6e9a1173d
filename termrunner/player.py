# -*- coding: utf-8 -*-
"""Player vertical motion: run, jump, hang, fall, die."""
from __future__ import annotations

from dataclasses import dataclass

from .models import PlayerState, RunnerConfig
from .terrain import SlopeType, TerrainBuffer, TerrainUnit


@dataclass
class Player:
    row: int
    state: PlayerState = PlayerState.IDLE
    air_distance: int = 0
    pending_jump: bool = False
    ascent_distance: int = 3

    @classmethod
    def new(cls, config: RunnerConfig) -> "Player":
        return cls(row=config.baseline_row, ascent_distance=config.ascent_distance)

    @property
    def alive(self) -> bool:
        return self.state is not PlayerState.DEAD

    @property
    def airborne(self) -> bool:
        return self.state in (PlayerState.JUMPING, PlayerState.MAX_HEIGHT, PlayerState.FALLING)

    def start(self) -> None:
        if self.state is PlayerState.IDLE:
            self.state = PlayerState.RUNNING

    def jump(self, unit: TerrainUnit) -> None:
        """Request a jump. On an UP slope the jump waits for level ground."""
        if unit.slope is SlopeType.UP:
            self.pending_jump = True
        elif self.state is PlayerState.RUNNING:
            self.state = PlayerState.JUMPING

    def update(self, terrain: TerrainBuffer, max_air_time: int) -> None:
        if self.state is PlayerState.DEAD:
            return

        unit = terrain.unit_at_player_column()
        ground = terrain.ground_row()

        if self.state is PlayerState.JUMPING:
            self.row -= 1
            self.air_distance += 1
            if self.air_distance == self.ascent_distance:
                self.state = PlayerState.MAX_HEIGHT
            if self.row >= ground:
                self.state = PlayerState.RUNNING
                self.air_distance = 0
        elif self.state is PlayerState.MAX_HEIGHT:
            if self.row >= ground:
                self.state = PlayerState.RUNNING
                self.air_distance = 0
            else:
                self.air_distance += 1
                if self.air_distance >= max_air_time:
                    self.state = PlayerState.FALLING
        elif self.state is PlayerState.FALLING:
            if self.row >= ground:
                self.state = PlayerState.RUNNING
                self.air_distance = 0
            else:
                self.row += 1
        elif (
            self.state is PlayerState.RUNNING
            and self.pending_jump
            and unit.slope is not SlopeType.UP
        ):
            self.pending_jump = False
            self.state = PlayerState.JUMPING
        else:
            self.row = ground

        # Collision overrides whatever transition happened above.
        if unit.obstacle and self.row == terrain.surface_row(unit):
            self.state = PlayerState.DEAD
