# -*- coding: utf-8 -*-
"""Project-wide constants and type aliases for the terminal runner."""
from __future__ import annotations

from typing import Literal

# ----- Screen layout -----
BASELINE_ROW = 6          # row the player runs on before any slope
SCREEN_X = 1              # left margin of the terrain strip
PLAYER_COLUMN = 23
VISIBLE_WIDTH = 80
TERRAIN_DEPTH = 3         # glyph rows per terrain unit

# ----- Speed / difficulty -----
INITIAL_TICK_MS = 100.0
MIN_TICK_MS = 40.0
SPEED_DECAY = 0.9
SCORE_INTERVAL = 300

# ----- Jump -----
INITIAL_AIR_TIME = 7
ASCENT_DISTANCE = 3

# ----- Terrain generation -----
MIN_FLAT = -0.46
MAX_FLAT = 0.46
X_STEP = 0.15
Y_STEP = 0.03

MIN_OBST_LENGTH = 3
MAX_OBST_LENGTH = 6
MIN_OBST_DIST = 7
MAX_OBST_DIST = 70
MIN_INCL_DIST = 2

# ----- Glyphs -----
FLAT_GLYPHS = ("_", ".", ".")
UP_GLYPHS = ("/", ".", ".")
DOWN_GLYPHS = ("\\", ".", ".")
MARKER_FILL = "!"

PLAYER_CHAR = "$"
PLAYER_CHAR_UNICODE = "◆"
OBSTACLE_CHAR = "#"
OBSTACLE_CHAR_UNICODE = "▲"

# ----- Keys -----
KEYS_JUMP = (ord(" "), ord("w"), ord("W"), ord("j"), ord("J"))
KEYS_PAUSE = (ord("p"), ord("P"))
KEYS_QUIT = (ord("q"), ord("Q"))
KEY_ESC = 27

# Seconds between polls of the keyboard while waiting for the next tick.
POLL_SLEEP = 0.005
DEMO_RESTART_DELAY = 1.5

Mode = Literal["play", "autoplay"]
OnOffAuto = Literal["auto", "on", "off"]
Hud = Literal["on", "off"]
