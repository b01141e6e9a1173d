# -*- coding: utf-8 -*-
"""Draws a world snapshot: terrain strip, player and the score line."""
from __future__ import annotations

import curses
from typing import Callable

from .constants import SCREEN_X, TERRAIN_DEPTH
from .models import PlayerState, Settings
from .style import Style
from .util import centered_x, safe_addstr
from .world import Snapshot


def draw_terrain(stdscr, snap: Snapshot, style: Style, view_h: int) -> None:
    for unit in snap.units:
        x = SCREEN_X + unit.column
        for i in range(TERRAIN_DEPTH):
            y = unit.row + i
            if 0 <= y < view_h:
                attr = style.surface_attr(unit.marker) if i == 0 else style.fill_attr(unit.marker)
                safe_addstr(stdscr, y, x, unit.glyphs[i], attr)
        if unit.obstacle and 0 <= unit.row < view_h:
            safe_addstr(stdscr, unit.row, x, style.obstacle_char(), style.obstacle_attr())


def draw_player(stdscr, snap: Snapshot, style: Style, view_h: int) -> None:
    if 0 <= snap.player_row < view_h:
        safe_addstr(
            stdscr,
            snap.player_row,
            SCREEN_X + snap.player_column,
            style.player_char(),
            style.player_attr(),
        )


def draw_hud(
    stdscr,
    tr: Callable[[str], str],
    snap: Snapshot,
    settings: Settings,
    style: Style,
    highscore: int,
) -> None:
    h, w = stdscr.getmaxyx()
    tags = [tr("tag_utf8") if style.unicode_ok else tr("tag_ascii")]
    if settings.mode == "autoplay":
        tags.append(tr("tag_auto"))
    line = tr(
        "hud_line",
        score=snap.score,
        best=max(highscore, snap.score),
        tick=snap.tick_interval_ms,
        tags="+".join(tags),
    )
    safe_addstr(stdscr, h - 1, 0, line[: max(0, w - 1)], style.hud_attr())


def draw_banner(stdscr, text: str) -> None:
    _h, w = stdscr.getmaxyx()
    safe_addstr(stdscr, 0, centered_x(w, text), text, curses.A_BOLD | curses.A_REVERSE)


def render_frame(
    stdscr,
    tr: Callable[[str], str],
    snap: Snapshot,
    style: Style,
    settings: Settings,
    highscore: int,
) -> None:
    stdscr.erase()
    h, _w = stdscr.getmaxyx()
    hud_lines = 1 if settings.hud == "on" else 0
    view_h = h - hud_lines

    draw_terrain(stdscr, snap, style, view_h)
    draw_player(stdscr, snap, style, view_h)

    if hud_lines:
        draw_hud(stdscr, tr, snap, settings, style, highscore)
    if snap.paused:
        draw_banner(stdscr, tr("pause_banner"))
    elif snap.player_state is PlayerState.DEAD:
        draw_banner(stdscr, tr("dead_banner"))

    stdscr.refresh()
