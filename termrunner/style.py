"""Terminal capabilities and styling (unicode, colors, glyph choice)."""

from __future__ import annotations

import curses
import locale
import os
import sys
from dataclasses import dataclass
from typing import Literal

from .constants import (
    OBSTACLE_CHAR,
    OBSTACLE_CHAR_UNICODE,
    PLAYER_CHAR,
    PLAYER_CHAR_UNICODE,
)
from .models import Settings
from .util import safe_addstr


@dataclass
class Style:
    unicode_ok: bool
    colors_ok: bool
    color_mode: Literal["none", "basic"]
    surface_pair: int
    fill_pair: int
    obstacle_pair: int
    player_pair: int
    marker_pair: int
    hud_pair: int

    def _pair(self, pid: int) -> int:
        if not self.colors_ok or not pid:
            return curses.A_NORMAL
        return curses.color_pair(pid)

    def surface_attr(self, marker: bool = False) -> int:
        if marker:
            return self._pair(self.marker_pair) | curses.A_BOLD
        return self._pair(self.surface_pair)

    def fill_attr(self, marker: bool = False) -> int:
        if marker:
            return self._pair(self.marker_pair) | curses.A_BOLD
        return self._pair(self.fill_pair) | curses.A_DIM

    def obstacle_attr(self) -> int:
        return self._pair(self.obstacle_pair) | curses.A_BOLD

    def player_attr(self) -> int:
        return self._pair(self.player_pair) | curses.A_BOLD

    def hud_attr(self) -> int:
        return self._pair(self.hud_pair) | curses.A_BOLD

    def player_char(self) -> str:
        return PLAYER_CHAR_UNICODE if self.unicode_ok else PLAYER_CHAR

    def obstacle_char(self) -> str:
        return OBSTACLE_CHAR_UNICODE if self.unicode_ok else OBSTACLE_CHAR


def init_style(stdscr) -> Style:
    unicode_ok = prefer_utf8()

    colors_ok = False
    color_mode: Literal["none", "basic"] = "none"
    surface_pair = 0
    fill_pair = 0
    obstacle_pair = 0
    player_pair = 0
    marker_pair = 0
    hud_pair = 0

    if curses.has_colors():
        try:
            curses.start_color()
            try:
                curses.use_default_colors()
            except curses.error:
                pass
            colors_ok = True
        except curses.error:
            colors_ok = False

    if colors_ok:
        color_mode = "basic"
        pairs = getattr(curses, "COLOR_PAIRS", 0) or 0

        def safe_init_pair(pid: int, fg: int, bg: int) -> int:
            if pid >= pairs:
                return 0
            try:
                curses.init_pair(pid, fg, bg)
                return pid
            except curses.error:
                return 0

        bg = -1
        surface_pair = safe_init_pair(1, curses.COLOR_GREEN, bg)
        fill_pair = safe_init_pair(2, curses.COLOR_WHITE, bg)
        obstacle_pair = safe_init_pair(3, curses.COLOR_RED, bg)
        player_pair = safe_init_pair(4, curses.COLOR_YELLOW, bg)
        marker_pair = safe_init_pair(5, curses.COLOR_BLUE, bg)
        hud_pair = safe_init_pair(6, curses.COLOR_WHITE, bg)

    return Style(
        unicode_ok=unicode_ok,
        colors_ok=colors_ok,
        color_mode=color_mode,
        surface_pair=surface_pair,
        fill_pair=fill_pair,
        obstacle_pair=obstacle_pair,
        player_pair=player_pair,
        marker_pair=marker_pair,
        hud_pair=hud_pair,
    )


def effective_style(base: Style, settings: Settings) -> Style:
    unicode_ok = base.unicode_ok
    if settings.unicode == "on":
        unicode_ok = True
    elif settings.unicode == "off":
        unicode_ok = False

    colors_ok = base.colors_ok and settings.colors != "off"

    return Style(
        unicode_ok=unicode_ok,
        colors_ok=colors_ok,
        color_mode=base.color_mode if colors_ok else "none",
        surface_pair=base.surface_pair if colors_ok else 0,
        fill_pair=base.fill_pair if colors_ok else 0,
        obstacle_pair=base.obstacle_pair if colors_ok else 0,
        player_pair=base.player_pair if colors_ok else 0,
        marker_pair=base.marker_pair if colors_ok else 0,
        hud_pair=base.hud_pair if colors_ok else 0,
    )


def prefer_utf8() -> bool:
    enc = (
        (sys.stdout.encoding or "")
        + "|"
        + locale.getpreferredencoding(False)
        + "|"
        + (os.environ.get("LC_ALL") or "")
        + "|"
        + (os.environ.get("LANG") or "")
    ).upper()
    return ("UTF-8" in enc) or ("UTF8" in enc)


def box_chars(unicode_ok: bool):
    if unicode_ok:
        return {"tl": "┌", "tr": "┐", "bl": "└", "br": "┘", "h": "─", "v": "│"}
    return {"tl": "+", "tr": "+", "bl": "+", "br": "+", "h": "-", "v": "|"}


def draw_box(stdscr, y: int, x: int, h: int, w: int, unicode_ok: bool, attr: int = 0) -> None:
    bc = box_chars(unicode_ok)
    safe_addstr(stdscr, y, x, bc["tl"] + bc["h"] * (w - 2) + bc["tr"], attr)
    for yy in range(y + 1, y + h - 1):
        safe_addstr(stdscr, yy, x, bc["v"], attr)
        safe_addstr(stdscr, yy, x + w - 1, bc["v"], attr)
    safe_addstr(stdscr, y + h - 1, x, bc["bl"] + bc["h"] * (w - 2) + bc["br"], attr)
