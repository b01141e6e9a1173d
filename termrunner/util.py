# -*- coding: utf-8 -*-
"""Small helpers used across modules."""
from __future__ import annotations

import curses


def safe_addstr(stdscr, y: int, x: int, s: str, attr: int = 0) -> None:
    try:
        stdscr.addstr(y, x, s, attr)
    except curses.error:
        pass


def centered_x(width: int, text: str) -> int:
    return max(0, (width - len(text)) // 2)
