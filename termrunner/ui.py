# -*- coding: utf-8 -*-
"""UI helpers: prompts, settings menu, game-over screen."""
from __future__ import annotations

import curses
import textwrap
import time
from typing import Callable, List, Literal, Tuple

from .constants import DEMO_RESTART_DELAY, KEYS_JUMP, KEYS_QUIT
from .i18n import LOCALES, make_tr, option_display
from .models import Settings
from .style import Style, draw_box
from .util import centered_x, safe_addstr

def confirm_yes_no(stdscr, tr: Callable[[str], str], prompt_key: str) -> bool:
    prompt = tr(prompt_key)
    h, w = stdscr.getmaxyx()
    line = tr("prompt_yes_no", prompt=prompt)
    safe_addstr(stdscr, h - 1, 0, line[: max(0, w - 1)], curses.A_REVERSE)
    stdscr.refresh()

    stdscr.nodelay(False)
    try:
        while True:
            ch = stdscr.getch()
            if ch in (ord("y"), ord("Y")):
                return True
            if ch in (ord("n"), ord("N")):
                return False
    finally:
        stdscr.nodelay(True)

def cycle_value(values: List[str], cur: str, delta: int) -> str:
    try:
        i = values.index(cur)
    except ValueError:
        i = 0
    return values[(i + delta) % len(values)]

def run_menu(
    stdscr,
    base_style: Style,
    settings: Settings,
    highscore: int,
    mode: Literal["start", "pause"],
) -> str:
    stdscr.nodelay(False)
    sel = 0

    onoff = ["on", "off"]
    onoffauto = ["auto", "on", "off"]
    mode_choices = ["play", "autoplay"]

    lang_choices = list(LOCALES.keys())
    if "en" in lang_choices:
        lang_choices = ["en"] + [l for l in lang_choices if l != "en"]

    items: List[Tuple[str, str, str]] = []
    if mode == "pause":
        items.append(("menu_action_resume", "action", "resume"))
    else:
        items.append(("menu_action_start", "action", "start"))

    items += [
        ("menu_item_mode", "choice", "mode"),
        ("menu_item_colors", "choice", "colors"),
        ("menu_item_unicode", "choice", "unicode"),
        ("menu_item_hud", "choice", "hud"),
        ("menu_item_language", "choice", "language"),
    ]

    if mode == "pause":
        items.append(("menu_action_restart", "action", "restart"))
    items.append(("menu_action_quit", "action", "quit"))

    while True:
        tr = make_tr(settings.language)

        stdscr.erase()
        H, W = stdscr.getmaxyx()

        if H < 14 or W < 44:
            safe_addstr(stdscr, 0, 0, tr("menu_small"))
            safe_addstr(stdscr, 2, 0, tr("menu_small_hint"))
            stdscr.refresh()
            ch = stdscr.getch()
            if ch in KEYS_QUIT:
                if confirm_yes_no(stdscr, tr, "prompt_quit_short"):
                    stdscr.nodelay(True)
                    return "quit"
            if ch in (10, 13, curses.KEY_ENTER):
                stdscr.nodelay(True)
                return "resume" if mode == "pause" else "start"
            continue

        box_w = min(80, W - 4)
        box_h = min(22, H - 4)
        box_x = (W - box_w) // 2
        box_y = (H - box_h) // 2

        unicode_ui = base_style.unicode_ok
        border_attr = curses.A_NORMAL
        if base_style.colors_ok and base_style.hud_pair:
            border_attr |= curses.color_pair(base_style.hud_pair)

        draw_box(stdscr, box_y, box_x, box_h, box_w, unicode_ui, border_attr)
        title = tr("menu_title")
        safe_addstr(stdscr, box_y, box_x + 2, title[: box_w - 4], border_attr | curses.A_BOLD)
        best_line = tr("menu_best", best=highscore)
        safe_addstr(stdscr, box_y + 1, box_x + 2, best_line[: box_w - 4], curses.A_DIM)

        left_w = int(box_w * 0.45)
        left_x = box_x + 2
        right_x = left_x + left_w + 2
        # Keep one-char padding before the border to prevent curses auto-wrap.
        text_right = box_x + box_w - 3
        right_w = max(0, text_right - right_x + 1)
        top_y = box_y + 3

        sep = "│" if unicode_ui else "|"
        for yy in range(top_y - 1, box_y + box_h - 2):
            safe_addstr(stdscr, yy, right_x - 2, sep, border_attr)

        sel = max(0, min(sel, len(items) - 1))
        label_width = 10

        for i, (label_key, kind, key) in enumerate(items):
            y = top_y + i
            is_sel = (i == sel)
            prefix = "▶ " if unicode_ui else "> "
            pad = "  "
            attr = curses.A_REVERSE if is_sel else curses.A_NORMAL

            label = tr(label_key)
            value = ""
            if kind == "choice":
                cur = str(getattr(settings, key))
                value = f"[ {option_display(tr, key, cur)} ]"

            line = (prefix if is_sel else pad) + f"{label:<{label_width}} {value}"
            safe_addstr(stdscr, y, left_x, line[: left_w], attr)

        label_key, kind, key = items[sel]
        help_lines = [
            tr("help_selected", label=tr(label_key)),
            "",
            tr("help_nav_title"),
            tr("help_nav_updown"),
            tr("help_nav_leftright"),
            tr("help_nav_enter"),
            tr("help_nav_esc"),
            "",
            tr("help_in_game"),
            "",
        ]
        if key == "mode":
            help_lines += [
                tr("help_mode_title"),
                tr("help_mode_play"),
                tr("help_mode_autoplay"),
            ]
        elif key == "hud":
            help_lines += [
                tr("help_hud_title"),
                tr("help_hud_on"),
                tr("help_hud_off"),
            ]

        yy = top_y
        for i, line in enumerate(help_lines):
            if yy >= box_y + box_h - 2:
                break
            base_attr = (curses.A_BOLD if i == 0 else curses.A_DIM)
            if not line:
                yy += 1
                continue
            for seg in textwrap.wrap(line, width=max(1, right_w), break_long_words=True):
                if yy >= box_y + box_h - 2:
                    break
                safe_addstr(stdscr, yy, right_x, seg, base_attr)
                yy += 1

        footer = tr("menu_footer")
        safe_addstr(stdscr, box_y + box_h - 2, box_x + 2, footer[: box_w - 4], curses.A_DIM)

        stdscr.refresh()
        ch = stdscr.getch()

        if ch == 27:  # ESC
            if mode == "start":
                if confirm_yes_no(stdscr, tr, "prompt_exit"):
                    stdscr.nodelay(True)
                    return "quit"
                continue
            stdscr.nodelay(True)
            return "resume"

        if ch in (curses.KEY_UP, ord("w"), ord("W")):
            sel = (sel - 1) % len(items)
            continue
        if ch in (curses.KEY_DOWN, ord("s"), ord("S")):
            sel = (sel + 1) % len(items)
            continue

        def adjust(delta: int) -> None:
            _label_key, kind, key = items[sel]
            if kind != "choice":
                return
            cur = str(getattr(settings, key))
            if key == "mode":
                settings.mode = cycle_value(mode_choices, cur, delta)  # type: ignore
            elif key in ("colors", "unicode"):
                setattr(settings, key, cycle_value(onoffauto, cur, delta))
            elif key == "hud":
                settings.hud = cycle_value(onoff, cur, delta)  # type: ignore
            elif key == "language":
                settings.language = cycle_value(lang_choices, cur, delta)

        if ch in (curses.KEY_LEFT, ord("a"), ord("A")):
            adjust(-1)
            continue
        if ch in (curses.KEY_RIGHT, ord("d"), ord("D")):
            adjust(1)
            continue

        if ch in (10, 13, curses.KEY_ENTER, ord(" ")):
            label_key, kind, key = items[sel]
            if kind == "action":
                if key == "quit":
                    if confirm_yes_no(stdscr, tr, "prompt_exit"):
                        stdscr.nodelay(True)
                        return "quit"
                    continue
                stdscr.nodelay(True)
                return key
            adjust(1)
            continue

        if ch in KEYS_QUIT:
            if confirm_yes_no(stdscr, tr, "prompt_exit"):
                stdscr.nodelay(True)
                return "quit"

def game_over_screen(
    stdscr, tr: Callable[[str], str], score: int, best: int, new_best: bool, wait: bool
) -> bool:
    """Show the final score. Returns False when the player chose to quit."""
    h, w = stdscr.getmaxyx()

    lines = [tr("over_title"), tr("over_score", score=score), tr("over_best", best=best)]
    if new_best:
        lines.append(tr("over_new_best"))
    lines.append(tr("over_press_key") if wait else tr("over_demo_next"))

    y = max(0, 2 * h // 3 - len(lines) // 2)
    for i, msg in enumerate(lines):
        safe_addstr(stdscr, y + i, centered_x(w, msg), msg[: max(0, w - 1)], curses.A_BOLD)
    stdscr.refresh()

    if not wait:
        time.sleep(DEMO_RESTART_DELAY)
        return True

    stdscr.nodelay(False)
    try:
        while True:
            ch = stdscr.getch()
            if ch in KEYS_QUIT:
                return False
            if ch in KEYS_JUMP or ch == curses.KEY_UP:
                return True
    finally:
        stdscr.nodelay(True)
