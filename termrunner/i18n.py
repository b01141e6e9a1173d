# -*- coding: utf-8 -*-
"""Localization utilities (English + Russian)."""
from __future__ import annotations

from typing import Callable, Dict


LOCALES: Dict[str, Dict[str, str]] = {
    "en": {
        "lang_name": "English",

        "msg_too_small": "Terminal too small. Enlarge it.",
        "msg_too_small_detail": "({detail})",

        "prompt_yes_no": "{prompt} Y/N ",
        "prompt_exit": "Exit the game?",
        "prompt_quit_short": "Quit?",

        "menu_title": " TERMRUNNER ",
        "menu_best": "Best score: {best}",
        "menu_footer": "←/→: change   Enter: select   ESC: back",
        "menu_small": "Terminal too small for the menu. Enlarge it.",
        "menu_small_hint": "Enter: continue   Q: quit",

        "menu_action_start": "Start",
        "menu_action_resume": "Resume",
        "menu_action_restart": "Restart",
        "menu_action_quit": "Quit",

        "menu_item_mode": "Mode",
        "menu_item_colors": "Color",
        "menu_item_unicode": "Unicode",
        "menu_item_hud": "HUD",
        "menu_item_language": "Language",

        "help_selected": "Selected: {label}",
        "help_nav_title": "Navigation:",
        "help_nav_updown": "  ↑/↓ or W/S — select",
        "help_nav_leftright": "  ←/→ or A/D — change",
        "help_nav_enter": "  Enter/Space — apply",
        "help_nav_esc": "  ESC — close",
        "help_in_game": "In game: Space/W/J jump, P pause, ESC menu, Q quit",

        "help_mode_title": "Mode:",
        "help_mode_play": "  play     — you jump",
        "help_mode_autoplay": "  autoplay — the bot jumps, runs restart on their own",

        "help_hud_title": "HUD:",
        "help_hud_on": "  on  — score line at the bottom",
        "help_hud_off": "  off — hidden",

        "opt_auto": "auto",
        "opt_on": "on",
        "opt_off": "off",
        "opt_play": "play",
        "opt_autoplay": "autoplay",

        "start_hint": "PRESS ANY KEY TO PLAY",

        "hud_line": "Score: {score}  Best: {best}  Tick: {tick:.0f} ms  {tags}",
        "tag_auto": "AUTO",
        "tag_ascii": "ASCII",
        "tag_utf8": "UTF-8",

        "pause_banner": "PAUSE",
        "dead_banner": "DEAD",

        "over_title": "Game over",
        "over_score": "Score: {score}",
        "over_best": "Best: {best}",
        "over_new_best": "New best score!",
        "over_press_key": "Press JUMP to run again, Q to quit",
        "over_demo_next": "Autoplay: next run…",
    },
    "ru": {
        "lang_name": "Русский",

        "msg_too_small": "Окно слишком маленькое. Увеличьте терминал.",
        "msg_too_small_detail": "({detail})",

        "prompt_yes_no": "{prompt} Y/N ",
        "prompt_exit": "Выйти из игры?",
        "prompt_quit_short": "Выйти?",

        "menu_title": " TERMRUNNER ",
        "menu_best": "Рекорд: {best}",
        "menu_footer": "←/→: изменить   Enter: выбрать   ESC: назад",
        "menu_small": "Окно слишком маленькое для меню. Увеличьте терминал.",
        "menu_small_hint": "Enter: продолжить   Q: выйти",

        "menu_action_start": "Начать",
        "menu_action_resume": "Продолжить",
        "menu_action_restart": "Перезапуск",
        "menu_action_quit": "Выход",

        "menu_item_mode": "Режим",
        "menu_item_colors": "Цвет",
        "menu_item_unicode": "Unicode",
        "menu_item_hud": "HUD",
        "menu_item_language": "Язык",

        "help_selected": "Выбрано: {label}",
        "help_nav_title": "Навигация:",
        "help_nav_updown": "  ↑/↓ или W/S — выбор",
        "help_nav_leftright": "  ←/→ или A/D — изменить",
        "help_nav_enter": "  Enter/Space — применить",
        "help_nav_esc": "  ESC — закрыть",
        "help_in_game": "В игре: Space/W/J прыжок, P пауза, ESC меню, Q выход",

        "help_mode_title": "Режим:",
        "help_mode_play": "  игра    — прыгаете вы",
        "help_mode_autoplay": "  автоигра — прыгает бот, забеги перезапускаются сами",

        "help_hud_title": "HUD:",
        "help_hud_on": "  вкл  — строка счёта внизу",
        "help_hud_off": "  выкл — скрыта",

        "opt_auto": "авто",
        "opt_on": "вкл",
        "opt_off": "выкл",
        "opt_play": "игра",
        "opt_autoplay": "автоигра",

        "start_hint": "НАЖМИТЕ ЛЮБУЮ КЛАВИШУ",

        "hud_line": "Счёт: {score}  Рекорд: {best}  Такт: {tick:.0f} мс  {tags}",
        "tag_auto": "АВТО",
        "tag_ascii": "ASCII",
        "tag_utf8": "UTF-8",

        "pause_banner": "ПАУЗА",
        "dead_banner": "КОНЕЦ",

        "over_title": "Игра окончена",
        "over_score": "Счёт: {score}",
        "over_best": "Рекорд: {best}",
        "over_new_best": "Новый рекорд!",
        "over_press_key": "ПРЫЖОК — ещё раз, Q — выход",
        "over_demo_next": "Автоигра: следующий забег…",
    },
}

def make_tr(lang: str) -> Callable[[str], str]:
    def tr(key: str, **kwargs) -> str:
        table = LOCALES.get(lang) or LOCALES["en"]
        s = table.get(key) or LOCALES["en"].get(key) or key
        if kwargs:
            try:
                return s.format(**kwargs)
            except (KeyError, IndexError, ValueError):
                return s
        return s
    return tr


def option_display(tr: Callable[[str], str], key: str, value: str) -> str:
    mapping = {
        "auto": "opt_auto",
        "on": "opt_on",
        "off": "opt_off",
        "play": "opt_play",
        "autoplay": "opt_autoplay",
    }
    if key == "language":
        return (LOCALES.get(value) or LOCALES["en"]).get("lang_name", value)
    return tr(mapping.get(value, value))
