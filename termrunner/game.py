"""Main game loop and curses entrypoint.

Between ticks the loop polls the keyboard without blocking and applies each
event to the world immediately. A tick fires once more wall-clock time than
the current tick interval has passed; it scrolls, moves and scores the world,
then the snapshot it returns is drawn.
"""

from __future__ import annotations

import argparse
import curses
import locale
import logging
import random
import time
from collections.abc import Callable
from pathlib import Path
from typing import Optional, Sequence

from .constants import KEY_ESC, KEYS_JUMP, KEYS_PAUSE, KEYS_QUIT, POLL_SLEEP
from .highscore import default_path, load_highscore, save_highscore
from .i18n import make_tr
from .models import ConfigError, RunnerConfig, Settings
from .render import render_frame
from .style import Style, effective_style, init_style
from .ui import confirm_yes_no, game_over_screen, run_menu
from .util import centered_x, safe_addstr
from .world import InputEvent, World

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="termrunner", description="Endless runner in the terminal.")
    p.add_argument("--seed", type=int, default=None, help="terrain seed (random by default)")
    p.add_argument("--autoplay", action="store_true", help="start in autoplay mode")
    p.add_argument(
        "--highscore-file",
        type=Path,
        default=None,
        help="where the best score is kept (default: XDG data dir)",
    )
    p.add_argument("--log-file", type=Path, default=None, help="write debug log to this file")
    return p.parse_args(argv)


def setup_logging(log_file: Optional[Path]) -> None:
    # The terminal belongs to curses: log to a file or nowhere.
    if log_file is None:
        logging.getLogger().addHandler(logging.NullHandler())
        return
    logging.basicConfig(
        filename=str(log_file),
        level=logging.DEBUG,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def key_to_event(ch: int) -> Optional[InputEvent]:
    if ch in KEYS_JUMP or ch == curses.KEY_UP:
        return InputEvent.JUMP
    if ch in KEYS_PAUSE:
        return InputEvent.TOGGLE_PAUSE
    if ch in KEYS_QUIT:
        return InputEvent.QUIT
    return None


def build_config(stdscr, seed: Optional[int]) -> RunnerConfig:
    _h, w = stdscr.getmaxyx()
    return RunnerConfig(visible_width=w - 2, seed=seed)


def _too_small(stdscr, tr: Callable[[str], str], err: ConfigError) -> None:
    stdscr.erase()
    h, w = stdscr.getmaxyx()
    msg = tr("msg_too_small")
    detail = tr("msg_too_small_detail", detail=str(err))
    safe_addstr(stdscr, h // 2, centered_x(w, msg), msg[: max(0, w - 1)], curses.A_BOLD)
    safe_addstr(stdscr, h // 2 + 1, 0, detail[: max(0, w - 1)], curses.A_DIM)
    stdscr.refresh()
    stdscr.nodelay(False)
    stdscr.getch()
    stdscr.nodelay(True)


def _wait_for_start(
    stdscr, tr: Callable[[str], str], world: World, style: Style, settings: Settings, highscore: int
) -> bool:
    """Draw the idle world and wait for any key. Returns False on quit."""
    render_frame(stdscr, tr, world.snapshot(), style, settings, highscore)
    h, w = stdscr.getmaxyx()
    hint = tr("start_hint")
    safe_addstr(stdscr, h // 2, centered_x(w, hint), hint, curses.A_BOLD)
    stdscr.refresh()

    stdscr.nodelay(False)
    try:
        ch = stdscr.getch()
    finally:
        stdscr.nodelay(True)
    if ch in KEYS_QUIT:
        return False
    world.start()
    return True


def play_run(
    stdscr,
    base_style: Style,
    settings: Settings,
    config: RunnerConfig,
    rng: random.Random,
    highscore: int,
) -> tuple[str, int]:
    """Play one run until death, restart or quit.

    Returns (action, score) where action is "over", "restart" or "quit".
    """
    tr = make_tr(settings.language)
    style = effective_style(base_style, settings)
    world = World.new(config, highscore=highscore, autoplay=settings.mode == "autoplay", rng=rng)
    logger.info("run started (autoplay=%s, highscore=%d)", world.autoplay, highscore)

    if world.autoplay:
        world.start()
    elif not _wait_for_start(stdscr, tr, world, style, settings, highscore):
        return "quit", 0

    last_tick = time.monotonic()
    while True:
        while True:
            ch = stdscr.getch()
            if ch == -1:
                break

            if ch == KEY_ESC:
                action = run_menu(stdscr, base_style, settings, highscore, mode="pause")
                if action in ("quit", "restart"):
                    return action, world.score
                tr = make_tr(settings.language)
                style = effective_style(base_style, settings)
                world.autoplay = settings.mode == "autoplay"
                last_tick = time.monotonic()
                continue

            event = key_to_event(ch)
            if event is InputEvent.QUIT:
                if confirm_yes_no(stdscr, tr, "prompt_exit"):
                    return "quit", world.score
                continue
            if event is not None:
                world.handle(event)

        now = time.monotonic()
        if now - last_tick > world.difficulty.tick_seconds:
            last_tick = now
            snap = world.tick()
            render_frame(stdscr, tr, snap, style, settings, highscore)
            if not world.alive:
                logger.info("run over at score %d", world.score)
                return "over", world.score

        time.sleep(POLL_SLEEP)


def main(stdscr, args: argparse.Namespace) -> None:
    curses.curs_set(0)
    stdscr.keypad(True)
    curses.noecho()
    curses.cbreak()

    base_style = init_style(stdscr)
    settings = Settings(mode="autoplay" if args.autoplay else "play")

    hs_path = args.highscore_file or default_path()
    highscore = load_highscore(hs_path)

    action = run_menu(stdscr, base_style, settings, highscore, mode="start")
    if action == "quit":
        return

    rng = random.Random(args.seed)
    stdscr.nodelay(True)

    while True:
        tr = make_tr(settings.language)
        try:
            config = build_config(stdscr, args.seed)
        except ConfigError as err:
            logger.warning("cannot start: %s", err)
            _too_small(stdscr, tr, err)
            return

        action, score = play_run(stdscr, base_style, settings, config, rng, highscore)
        if action == "quit":
            return
        if action == "restart":
            logger.info("restart requested at score %d", score)
            continue

        new_best = score > highscore
        if new_best:
            highscore = score
            save_highscore(hs_path, highscore)

        wait = settings.mode != "autoplay"
        if not game_over_screen(stdscr, tr, score, highscore, new_best, wait=wait):
            return


def run(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    setup_logging(args.log_file)
    try:
        locale.setlocale(locale.LC_ALL, "")
    except locale.Error:
        pass
    curses.wrapper(main, args)
