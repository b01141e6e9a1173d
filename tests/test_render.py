import curses
import random

from termrunner.constants import OBSTACLE_CHAR, PLAYER_CHAR, SCREEN_X
from termrunner.game import key_to_event, parse_args
from termrunner.i18n import make_tr, option_display
from termrunner.models import RunnerConfig, Settings
from termrunner.render import render_frame
from termrunner.style import Style
from termrunner.terrain import TerrainUnit
from termrunner.world import InputEvent, World


class FakeScreen:
    """Records addstr calls; enough of a curses window for the renderer."""

    def __init__(self, h: int = 24, w: int = 100) -> None:
        self.h = h
        self.w = w
        self.cells: dict[tuple[int, int], str] = {}

    def getmaxyx(self) -> tuple[int, int]:
        return self.h, self.w

    def erase(self) -> None:
        self.cells.clear()

    def refresh(self) -> None:
        pass

    def addstr(self, y: int, x: int, s: str, attr: int = 0) -> None:
        if not (0 <= y < self.h and 0 <= x < self.w):
            raise curses.error("out of bounds")
        for i, ch in enumerate(s):
            self.cells[(y, x + i)] = ch

    def row_text(self, y: int) -> str:
        return "".join(self.cells.get((y, x), " ") for x in range(self.w))


def dummy_style(*, unicode_ok: bool = False) -> Style:
    # Keep colors disabled so tests don't require curses initialization.
    return Style(
        unicode_ok=unicode_ok,
        colors_ok=False,
        color_mode="none",
        surface_pair=0,
        fill_pair=0,
        obstacle_pair=0,
        player_pair=0,
        marker_pair=0,
        hud_pair=0,
    )


def test_render_draws_terrain_player_and_hud() -> None:
    config = RunnerConfig()
    world = World.new(config, rng=random.Random(0))
    world.terrain.units[30] = TerrainUnit.flat(config.baseline_row, obstacle=True)
    scr = FakeScreen()

    render_frame(scr, make_tr("en"), world.snapshot(), dummy_style(), Settings(), highscore=42)

    b = config.baseline_row
    assert scr.cells[(b, SCREEN_X + config.player_column)] == PLAYER_CHAR
    assert scr.cells[(b, SCREEN_X + 30)] == OBSTACLE_CHAR
    assert scr.cells[(b, SCREEN_X)] == "_"
    assert scr.cells[(b + 1, SCREEN_X)] == "."
    assert "Best: 42" in scr.row_text(scr.h - 1)


def test_render_shows_pause_banner_and_hides_hud() -> None:
    world = World.new(RunnerConfig(), rng=random.Random(0))
    world.start()
    world.handle(InputEvent.TOGGLE_PAUSE)
    scr = FakeScreen()

    render_frame(scr, make_tr("en"), world.snapshot(), dummy_style(), Settings(hud="off"), 0)

    assert "PAUSE" in scr.row_text(0)
    assert scr.row_text(scr.h - 1).strip() == ""


def test_key_mapping() -> None:
    assert key_to_event(ord(" ")) is InputEvent.JUMP
    assert key_to_event(curses.KEY_UP) is InputEvent.JUMP
    assert key_to_event(ord("p")) is InputEvent.TOGGLE_PAUSE
    assert key_to_event(ord("q")) is InputEvent.QUIT
    assert key_to_event(ord("z")) is None


def test_parse_args() -> None:
    args = parse_args(["--seed", "7", "--autoplay"])
    assert args.seed == 7
    assert args.autoplay
    assert args.log_file is None


def test_translations_fall_back_to_english() -> None:
    tr = make_tr("ru")
    assert tr("menu_action_quit") == "Выход"
    assert make_tr("xx")("menu_action_quit") == "Quit"
    assert option_display(make_tr("en"), "mode", "autoplay") == "autoplay"
    assert option_display(tr, "language", "ru") == "Русский"
