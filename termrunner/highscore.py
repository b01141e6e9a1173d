# -*- coding: utf-8 -*-
"""Best-score persistence (a single integer in a text file)."""
from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def default_path() -> Path:
    base = os.environ.get("XDG_DATA_HOME") or str(Path.home() / ".local" / "share")
    return Path(base) / "termrunner" / "highscore"


def load_highscore(path: Path) -> int:
    try:
        text = path.read_text(encoding="utf-8").strip()
    except FileNotFoundError:
        return 0
    except OSError as exc:
        logger.warning("cannot read high score from %s: %s", path, exc)
        return 0

    try:
        value = int(text)
    except ValueError:
        logger.warning("ignoring malformed high score file %s: %r", path, text[:32])
        return 0
    return max(0, value)


def save_highscore(path: Path, score: int) -> bool:
    """Write ``score`` atomically. Returns False (and logs) on I/O failure."""
    tmp = path.with_name(path.name + ".tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp.write_text(f"{int(score)}\n", encoding="utf-8")
        os.replace(tmp, path)
    except OSError as exc:
        logger.warning("cannot save high score to %s: %s", path, exc)
        return False
    logger.info("saved high score %d to %s", score, path)
    return True
