#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Endless runner in the terminal.

Features:
- Noise-generated slopes and obstacle runs, streamed in chunks.
- Jump arcs that wait for level ground when started on a climb.
- Speed and air time grow with the score; best score is kept on disk.
- Autoplay bot for unattended runs.
- ESC menu with language/color/unicode settings.

Usage:
  python3 main.py [--seed N] [--autoplay] [--highscore-file PATH] [--log-file PATH]
"""

from termrunner.game import run

if __name__ == "__main__":
    run()
