# -*- coding: utf-8 -*-
"""Seeded 2-D gradient noise, sampled one point at a time."""
from __future__ import annotations

import math
import random

# Gradient set of improved Perlin noise, reduced to 2-D.
_GRADIENTS = (
    (1.0, 1.0), (-1.0, 1.0), (1.0, -1.0), (-1.0, -1.0),
    (1.0, 0.0), (-1.0, 0.0), (0.0, 1.0), (0.0, -1.0),
)


def _fade(t: float) -> float:
    return t * t * t * (t * (t * 6 - 15) + 10)


def _lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


class Perlin:
    """Perlin noise over the plane with a permutation drawn from ``rng``.

    Values lie roughly in [-1, 1] and are exactly 0 on integer lattice points.
    """

    def __init__(self, rng: random.Random) -> None:
        perm = list(range(256))
        rng.shuffle(perm)
        self._perm = perm + perm

    def _grad(self, ix: int, iy: int, dx: float, dy: float) -> float:
        h = self._perm[self._perm[ix & 255] + (iy & 255)] & 7
        gx, gy = _GRADIENTS[h]
        return gx * dx + gy * dy

    def get(self, x: float, y: float) -> float:
        x0 = math.floor(x)
        y0 = math.floor(y)
        tx = x - x0
        ty = y - y0
        u = _fade(tx)
        v = _fade(ty)

        n00 = self._grad(x0, y0, tx, ty)
        n10 = self._grad(x0 + 1, y0, tx - 1.0, ty)
        n01 = self._grad(x0, y0 + 1, tx, ty - 1.0)
        n11 = self._grad(x0 + 1, y0 + 1, tx - 1.0, ty - 1.0)

        nx0 = _lerp(n00, n10, u)
        nx1 = _lerp(n01, n11, u)
        return _lerp(nx0, nx1, v)
