"""Random shortcut smoothing of planned paths."""

from __future__ import annotations

import math
import random
from typing import Iterable

from objplan.collision import CollisionChecker
from objplan.geometry import Config, interpolate_segment

SHORTCUT_RESOLUTION = 0.01


class PathSmoother:
    """Shortens paths by replacing stretches with collision-free straight segments."""

    def __init__(self, checker: CollisionChecker, seed: int | None = None) -> None:
        self._checker = checker
        self._rng = random.Random(seed)

    def smooth(self, path: Iterable[Config], iterations: int) -> list[Config]:
        """Return a new path after ``iterations`` random shortcut attempts."""
        path = list(path)
        for _ in range(iterations):
            if len(path) < 3:
                break
            first = self._rng.randint(0, len(path) - 1)
            second = self._rng.randint(0, len(path) - 1)
            if first == second:
                continue
            first, second = sorted((first, second))
            if second == first + 1:
                continue
            if self._is_free(path[first], path[second]):
                path = path[: first + 1] + path[second:]
        return path

    def _is_free(self, start: Config, end: Config) -> bool:
        dist = math.hypot(start.x - end.x, start.y - end.y)
        steps = int(dist / SHORTCUT_RESOLUTION)
        return not self._checker.is_path_in_collision(interpolate_segment(start, end, steps))