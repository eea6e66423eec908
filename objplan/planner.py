"""High-level planner: sphere-tree files, collision queries and smoothed RRT* paths."""

from __future__ import annotations

import os

import numpy as np

from objplan.collision import CollisionChecker
from objplan.geometry import Config
from objplan.rrt_star import PlanParams, RRTStarPlanner
from objplan.smoothing import PathSmoother
from objplan.sphere_tree import build_sphere_tree, load_sphere_tree, save_sphere_tree


def as_points(array) -> np.ndarray:
    """Return ``array`` as an (N, 3) float array, raising ValueError for any other shape."""
    points = np.asarray(array, dtype=float)
    if points.ndim != 2 or points.shape[1] != 3:
        raise ValueError("Input point cloud must be an Nx3 array")
    return points


def create_sphere_tree_file(object_points, filename: str | os.PathLike) -> None:
    """Build a sphere tree over the object's points and write it to ``filename``."""
    save_sphere_tree(filename, build_sphere_tree(as_points(object_points)))


class Planner:
    """Plans collision-free planar motions of an object among obstacle points."""

    def __init__(
        self,
        sphere_tree_file: str | os.PathLike,
        obstacle_points,
        x_bounds: tuple[float, float],
        y_bounds: tuple[float, float],
        theta_bounds: tuple[float, float],
    ) -> None:
        tree = load_sphere_tree(sphere_tree_file)
        obstacles = as_points(obstacle_points)
        self._checker = CollisionChecker(tree, obstacles)
        bounds_min = Config(x_bounds[0], y_bounds[0], theta_bounds[0])
        bounds_max = Config(x_bounds[1], y_bounds[1], theta_bounds[1])
        self._rrt = RRTStarPlanner(self._checker, bounds_min, bounds_max)
        self._smoother = PathSmoother(self._checker)

    def plan(
        self,
        start: Config,
        goal: Config,
        plan_params: PlanParams | None = None,
        smoothing_iterations: int = 100,
    ) -> list[Config]:
        """Plan and smooth a path; an empty list means no path was found."""
        raw_path = self._rrt.plan(start, goal, plan_params or PlanParams())
        if not raw_path:
            return []
        return self._smoother.smooth(raw_path, smoothing_iterations)

    def is_config_in_collision(self, config: Config) -> bool:
        """Return True if the object at ``config`` touches an obstacle."""
        return self._checker.is_path_in_collision([config])