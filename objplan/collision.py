"""Collision checking of a sphere-approximated object against obstacle points."""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np
from scipy.spatial import cKDTree

from objplan.geometry import Config, SphereTreeNode
from objplan.sphere_tree import _as_point_array


class CollisionChecker:
    """Tests poses of an object, given by its sphere tree, against a point cloud.

    Only the leaf spheres take part. A pose collides when an obstacle point lies
    strictly inside any leaf sphere after rotating the object by ``theta`` about
    the z axis and translating it by ``(x, y)``.
    """

    def __init__(self, sphere_tree: Sequence[SphereTreeNode], obstacle_points) -> None:
        leaves = [node.sphere for node in sphere_tree if node.is_leaf()]
        self._centers = np.array([s.center for s in leaves], dtype=float).reshape(-1, 3)
        self._radius_sq = np.array([s.radius * s.radius for s in leaves], dtype=float)
        obstacles = _as_point_array(obstacle_points)
        self._obstacles = cKDTree(obstacles) if len(obstacles) else None

    def is_path_in_collision(self, path_segment: Iterable[Config]) -> bool:
        """Return True if any pose of the segment collides."""
        if self._obstacles is None or len(self._centers) == 0:
            return False
        poses = np.array([(c.x, c.y, c.theta) for c in path_segment], dtype=float)
        if len(poses) == 0:
            return False

        sin = np.sin(poses[:, 2])[:, None]
        cos = np.cos(poses[:, 2])[:, None]
        ox, oy, oz = self._centers.T
        new_x = cos * ox - sin * oy + poses[:, 0:1]
        new_y = sin * ox + cos * oy + poses[:, 1:2]
        new_z = np.broadcast_to(oz, new_x.shape)

        queries = np.stack([new_x, new_y, new_z], axis=-1).reshape(-1, 3)
        distances, _ = self._obstacles.query(queries, k=1)
        distances_sq = distances.reshape(new_x.shape) ** 2
        return bool(np.any(distances_sq < self._radius_sq))