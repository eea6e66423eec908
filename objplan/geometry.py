"""Planar configurations, spheres and the sphere-tree node type."""

from __future__ import annotations

import math
from dataclasses import dataclass

ROTATION_WEIGHT = 0.1
"""Weight applied to the squared angular difference in :func:`config_distance`."""

MIN_SEGMENT_STEPS = 2


@dataclass
class Config:
    """A planar pose: position ``(x, y)`` and heading ``theta`` in radians."""

    x: float = 0.0
    y: float = 0.0
    theta: float = 0.0

    def __repr__(self) -> str:
        return f"<Config(x={self.x:f}, y={self.y:f}, theta={self.theta:f})>"


@dataclass
class Sphere:
    """A sphere given by its centre and radius."""

    center: tuple[float, float, float] = (0.0, 0.0, 0.0)
    radius: float = 0.0


@dataclass
class SphereTreeNode:
    """A node of a bounding-sphere hierarchy; ids index into the tree list."""

    sphere: Sphere
    parent_id: int = -1
    child1_id: int = -1
    child2_id: int = -1

    def is_leaf(self) -> bool:
        """Return True when the node has no children."""
        return self.child1_id == -1


def normalize_angle(angle: float) -> float:
    """Wrap an angle into the half-open interval [-pi, pi)."""
    return angle - 2.0 * math.pi * math.floor((angle + math.pi) / (2.0 * math.pi))


def config_distance(start: Config, end: Config) -> float:
    """Distance between two poses, with rotation weighted less than translation."""
    dx = start.x - end.x
    dy = start.y - end.y
    d_theta = normalize_angle(start.theta - end.theta)
    return math.sqrt(dx * dx + dy * dy + ROTATION_WEIGHT * d_theta * d_theta)


def interpolate_segment(start: Config, end: Config, steps: int) -> list[Config]:
    """Return ``steps + 1`` evenly spaced poses from ``start`` to ``end``.

    At least two steps are always taken; the heading follows the shorter way round.
    """
    steps = max(int(steps), MIN_SEGMENT_STEPS)
    delta_theta = normalize_angle(end.theta - start.theta)
    segment = []
    for i in range(steps + 1):
        t = i / steps
        segment.append(
            Config(
                (1.0 - t) * start.x + t * end.x,
                (1.0 - t) * start.y + t * end.y,
                normalize_angle(start.theta + t * delta_theta),
            )
        )
    return segment