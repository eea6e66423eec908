"""RRT* planning over planar poses (x, y, theta)."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

from objplan.collision import CollisionChecker
from objplan.geometry import Config, config_distance, interpolate_segment, normalize_angle


@dataclass
class PlanParams:
    """Tuning parameters for :meth:`RRTStarPlanner.plan`."""

    max_iterations: int = 5000
    step_size: float = 0.1
    goal_bias: float = 0.1
    neighborhood_radius: float = 0.5
    collision_check_resolution: float = 0.01


@dataclass
class RRTNode:
    """A node of the search tree with its cost from the root."""

    config: Config
    parent_id: int = -1
    cost: float = 0.0


def steer(start: Config, end: Config, step_size: float) -> Config:
    """Move from ``start`` towards ``end`` by at most ``step_size``."""
    dist = config_distance(start, end)
    if dist <= step_size:
        return end
    ratio = step_size / dist
    delta_theta = normalize_angle(end.theta - start.theta)
    return Config(
        start.x + ratio * (end.x - start.x),
        start.y + ratio * (end.y - start.y),
        normalize_angle(start.theta + ratio * delta_theta),
    )


class RRTStarPlanner:
    """Asymptotically optimal sampling planner within axis-aligned pose bounds."""

    def __init__(
        self,
        checker: CollisionChecker,
        bounds_min: Config,
        bounds_max: Config,
        seed: int | None = None,
    ) -> None:
        self._checker = checker
        self._bounds_min = bounds_min
        self._bounds_max = bounds_max
        self._rng = random.Random(seed)

    def plan(self, start: Config, goal: Config, params: PlanParams | None = None) -> list[Config]:
        """Return waypoints from ``start`` to ``goal``, or an empty list if none is found."""
        if params is None:
            params = PlanParams()
        resolution = params.collision_check_resolution
        nodes = [RRTNode(start, -1, 0.0)]

        for _ in range(params.max_iterations):
            sampled = goal if self._rng.random() < params.goal_bias else self._sample()

            nearest_id = self._nearest(nodes, sampled)
            nearest = nodes[nearest_id]
            new_config = steer(nearest.config, sampled, params.step_size)

            if not self._is_free(nearest.config, new_config, resolution):
                continue

            nearby_ids = [
                i for i, node in enumerate(nodes)
                if config_distance(node.config, new_config) <= params.neighborhood_radius
            ]

            best_parent_id = nearest_id
            min_cost = nearest.cost + config_distance(nearest.config, new_config)
            for nearby_id in nearby_ids:
                candidate = nodes[nearby_id]
                if self._is_free(candidate.config, new_config, resolution):
                    cost = candidate.cost + config_distance(candidate.config, new_config)
                    if cost < min_cost:
                        min_cost = cost
                        best_parent_id = nearby_id

            new_id = len(nodes)
            nodes.append(RRTNode(new_config, best_parent_id, min_cost))

            for nearby_id in nearby_ids:
                if nearby_id == best_parent_id:
                    continue
                neighbour = nodes[nearby_id]
                cost_via_new = min_cost + config_distance(new_config, neighbour.config)
                if cost_via_new < neighbour.cost and self._is_free(
                    new_config, neighbour.config, resolution
                ):
                    neighbour.parent_id = new_id
                    neighbour.cost = cost_via_new

        goal_id = -1
        min_goal_dist = math.inf
        for i, node in enumerate(nodes):
            dist = config_distance(node.config, goal)
            if dist < min_goal_dist and self._is_free(node.config, goal, resolution):
                min_goal_dist = dist
                goal_id = i

        if goal_id == -1:
            return []
        path = self._reconstruct(nodes, goal_id)
        path.append(goal)
        return path

    def _sample(self) -> Config:
        lo, hi = self._bounds_min, self._bounds_max
        x = self._rng.random() * (hi.x - lo.x) + lo.x
        y = self._rng.random() * (hi.y - lo.y) + lo.y
        theta = self._rng.random() * (hi.theta - lo.theta) + lo.theta
        return Config(x, y, theta)

    @staticmethod
    def _nearest(nodes: list[RRTNode], config: Config) -> int:
        return min(range(len(nodes)), key=lambda i: config_distance(nodes[i].config, config))

    def _is_free(self, start: Config, end: Config, resolution: float) -> bool:
        steps = int(config_distance(start, end) / resolution)
        return not self._checker.is_path_in_collision(interpolate_segment(start, end, steps))

    @staticmethod
    def _reconstruct(nodes: list[RRTNode], goal_id: int) -> list[Config]:
        path = []
        current = goal_id
        while current != -1:
            path.append(nodes[current].config)
            current = nodes[current].parent_id
        path.reverse()
        return path