"""Sphere-tree collision checking and RRT* planning for a rigid object in (x, y, theta)."""

__version__ = "0.1.0"

__all__ = ["geometry", "sphere_tree", "collision", "rrt_star", "smoothing", "planner"]