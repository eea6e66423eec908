"""Build, save and load bounding-sphere hierarchies over point clouds."""

from __future__ import annotations

import os
import struct
from typing import Sequence

import numpy as np

from objplan.geometry import Sphere, SphereTreeNode

LEAF_SIZE = 10
"""Point sets smaller than this become leaves."""

_COUNT = struct.Struct("<Q")
_NODE = struct.Struct("<4d3i4x")


def _as_point_array(points) -> np.ndarray:
    """Return ``points`` as an (N, 3) float array, raising ValueError otherwise."""
    array = np.asarray(points, dtype=float)
    if array.size == 0:
        return np.empty((0, 3))
    if array.ndim != 2 or array.shape[1] != 3:
        raise ValueError("Input point cloud must be an Nx3 array")
    return array


def principal_axis(points) -> np.ndarray:
    """Unit direction of largest spread of the points (the x axis for 0 or 1 point)."""
    array = _as_point_array(points)
    if len(array) <= 1:
        return np.array([1.0, 0.0, 0.0])
    centered = array - array.mean(axis=0)
    covariance = centered.T @ centered
    _, vectors = np.linalg.eigh(covariance)
    return vectors[:, -1]


def bounding_sphere(points) -> Sphere:
    """Sphere centred on the centroid that encloses every point."""
    array = _as_point_array(points)
    if len(array) == 0:
        return Sphere((0.0, 0.0, 0.0), 0.0)
    center = array.mean(axis=0)
    radius = float(np.sqrt(np.max(np.sum((array - center) ** 2, axis=1))))
    return Sphere(tuple(float(v) for v in center), radius)


def _build(points: np.ndarray, tree: list[SphereTreeNode], parent_id: int) -> int:
    node_id = len(tree)
    node = SphereTreeNode(bounding_sphere(points), parent_id=parent_id)
    tree.append(node)
    if len(points) < LEAF_SIZE:
        return node_id

    center = np.asarray(node.sphere.center)
    axis = principal_axis(points)
    on_left = (points - center) @ axis <= 0
    left, right = points[on_left], points[~on_left]
    if len(left) == 0 or len(right) == 0:
        return node_id

    node.child1_id = _build(left, tree, node_id)
    node.child2_id = _build(right, tree, node_id)
    return node_id


def build_sphere_tree(points) -> list[SphereTreeNode]:
    """Build a sphere hierarchy in depth-first order; the root is at index 0."""
    array = _as_point_array(points)
    tree: list[SphereTreeNode] = []
    if len(array) == 0:
        return tree
    _build(array, tree, -1)
    return tree


def save_sphere_tree(filename: str | os.PathLike, tree: Sequence[SphereTreeNode]) -> None:
    """Write the tree as a node count followed by fixed-size node records."""
    with open(filename, "wb") as out:
        out.write(_COUNT.pack(len(tree)))
        for node in tree:
            cx, cy, cz = node.sphere.center
            out.write(
                _NODE.pack(
                    cx, cy, cz, node.sphere.radius,
                    node.parent_id, node.child1_id, node.child2_id,
                )
            )


def load_sphere_tree(filename: str | os.PathLike) -> list[SphereTreeNode]:
    """Read a tree written by :func:`save_sphere_tree`."""
    with open(filename, "rb") as source:
        data = source.read()
    if len(data) < _COUNT.size:
        raise ValueError(f"Sphere tree file is truncated: {filename}")
    (count,) = _COUNT.unpack_from(data)
    expected = _COUNT.size + count * _NODE.size
    if len(data) < expected:
        raise ValueError(f"Sphere tree file is truncated: {filename}")
    return [
        SphereTreeNode(Sphere((cx, cy, cz), radius), parent, child1, child2)
        for cx, cy, cz, radius, parent, child1, child2 in _NODE.iter_unpack(
            data[_COUNT.size:expected]
        )
    ]