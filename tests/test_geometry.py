import math

import pytest

from objplan.geometry import (
    Config,
    Sphere,
    SphereTreeNode,
    config_distance,
    interpolate_segment,
    normalize_angle,
)


@pytest.mark.parametrize("angle", [-20.0, -math.pi, -1.0, 0.0, 1.0, math.pi, 3.5, 7.0, 100.0])
def test_normalize_angle_range(angle):
    result = normalize_angle(angle)
    assert -math.pi <= result < math.pi
    assert math.isclose(math.sin(result), math.sin(angle), abs_tol=1e-9)
    assert math.isclose(math.cos(result), math.cos(angle), abs_tol=1e-9)


def test_normalize_angle_pi_wraps_to_minus_pi():
    assert normalize_angle(math.pi) == -math.pi


def test_normalize_angle_identity_inside_range():
    assert normalize_angle(0.5) == 0.5
    assert normalize_angle(0.0) == 0.0


def test_config_distance_translation_only():
    assert config_distance(Config(0, 0, 0), Config(3, 4, 0)) == pytest.approx(5.0)


def test_config_distance_rotation_weighted():
    assert config_distance(Config(0, 0, 0), Config(0, 0, 1.0)) == pytest.approx(math.sqrt(0.1))


def test_config_distance_symmetric_and_zero():
    a = Config(1.0, -2.0, 0.3)
    b = Config(-0.5, 4.0, 2.9)
    assert config_distance(a, a) == 0.0
    assert config_distance(a, b) == pytest.approx(config_distance(b, a))


def test_config_distance_uses_wrapped_angle():
    near = config_distance(Config(0, 0, math.pi - 0.1), Config(0, 0, -math.pi + 0.1))
    direct = config_distance(Config(0, 0, 0.0), Config(0, 0, 0.2))
    assert near == pytest.approx(direct)


def test_interpolate_segment_endpoints_and_length():
    start = Config(0.0, 0.0, 0.0)
    end = Config(2.0, -1.0, 1.0)
    segment = interpolate_segment(start, end, 10)
    assert len(segment) == 11
    assert segment[0].x == start.x and segment[0].y == start.y
    assert segment[-1].x == pytest.approx(end.x)
    assert segment[-1].y == pytest.approx(end.y)
    assert segment[-1].theta == pytest.approx(end.theta)


@pytest.mark.parametrize("steps", [-3, 0, 1, 2])
def test_interpolate_segment_minimum_steps(steps):
    segment = interpolate_segment(Config(0, 0, 0), Config(1, 1, 0), steps)
    assert len(segment) == 3


def test_interpolate_segment_even_spacing():
    segment = interpolate_segment(Config(0, 0, 0), Config(4, 0, 0), 4)
    xs = [c.x for c in segment]
    gaps = [b - a for a, b in zip(xs, xs[1:])]
    assert all(g == pytest.approx(gaps[0]) for g in gaps)


def test_interpolate_segment_short_way_round():
    segment = interpolate_segment(Config(0, 0, math.pi - 0.1), Config(0, 0, -math.pi + 0.1), 4)
    for config in segment:
        assert abs(abs(config.theta) - math.pi) <= 0.1 + 1e-9


def test_sphere_tree_node_is_leaf():
    leaf = SphereTreeNode(Sphere((0.0, 0.0, 0.0), 1.0))
    inner = SphereTreeNode(Sphere((0.0, 0.0, 0.0), 1.0), child1_id=1, child2_id=2)
    assert leaf.is_leaf() is True
    assert inner.is_leaf() is False
    assert leaf.parent_id == -1


def test_config_defaults_and_repr():
    config = Config()
    assert (config.x, config.y, config.theta) == (0.0, 0.0, 0.0)
    assert repr(Config(1.0, 2.0, 0.5)) == "<Config(x=1.000000, y=2.000000, theta=0.500000)>"