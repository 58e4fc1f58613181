import random

import pytest

from kanpl.univariate import UnivariatePL


def make(seed=1, points=6):
    return UnivariatePL(0.0, 1.0, -1.0, 1.0, points, random.Random(seed))


def step(u):
    return (u.xmax - u.xmin) / (u.points - 1)


def test_limits_are_widened_by_margin():
    u = make()
    assert u.xmin < 0.0
    assert u.xmax > 1.0
    assert u.xmax - u.xmin == pytest.approx(1.02)


def test_point_count_and_range():
    u = make(points=8)
    assert u.how_many_points() == 8
    assert len(u.all_points()) == 8
    assert all(-1.0 <= y < 1.0 for y in u.all_points())


def test_same_seed_gives_same_function():
    first = make(seed=9)
    second = make(seed=9)
    points = first.all_points()
    assert len(points) == 6
    assert points == second.all_points()
    probe = first.xmin + 2.5 * step(first)
    assert first.function_value(probe, True) == pytest.approx(
        (points[2] + points[3]) / 2.0
    )
    assert second.function_value(probe, True) == pytest.approx(
        first.function_value(probe, True)
    )


def test_values_at_nodes_match_points():
    u = make()
    h = step(u)
    for i, y in enumerate(u.all_points()):
        assert u.function_value(u.xmin + i * h, True) == pytest.approx(y)


def test_no_update_clamps_argument():
    u = make()
    xmin, xmax = u.xmin, u.xmax
    points = u.all_points()
    assert u.function_value(50.0, True) == pytest.approx(points[-1])
    assert u.function_value(-50.0, True) == pytest.approx(points[0])
    assert (u.xmin, u.xmax) == (xmin, xmax)


def test_update_extends_definition():
    u = make()
    u.function_value(5.0)
    assert u.xmax > 5.0
    u.function_value(-3.0)
    assert u.xmin < -3.0
    assert u.how_many_points() == 6


def test_update_using_memory_adds_delta_to_total():
    u = make()
    u.function_value(0.37)
    before = sum(u.all_points())
    u.update_using_memory(0.5)
    assert sum(u.all_points()) == pytest.approx(before + 0.5)


def test_update_using_memory_at_node_shifts_value():
    u = make()
    x = u.xmin + 2 * step(u)
    value = u.function_value(x, True)
    u.function_value(x)
    u.update_using_memory(0.25)
    assert u.function_value(x, True) == pytest.approx(value + 0.25)


def test_update_using_input_adds_delta_to_total():
    u = make()
    before = sum(u.all_points())
    u.update_using_input(0.61, -0.3)
    assert sum(u.all_points()) == pytest.approx(before - 0.3)


def test_update_using_input_extends_definition():
    u = make()
    u.update_using_input(4.0, 0.1)
    assert u.xmax > 4.0


def test_derivative_is_segment_slope():
    u = make()
    h = step(u)
    a = u.xmin + 1.2 * h
    b = u.xmin + 1.7 * h
    slope = (u.function_value(b, True) - u.function_value(a, True)) / (b - a)
    assert u.derivative(a) == pytest.approx(slope)
    assert u.derivative(b) == pytest.approx(slope)


def test_increment_points_keeps_shape():
    u = make(points=5)
    old = u.all_points()
    new_step = (u.xmax - u.xmin) / 5
    expected = [u.function_value(u.xmin + i * new_step, True) for i in range(6)]
    u.increment_points()
    points = u.all_points()
    assert u.how_many_points() == 6
    assert points[0] == old[0]
    assert points[-1] == old[-1]
    assert points == pytest.approx(expected)


def test_copy_is_independent():
    u = make()
    c = u.copy()
    original = u.all_points()
    c.update_using_input(0.5, 10.0)
    c.increment_points()
    assert u.all_points() == original
    assert c.how_many_points() == u.how_many_points() + 1


def test_rejects_too_few_points():
    with pytest.raises(ValueError):
        UnivariatePL(0.0, 1.0, 0.0, 1.0, 1, random.Random(0))


def test_rejects_empty_interval():
    with pytest.raises(ValueError):
        UnivariatePL(1.0, 1.0, 0.0, 1.0, 4, random.Random(0))