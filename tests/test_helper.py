import random

import pytest

from kanpl.helper import (
    find_min_max,
    format_matrix,
    format_vector,
    individual_limits_to_sum,
    pearson,
    pearson2,
    shuffle,
    sum_to_individual_limits,
)


def _random_pairs(seed, n=200):
    rng = random.Random(seed)
    x = [rng.random() for _ in range(n)]
    y = [a + rng.random() for a in x]
    return x, y


def test_pearson_of_linear_relation_is_one():
    x = [1.0, 2.0, 3.0, 4.0, 5.0]
    y = [2.0 * v + 3.0 for v in x]
    assert pearson(x, y) == pytest.approx(1.0)


def test_pearson_of_inverse_relation_is_minus_one():
    x = [1.0, 2.0, 3.0, 4.0, 5.0]
    y = [-v for v in x]
    assert pearson(x, y) == pytest.approx(-1.0)


def test_pearson_variants_agree():
    x, y = _random_pairs(11)
    assert pearson(x, y) == pytest.approx(pearson2(x, y))


def test_pearson_is_symmetric():
    x, y = _random_pairs(12)
    assert pearson(x, y) == pytest.approx(pearson(y, x))
    assert -1.0 <= pearson(x, y) <= 1.0


def test_pearson_rejects_constant_sequence():
    with pytest.raises(ValueError):
        pearson([2.0, 2.0, 2.0], [1.0, 2.0, 3.0])
    with pytest.raises(ValueError):
        pearson2([2.0, 2.0, 2.0], [1.0, 2.0, 3.0])


def test_pearson_rejects_bad_lengths():
    with pytest.raises(ValueError):
        pearson([1.0, 2.0], [1.0])
    with pytest.raises(ValueError):
        pearson2([], [])


def test_format_matrix_rows_and_values():
    matrix = [[0.5, 1.25, 3.0], [2.0, -1.5, 0.125]]
    text = format_matrix(matrix)
    lines = text.splitlines()
    assert len(lines) == len(matrix)
    for line, row in zip(lines, matrix):
        assert [float(tok) for tok in line.split()] == [round(v, 3) for v in row]
    assert text.endswith("\n")


def test_format_vector_wraps_every_ten():
    values = [i * 0.5 for i in range(25)]
    text = format_vector(values)
    lines = text.split("\n")
    assert all(len(line.split()) <= 10 for line in lines)
    assert [float(tok) for tok in text.split()] == [round(v, 2) for v in values]
    assert len(lines[0].split()) == 10


def test_shuffle_keeps_rows_aligned():
    matrix = [[float(i), float(2 * i)] for i in range(20)]
    vector = [float(i) for i in range(20)]
    shuffle(matrix, vector, random.Random(4))
    for row, value in zip(matrix, vector):
        assert row[0] == value
        assert row[1] == 2 * value
    assert sorted(vector) == [float(i) for i in range(20)]


def test_shuffle_rejects_mismatched_lengths():
    with pytest.raises(ValueError):
        shuffle([[1.0]], [1.0, 2.0], random.Random(0))


def test_find_min_max():
    xmin, xmax, tmin, tmax = find_min_max([[1.0, 5.0], [3.0, -2.0]], [4.0, -1.0])
    assert xmin == [1.0, -2.0]
    assert xmax == [3.0, 5.0]
    assert (tmin, tmax) == (-1.0, 4.0)


def test_find_min_max_rejects_empty():
    with pytest.raises(ValueError):
        find_min_max([], [])


@pytest.mark.parametrize("low, high, n", [(0.0, 1.0, 4), (-2.0, 3.0, 16), (0.5, 0.75, 25)])
def test_limits_round_trip(low, high, n):
    sum_min, sum_max = individual_limits_to_sum(low, high, n)
    back_min, back_max = sum_to_individual_limits(sum_min, sum_max, n)
    assert back_min == pytest.approx(low)
    assert back_max == pytest.approx(high)


def test_sum_interval_is_centred_on_sum_mean():
    sum_min, sum_max = individual_limits_to_sum(1.0, 3.0, 10)
    assert (sum_min + sum_max) / 2 == pytest.approx(10 * (1.0 + 3.0) / 2)
    assert sum_min < sum_max


def test_sum_to_individual_limits_rejects_zero_terms():
    with pytest.raises(ValueError):
        sum_to_individual_limits(0.0, 1.0, 0)