"""Statistics, formatting and data-handling helpers used by the models."""

from __future__ import annotations

import math
import random
from typing import MutableSequence, Sequence

_CONFIDENCE = 1.96


def _paired(x: Sequence[float], y: Sequence[float]) -> tuple[list[float], list[float]]:
    xs = [float(v) for v in x]
    ys = [float(v) for v in y]
    if len(xs) != len(ys):
        raise ValueError("sequences must have the same length")
    if not xs:
        raise ValueError("sequences must not be empty")
    return xs, ys


def pearson(x: Sequence[float], y: Sequence[float]) -> float:
    """Pearson correlation from raw first and second moments."""
    xs, ys = _paired(x, y)
    n = len(xs)
    xy = sum(a * b for a, b in zip(xs, ys)) / n
    x2 = sum(a * a for a in xs) / n
    y2 = sum(b * b for b in ys) / n
    xav = sum(xs) / n
    yav = sum(ys) / n
    var_x = x2 - xav * xav
    var_y = y2 - yav * yav
    if var_x <= 0.0 or var_y <= 0.0:
        raise ValueError("correlation is undefined for a sequence with zero variance")
    return (xy - xav * yav) / math.sqrt(var_x) / math.sqrt(var_y)


def pearson2(x: Sequence[float], y: Sequence[float]) -> float:
    """Pearson correlation from centred values; agrees with :func:`pearson`."""
    xs, ys = _paired(x, y)
    n = len(xs)
    xmean = sum(xs) / n
    ymean = sum(ys) / n
    covariance = sum((a - xmean) * (b - ymean) for a, b in zip(xs, ys))
    std_x = math.sqrt(sum((a - xmean) ** 2 for a in xs))
    std_y = math.sqrt(sum((b - ymean) ** 2 for b in ys))
    if std_x == 0.0 or std_y == 0.0:
        raise ValueError("correlation is undefined for a sequence with zero variance")
    return covariance / std_x / std_y


def format_matrix(matrix: Sequence[Sequence[float]]) -> str:
    """Render a matrix row by row with three decimals per value."""
    return "".join("".join(f"{v:5.3f} " for v in row) + "\n" for row in matrix)


def format_vector(values: Sequence[float]) -> str:
    """Render values with two decimals, ten per line."""
    parts = []
    for count, value in enumerate(values, start=1):
        parts.append(f"{value:5.2f} ")
        if count % 10 == 0:
            parts.append("\n")
    return "".join(parts)


def shuffle(
    matrix: MutableSequence[Sequence[float]],
    vector: MutableSequence[float],
    rng: random.Random | None = None,
) -> None:
    """Shuffle rows of ``matrix`` in place, keeping ``vector`` aligned with them."""
    if len(matrix) != len(vector):
        raise ValueError("matrix and vector must have the same number of rows")
    rng = rng if rng is not None else random.Random()
    rows = len(matrix)
    for _ in range(2 * rows):
        n1 = rng.randrange(rows)
        n2 = rng.randrange(rows)
        matrix[n1], matrix[n2] = matrix[n2], matrix[n1]
        vector[n1], vector[n2] = vector[n2], vector[n1]


def find_min_max(
    matrix: Sequence[Sequence[float]], target: Sequence[float]
) -> tuple[list[float], list[float], float, float]:
    """Return per-column minima and maxima plus the target's minimum and maximum."""
    if not matrix or not target:
        raise ValueError("matrix and target must not be empty")
    columns = list(zip(*matrix))
    xmin = [float(min(col)) for col in columns]
    xmax = [float(max(col)) for col in columns]
    return xmin, xmax, float(min(target)), float(max(target))


def individual_limits_to_sum(xmin: float, xmax: float, n: int) -> tuple[float, float]:
    """95% interval of a sum of ``n`` uniform variables on ``[xmin, xmax]``."""
    sum_mean = n * (xmin + xmax) / 2.0
    sum_variance = n * (xmin - xmax) * (xmin - xmax) / 12.0
    std = math.sqrt(sum_variance)
    return sum_mean - _CONFIDENCE * std, sum_mean + _CONFIDENCE * std


def sum_to_individual_limits(sum_min: float, sum_max: float, n: int) -> tuple[float, float]:
    """Inverse of :func:`individual_limits_to_sum`: limits of each of ``n`` terms."""
    if n <= 0:
        raise ValueError("n must be positive")
    conf_coeff = math.sqrt(n / 12.0) * _CONFIDENCE
    xmin_plus_xmax = (sum_min + sum_max) / n
    xmax_minus_xmin = (sum_max - sum_min) / 2 / conf_coeff
    xmax = (xmin_plus_xmax + xmax_minus_xmin) / 2.0
    xmin = xmin_plus_xmax - xmax
    return xmin, xmax