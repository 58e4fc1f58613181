"""Piecewise-linear function of one variable on a uniform grid."""

from __future__ import annotations

import random


class UnivariatePL:
    """Piecewise-linear function whose node values are trained incrementally.

    The definition interval widens itself, with a 1% margin, whenever an
    updating evaluation sees an argument outside of it.
    """

    def __init__(
        self,
        xmin: float,
        xmax: float,
        ymin: float,
        ymax: float,
        points: int,
        rng: random.Random | None = None,
    ) -> None:
        if points < 2:
            raise ValueError("a piecewise-linear function needs at least two points")
        if not xmax > xmin:
            raise ValueError("xmax must be greater than xmin")
        rng = rng if rng is not None else random.Random()
        self.xmin = float(xmin)
        self.xmax = float(xmax)
        self._y = [0.0] * points
        self._set_limits()
        self._y = [rng.randrange(100) / 100.0 * (ymax - ymin) + ymin for _ in range(points)]
        self._last_left_index = 0
        self._last_left_offset = 0.0

    @property
    def points(self) -> int:
        """Number of grid nodes."""
        return len(self._y)

    def copy(self) -> "UnivariatePL":
        """Return an independent copy of this function."""
        other = UnivariatePL.__new__(UnivariatePL)
        other.xmin = self.xmin
        other.xmax = self.xmax
        other._deltax = self._deltax
        other._y = list(self._y)
        other._last_left_index = self._last_left_index
        other._last_left_offset = self._last_left_offset
        return other

    def how_many_points(self) -> int:
        return self.points

    def increment_points(self) -> None:
        """Refine the grid by one node, keeping the current shape."""
        points = self.points + 1
        deltax = (self.xmax - self.xmin) / (points - 1)
        interior = [self.function_value(self.xmin + i * deltax) for i in range(1, points - 1)]
        self._y = [self._y[0], *interior, self._y[-1]]
        self._deltax = deltax

    def _set_limits(self) -> None:
        span = self.xmax - self.xmin
        self.xmin -= 0.01 * span
        self.xmax += 0.01 * span
        self._deltax = (self.xmax - self.xmin) / (self.points - 1)

    def _fit_definition(self, x: float) -> None:
        if x < self.xmin:
            self.xmin = x
            self._set_limits()
        if x > self.xmax:
            self.xmax = x
            self._set_limits()

    def _locate(self, x: float) -> tuple[int, float]:
        offset = (x - self.xmin) / self._deltax
        index = min(max(int(offset), 0), self.points - 2)
        return index, offset - index

    def derivative(self, x: float) -> float:
        """Slope of the segment that holds ``x``."""
        index, _ = self._locate(x)
        return (self._y[index + 1] - self._y[index]) / self._deltax

    def update_using_input(self, x: float, delta: float) -> None:
        """Spread ``delta`` over the two nodes around ``x``."""
        self._fit_definition(x)
        index, fraction = self._locate(x)
        share = delta * fraction
        self._y[index + 1] += share
        self._y[index] += delta - share

    def update_using_memory(self, delta: float) -> None:
        """Spread ``delta`` over the nodes used by the last evaluation."""
        share = delta * self._last_left_offset
        self._y[self._last_left_index + 1] += share
        self._y[self._last_left_index] += delta - share

    def function_value(self, x: float, no_update: bool = False) -> float:
        """Evaluate at ``x``.

        With ``no_update`` the argument is clamped to the interval; otherwise
        the interval is widened to hold it.
        """
        if no_update:
            x = min(max(x, self.xmin), self.xmax)
        else:
            self._fit_definition(x)
        index, fraction = self._locate(x)
        self._last_left_index = index
        self._last_left_offset = fraction
        return self._y[index] + (self._y[index + 1] - self._y[index]) * fraction

    def all_points(self) -> list[float]:
        """Node values, as a new list."""
        return list(self._y)