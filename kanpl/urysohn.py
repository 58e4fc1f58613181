"""Sum of piecewise-linear functions, one per input."""

from __future__ import annotations

import random
from typing import Sequence

from kanpl.helper import sum_to_individual_limits
from kanpl.univariate import UnivariatePL


class UrysohnPL:
    """Additive model: the sum over inputs of a univariate function of each."""

    def __init__(
        self,
        xmin: Sequence[float],
        xmax: Sequence[float],
        target_min: float,
        target_max: float,
        layers: Sequence[int],
        rng: random.Random | None = None,
    ) -> None:
        layers = list(layers)
        if not layers:
            raise ValueError("at least one input is required")
        n = len(layers)
        if len(xmin) < n or len(xmax) < n:
            raise ValueError("input limits must cover every input")
        rng = rng if rng is not None else random.Random()
        ymin, ymax = sum_to_individual_limits(target_min, target_max, n)
        self.univariates = [
            UnivariatePL(lo, hi, ymin, ymax, points, rng)
            for lo, hi, points in zip(xmin, xmax, layers)
        ]

    @property
    def length(self) -> int:
        """Number of inputs."""
        return len(self.univariates)

    def _check(self, inputs: Sequence[float]) -> None:
        if len(inputs) < self.length:
            raise ValueError(f"expected {self.length} inputs, got {len(inputs)}")

    def copy(self) -> "UrysohnPL":
        """Return an independent copy of this model."""
        other = UrysohnPL.__new__(UrysohnPL)
        other.univariates = [u.copy() for u in self.univariates]
        return other

    def increment_inner(self) -> None:
        for u in self.univariates:
            u.increment_points()

    def update_using_input(self, delta: float, inputs: Sequence[float]) -> None:
        self._check(inputs)
        for u, x in zip(self.univariates, inputs):
            u.update_using_input(x, delta)

    def update_using_memory(self, delta: float) -> None:
        for u in self.univariates:
            u.update_using_memory(delta)

    def value(self, inputs: Sequence[float], no_update: bool = False) -> float:
        """Sum of the univariate functions at ``inputs``."""
        self._check(inputs)
        return sum(u.function_value(x, no_update) for u, x in zip(self.univariates, inputs))

    def u_points(self, n: int) -> list[float]:
        """Node values of the function for input ``n``."""
        return self.univariates[n].all_points()