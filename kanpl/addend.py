"""One addend of a Kolmogorov-Arnold representation."""

from __future__ import annotations

import random
from typing import Sequence

from kanpl.univariate import UnivariatePL
from kanpl.urysohn import UrysohnPL


class KANAddendPL:
    """An outer univariate function applied to an inner additive model."""

    def __init__(
        self,
        xmin: Sequence[float],
        xmax: Sequence[float],
        target_min: float,
        target_max: float,
        inner: int,
        outer: int,
        number_of_inputs: int,
        rng: random.Random | None = None,
    ) -> None:
        rng = rng if rng is not None else random.Random()
        self.target_min = target_min
        self.target_max = target_max
        self._last_inner_value = 0.0
        self.urysohn = UrysohnPL(
            xmin, xmax, target_min, target_max, [inner] * number_of_inputs, rng
        )
        self.univariate = UnivariatePL(target_min, target_max, target_min, target_max, outer, rng)

    def copy(self) -> "KANAddendPL":
        """Return an independent copy of this addend."""
        other = KANAddendPL.__new__(KANAddendPL)
        other.target_min = self.target_min
        other.target_max = self.target_max
        other._last_inner_value = self._last_inner_value
        other.urysohn = self.urysohn.copy()
        other.univariate = self.univariate.copy()
        return other

    def increment_inner(self) -> None:
        self.urysohn.increment_inner()

    def increment_outer(self) -> None:
        self.univariate.increment_points()

    def how_many_inner(self) -> int:
        return self.urysohn.univariates[0].how_many_points()

    def how_many_outer(self) -> int:
        return self.univariate.how_many_points()

    def all_outer_points(self) -> list[float]:
        return self.univariate.all_points()

    def update_using_memory(self, diff: float) -> None:
        """Adjust both layers for the inputs of the last :meth:`compute`."""
        slope = self.univariate.derivative(self._last_inner_value)
        self.urysohn.update_using_memory(diff * slope)
        self.univariate.update_using_memory(diff)

    def update_using_input(self, inputs: Sequence[float], diff: float) -> None:
        """Adjust both layers for ``inputs``."""
        value = self.urysohn.value(inputs)
        slope = self.univariate.derivative(value)
        self.urysohn.update_using_input(diff * slope, inputs)
        self.univariate.update_using_input(value, diff)

    def compute(self, inputs: Sequence[float], no_update: bool = False) -> float:
        """Model output for ``inputs``; remembers the evaluation for later updates."""
        self._last_inner_value = self.urysohn.value(inputs, no_update)
        return self.univariate.function_value(self._last_inner_value, no_update)