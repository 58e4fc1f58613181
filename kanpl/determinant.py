"""Learning matrix determinants with a sum of Kolmogorov-Arnold addends."""

from __future__ import annotations

import argparse
import dataclasses
import math
import random
import time
from dataclasses import dataclass
from typing import Iterator, Sequence

from kanpl.addend import KANAddendPL
from kanpl.helper import find_min_max, pearson


@dataclass(frozen=True)
class ExperimentConfig:
    """Sizes and learning parameters of one determinant-fitting experiment."""

    training_records: int = 100_000
    validation_records: int = 20_000
    matrix_size: int = 4
    low: float = 0.0
    high: float = 1.0
    addends: int = 66
    epochs: int = 50
    mu: float = 0.3
    inner: int = 5
    outer: int = 22

    def __post_init__(self) -> None:
        for name in ("training_records", "validation_records", "matrix_size",
                     "addends", "epochs"):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} must be positive")
        if self.inner < 2 or self.outer < 2:
            raise ValueError("inner and outer functions need at least two points")
        if not self.high > self.low:
            raise ValueError("high must be greater than low")

    @property
    def features(self) -> int:
        """Number of inputs per record: the entries of one matrix."""
        return self.matrix_size * self.matrix_size


DETERMINANT_4X4 = ExperimentConfig()

# Needs at least half an hour to run.
DETERMINANT_5X5 = ExperimentConfig(
    training_records=10_000_000,
    validation_records=2_000_000,
    matrix_size=5,
    low=0.0,
    high=10.0,
    addends=200,
    epochs=10,
    mu=0.2,
)


@dataclass(frozen=True)
class EpochReport:
    """Accuracy figures measured after one training epoch."""

    epoch: int
    training_pearson: float
    validation_pearson: float
    rrmse: float
    l2: float
    seconds: float

    def format(self) -> str:
        return (
            f"E {self.epoch}, training {self.training_pearson:6.3f}, "
            f"validation {self.validation_pearson:6.3f}, RRMSE {self.rrmse:6.3f}, "
            f"L2 {self.l2:6.3f}, time {self.seconds:2.3f}"
        )


def generate_input(
    n_records: int,
    n_features: int,
    low: float,
    high: float,
    rng: random.Random | None = None,
) -> list[list[float]]:
    """Random records with values on a grid of 10000 steps in ``[low, high)``."""
    rng = rng if rng is not None else random.Random()
    span = high - low
    return [
        [rng.randrange(10000) / 10000.0 * span + low for _ in range(n_features)]
        for _ in range(n_records)
    ]


def determinant(matrix: Sequence[Sequence[float]]) -> float:
    """Determinant by cofactor expansion along the first row."""
    n = len(matrix)
    if n == 0:
        raise ValueError("matrix must not be empty")
    if any(len(row) != n for row in matrix):
        raise ValueError("matrix must be square")
    return _expand(matrix)


def _expand(matrix: Sequence[Sequence[float]]) -> float:
    n = len(matrix)
    if n == 1:
        return matrix[0][0]
    if n == 2:
        return matrix[0][0] * matrix[1][1] - matrix[0][1] * matrix[1][0]
    det = 0.0
    for col, pivot in enumerate(matrix[0]):
        minor = [[v for j, v in enumerate(row) if j != col] for row in matrix[1:]]
        sign = 1 if col % 2 == 0 else -1
        det += sign * pivot * _expand(minor)
    return det


def compute_determinant(values: Sequence[float], size: int) -> float:
    """Determinant of a ``size`` x ``size`` matrix given row by row in ``values``."""
    if size < 1:
        raise ValueError("size must be positive")
    if len(values) < size * size:
        raise ValueError(f"expected {size * size} values, got {len(values)}")
    rows = [list(values[i * size:(i + 1) * size]) for i in range(size)]
    return determinant(rows)


def determinant_targets(inputs: Sequence[Sequence[float]], size: int) -> list[float]:
    """Determinant of every record read as a square matrix."""
    return [compute_determinant(record, size) for record in inputs]


def train(
    config: ExperimentConfig = DETERMINANT_4X4,
    rng: random.Random | None = None,
) -> Iterator[EpochReport]:
    """Fit determinants with a sum of addends, yielding a report after each epoch."""
    rng = rng if rng is not None else random.Random()
    n_features = config.features
    inputs_training = generate_input(
        config.training_records, n_features, config.low, config.high, rng)
    inputs_validation = generate_input(
        config.validation_records, n_features, config.low, config.high, rng)
    target_training = determinant_targets(inputs_training, config.matrix_size)
    target_validation = determinant_targets(inputs_validation, config.matrix_size)

    reference = sum(t * t for t in target_validation)
    start = time.process_time()

    argmin, argmax, target_min, target_max = find_min_max(inputs_training, target_training)
    n_addends = config.addends
    mu = config.mu / n_addends
    addends = [
        KANAddendPL(argmin, argmax, target_min / n_addends, target_max / n_addends,
                    config.inner, config.outer, n_features, rng)
        for _ in range(n_addends)
    ]

    for epoch in range(1, config.epochs + 1):
        model_training = []
        for record, target in zip(inputs_training, target_training):
            model = sum(a.compute(record) for a in addends)
            model_training.append(model)
            residual = (target - model) * mu
            for a in addends:
                a.update_using_memory(residual)

        model_validation = []
        error = 0.0
        for record, target in zip(inputs_validation, target_validation):
            vmodel = sum(a.compute(record, True) for a in addends)
            model_validation.append(vmodel)
            error += (target - vmodel) ** 2

        l2 = math.sqrt(error / reference)
        rrmse = math.sqrt(error / config.validation_records) / (target_max - target_min)
        yield EpochReport(
            epoch=epoch,
            training_pearson=pearson(model_training, target_training),
            validation_pearson=pearson(model_validation, target_validation),
            rrmse=rrmse,
            l2=l2,
            seconds=time.process_time() - start,
        )


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Train a Kolmogorov-Arnold model to compute matrix determinants.")
    parser.add_argument("--size", type=int, choices=(4, 5), default=4,
                        help="matrix size of the experiment (5 takes very long)")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--epochs", type=int, default=None)
    parser.add_argument("--training-records", type=int, default=None)
    parser.add_argument("--validation-records", type=int, default=None)
    parser.add_argument("--addends", type=int, default=None)
    args = parser.parse_args(argv)

    config = DETERMINANT_4X4 if args.size == 4 else DETERMINANT_5X5
    overrides = {
        name: value
        for name, value in (
            ("epochs", args.epochs),
            ("training_records", args.training_records),
            ("validation_records", args.validation_records),
            ("addends", args.addends),
        )
        if value is not None
    }
    try:
        config = dataclasses.replace(config, **overrides)
    except ValueError as exc:
        parser.error(str(exc))

    for report in train(config, random.Random(args.seed)):
        print(report.format(), flush=True)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())