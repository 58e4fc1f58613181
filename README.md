# kanpl

Kolmogorov-Arnold models made from piecewise-linear functions and trained one
record at a time. The package needs nothing outside the Python standard library.

## Building blocks

- `kanpl.univariate.UnivariatePL`: a piecewise-linear function on an evenly
  spaced grid, with node values drawn at random between `ymin` and `ymax`.
  An updating evaluation widens its domain (with a 1% margin) when an input
  falls outside it; `increment_points()` refines the grid by one node while
  keeping the current shape. `function_value`, `derivative`,
  `update_using_input`, `update_using_memory`, `all_points` and `copy` cover
  evaluation, training and inspection.
- `kanpl.urysohn.UrysohnPL`: a sum of univariate functions, one per input.
  The per-function value range is derived from the target range with
  `kanpl.helper.sum_to_individual_limits`.
- `kanpl.addend.KANAddendPL`: an outer univariate function applied to an inner
  `UrysohnPL`. A model is a sum of several addends.
- `kanpl.helper`: `pearson` and `pearson2` (Pearson correlation, two formulas
  that agree), `find_min_max`, `shuffle` (rows of a matrix together with a
  target vector), `format_matrix`, `format_vector`, and the conversions
  `individual_limits_to_sum` / `sum_to_individual_limits`.
- `kanpl.determinant`: random data generation (`generate_input`), determinants
  by cofactor expansion (`determinant`, `compute_determinant`,
  `determinant_targets`), and the `train` generator with its
  `ExperimentConfig` and `EpochReport`.

Every class and random generator takes an optional `random.Random`, so runs
can be made reproducible by passing a seeded one.

## Installation

```
pip install .
```

## Learning determinants

The `kanpl-determinant` command teaches a sum of addends to compute the
determinant of random matrices. After each epoch it prints the Pearson
correlation on training and validation data, the RMSE relative to the target
range, the relative L2 error and the CPU time used so far:

```
kanpl-determinant --seed 1
```

Options:

- `--size {4,5}`: the 4x4 experiment (entries in [0, 1], 66 addends,
  100,000 training records, 50 epochs; the default) or the 5x5 one (entries
  in [0, 10], 200 addends, 10,000,000 training records, 10 epochs), which
  takes a very long time.
- `--seed`: seed of the random generator.
- `--epochs`, `--training-records`, `--validation-records`, `--addends`:
  override the chosen experiment's values.

Even the 4x4 experiment takes a while in pure Python; smaller record counts
give a quick run:

```
kanpl-determinant --training-records 5000 --validation-records 1000 --epochs 5
```

The same run is available from code:

```python
import random

from kanpl.determinant import ExperimentConfig, train

config = ExperimentConfig(training_records=5000, validation_records=1000, epochs=5)
for report in train(config, random.Random(1)):
    print(report.format())
```

## Using the pieces

```python
import random

from kanpl.addend import KANAddendPL
from kanpl.determinant import compute_determinant, generate_input
from kanpl.helper import find_min_max, pearson

rng = random.Random(1)
inputs = generate_input(2000, 4, 0.0, 1.0, rng)
targets = [compute_determinant(row, 2) for row in inputs]
xmin, xmax, tmin, tmax = find_min_max(inputs, targets)

n_addends = 6
mu = 0.3 / n_addends
addends = [
    KANAddendPL(xmin, xmax, tmin / n_addends, tmax / n_addends, 5, 22, 4, rng)
    for _ in range(n_addends)
]

for _ in range(20):
    for row, target in zip(inputs, targets):
        model = sum(a.compute(row, False) for a in addends)
        residual = (target - model) * mu
        for a in addends:
            a.update_using_memory(residual)

predictions = [sum(a.compute(row, True) for a in addends) for row in inputs]
print(pearson(predictions, targets))
```

`compute(inputs, no_update)` evaluates an addend and remembers where each input
fell on its grids; `update_using_memory` then moves the function values at
those grid points by the given residual. Pass `no_update=True` for validation:
inputs are clamped to the current domain and nothing widens.

## What it does not do

Models live only in memory: there is no saving or loading of trained
addends, and the command does not keep the model it trains.