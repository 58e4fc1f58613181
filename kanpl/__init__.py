"""Kolmogorov-Arnold models built from piecewise-linear functions, with a determinant-learning experiment."""

__version__ = "0.1.0"