[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "kanpl"
version = "0.1.0"
description = "Kolmogorov-Arnold models built from piecewise-linear functions, with a determinant-learning experiment"
requires-python = ">=3.10"
dependencies = []
keywords = ["kolmogorov-arnold", "kan", "piecewise-linear", "regression", "machine-learning"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kanpl-determinant = "kanpl.determinant:main"

[tool.setuptools.packages.find]
include = ["kanpl*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
