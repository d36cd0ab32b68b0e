[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "strippack"
version = "0.1.0"
description = "Strip packing of rectangles on a roll of fixed width: greedy, exhaustive and randomised solvers, plus a solution checker"
requires-python = ">=3.10"
dependencies = []
keywords = ["strip packing", "rectangles", "optimization", "branch and bound", "heuristics"]
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
strippack-greedy = "strippack.greedy:main"
strippack-exhaustive = "strippack.exhaustive:main"
strippack-metaheuristic = "strippack.metaheuristic:main"
strippack-check = "strippack.checker:main"

[tool.hatch.build.targets.wheel]
packages = ["strippack"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
