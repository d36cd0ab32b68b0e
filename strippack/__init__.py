"""Strip packing: greedy, exhaustive and randomised solvers, file formats and a solution checker."""

__version__ = "0.1.0"