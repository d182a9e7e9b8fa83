"""Solvers for a series of grid, graph and geometry puzzles."""

__version__ = "0.1.0"