"""Solvers for systems of linear equations with step-by-step working, and a command-line front end."""

__version__ = "0.1.0"
__all__ = ["app", "solver"]