"""Quadratic equation solver with an interactive calculator and a file-driven self-check."""

__version__ = "1.0.0"
__all__ = ["solver", "checker", "console"]