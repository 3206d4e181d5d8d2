"""pace - live workout metric smoothing from the terminal."""

__version__ = "0.1.0"
