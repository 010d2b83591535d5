"""Design-pattern catalog: runnable demonstrations plus a small harness."""

__version__ = "0.1.0"
