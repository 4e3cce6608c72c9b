"""Cascade: a daily word-reveal puzzle engine and balance-simulation harness."""

__version__ = "0.1.0"
