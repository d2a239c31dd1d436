"""Advent of Code 2024 puzzle solutions for days 1-7 and 9-12, with a command-line runner."""

__version__ = "0.1.0"