"""Advent of Code puzzle solutions: 2015 days 1-7 and 2021 days 1-9 and 11-17."""

__version__ = "0.1.0"