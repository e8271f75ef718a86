"""Threaded quicksort, completion dictionary, shapes and a networked Reversi player."""

__version__ = "0.1.0"