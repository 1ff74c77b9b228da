"""Bounce a bird between two spiked walls: menu, rounds, skin shop and saved progress."""

__version__ = "0.1.0"