"""Simulation of an RGB pinball saucer light controller: colours, patterns, modes and main loop."""

__version__ = "0.1.0"