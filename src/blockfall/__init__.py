"""Blockfall: a falling-block puzzle game for the terminal."""

__version__ = "0.1.0"
