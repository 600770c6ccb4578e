"""Galactic Wars: multiplayer turn-based fleet strategy on a 20x20 grid."""

__version__ = "1.0.0"
