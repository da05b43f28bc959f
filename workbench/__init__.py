"""Seam-carving image resizer, euchre game and naive Bayes post classifier."""

__version__ = "0.1.0"