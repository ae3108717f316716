"""Kingside — a two-player chess board with rule enforcement."""

__version__ = "0.1.0"
