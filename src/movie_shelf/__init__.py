"""Favourites, filtering and per-item actions for movie lists."""

__version__ = "0.1.0"
