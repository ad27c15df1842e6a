"""Source adapters for fetching movies."""

from movie_shelf.adapters.sources.tmdb_source import TMDBSource

__all__ = ["TMDBSource"]
