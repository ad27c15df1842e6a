"""Persistence adapters for the favourites snapshot."""

from movie_shelf.adapters.persistence.yaml_store import YamlFavouritesPersistence

__all__ = ["YamlFavouritesPersistence"]
