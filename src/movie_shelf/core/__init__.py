"""Core domain layer."""

from movie_shelf.core.actions import (
    ActionStrategy,
    combine_strategies,
    favourite_toggle_strategy,
    favourites_page_strategy,
    find_action,
    resolve_actions,
)
from movie_shelf.core.entities import ActionDescriptor, ActionKind, FilterSpec, Genre, MovieItem
from movie_shelf.core.errors import (
    AuthenticationError,
    ConfigError,
    DuplicateFilterNameError,
    InvalidInputError,
    ListenerError,
    MovieShelfError,
    PersistenceError,
    PredicateError,
    SourceError,
    UnknownActionError,
    UnknownFilterError,
)
from movie_shelf.core.favourites_store import FavouritesStore
from movie_shelf.core.filter_pipeline import FilterPipeline
from movie_shelf.core.interfaces import FavouritesPersistence, ListRenderer, MovieSource

__all__ = [
    "MovieItem",
    "Genre",
    "ActionKind",
    "ActionDescriptor",
    "FilterSpec",
    "FavouritesStore",
    "FilterPipeline",
    "ActionStrategy",
    "favourite_toggle_strategy",
    "favourites_page_strategy",
    "combine_strategies",
    "resolve_actions",
    "find_action",
    "MovieSource",
    "FavouritesPersistence",
    "ListRenderer",
    "MovieShelfError",
    "ConfigError",
    "InvalidInputError",
    "ListenerError",
    "PersistenceError",
    "UnknownFilterError",
    "DuplicateFilterNameError",
    "PredicateError",
    "UnknownActionError",
    "SourceError",
    "AuthenticationError",
]
