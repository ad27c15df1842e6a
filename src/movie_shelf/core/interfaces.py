"""Core interfaces for adapters."""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from typing import Optional

from movie_shelf.core.actions import ActionStrategy
from movie_shelf.core.entities import MovieItem


class MovieSource(ABC):
    """Interface for resolving movies from a catalogue."""

    @abstractmethod
    async def fetch_by_id(self, movie_id: int) -> Optional[MovieItem]:
        """Fetch a single movie, None if it does not exist."""
        pass

    @abstractmethod
    async def fetch_list(self, page: int = 1) -> list[MovieItem]:
        """Fetch a page of the bulk listing."""
        pass

    @abstractmethod
    async def fetch_many(self, movie_ids: Iterable[int]) -> list[Optional[MovieItem]]:
        """Fetch several movies in parallel, keeping the order of ids."""
        pass


class FavouritesPersistence(ABC):
    """Interface for durable storage of the favourites snapshot."""

    @abstractmethod
    def load(self) -> frozenset[int]:
        """Load stored favourite ids."""
        pass

    @abstractmethod
    def save(self, snapshot: frozenset[int]) -> None:
        """Store the given snapshot."""
        pass


class ListRenderer(ABC):
    """Interface for rendering a filtered list with per-item actions."""

    @abstractmethod
    def render(
        self,
        items: Sequence[MovieItem],
        favourites: frozenset[int],
        strategy: ActionStrategy,
    ) -> str:
        """Render items using one strategy for the whole pass."""
        pass
