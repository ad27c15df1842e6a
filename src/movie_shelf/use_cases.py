"""Page composition: sources, filters, favourites and actions wired together."""

from collections.abc import Sequence
from typing import Any, Callable, Optional

from movie_shelf.adapters.rendering import MarkdownListRenderer
from movie_shelf.adapters.sources.filters import detail_page_filters, list_page_filters
from movie_shelf.core import (
    ActionStrategy,
    FavouritesStore,
    FilterPipeline,
    InvalidInputError,
    ListRenderer,
    MovieItem,
    MovieSource,
    favourite_toggle_strategy,
    favourites_page_strategy,
    find_action,
)


class ListPage:
    """A page showing a filtered movie list with one action strategy."""

    def __init__(
        self,
        store: FavouritesStore,
        pipeline: FilterPipeline,
        strategy: ActionStrategy,
        renderer: ListRenderer,
    ) -> None:
        self.store = store
        self.pipeline = pipeline
        self.strategy = strategy
        self.renderer = renderer
        self.items: list[Optional[MovieItem]] = []
        self.last_visible: list[MovieItem] = []

    def candidates(self) -> Sequence[Optional[MovieItem]]:
        """Items offered to the filter pipeline."""
        return self.items

    def visible_items(self) -> list[MovieItem]:
        """Evaluate the filters against the loaded items.

        On a predicate failure the previous result stays in ``last_visible``
        and the error propagates.
        """
        self.last_visible = self.pipeline.evaluate(self.candidates())
        return self.last_visible

    def set_filter(self, name: str, value: str) -> list[MovieItem]:
        """Update one filter and return the new visible items."""
        self.pipeline.set_value(name, value)
        return self.visible_items()

    def render(self) -> str:
        return self.renderer.render(self.visible_items(), self.store.snapshot(), self.strategy)

    def trigger(self, movie_id: int, kind: str) -> Any:
        """Run the action of ``kind`` offered for a loaded movie."""
        item = self._find_item(movie_id)
        action = find_action(self.strategy(item), kind)
        return action(item)

    def _find_item(self, movie_id: int) -> MovieItem:
        for item in self.candidates():
            if item is not None and item.id == movie_id:
                return item
        raise InvalidInputError(f"Movie {movie_id} is not on this page")


class BrowsePage(ListPage):
    """Bulk listing with a favourite toggle on every card."""

    def __init__(
        self,
        source: MovieSource,
        store: FavouritesStore,
        renderer: Optional[ListRenderer] = None,
        filters: Optional[dict[str, str]] = None,
    ) -> None:
        super().__init__(
            store=store,
            pipeline=FilterPipeline(list_page_filters(**(filters or {}))),
            strategy=favourite_toggle_strategy(store),
            renderer=renderer or MarkdownListRenderer(heading="Popular movies"),
        )
        self.source = source

    async def load(self, page: int = 1) -> list[MovieItem]:
        """Fetch a page of the listing."""
        items = await self.source.fetch_list(page)
        self.items = list(items)
        print(f"🎬 Loaded {len(items)} movies (page {page})")
        return items


class FavouritesPage(ListPage):
    """Favourited movies with remove and review actions.

    Items are fetched one by one through the detail endpoint, so the genre
    filter reads the detail shape.
    """

    def __init__(
        self,
        source: MovieSource,
        store: FavouritesStore,
        open_review: Callable[[Any], Any],
        renderer: Optional[ListRenderer] = None,
        filters: Optional[dict[str, str]] = None,
    ) -> None:
        super().__init__(
            store=store,
            pipeline=FilterPipeline(detail_page_filters(**(filters or {}))),
            strategy=favourites_page_strategy(store, open_review),
            renderer=renderer or MarkdownListRenderer(heading="My favourites"),
        )
        self.source = source

    async def load(self) -> list[Optional[MovieItem]]:
        """Fetch details for every favourite in parallel.

        Ids the source cannot resolve stay as None and are never shown.
        """
        ids = sorted(self.store.snapshot())
        self.items = await self.source.fetch_many(ids)

        missing = sum(1 for item in self.items if item is None)
        print(f"❤️  Loaded {len(ids) - missing} favourites")
        if missing:
            print(f"  └─ ⚠️  Not available: {missing}")
        return self.items

    async def refresh(self) -> list[Optional[MovieItem]]:
        """Fetch only favourites added since the last load."""
        loaded = {item.id for item in self.items if item is not None}
        new_ids = sorted(self.store.snapshot() - loaded)
        if new_ids:
            self.items = [
                item for item in self.items if item is not None
            ] + await self.source.fetch_many(new_ids)
        return self.items

    def candidates(self) -> Sequence[Optional[MovieItem]]:
        # Removals show up immediately without refetching
        current = self.store.snapshot()
        return [item for item in self.items if item is None or item.id in current]
