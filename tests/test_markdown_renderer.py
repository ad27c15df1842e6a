"""Tests for markdown list renderer."""

from enum import Enum

from movie_shelf.adapters.rendering import MarkdownListRenderer
from movie_shelf.core import (
    ActionDescriptor,
    ActionKind,
    FavouritesStore,
    Genre,
    MovieItem,
    favourite_toggle_strategy,
    favourites_page_strategy,
)

ITEMS = [
    MovieItem(id=1, title="Batman", release_date="1989-06-23", vote_average=7.2,
              overview="Gotham needs a hero."),
    MovieItem(id=2, title="Superman", genres=(Genre(878, "Science Fiction"),)),
]


def test_render_marks_favourites() -> None:
    """Test favourite items are highlighted."""
    store = FavouritesStore()
    store.add(ITEMS[0])
    renderer = MarkdownListRenderer(heading="Popular")
    
    output = renderer.render(ITEMS, store.snapshot(), favourite_toggle_strategy(store))
    
    assert output.startswith("# Popular")
    assert "### ★ Batman (1989)" in output
    assert "### Superman" in output
    assert "rating: 7.2/10" in output
    assert "genres: Science Fiction" in output
    assert "**[♥ Favourite]**" in output
    assert "[♡ Favourite]" in output


def test_render_uses_strategy_labels_only() -> None:
    """Test a different strategy changes controls with the same renderer."""
    store = FavouritesStore()
    renderer = MarkdownListRenderer()
    
    output = renderer.render(ITEMS, store.snapshot(), favourites_page_strategy(store, print))
    
    assert "[✕ Remove] [✎ Review]" in output
    assert "Favourite" not in output


def test_render_unlabelled_action_shows_kind_value() -> None:
    """Test descriptors without a label fall back to the kind value."""
    def strategy(item):
        return [ActionDescriptor(kind=ActionKind.REVIEW, handler=print)]
    
    output = MarkdownListRenderer().render(ITEMS[:1], frozenset(), strategy)
    
    assert "[review]" in output


def test_render_page_defined_action_kind() -> None:
    """Test the renderer handles kinds it has never heard of."""
    class PageKind(str, Enum):
        WATCHLIST = "watchlist"
        SHARE = "share"
    
    def strategy(item):
        return [
            ActionDescriptor(kind=PageKind.WATCHLIST, handler=print, label="+ Watchlist", active=True),
            ActionDescriptor(kind=PageKind.SHARE, handler=print),
        ]
    
    output = MarkdownListRenderer().render(ITEMS[:1], frozenset(), strategy)
    
    assert "**[+ Watchlist]** [share]" in output


def test_render_empty() -> None:
    """Test rendering without items."""
    output = MarkdownListRenderer(heading="Empty").render([], frozenset(), lambda item: [])
    
    assert "No movies to display." in output


def test_overview_is_truncated() -> None:
    """Test long overviews are shortened."""
    item = MovieItem(id=1, title="Long", overview="x" * 300)
    
    output = MarkdownListRenderer(overview_length=20).render([item], frozenset(), lambda i: [])
    
    assert "x" * 20 + "..." in output
    assert "x" * 21 not in output


def test_build_cards() -> None:
    """Test structured cards."""
    store = FavouritesStore()
    store.add(ITEMS[1])
    
    cards = MarkdownListRenderer().build_cards(ITEMS, store.snapshot(), favourite_toggle_strategy(store))
    
    assert [card.is_favourite for card in cards] == [False, True]
    assert cards[1].actions[0].active
