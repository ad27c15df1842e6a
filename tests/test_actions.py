"""Tests for action strategies."""

from dataclasses import asdict
from enum import Enum

import pytest

from movie_shelf.core import (
    ActionDescriptor,
    ActionKind,
    FavouritesStore,
    MovieItem,
    UnknownActionError,
    combine_strategies,
    favourite_toggle_strategy,
    favourites_page_strategy,
    find_action,
    resolve_actions,
)

ITEM = MovieItem(id=5, title="Batman", genre_ids=(28,))


class PageKind(str, Enum):
    """Action kinds defined outside the core."""

    WATCHLIST = "watchlist"


def test_strategies_give_different_actions_for_same_item() -> None:
    """Scenario: two strategies, same item, different descriptors."""
    store = FavouritesStore()
    reviews = []
    toggle_only = favourite_toggle_strategy(store)
    remove_and_review = favourites_page_strategy(store, reviews.append)
    before = asdict(ITEM)
    
    first = [a.kind for a in toggle_only(ITEM)]
    second = [a.kind for a in remove_and_review(ITEM)]
    
    assert first == [ActionKind.TOGGLE_FAVOURITE]
    assert second == [ActionKind.REMOVE, ActionKind.REVIEW]
    assert asdict(ITEM) == before
    assert ITEM == MovieItem(id=5, title="Batman", genre_ids=(28,))
    assert store.snapshot() == frozenset()
    assert reviews == []


def test_toggle_handler_updates_store() -> None:
    """Test invoking the toggle descriptor flips favourite state."""
    store = FavouritesStore()
    strategy = favourite_toggle_strategy(store)
    
    action = find_action(strategy(ITEM), ActionKind.TOGGLE_FAVOURITE)
    assert not action.active
    action(ITEM)
    
    assert store.snapshot() == frozenset({5})
    assert strategy(ITEM)[0].active
    
    strategy(ITEM)[0](ITEM)
    assert store.snapshot() == frozenset()


def test_favourites_page_handlers() -> None:
    """Test remove hits the store and review calls out."""
    store = FavouritesStore()
    store.add(ITEM)
    reviews = []
    strategy = favourites_page_strategy(store, reviews.append)
    
    find_action(strategy(ITEM), ActionKind.REVIEW)(ITEM)
    assert reviews == [ITEM]
    assert 5 in store
    
    find_action(strategy(ITEM), ActionKind.REMOVE)(ITEM)
    assert 5 not in store


def test_find_action_missing_kind() -> None:
    """Test lookup of an action the strategy did not offer."""
    strategy = favourite_toggle_strategy(FavouritesStore())
    
    with pytest.raises(UnknownActionError):
        find_action(strategy(ITEM), ActionKind.REMOVE)


def test_find_action_accepts_string_kind() -> None:
    """Test kind given as its string value."""
    strategy = favourite_toggle_strategy(FavouritesStore())
    
    action = find_action(strategy(ITEM), "toggle_favourite")
    
    assert action.kind is ActionKind.TOGGLE_FAVOURITE


def test_combine_strategies_keeps_order() -> None:
    """Test combined strategies concatenate descriptors."""
    store = FavouritesStore()
    combined = combine_strategies(
        favourite_toggle_strategy(store),
        favourites_page_strategy(store, lambda item: None),
    )
    
    assert [a.kind for a in combined(ITEM)] == [
        ActionKind.TOGGLE_FAVOURITE,
        ActionKind.REMOVE,
        ActionKind.REVIEW,
    ]


def test_resolve_actions_applies_one_strategy_to_all() -> None:
    """Test each item gets the strategy's output."""
    store = FavouritesStore()
    items = [ITEM, MovieItem(id=6, title="Heat")]
    
    resolved = resolve_actions(favourite_toggle_strategy(store), items)
    
    assert [item for item, _ in resolved] == items
    assert all(len(actions) == 1 for _, actions in resolved)


def test_find_action_custom_kind() -> None:
    """Test pages can add their own action kinds without core changes."""
    watchlist = []
    
    def strategy(item):
        return [ActionDescriptor(kind=PageKind.WATCHLIST, handler=watchlist.append, label="+ Watchlist")]
    
    find_action(strategy(ITEM), PageKind.WATCHLIST)(ITEM)
    
    assert watchlist == [ITEM]
    assert find_action(strategy(ITEM), "watchlist").label == "+ Watchlist"


def test_find_action_unknown_string_kind() -> None:
    """Test an unknown kind raises UnknownActionError, not ValueError."""
    with pytest.raises(UnknownActionError, match="watchlist"):
        find_action([], "watchlist")
    
    with pytest.raises(UnknownActionError, match="watchlist"):
        find_action([], PageKind.WATCHLIST)
