"""Per-item action strategies supplied by pages to the list renderer."""

from collections.abc import Iterable, Sequence
from typing import Any, Callable

from movie_shelf.core.entities import ActionDescriptor, ActionKind, kind_name
from movie_shelf.core.errors import UnknownActionError
from movie_shelf.core.favourites_store import FavouritesStore

ActionStrategy = Callable[[Any], Sequence[ActionDescriptor]]


def favourite_toggle_strategy(store: FavouritesStore) -> ActionStrategy:
    """Single heart button that adds or removes the item."""

    def strategy(item: Any) -> list[ActionDescriptor]:
        active = store.is_favourite(item)
        return [
            ActionDescriptor(
                kind=ActionKind.TOGGLE_FAVOURITE,
                handler=store.toggle,
                label="♥ Favourite" if active else "♡ Favourite",
                active=active,
            )
        ]

    return strategy


def favourites_page_strategy(
    store: FavouritesStore, open_review: Callable[[Any], Any]
) -> ActionStrategy:
    """Remove button plus a link into the external review flow."""

    def strategy(item: Any) -> list[ActionDescriptor]:
        return [
            ActionDescriptor(kind=ActionKind.REMOVE, handler=store.remove, label="✕ Remove"),
            ActionDescriptor(kind=ActionKind.REVIEW, handler=open_review, label="✎ Review"),
        ]

    return strategy


def combine_strategies(*strategies: ActionStrategy) -> ActionStrategy:
    """Concatenate the actions of several strategies in the given order."""

    def strategy(item: Any) -> list[ActionDescriptor]:
        actions: list[ActionDescriptor] = []
        for inner in strategies:
            actions.extend(inner(item))
        return actions

    return strategy


def resolve_actions(
    strategy: ActionStrategy, items: Iterable[Any]
) -> list[tuple[Any, list[ActionDescriptor]]]:
    """Apply one strategy uniformly to every item of a render pass."""
    return [(item, list(strategy(item))) for item in items]


def find_action(
    actions: Iterable[ActionDescriptor], kind: str
) -> ActionDescriptor:
    """Return the first descriptor of ``kind``.

    Kinds compare by value, so pages may define their own ``str`` Enum kinds.
    """
    for action in actions:
        if action.kind == kind:
            return action
    raise UnknownActionError(f"Action {kind_name(kind)!r} is not available for this item")
