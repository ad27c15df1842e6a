"""Observable store holding the favourited movie ids."""

from collections.abc import Mapping
from typing import Any, Callable

from movie_shelf.core.errors import InvalidInputError, ListenerError

Listener = Callable[[frozenset[int]], None]


def extract_id(item: Any) -> int:
    """Return the integer id of ``item`` or raise InvalidInputError.

    Accepts objects with an ``id`` attribute and mappings with an ``"id"`` key.
    """
    if isinstance(item, Mapping):
        item_id = item.get("id")
    else:
        item_id = getattr(item, "id", None)

    # bool is an int subclass but never a valid id
    if item_id is None or isinstance(item_id, bool) or not isinstance(item_id, int):
        raise InvalidInputError(f"Item has no usable id: {item!r}")
    return item_id


class FavouritesStore:
    """Single source of truth for favourites, shared by reference across views.

    Every state change replaces the snapshot with a new frozenset, so a
    snapshot handed out earlier never changes under its reader.
    """

    def __init__(self) -> None:
        self._snapshot: frozenset[int] = frozenset()
        self._listeners: list[Listener] = []

    def snapshot(self) -> frozenset[int]:
        """Return the current immutable set of favourite ids."""
        return self._snapshot

    def add(self, item: Any) -> None:
        """Mark item as favourite. Repeated adds are silent no-ops."""
        item_id = extract_id(item)
        if item_id in self._snapshot:
            return
        self._commit(self._snapshot | {item_id})

    def remove(self, item: Any) -> None:
        """Drop item from favourites if present."""
        item_id = extract_id(item)
        if item_id not in self._snapshot:
            return
        self._commit(self._snapshot - {item_id})

    def toggle(self, item: Any) -> bool:
        """Flip favourite state of item.

        Returns:
            True if the item is a favourite afterwards
        """
        if extract_id(item) in self._snapshot:
            self.remove(item)
            return False
        self.add(item)
        return True

    def is_favourite(self, item: Any) -> bool:
        if isinstance(item, int) and not isinstance(item, bool):
            return item in self._snapshot
        return extract_id(item) in self._snapshot

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register listener for snapshot changes.

        Returns:
            Function that removes the listener; safe to call more than once
        """
        self._listeners.append(listener)
        subscribed = True

        def unsubscribe() -> None:
            nonlocal subscribed
            if subscribed and listener in self._listeners:
                self._listeners.remove(listener)
            subscribed = False

        return unsubscribe

    def _commit(self, snapshot: frozenset[int]) -> None:
        self._snapshot = snapshot
        errors: list[Exception] = []
        # Copy so (un)subscribing inside a callback applies from the next change
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception as e:
                errors.append(e)

        # Every listener has seen the snapshot before any failure is reported
        if errors:
            raise ListenerError(errors) from errors[0]

    def __contains__(self, item: Any) -> bool:
        return self.is_favourite(item)

    def __len__(self) -> int:
        return len(self._snapshot)

    def __repr__(self) -> str:
        return f"FavouritesStore({sorted(self._snapshot)!r})"
