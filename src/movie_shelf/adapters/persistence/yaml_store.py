"""YAML file persistence for the favourites snapshot."""

from datetime import datetime
from pathlib import Path
from typing import Callable

import yaml

from movie_shelf.core import FavouritesPersistence, FavouritesStore, PersistenceError


class YamlFavouritesPersistence(FavouritesPersistence):
    """Keep favourite ids in a single YAML document."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def load(self) -> frozenset[int]:
        """Load stored ids.

        A missing file or an empty ``favourites`` key means no favourites yet.
        Entries that are not integer ids are skipped with a warning.

        Raises:
            PersistenceError: file is not valid YAML or has the wrong structure
        """
        if not self.path.exists():
            return frozenset()

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise PersistenceError(f"Cannot parse {self.path}: {e}") from e

        if data is None:
            return frozenset()
        if not isinstance(data, dict):
            raise PersistenceError(f"Expected a mapping in {self.path}")

        ids = data.get("favourites")
        if ids is None:
            return frozenset()
        if not isinstance(ids, list):
            raise PersistenceError(f"'favourites' in {self.path} must be a list of ids")

        valid = set()
        skipped = 0
        for entry in ids:
            if isinstance(entry, int) and not isinstance(entry, bool):
                valid.add(entry)
            else:
                skipped += 1

        if skipped:
            print(f"⚠️  Warning: skipped {skipped} invalid ids in {self.path}")
        return frozenset(valid)

    def save(self, snapshot: frozenset[int]) -> None:
        """Write the snapshot, sorted for stable diffs."""
        self.path.parent.mkdir(parents=True, exist_ok=True)

        document = {
            "favourites": sorted(snapshot),
            "count": len(snapshot),
            "updated_at": datetime.now().isoformat(timespec="seconds"),
        }

        with open(self.path, "w", encoding="utf-8") as f:
            yaml.dump(document, f, allow_unicode=True, default_flow_style=False, sort_keys=False)

    def rehydrate(self, store: FavouritesStore) -> int:
        """Replay stored ids into ``store`` through its public add.

        Returns:
            Number of ids loaded
        """
        ids = self.load()
        for movie_id in sorted(ids):
            store.add({"id": movie_id})
        return len(ids)

    def attach(self, store: FavouritesStore) -> Callable[[], None]:
        """Save every future snapshot of ``store``.

        Returns:
            Unsubscribe function
        """
        return store.subscribe(self.save)
