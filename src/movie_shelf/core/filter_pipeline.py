"""Ordered conjunction of named filters applied to item collections."""

from collections.abc import Iterable, Sequence
from dataclasses import replace
from typing import Callable, TypeVar

from movie_shelf.core.entities import FilterSpec
from movie_shelf.core.errors import (
    DuplicateFilterNameError,
    PredicateError,
    UnknownFilterError,
)

T = TypeVar("T")


class FilterPipeline:
    """Hold filter values and evaluate every predicate against a collection.

    Values are read at evaluation time, so a pipeline built once can be
    re-evaluated as the user edits filters.
    """

    def __init__(self, specs: Iterable[FilterSpec] = ()) -> None:
        self._filters: dict[str, FilterSpec] = {}
        self._initial: dict[str, str] = {}

        for spec in specs:
            if spec.name in self._filters:
                raise DuplicateFilterNameError(f"Duplicate filter name: {spec.name!r}")
            # Own copy so the caller's spec is never mutated by set_value
            self._filters[spec.name] = replace(spec)
            self._initial[spec.name] = spec.value

    @property
    def names(self) -> list[str]:
        return list(self._filters)

    def current_values(self) -> dict[str, str]:
        """Return filter values in evaluation order."""
        return {name: spec.value for name, spec in self._filters.items()}

    def set_value(self, name: str, value: str) -> None:
        """Update the value of one filter."""
        if name not in self._filters:
            raise UnknownFilterError(name)
        self._filters[name].value = value

    def reset(self) -> None:
        """Restore every filter to the value it was created with."""
        for name, spec in self._filters.items():
            spec.value = self._initial[name]

    def evaluate(self, collection: Sequence[T]) -> list[T]:
        """Return the items accepted by every filter, in input order.

        ``None`` entries stand for items that are not available yet and are
        dropped. A failing predicate aborts the whole evaluation.
        """
        filters = list(self._filters.values())
        result: list[T] = []

        for item in collection:
            if item is None:
                continue
            if all(self._check(spec, item) for spec in filters):
                result.append(item)

        return result

    def evaluator(self) -> Callable[[Sequence[T]], list[T]]:
        """Return a callable bound to this pipeline's live values."""
        return self.evaluate

    def _check(self, spec: FilterSpec, item: object) -> bool:
        try:
            return bool(spec.predicate(item, spec.value))
        except Exception as e:
            raise PredicateError(
                spec.name, f"Filter {spec.name!r} failed on {item!r}: {e}"
            ) from e

    def __contains__(self, name: object) -> bool:
        return name in self._filters

    def __len__(self) -> int:
        return len(self._filters)

    def __repr__(self) -> str:
        return f"FilterPipeline({self.current_values()!r})"
