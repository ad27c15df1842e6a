"""Core domain entities."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional


class ActionKind(str, Enum):
    """Kind of per-item control."""

    TOGGLE_FAVOURITE = "toggle_favourite"
    REMOVE = "remove"
    REVIEW = "review"


@dataclass(frozen=True)
class Genre:
    """Genre as returned by the detail endpoint."""

    id: int
    name: str


@dataclass(frozen=True)
class MovieItem:
    """Movie reference with display attributes.

    ``genre_ids`` is only present on list-query results and ``genres`` only on
    detail-query results. ``None`` marks a field the result shape lacks.
    """

    id: Optional[int]
    title: str
    genre_ids: Optional[tuple[int, ...]] = None
    genres: Optional[tuple[Genre, ...]] = None
    release_date: Optional[str] = None
    vote_average: Optional[float] = None
    overview: str = ""
    poster_path: Optional[str] = None
    metadata: dict[str, str] = field(default_factory=dict, compare=False, hash=False)

    @classmethod
    def from_list_result(cls, data: dict[str, Any]) -> "MovieItem":
        """Build from an entry of a list or search response."""
        genre_ids = data.get("genre_ids")
        return cls(
            id=data.get("id"),
            title=data.get("title") or data.get("original_title") or "",
            genre_ids=tuple(genre_ids) if genre_ids is not None else None,
            release_date=data.get("release_date") or None,
            vote_average=data.get("vote_average"),
            overview=data.get("overview") or "",
            poster_path=data.get("poster_path"),
            metadata={"shape": "list"},
        )

    @classmethod
    def from_detail_result(cls, data: dict[str, Any]) -> "MovieItem":
        """Build from a single-movie detail response."""
        genres = data.get("genres")
        metadata = {"shape": "detail"}
        if data.get("runtime"):
            metadata["runtime"] = str(data["runtime"])
        if data.get("tagline"):
            metadata["tagline"] = data["tagline"]

        return cls(
            id=data.get("id"),
            title=data.get("title") or data.get("original_title") or "",
            genres=(
                tuple(Genre(id=g["id"], name=g.get("name", "")) for g in genres)
                if genres is not None
                else None
            ),
            release_date=data.get("release_date") or None,
            vote_average=data.get("vote_average"),
            overview=data.get("overview") or "",
            poster_path=data.get("poster_path"),
            metadata=metadata,
        )


def kind_name(kind: str) -> str:
    """Plain string value of an action kind."""
    return getattr(kind, "value", str(kind))


@dataclass(frozen=True)
class ActionDescriptor:
    """One interactive control attached to an item.

    ``kind`` is an ``ActionKind`` or any other ``str`` Enum a page defines.
    """

    kind: str
    handler: Callable[[Any], Any] = field(compare=False)
    label: str = ""
    active: bool = False

    def __call__(self, item: Any) -> Any:
        return self.handler(item)


@dataclass
class FilterSpec:
    """Named inclusion predicate with its current value."""

    name: str
    value: str
    predicate: Callable[[Any, str], bool]

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Filter name cannot be empty")
