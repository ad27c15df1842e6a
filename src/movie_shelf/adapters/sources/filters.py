"""Filter predicates for the two TMDB result shapes.

List and search results carry ``genre_ids`` while detail results carry
``genres``, so the genre criterion has one predicate per shape. Every
predicate lets an item through when the field it reads is absent.
"""

from movie_shelf.core.entities import FilterSpec, MovieItem

ALL_GENRES = "0"


def title_contains(item: MovieItem, value: str) -> bool:
    """
    Case-insensitive substring match on the title.

    Sentinel: an empty or blank value matches every item.
    """
    needle = value.strip().lower()
    if not needle:
        return True
    if item.title is None:
        return True
    return needle in item.title.lower()


def genre_ids_match(item: MovieItem, value: str) -> bool:
    """
    Genre match for list-shaped items (``genre_ids``).

    Sentinel: ``"0"`` or an empty value matches every item.
    """
    value = value.strip()
    if value in ("", ALL_GENRES):
        return True
    if item.genre_ids is None:
        return True
    return int(value) in item.genre_ids


def detail_genres_match(item: MovieItem, value: str) -> bool:
    """
    Genre match for detail-shaped items (``genres``).

    Sentinel: ``"0"`` or an empty value matches every item.
    """
    value = value.strip()
    if value in ("", ALL_GENRES):
        return True
    if item.genres is None:
        return True
    genre_id = int(value)
    return any(genre.id == genre_id for genre in item.genres)


def min_rating(item: MovieItem, value: str) -> bool:
    """
    Keep items rated at least ``value`` (0-10 scale).

    Sentinel: ``"0"`` or an empty value. A non-numeric value raises ValueError.
    """
    value = value.strip()
    if value in ("", "0"):
        return True
    threshold = float(value)
    if item.vote_average is None:
        return True
    return item.vote_average >= threshold


def release_year(item: MovieItem, value: str) -> bool:
    """
    Keep items released in the given year.

    Sentinel: an empty value.
    """
    value = value.strip()
    if not value:
        return True
    if not item.release_date:
        return True
    return item.release_date[:4] == value


def list_page_filters(
    title: str = "", genre: str = ALL_GENRES, rating: str = "", year: str = ""
) -> list[FilterSpec]:
    """Filters for pages showing list-shaped items."""
    return [
        FilterSpec("title", title, title_contains),
        FilterSpec("genre", genre, genre_ids_match),
        FilterSpec("rating", rating, min_rating),
        FilterSpec("year", year, release_year),
    ]


def detail_page_filters(
    title: str = "", genre: str = ALL_GENRES, rating: str = "", year: str = ""
) -> list[FilterSpec]:
    """Filters for pages showing detail-shaped items."""
    return [
        FilterSpec("title", title, title_contains),
        FilterSpec("genre", genre, detail_genres_match),
        FilterSpec("rating", rating, min_rating),
        FilterSpec("year", year, release_year),
    ]
