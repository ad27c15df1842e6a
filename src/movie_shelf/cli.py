"""CLI entry point for movie shelf."""

import asyncio
from typing import Optional

import typer

from movie_shelf.adapters.persistence import YamlFavouritesPersistence
from movie_shelf.adapters.sources import TMDBSource
from movie_shelf.config import Settings, get_settings
from movie_shelf.core import ActionKind, FavouritesStore, MovieItem, MovieShelfError
from movie_shelf.use_cases import BrowsePage, FavouritesPage

app = typer.Typer(help="Browse movies and manage favourites.", no_args_is_help=True)


def open_store(settings: Settings) -> FavouritesStore:
    """Create the shared store, restoring and persisting it if enabled."""
    store = FavouritesStore()
    if settings.persist_favourites:
        persistence = YamlFavouritesPersistence(settings.favourites_file)
        persistence.rehydrate(store)
        persistence.attach(store)
    return store


def make_source(settings: Settings) -> TMDBSource:
    if not settings.tmdb_api_key:
        print("⚠️  TMDB_API_KEY not set, requests will be rejected")
    return TMDBSource(
        api_key=settings.tmdb_api_key,
        language=settings.tmdb.language,
        api_base=settings.tmdb.api_base,
        timeout=settings.tmdb.timeout,
        list_endpoint=settings.tmdb.list_endpoint,
    )


def open_review(item: MovieItem) -> str:
    """Hand off to the TMDB review page."""
    url = f"https://www.themoviedb.org/movie/{item.id}/reviews"
    print(f"✎ Review {item.title}: {url}")
    return url


def _fail(error: Exception) -> None:
    typer.secho(f"❌ {error}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


def _filters(
    title: Optional[str],
    genre: Optional[str],
    rating: Optional[str],
    year: Optional[str],
    defaults: dict[str, str],
) -> dict[str, str]:
    given = {"title": title, "genre": genre, "rating": rating, "year": year}
    return {name: value if value is not None else defaults.get(name, "") for name, value in given.items()}


@app.command()
def browse(
    page: int = typer.Option(1, help="Listing page"),
    title: Optional[str] = typer.Option(None, help="Title substring"),
    genre: Optional[str] = typer.Option(None, help="Genre id, 0 for all"),
    rating: Optional[str] = typer.Option(None, help="Minimum rating"),
    year: Optional[str] = typer.Option(None, help="Release year"),
    toggle: Optional[int] = typer.Option(None, help="Toggle favourite for a movie id on this page"),
) -> None:
    """Show the popular movies listing."""
    try:
        settings = get_settings()
        view = BrowsePage(
            make_source(settings),
            open_store(settings),
            filters=_filters(title, genre, rating, year, settings.filters.browse),
        )

        asyncio.run(view.load(page))
        if toggle is not None:
            is_favourite = view.trigger(toggle, ActionKind.TOGGLE_FAVOURITE)
            print(f"{'♥ Added' if is_favourite else '♡ Removed'} {toggle}")
        print()
        print(view.render())
    except MovieShelfError as e:
        _fail(e)


@app.command()
def favourites(
    title: Optional[str] = typer.Option(None, help="Title substring"),
    genre: Optional[str] = typer.Option(None, help="Genre id, 0 for all"),
    rating: Optional[str] = typer.Option(None, help="Minimum rating"),
    year: Optional[str] = typer.Option(None, help="Release year"),
    remove: Optional[int] = typer.Option(None, help="Remove a movie id from favourites"),
    review: Optional[int] = typer.Option(None, help="Open reviews for a movie id"),
) -> None:
    """Show favourite movies."""
    try:
        settings = get_settings()
        view = FavouritesPage(
            make_source(settings),
            open_store(settings),
            open_review=open_review,
            filters=_filters(title, genre, rating, year, settings.filters.favourites),
        )

        asyncio.run(view.load())
        if remove is not None:
            view.trigger(remove, ActionKind.REMOVE)
            print(f"✕ Removed {remove}")
        if review is not None:
            view.trigger(review, ActionKind.REVIEW)
        print()
        print(view.render())
    except MovieShelfError as e:
        _fail(e)


@app.command()
def add(movie_id: int) -> None:
    """Add a movie id to favourites."""
    try:
        store = open_store(get_settings())
        store.add({"id": movie_id})
    except MovieShelfError as e:
        _fail(e)
        return
    print(f"♥ Favourites: {len(store)}")


@app.command("remove")
def remove_favourite(movie_id: int) -> None:
    """Remove a movie id from favourites."""
    try:
        store = open_store(get_settings())
        store.remove({"id": movie_id})
    except MovieShelfError as e:
        _fail(e)
        return
    print(f"♡ Favourites: {len(store)}")


@app.command()
def genres() -> None:
    """List genre ids usable with --genre."""
    try:
        source = make_source(get_settings())
        catalogue = asyncio.run(source.fetch_genres())
    except MovieShelfError as e:
        _fail(e)
        return

    print("0: All genres")
    for genre in catalogue:
        print(f"{genre.id}: {genre.name}")


if __name__ == "__main__":
    app()
