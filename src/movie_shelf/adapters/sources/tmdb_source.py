"""TMDB source for movie listings and details."""

import asyncio
from collections.abc import Iterable
from typing import Any, Optional

import httpx

from movie_shelf.core import AuthenticationError, Genre, MovieItem, MovieSource, SourceError


class TMDBSource(MovieSource):
    """Fetch movies from The Movie Database v3 API."""

    emoji = "🎬"
    name = "TMDB"

    def __init__(
        self,
        api_key: str,
        language: str = "en-US",
        api_base: str = "https://api.themoviedb.org/3",
        timeout: float = 10.0,
        list_endpoint: str = "/movie/popular",
    ) -> None:
        self.api_key = api_key
        self.language = language
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout
        self.list_endpoint = list_endpoint

    async def fetch_list(self, page: int = 1) -> list[MovieItem]:
        """Fetch one page of the configured listing."""
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            data = await self._get(client, self.list_endpoint, {"page": page})

        return [MovieItem.from_list_result(result) for result in data.get("results", [])]

    async def search(self, query: str, page: int = 1) -> list[MovieItem]:
        """Search movies by title. Results share the list shape."""
        if not query.strip():
            return await self.fetch_list(page)

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            data = await self._get(client, "/search/movie", {"query": query, "page": page})

        return [MovieItem.from_list_result(result) for result in data.get("results", [])]

    async def fetch_by_id(self, movie_id: int) -> Optional[MovieItem]:
        """Fetch movie details, None if TMDB does not know the id."""
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await self._fetch_detail(client, movie_id)

    async def fetch_many(self, movie_ids: Iterable[int]) -> list[Optional[MovieItem]]:
        """Fetch details for all ids concurrently.

        Failed lookups come back as None in their slot. A rejected API key
        fails every lookup, so it is raised instead.

        Raises:
            AuthenticationError: TMDB rejected the API key
        """
        ids = list(movie_ids)
        if not ids:
            return []

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            results = await asyncio.gather(
                *(self._fetch_detail(client, movie_id) for movie_id in ids),
                return_exceptions=True,
            )

        items: list[Optional[MovieItem]] = []
        for movie_id, result in zip(ids, results):
            if isinstance(result, AuthenticationError):
                raise result
            if isinstance(result, BaseException):
                print(f"  └─ ⚠️  Could not load movie {movie_id}: {result}")
                items.append(None)
            else:
                items.append(result)
        return items

    async def fetch_genres(self) -> list[Genre]:
        """Fetch the movie genre catalogue."""
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            data = await self._get(client, "/genre/movie/list", {})

        return [Genre(id=g["id"], name=g.get("name", "")) for g in data.get("genres", [])]

    async def _fetch_detail(
        self, client: httpx.AsyncClient, movie_id: int
    ) -> Optional[MovieItem]:
        data = await self._get(client, f"/movie/{movie_id}", {}, allow_missing=True)
        if data is None:
            return None
        return MovieItem.from_detail_result(data)

    async def _get(
        self,
        client: httpx.AsyncClient,
        path: str,
        params: dict[str, Any],
        allow_missing: bool = False,
    ) -> Any:
        """GET a TMDB endpoint with credentials and language applied."""
        query = {"api_key": self.api_key, "language": self.language, **params}

        try:
            response = await client.get(f"{self.api_base}{path}", params=query)
        except httpx.HTTPError as e:
            raise SourceError(f"TMDB request to {path} failed: {e}") from e

        if response.status_code == 404 and allow_missing:
            return None

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            if response.status_code == 401:
                raise AuthenticationError("TMDB rejected the API key (set TMDB_API_KEY)") from e
            raise SourceError(f"TMDB API error {response.status_code} for {path}") from e

        return response.json()
