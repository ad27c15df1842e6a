"""Configuration management."""

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from movie_shelf.core import ConfigError

PAGES = ("browse", "favourites")


@dataclass
class TMDBConfig:
    """TMDB API settings."""
    api_base: str = "https://api.themoviedb.org/3"
    language: str = "en-US"
    timeout: float = 10.0
    list_endpoint: str = "/movie/popular"


@dataclass
class PathsConfig:
    """Path settings."""
    favourites_file: Path = Path("data/favourites.yaml")


@dataclass
class FiltersConfig:
    """Initial filter values for each page."""
    browse: dict[str, str] = field(default_factory=lambda: {
        "title": "",
        "genre": "0",
        "rating": "",
        "year": "",
    })
    favourites: dict[str, str] = field(default_factory=lambda: {
        "title": "",
        "genre": "0",
        "rating": "",
        "year": "",
    })


@dataclass
class Settings:
    """Application settings."""

    # API key (from environment only)
    tmdb_api_key: str = ""

    # Persist favourites between sessions
    persist_favourites: bool = True

    tmdb: TMDBConfig = field(default_factory=TMDBConfig)
    paths: PathsConfig = field(default_factory=PathsConfig)
    filters: FiltersConfig = field(default_factory=FiltersConfig)

    @property
    def favourites_file(self) -> Path:
        return self.paths.favourites_file


def load_config(config_path: Path = Path("config.yaml")) -> dict:
    """Load configuration from YAML file."""
    if not config_path.exists():
        return {}

    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def get_settings(config_path: Path = Path("config.yaml")) -> Settings:
    """Get application settings from YAML config and environment."""
    config = load_config(config_path)

    settings = Settings(tmdb_api_key=os.getenv("TMDB_API_KEY", ""))

    if "persist_favourites" in config:
        settings.persist_favourites = bool(config["persist_favourites"])

    if "tmdb" in config:
        for key, value in config["tmdb"].items():
            setattr(settings.tmdb, key, value)

    if "paths" in config:
        for key, value in config["paths"].items():
            setattr(settings.paths, key, Path(value))

    if "filters" in config:
        for page, values in (config["filters"] or {}).items():
            if page not in PAGES:
                raise ConfigError(f"Unknown page {page!r} in filters, expected one of {', '.join(PAGES)}")
            defaults = getattr(settings.filters, page)
            for name, value in (values or {}).items():
                if name not in defaults:
                    raise ConfigError(f"Unknown filter {name!r} for page {page!r}")
                defaults[name] = str(value)

    return settings
