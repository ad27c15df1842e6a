"""Tests for configuration loading."""

from pathlib import Path
from tempfile import TemporaryDirectory

import pytest

from movie_shelf.config import get_settings
from movie_shelf.core import ConfigError


def test_defaults_without_file(monkeypatch) -> None:
    """Test defaults when config file is missing."""
    monkeypatch.delenv("TMDB_API_KEY", raising=False)
    
    settings = get_settings(Path("does-not-exist.yaml"))
    
    assert settings.tmdb_api_key == ""
    assert settings.tmdb.language == "en-US"
    assert settings.persist_favourites is True
    assert settings.favourites_file == Path("data/favourites.yaml")
    assert settings.filters.browse["genre"] == "0"


def test_yaml_overrides_and_env(monkeypatch) -> None:
    """Test YAML sections and environment key are applied."""
    monkeypatch.setenv("TMDB_API_KEY", "secret")
    
    with TemporaryDirectory() as tmpdir:
        config_path = Path(tmpdir) / "config.yaml"
        config_path.write_text(
            "persist_favourites: false\n"
            "tmdb:\n"
            "  language: de-DE\n"
            "paths:\n"
            "  favourites_file: /tmp/favs.yaml\n"
            "filters:\n"
            "  favourites:\n"
            "    rating: 7\n",
            encoding="utf-8",
        )
        
        settings = get_settings(config_path)
    
    assert settings.tmdb_api_key == "secret"
    assert settings.persist_favourites is False
    assert settings.tmdb.language == "de-DE"
    assert settings.favourites_file == Path("/tmp/favs.yaml")
    assert settings.filters.favourites["rating"] == "7"
    assert settings.filters.favourites["genre"] == "0"


@pytest.mark.parametrize(
    "filters_yaml, message",
    [
        ("  watchlist:\n    title: x\n", "watchlist"),
        ("  browse:\n    director: Nolan\n", "director"),
    ],
)
def test_unknown_filter_settings_rejected(filters_yaml, message) -> None:
    """Test unknown pages and filter names raise ConfigError."""
    with TemporaryDirectory() as tmpdir:
        config_path = Path(tmpdir) / "config.yaml"
        config_path.write_text("filters:\n" + filters_yaml, encoding="utf-8")
        
        with pytest.raises(ConfigError, match=message):
            get_settings(config_path)
