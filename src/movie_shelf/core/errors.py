"""Core exceptions."""

from typing import Optional


class MovieShelfError(Exception):
    """Base error for movie shelf operations."""


class InvalidInputError(MovieShelfError, ValueError):
    """Item has no usable identifier."""


class UnknownFilterError(MovieShelfError, KeyError):
    """Filter name is not registered in the pipeline."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown filter: {self.name!r}"


class DuplicateFilterNameError(MovieShelfError, ValueError):
    """Two filters share the same name."""


class PredicateError(MovieShelfError):
    """A filter predicate raised during evaluation."""

    def __init__(self, filter_name: str, message: Optional[str] = None) -> None:
        super().__init__(message or f"Filter {filter_name!r} failed")
        self.filter_name = filter_name


class UnknownActionError(MovieShelfError, LookupError):
    """Strategy did not offer the requested action."""


class SourceError(MovieShelfError):
    """Data source request failed."""


class AuthenticationError(SourceError):
    """TMDB rejected the API key."""


class ListenerError(MovieShelfError):
    """One or more subscribers failed while handling a committed snapshot."""

    def __init__(self, errors: list[Exception]) -> None:
        super().__init__(
            f"{len(errors)} listener(s) failed: " + "; ".join(str(e) for e in errors)
        )
        self.errors = errors


class PersistenceError(MovieShelfError):
    """Stored favourites could not be read."""


class ConfigError(MovieShelfError, ValueError):
    """Configuration file names an unknown page or filter."""
