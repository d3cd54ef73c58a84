"""Read-only movie catalog."""

from __future__ import annotations

import importlib.resources
import json
import logging
from collections.abc import Iterable, Sequence

from pydantic import TypeAdapter, ValidationError

from cinevault._constants import HIGHLIGHT_COUNT
from cinevault.exceptions import CinevaultCatalogError
from cinevault.models.movie import MovieRecord

_logger = logging.getLogger(__name__)

_MOVIE_LIST = TypeAdapter(list[MovieRecord])


def load_seed_movies() -> list[MovieRecord]:
    """Load the bundled seed catalog from package data."""
    try:
        ref = importlib.resources.files("cinevault").joinpath("data/movies.json")
        raw = json.loads(ref.read_text(encoding="utf-8"))
        movies = _MOVIE_LIST.validate_python(raw)
    except FileNotFoundError as exc:
        raise CinevaultCatalogError("movies.json not found in package data") from exc
    except (json.JSONDecodeError, ValidationError) as exc:
        raise CinevaultCatalogError(f"Seed catalog is malformed: {exc}") from exc
    _logger.debug("Loaded %d seed movies", len(movies))
    return movies


class CatalogStore:
    """Immutable-for-the-session list of movies.

    Insertion order is preserved and drives both :meth:`list_movies` and
    :meth:`featured`. Lookups for unknown identifiers return ``None``.
    """

    def __init__(self, movies: Iterable[MovieRecord], *, highlight_count: int = HIGHLIGHT_COUNT) -> None:
        self._movies: tuple[MovieRecord, ...] = tuple(movies)
        self._by_id: dict[int, MovieRecord] = {}
        for movie in self._movies:
            if movie.id in self._by_id:
                raise CinevaultCatalogError(f"Duplicate movie id {movie.id}")
            self._by_id[movie.id] = movie
        self._highlight_count = highlight_count

    @classmethod
    def from_seed(cls, *, highlight_count: int = HIGHLIGHT_COUNT) -> CatalogStore:
        return cls(load_seed_movies(), highlight_count=highlight_count)

    def __len__(self) -> int:
        return len(self._movies)

    def __contains__(self, movie_id: object) -> bool:
        return movie_id in self._by_id

    def list_movies(self) -> tuple[MovieRecord, ...]:
        return self._movies

    def get(self, movie_id: int) -> MovieRecord | None:
        return self._by_id.get(movie_id)

    def featured(self) -> tuple[MovieRecord, ...]:
        """First records by insertion order."""
        return self._movies[: self._highlight_count]

    def newest(self) -> tuple[MovieRecord, ...]:
        """Most recent releases first; equal dates keep insertion order."""
        # sorted() is stable, so reverse=True keeps ties in insertion order.
        ordered = sorted(self._movies, key=lambda movie: movie.release_date, reverse=True)
        return tuple(ordered[: self._highlight_count])

    def genres(self, movies: Iterable[MovieRecord] | None = None) -> tuple[str, ...]:
        """Unique genre labels in first-seen order."""
        seen: dict[str, None] = {}
        for movie in self._movies if movies is None else movies:
            for genre in movie.genres:
                seen.setdefault(genre, None)
        return tuple(seen)

    def filter(
        self,
        movies: Sequence[MovieRecord] | None = None,
        *,
        query: str = "",
        genre: str | None = None,
    ) -> tuple[MovieRecord, ...]:
        """Case-insensitive title search combined with an optional genre.

        ``genre=None`` or ``"all"`` disables the genre condition.
        """
        needle = query.strip().lower()
        wanted = None if genre is None or genre.strip().lower() == "all" else genre
        pool = self._movies if movies is None else movies
        return tuple(
            movie
            for movie in pool
            if needle in movie.title.lower() and (wanted is None or movie.has_genre(wanted))
        )
