from __future__ import annotations

from datetime import date

import pytest

from cinevault.exceptions import CinevaultCatalogError
from cinevault.models.movie import MovieRecord
from cinevault.state.catalog import CatalogStore, load_seed_movies


def _movie(movie_id: int, released: date, *, title: str | None = None, genres: tuple[str, ...] = ()) -> MovieRecord:
    return MovieRecord(
        id=movie_id,
        title=title or f"Movie {movie_id}",
        release_date=released,
        price=9.99,
        genres=genres,
    )


class TestSeedCatalog:
    def test_seed_loads_all_movies_in_order(self) -> None:
        movies = load_seed_movies()
        assert [movie.id for movie in movies] == [1, 2, 3, 4, 5, 6, 7, 8]
        assert movies[0].title == "Dune: Part Two"
        assert movies[0].genres == ("Science Fiction", "Adventure")
        assert movies[0].trailer_key == "Way3Dmt3ZxQ"

    def test_featured_is_first_four(self) -> None:
        catalog = CatalogStore.from_seed()
        assert [movie.id for movie in catalog.featured()] == [1, 2, 3, 4]

    def test_newest_from_seed(self) -> None:
        catalog = CatalogStore.from_seed()
        assert [movie.id for movie in catalog.newest()] == [8, 7, 6, 1]


class TestLookup:
    def test_get_known_and_unknown(self) -> None:
        catalog = CatalogStore([_movie(1, date(2020, 1, 1))])
        found = catalog.get(1)
        assert found is not None
        assert found.id == 1
        assert catalog.get(999) is None
        assert 1 in catalog
        assert 999 not in catalog

    def test_list_preserves_insertion_order(self) -> None:
        catalog = CatalogStore([_movie(3, date(2020, 1, 1)), _movie(1, date(2021, 1, 1))])
        assert [movie.id for movie in catalog.list_movies()] == [3, 1]

    def test_duplicate_ids_rejected(self) -> None:
        with pytest.raises(CinevaultCatalogError):
            CatalogStore([_movie(1, date(2020, 1, 1)), _movie(1, date(2021, 1, 1))])


class TestNewest:
    def test_ties_keep_insertion_order(self) -> None:
        catalog = CatalogStore(
            [
                _movie(1, date(2022, 1, 1)),
                _movie(2, date(2024, 1, 1)),
                _movie(3, date(2023, 1, 1)),
                _movie(4, date(2024, 1, 1)),
            ]
        )
        assert [movie.id for movie in catalog.newest()] == [2, 4, 3, 1]

    def test_truncates_to_highlight_count(self) -> None:
        movies = [_movie(i, date(2000 + i, 1, 1)) for i in range(1, 7)]
        catalog = CatalogStore(movies)
        assert [movie.id for movie in catalog.newest()] == [6, 5, 4, 3]

    def test_custom_highlight_count(self) -> None:
        movies = [_movie(i, date(2000 + i, 1, 1)) for i in range(1, 7)]
        catalog = CatalogStore(movies, highlight_count=2)
        assert [movie.id for movie in catalog.featured()] == [1, 2]
        assert [movie.id for movie in catalog.newest()] == [6, 5]

    def test_empty_catalog(self) -> None:
        catalog = CatalogStore([])
        assert catalog.featured() == ()
        assert catalog.newest() == ()


class TestFilter:
    def _catalog(self) -> CatalogStore:
        return CatalogStore(
            [
                _movie(1, date(2024, 1, 1), title="Dune: Part Two", genres=("Science Fiction", "Adventure")),
                _movie(2, date(2022, 1, 1), title="The Batman", genres=("Crime", "Thriller")),
                _movie(3, date(2023, 1, 1), title="Oppenheimer", genres=("Drama", "Thriller")),
            ]
        )

    def test_query_is_case_insensitive(self) -> None:
        assert [movie.id for movie in self._catalog().filter(query="BAT")] == [2]

    def test_genre_filter(self) -> None:
        assert [movie.id for movie in self._catalog().filter(genre="thriller")] == [2, 3]

    def test_all_genre_disables_filter(self) -> None:
        assert len(self._catalog().filter(genre="all")) == 3

    def test_query_and_genre_combined(self) -> None:
        assert [movie.id for movie in self._catalog().filter(query="opp", genre="Thriller")] == [3]

    def test_genres_first_seen_order(self) -> None:
        assert self._catalog().genres() == ("Science Fiction", "Adventure", "Crime", "Thriller", "Drama")
