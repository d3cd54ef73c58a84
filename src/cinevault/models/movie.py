"""Movie record model."""

from __future__ import annotations

from datetime import date

from pydantic import Field, field_validator

from cinevault.models._base import StoreBaseModel


class MovieRecord(StoreBaseModel):
    """A purchasable title in the catalog.

    Records are loaded once from the seed list and never change for the
    lifetime of a :class:`~cinevault.state.catalog.CatalogStore`.
    """

    id: int
    """Unique catalog identifier."""
    title: str
    overview: str = ""
    """Descriptive text shown on the detail page."""
    poster_path: str = ""
    backdrop_path: str = ""
    release_date: date
    vote_average: float = Field(default=0.0, ge=0.0, le=10.0)
    """Audience rating on a 0-10 scale."""
    price: float = Field(ge=0.0)
    """Price in USD."""
    genres: tuple[str, ...] = ()
    runtime: int = Field(default=0, ge=0)
    """Runtime in minutes."""
    director: str = ""
    starring: tuple[str, ...] = ()
    trailer_key: str | None = None
    """YouTube video key for the trailer, when one exists."""

    @field_validator("title")
    @classmethod
    def _strip_title(cls, value: str) -> str:
        title = value.strip()
        if not title:
            raise ValueError("title must be non-empty")
        return title

    @property
    def release_year(self) -> int:
        return self.release_date.year

    def has_genre(self, genre: str) -> bool:
        """Case-insensitive genre membership."""
        wanted = genre.strip().lower()
        return any(label.lower() == wanted for label in self.genres)
