"""
Dataset Schemas - records exchanged between the corpus parser, the record
synthesizer and the CineMax front-end.

Attributes are snake_case; the JSON/front-end names are camelCase aliases.
Dump with `model_dump(by_alias=True)` to get the on-disk shape.
"""

from typing import List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RawRecord(CamelModel):
    """A parsed corpus line, no presentation fields yet."""

    id: str = Field(..., description="Corpus identifier (free text, not unique)")
    title: str = Field(..., description="Title as found in the corpus, year suffix included")
    genre: Optional[str] = Field(None, description="Lower-cased genre, None for test corpus")
    description: str = Field("", description="Plot description")
    source: Literal["dataset"] = "dataset"


class SnapshotMetadata(CamelModel):
    training_count: int
    test_count: int
    total_count: int
    genre_count: int
    processed_at: str = Field(..., description="ISO-8601 timestamp of the parsing run")
    note: Optional[str] = None


class GenreStat(CamelModel):
    genre: str = Field(..., description="Capitalized genre label")
    count: int


class DatasetSnapshot(CamelModel):
    """Persisted output of the corpus parser (full or sample variant)."""

    metadata: SnapshotMetadata
    genres: List[str] = Field(default_factory=list)
    genre_stats: List[GenreStat] = Field(default_factory=list)
    training_data: List[RawRecord] = Field(default_factory=list)
    test_data: List[RawRecord] = Field(default_factory=list)

    def to_json_dict(self) -> dict:
        data = self.model_dump(by_alias=True)
        # the original snapshot files never carried a null note
        if data["metadata"].get("note") is None:
            data["metadata"].pop("note", None)
        return data


class Director(CamelModel):
    name: str
    image: str


class CastMember(CamelModel):
    name: str
    character: str
    image: str


class RatingShare(CamelModel):
    stars: int = Field(..., ge=1, le=5)
    percentage: int = Field(..., ge=0, le=100)


class PresentationRecord(CamelModel):
    """
    A RawRecord enriched with every display field the front-end reads.

    Field names (as aliases) must match the movie objects of `movies.js`.
    """

    id: str
    title: str
    release_year: int
    release_date: str
    runtime: int
    certification: str
    language: str = "English"
    budget: str = "N/A"
    box_office: str = "N/A"
    genres: List[str]
    average_rating: float
    total_ratings: int
    popularity: int
    poster_image: str
    backdrop_image: str
    synopsis: str
    director: Director
    cast: List[CastMember]
    production_companies: List[str]
    rating_distribution: List[RatingShare]
    source: Literal["dataset"] = "dataset"


# Fields every integrated movie literal must expose to the front-end
REQUIRED_MOVIE_FIELDS: tuple[str, ...] = (
    "id", "title", "releaseYear", "releaseDate", "runtime",
    "certification", "language", "genres", "averageRating",
    "totalRatings", "popularity", "posterImage", "backdropImage",
    "synopsis", "director", "cast", "productionCompanies", "ratingDistribution",
)
