"""Unit tests for presentation record synthesis."""
import pytest
import numpy as np

from cinemax_pipeline.features.dataset_schema import RawRecord
from cinemax_pipeline.preprocessing.record_synthesis import (
    capitalize_genre,
    clean_title,
    convert_to_presentation_record,
    extract_year_from_title,
    generate_rating_distribution,
    random_backdrop_image,
    random_certification,
    random_director,
    random_poster_image,
    synthesize_records,
)
from cinemax_pipeline.preprocessing.synthesis_constants import (
    CERTIFICATIONS,
    DEFAULT_DIRECTORS,
    DIRECTORS_BY_GENRE,
)


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


class TestTitleHandling:
    """Tests for extract_year_from_title and clean_title."""

    def test_year_in_title(self, rng):
        """Test that a parenthesized year is used."""
        assert extract_year_from_title("Pierrot (1981)", rng) == 1981
        assert clean_title("Pierrot (1981)") == "Pierrot"

    def test_year_anywhere_in_title(self, rng):
        """Test that the year need not be at the end."""
        assert extract_year_from_title("Before (1999) After", rng) == 1999

    def test_no_year_is_random_in_range(self, rng):
        """Test the fallback year range [1980, 2024)."""
        years = [extract_year_from_title("Untitled", rng) for _ in range(200)]
        assert all(1980 <= y < 2024 for y in years)

    def test_clean_title_roman_suffix(self):
        """Test that '(YYYY/II)' suffixes are removed."""
        assert clean_title("Cupid (1997/II)") == "Cupid"
        assert clean_title("Young, Wild and Wonderful (1980/IV)") == "Young, Wild and Wonderful"

    def test_clean_title_without_year(self):
        """Test titles without a year are only trimmed."""
        assert clean_title("  Plain Title ") == "Plain Title"


class TestCapitalizeGenre:
    """Tests for capitalize_genre function."""

    @pytest.mark.parametrize("genre,expected", [
        ("sci-fi", "Sci-Fi"),
        ("SCI-FI", "Sci-Fi"),
        ("tv-movie", "TV Movie"),
        ("reality-tv", "Reality TV"),
        ("talk-show", "Talk Show"),
        ("game-show", "Game Show"),
        ("drama", "Drama"),
        ("documentary", "Documentary"),
    ])
    def test_labels(self, genre, expected):
        """Test override table and first-letter capitalization."""
        assert capitalize_genre(genre) == expected

    @pytest.mark.parametrize("genre", ["", None])
    def test_missing_genre(self, genre):
        """Test that missing genres become 'Unknown'."""
        assert capitalize_genre(genre) == "Unknown"


class TestRandomPicks:
    """Tests for certification, image and director picks."""

    def test_certification_from_fixed_set(self, rng):
        """Test certifications come from the fixed rating set."""
        assert {random_certification(rng) for _ in range(100)} <= set(CERTIFICATIONS)

    def test_image_sizes(self, rng):
        """Test poster and backdrop URLs carry their sizes."""
        poster = random_poster_image(rng)
        backdrop = random_backdrop_image(rng)

        assert poster.startswith("https://images.unsplash.com/photo-")
        assert poster.endswith("?w=500&h=750&fit=crop")
        assert backdrop.endswith("?w=1280&h=720&fit=crop")

    def test_director_by_genre(self, rng):
        """Test genre-keyed director lookup, case-insensitive."""
        assert random_director("horror", rng) in DIRECTORS_BY_GENRE["horror"]
        assert random_director("Sci-Fi", rng) in DIRECTORS_BY_GENRE["sci-fi"]

    def test_director_default(self, rng):
        """Test fallback list for unknown and missing genres."""
        assert random_director("western", rng) in DEFAULT_DIRECTORS
        assert random_director(None, rng) in DEFAULT_DIRECTORS


class TestRatingDistribution:
    """Tests for generate_rating_distribution function."""

    def test_covers_each_star_once(self, rng):
        """Test the five buckets appear in ascending star order."""
        distribution = generate_rating_distribution(rng)
        assert [r.stars for r in distribution] == [1, 2, 3, 4, 5]

    @pytest.mark.parametrize("seed", range(50))
    def test_percentages_non_negative_and_sum_to_100(self, seed):
        """Test bucket bounds over many seeds."""
        distribution = generate_rating_distribution(np.random.default_rng(seed))
        percentages = [r.percentage for r in distribution]

        assert all(p >= 0 for p in percentages)
        assert sum(percentages) == 100


class TestConvertToPresentationRecord:
    """Tests for convert_to_presentation_record and synthesize_records."""

    def test_fields(self, rng):
        """Test synthesized fields and their ranges."""
        raw = RawRecord(id="42", title="Pierrot (1981)", genre="sci-fi", description="A clown in space.")

        record = convert_to_presentation_record(raw, 7, rng)

        assert record.id == "7"
        assert record.title == "Pierrot"
        assert record.release_year == 1981
        assert record.release_date == "January 1, 1981"
        assert 80 <= record.runtime < 180
        assert record.certification in CERTIFICATIONS
        assert record.language == "English"
        assert record.budget == "N/A"
        assert record.box_office == "N/A"
        assert record.genres == ["Sci-Fi"]
        assert 6.0 <= record.average_rating <= 10.0
        assert round(record.average_rating, 1) == record.average_rating
        assert 1000 <= record.total_ratings < 101000
        assert 1 <= record.popularity <= 100
        assert record.synopsis == "A clown in space."
        assert record.director.name in DIRECTORS_BY_GENRE["sci-fi"]
        assert [m.name for m in record.cast] == ["Lead Actor", "Supporting Actor"]
        assert record.production_companies == ["Independent Studio"]
        assert record.source == "dataset"

    def test_missing_genre(self, rng):
        """Test test-corpus records get the 'Unknown' label and default director."""
        raw = RawRecord(id="1", title="No Genre", genre=None, description="")
        record = convert_to_presentation_record(raw, 1, rng)

        assert record.genres == ["Unknown"]
        assert record.director.name in DEFAULT_DIRECTORS

    def test_sequential_ids(self, rng):
        """Test ids continue from the given first id."""
        raws = [RawRecord(id="x", title=f"M{i}", genre="drama", description="") for i in range(3)]
        records = synthesize_records(raws, 11, rng)

        assert [r.id for r in records] == ["11", "12", "13"]

    def test_seeded_generator_is_reproducible(self):
        """Test that the same seed yields identical records."""
        raws = [RawRecord(id="1", title="Untitled", genre="comedy", description="d")]

        first = synthesize_records(raws, 1, np.random.default_rng(99))
        second = synthesize_records(raws, 1, np.random.default_rng(99))

        assert first == second

    def test_dump_uses_front_end_names(self, rng):
        """Test serialized field names match the front-end movie objects."""
        raw = RawRecord(id="1", title="T (2001)", genre="drama", description="d")
        data = convert_to_presentation_record(raw, 1, rng).model_dump(by_alias=True)

        assert {"releaseYear", "boxOffice", "averageRating", "posterImage",
                "productionCompanies", "ratingDistribution"} <= set(data)
        assert data["director"]["image"].endswith("?w=100&h=100&fit=crop")
