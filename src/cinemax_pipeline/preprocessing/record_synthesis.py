"""
Turn RawRecords into PresentationRecords for the CineMax front-end.

The corpus only carries id, title, genre and description. Every other display
field is placeholder data drawn from the generator passed in as `rng`, so a
seeded generator gives reproducible output.
"""

import math
import re
import logging
from typing import Optional, Sequence

import numpy as np
from tqdm.auto import tqdm

from cinemax_pipeline.features.dataset_schema import (
    CastMember,
    Director,
    PresentationRecord,
    RatingShare,
    RawRecord,
)
from cinemax_pipeline.preprocessing.synthesis_constants import *

logger = logging.getLogger(__name__)


def _pick(options: Sequence[str], rng: np.random.Generator) -> str:
    return options[int(rng.integers(len(options)))]


def extract_year_from_title(title: str, rng: np.random.Generator) -> int:
    """Year from a "(YYYY)" anywhere in the title, else a random year in [1980, 2024)."""
    match = re.search(YEAR_IN_TITLE_PATTERN, title)
    if match:
        return int(match.group(1))
    low, high = RANDOM_YEAR_RANGE
    return int(rng.integers(low, high))


def clean_title(title: str) -> str:
    """Drop the "(YYYY)" or "(YYYY/II)" segment from a corpus title."""
    return re.sub(TITLE_YEAR_SUFFIX_PATTERN, "", title, count=1).strip()


def capitalize_genre(genre: Optional[str]) -> str:
    if not genre:
        return UNKNOWN_GENRE_LABEL

    override = GENRE_LABEL_OVERRIDES.get(genre.lower())
    if override:
        return override

    return genre[:1].upper() + genre[1:]


def random_certification(rng: np.random.Generator) -> str:
    return _pick(CERTIFICATIONS, rng)


def random_poster_image(rng: np.random.Generator) -> str:
    return f"{UNSPLASH_BASE_URL}/{_pick(POSTER_PHOTO_IDS, rng)}?{POSTER_SIZE}"


def random_backdrop_image(rng: np.random.Generator) -> str:
    return f"{UNSPLASH_BASE_URL}/{_pick(POSTER_PHOTO_IDS, rng)}?{BACKDROP_SIZE}"


def random_director(genre: Optional[str], rng: np.random.Generator) -> str:
    names = DIRECTORS_BY_GENRE.get((genre or "").lower(), DEFAULT_DIRECTORS)
    return _pick(names, rng)


def generate_rating_distribution(rng: np.random.Generator) -> list[RatingShare]:
    """
    Split a 100% budget across star ratings.

    Stars 5 down to 2 each take a random share of at most 60% of what is
    left; star 1 takes the remainder. Returned in ascending star order.
    """
    remaining = RATING_BUDGET
    distribution = []

    for stars in range(5, 0, -1):
        if stars == 1:
            distribution.append(RatingShare(stars=stars, percentage=max(0, remaining)))
        else:
            percentage = math.floor(rng.random() * remaining * RATING_DRAW_SHARE)
            distribution.append(RatingShare(stars=stars, percentage=percentage))
            remaining -= percentage

    distribution.reverse()
    return distribution


def random_average_rating(rng: np.random.Generator) -> float:
    return round(AVERAGE_RATING_MIN + rng.random() * AVERAGE_RATING_SPAN, 1)


def placeholder_cast() -> list[CastMember]:
    return [
        CastMember(name=name, character=character, image=f"{UNSPLASH_BASE_URL}/{photo}?{PORTRAIT_SIZE}")
        for name, character, photo in PLACEHOLDER_CAST
    ]


def convert_to_presentation_record(raw: RawRecord, record_id: int, rng: np.random.Generator) -> PresentationRecord:
    release_year = extract_year_from_title(raw.title, rng)

    return PresentationRecord(
        id=str(record_id),
        title=clean_title(raw.title),
        release_year=release_year,
        release_date=RELEASE_DATE_TEMPLATE.format(year=release_year),
        runtime=int(rng.integers(*RUNTIME_RANGE)),
        certification=random_certification(rng),
        genres=[capitalize_genre(raw.genre)],
        average_rating=random_average_rating(rng),
        total_ratings=int(rng.integers(*TOTAL_RATINGS_RANGE)),
        popularity=int(rng.integers(*POPULARITY_RANGE)),
        poster_image=random_poster_image(rng),
        backdrop_image=random_backdrop_image(rng),
        synopsis=raw.description,
        director=Director(name=random_director(raw.genre, rng), image=DIRECTOR_IMAGE),
        cast=placeholder_cast(),
        production_companies=list(PRODUCTION_COMPANIES),
        rating_distribution=generate_rating_distribution(rng),
    )


def synthesize_records(raw_records: Sequence[RawRecord], first_id: int, rng: np.random.Generator) -> list[PresentationRecord]:
    """Convert records in order, numbering them first_id, first_id + 1, ..."""
    logger.info(f"Converting {len(raw_records)} dataset movies starting at id {first_id}")
    return [
        convert_to_presentation_record(raw, first_id + offset, rng)
        for offset, raw in enumerate(tqdm(raw_records, desc="Synthesizing movie records...", disable=None))
    ]
