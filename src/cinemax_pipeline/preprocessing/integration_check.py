import re
from dataclasses import dataclass, field

from cinemax_pipeline.features.dataset_schema import REQUIRED_MOVIE_FIELDS
from cinemax_pipeline.preprocessing.source_splicing import count_existing_ids, find_movies_array

DATASET_SOURCE_PATTERN = re.compile(r'source: "dataset"')
# first entry tagged as dataset, up to its closing brace at entry indentation
DATASET_ENTRY_PATTERN = re.compile(r'  \{\n(?:(?!\n  \}).)*?source: "dataset"', re.DOTALL)


@dataclass
class VerificationReport:
    has_movies_array: bool
    movie_id_count: int
    dataset_movie_count: int
    missing_fields: list[str] = field(default_factory=list)
    file_size_mb: float = 0.0

    @property
    def passed(self) -> bool:
        return self.has_movies_array and self.dataset_movie_count > 0 and not self.missing_fields

    def to_stats(self) -> dict:
        return {
            "hasMoviesArray": self.has_movies_array,
            "movieIdCount": self.movie_id_count,
            "datasetMovieCount": self.dataset_movie_count,
            "missingFields": list(self.missing_fields),
            "fileSizeMb": self.file_size_mb,
        }


def verify_integration(content: str) -> VerificationReport:
    """Structural checks on a `movies.js` file after integration."""
    sample = DATASET_ENTRY_PATTERN.search(content)
    if sample is None:
        missing = list(REQUIRED_MOVIE_FIELDS)
    else:
        missing = [f for f in REQUIRED_MOVIE_FIELDS if f"{f}:" not in sample.group(0)]

    return VerificationReport(
        has_movies_array=find_movies_array(content) is not None,
        movie_id_count=count_existing_ids(content),
        dataset_movie_count=len(DATASET_SOURCE_PATTERN.findall(content)),
        missing_fields=missing,
        file_size_mb=round(len(content.encode("utf-8")) / 1024 / 1024, 2),
    )
