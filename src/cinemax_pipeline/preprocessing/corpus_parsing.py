from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, Optional
import logging

import pandas as pd

from cinemax_pipeline.io import readers
from cinemax_pipeline.features.dataset_schema import (
    DatasetSnapshot,
    GenreStat,
    RawRecord,
    SnapshotMetadata,
)

logger = logging.getLogger(__name__)

CORPUS_SEPARATOR = " ::: "
TRAINING_MIN_FIELDS = 4  # id, title, genre, description
TEST_MIN_FIELDS = 3      # id, title, description
SAMPLE_NOTE = "This is a sample of the full dataset for quick loading"


def load_corpus_lines(path: Path) -> list[str]:
    return readers.read_lines(path)


def split_corpus_line(line: str, min_fields: int, separator: str = CORPUS_SEPARATOR) -> Optional[list[str]]:
    """
    Split one corpus line into fields.

    Returns None for blank lines and for lines with fewer than `min_fields`
    fields. Fields after position `min_fields - 1` belong to the description
    and are rejoined with the separator, since descriptions may contain it.
    """
    if not line.strip():
        return None
    parts = line.split(separator)
    if len(parts) < min_fields:
        return None
    head = parts[:min_fields - 1]
    description = separator.join(parts[min_fields - 1:]).strip()
    return [p.strip() for p in head] + [description]


def _parse_lines(lines: Iterable[str], min_fields: int, to_record, separator: str) -> list[RawRecord]:
    records = []
    for line_num, line in enumerate(lines, 1):
        try:
            fields = split_corpus_line(line, min_fields, separator)
            if fields is None:
                continue
            records.append(to_record(fields))
        except Exception as e:
            logger.warning(f"Error parsing line {line_num}: {e}")
            continue
    return records


def parse_training_lines(lines: Iterable[str], separator: str = CORPUS_SEPARATOR) -> list[RawRecord]:
    """Parse labeled corpus lines: ID ::: TITLE ::: GENRE ::: DESCRIPTION."""
    def to_record(fields):
        movie_id, title, genre, description = fields
        return RawRecord(id=movie_id, title=title, genre=genre.lower(), description=description)

    return _parse_lines(lines, TRAINING_MIN_FIELDS, to_record, separator)


def parse_test_lines(lines: Iterable[str], separator: str = CORPUS_SEPARATOR) -> list[RawRecord]:
    """Parse unlabeled corpus lines: ID ::: TITLE ::: DESCRIPTION."""
    def to_record(fields):
        movie_id, title, description = fields
        return RawRecord(id=movie_id, title=title, genre=None, description=description)

    return _parse_lines(lines, TEST_MIN_FIELDS, to_record, separator)


def _labeled_genres(records: Iterable[RawRecord]) -> pd.Series:
    genres = [r.genre for r in records if r.genre and r.genre != "null"]
    return pd.Series(genres, dtype="object")


def collect_genres(records: Iterable[RawRecord]) -> list[str]:
    """Sorted unique lower-case genres of the labeled records."""
    return sorted(_labeled_genres(records).unique().tolist())


def capitalize_label(genre: str) -> str:
    return genre[:1].upper() + genre[1:]


def compute_genre_stats(records: Iterable[RawRecord]) -> list[GenreStat]:
    """
    Count records per genre, most frequent first.

    Ties keep first-seen order. Labels are capitalized (first letter only).
    """
    counts = _labeled_genres(records).value_counts(sort=False)
    counts = counts.sort_values(ascending=False, kind="stable")
    return [GenreStat(genre=capitalize_label(g), count=int(c)) for g, c in counts.items()]


def build_snapshot(training: list[RawRecord], test: list[RawRecord], processed_at: Optional[str] = None) -> DatasetSnapshot:
    if processed_at is None:
        processed_at = datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
    genres = collect_genres(training)
    metadata = SnapshotMetadata(
        training_count=len(training),
        test_count=len(test),
        total_count=len(training) + len(test),
        genre_count=len(genres),
        processed_at=processed_at,
    )
    return DatasetSnapshot(
        metadata=metadata,
        genres=genres,
        genre_stats=compute_genre_stats(training),
        training_data=training,
        test_data=test,
    )


def build_sample_snapshot(snapshot: DatasetSnapshot, training_limit: int = 1000, test_limit: int = 100) -> DatasetSnapshot:
    """
    Truncate a snapshot for quick loading.

    Genres and genre statistics describe the full corpus; counts in the
    metadata describe the truncated lists.
    """
    training = snapshot.training_data[:training_limit]
    test = snapshot.test_data[:test_limit]
    metadata = snapshot.metadata.model_copy(update={
        "training_count": len(training),
        "test_count": len(test),
        "total_count": len(training) + len(test),
        "note": SAMPLE_NOTE,
    })
    return snapshot.model_copy(update={
        "metadata": metadata,
        "training_data": training,
        "test_data": test,
    })


def load_snapshot(path: Path) -> DatasetSnapshot:
    return DatasetSnapshot.model_validate(readers.read_json(path))
