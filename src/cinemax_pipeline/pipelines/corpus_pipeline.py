from pathlib import Path
import logging

from cinemax_pipeline.features.dataset_schema import DatasetSnapshot
from cinemax_pipeline.preprocessing import corpus_parsing
from cinemax_pipeline.io.writers import atomic_write_json
from cinemax_pipeline.settings import get_settings

cfg = get_settings()

logger = logging.getLogger(__name__)


def run_corpus_parsing_pipeline(train_file: Path | None = None, test_file: Path | None = None, out_dir: Path | None = None) -> tuple[DatasetSnapshot, Path, Path]:
    """
    Parse the training and test corpora and write the full and sample snapshots.

    Parameters:
    train_file (Path): Labeled corpus (ID ::: TITLE ::: GENRE ::: DESCRIPTION)
    test_file (Path): Unlabeled corpus (ID ::: TITLE ::: DESCRIPTION)
    out_dir (Path): Directory receiving both snapshot files

    Returns:
    tuple[DatasetSnapshot, Path, Path]: The full snapshot, full and sample file paths
    """
    if train_file is None:
        train_file = cfg.train_corpus
    if test_file is None:
        test_file = cfg.test_corpus
    if out_dir is None:
        full_path, sample_path = cfg.full_snapshot, cfg.sample_snapshot
    else:
        full_path = out_dir / cfg.full_snapshot.name
        sample_path = out_dir / cfg.sample_snapshot.name

    logger.info("Starting dataset processing...")

    logger.info(f"Reading training data from {train_file}")
    training = corpus_parsing.parse_training_lines(corpus_parsing.load_corpus_lines(train_file), cfg.corpus_separator)
    logger.info(f"Parsed {len(training)} training movies")

    logger.info(f"Reading test data from {test_file}")
    test = corpus_parsing.parse_test_lines(corpus_parsing.load_corpus_lines(test_file), cfg.corpus_separator)
    logger.info(f"Parsed {len(test)} test movies")

    snapshot = corpus_parsing.build_snapshot(training, test)
    logger.info(f"Found {snapshot.metadata.genre_count} unique genres")

    atomic_write_json(snapshot.to_json_dict(), full_path)
    logger.info(f"Dataset written to {full_path}")

    sample = corpus_parsing.build_sample_snapshot(snapshot, cfg.sample_training_limit, cfg.sample_test_limit)
    atomic_write_json(sample.to_json_dict(), sample_path)
    logger.info(f"Sample dataset written to {sample_path}")

    top = ", ".join(f"{s.genre} ({s.count})" for s in snapshot.genre_stats[:5])
    logger.info("=== Dataset Processing Summary ===")
    logger.info(f"Training movies: {snapshot.metadata.training_count}")
    logger.info(f"Test movies: {snapshot.metadata.test_count}")
    logger.info(f"Total movies: {snapshot.metadata.total_count}")
    logger.info(f"Unique genres: {snapshot.metadata.genre_count}")
    logger.info(f"Top 5 genres: {top}")

    return snapshot, full_path, sample_path
