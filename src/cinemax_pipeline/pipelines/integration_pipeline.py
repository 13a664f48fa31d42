from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import logging

from cinemax_pipeline.io import readers
from cinemax_pipeline.io.writers import atomic_write_json, write_backup, write_text
from cinemax_pipeline.preprocessing import corpus_parsing, record_synthesis, source_splicing
from cinemax_pipeline.preprocessing.integration_check import verify_integration
from cinemax_pipeline.settings import get_settings
from cinemax_pipeline.utils.reproducibility import get_rng

cfg = get_settings()

logger = logging.getLogger(__name__)


@dataclass
class IntegrationResult:
    success: bool
    error: Optional[str] = None
    existing_count: int = 0
    added_count: int = 0
    backup_file: Optional[Path] = None
    genre_counts: list[tuple[str, int]] = field(default_factory=list)

    @property
    def total_count(self) -> int:
        return self.existing_count + self.added_count


def run_dataset_integration_pipeline(
    snapshot_file: Path | None = None,
    target_file: Path | None = None,
    max_records: int | None = None,
    seed: int | None = None,
    out_json: Path | None = None,
) -> IntegrationResult:
    """
    Append synthesized movies from a sample snapshot to the front-end movies array.

    Parameters:
    snapshot_file (Path): Sample snapshot written by the corpus parsing pipeline
    target_file (Path): Source file holding `export const movies = [...]`
    max_records (int): Cap on converted training records for this run
    seed (int): Seed for synthesized fields, None for non-reproducible output
    out_json (Path): Optional JSON export of the synthesized records

    Returns:
    IntegrationResult: success flag, error message on failure, and run counts.
    Failures are logged and returned, never raised.
    """
    if snapshot_file is None:
        snapshot_file = cfg.sample_snapshot
    if target_file is None:
        target_file = cfg.movies_source
    if max_records is None:
        max_records = cfg.max_integrated_records
    if seed is None:
        seed = cfg.random_seed

    logger.info("Starting dataset integration...")

    try:
        if not Path(snapshot_file).exists():
            logger.error(f"Dataset file not found: {snapshot_file}. Run the corpus parsing pipeline first.")
            return IntegrationResult(success=False, error=f"dataset file not found: {snapshot_file}")

        snapshot = corpus_parsing.load_snapshot(snapshot_file)
        logger.info(f"Found {len(snapshot.training_data)} movies in dataset")

        content = readers.read_text(target_file)
        if source_splicing.find_movies_array(content) is None:
            logger.error(f"Could not find existing movies array in {target_file}")
            return IntegrationResult(success=False, error="movies array not found")

        existing_count = source_splicing.count_existing_ids(content)
        logger.info(f"Found {existing_count} existing movies")

        to_add = snapshot.training_data[:max(0, max_records)]
        records = record_synthesis.synthesize_records(to_add, existing_count + 1, get_rng(seed))
        literals = [source_splicing.render_record_literal(r) for r in records]

        try:
            updated = source_splicing.splice_records(content, literals)
        except source_splicing.ArraySpliceError as e:
            logger.error(f"Cannot append to {target_file}: {e}")
            return IntegrationResult(success=False, error=str(e), existing_count=existing_count)

        backup = write_backup(content, Path(target_file))
        logger.info(f"Backup created at {backup}")

        write_text(updated, Path(target_file))
        logger.info(f"Updated {target_file} with {len(records)} new movies")

        if out_json is not None:
            atomic_write_json([r.model_dump(by_alias=True) for r in records], Path(out_json))
            logger.info(f"Synthesized records exported to {out_json}")

        result = IntegrationResult(
            success=True,
            existing_count=existing_count,
            added_count=len(records),
            backup_file=backup,
            genre_counts=source_splicing.summarize_genres(records),
        )

        logger.info("=== Integration Summary ===")
        logger.info(f"Original movies: {result.existing_count}")
        logger.info(f"Added movies: {result.added_count}")
        logger.info(f"Total movies: {result.total_count}")
        logger.info("New genres added:")
        for genre, count in result.genre_counts:
            logger.info(f"  {genre}: {count} movies")

        return result

    except Exception as e:
        logger.exception(f"Error during integration: {e}")
        return IntegrationResult(success=False, error=str(e))


def run_integration_check_pipeline(target_file: Path | None = None) -> dict:
    """Re-read the movies file and report whether dataset movies were integrated."""
    if target_file is None:
        target_file = cfg.movies_source

    try:
        report = verify_integration(readers.read_text(target_file))
    except Exception as e:
        logger.exception(f"Error testing integration: {e}")
        return {"success": False, "error": str(e)}

    logger.info(f"Movies array structure: {'PASS' if report.has_movies_array else 'FAIL'}")
    logger.info(f"Dataset movies found: {report.dataset_movie_count}")
    logger.info(f"Movie ids found: {report.movie_id_count}")
    if report.missing_fields:
        logger.warning(f"Missing fields on dataset movie: {', '.join(report.missing_fields)}")
    else:
        logger.info("All required movie fields present")
    logger.info(f"File size: {report.file_size_mb:.2f} MB")

    return {"success": report.passed, "stats": report.to_stats()}
