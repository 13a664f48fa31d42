import argparse
from pathlib import Path
import logging

from cinemax_pipeline.pipelines import integration_pipeline
from cinemax_pipeline import logging_setup

logger = logging.getLogger(__name__)

def main():
    p = argparse.ArgumentParser(description="Append synthesized dataset movies to the front-end movies array")
    p.add_argument("--snapshot", help="Path to sample snapshot JSON")
    p.add_argument("--target", help="Path to movies.js holding `export const movies = [...]`")
    p.add_argument("--max_records", type=int, help="Maximum number of dataset movies to add")
    p.add_argument("--seed", type=int, help="Random seed for synthesized fields")
    p.add_argument("--out_json", help="Also export the synthesized movies as JSON")
    p.add_argument("--log_level", default="INFO", help="Logging level (DEBUG, INFO, WARNING, ERROR)")

    a = p.parse_args()

    # Initialize logging
    logging_setup.setup_logging(a.log_level)

    result = integration_pipeline.run_dataset_integration_pipeline(
        snapshot_file=Path(a.snapshot) if a.snapshot else None,
        target_file=Path(a.target) if a.target else None,
        max_records=a.max_records,
        seed=a.seed,
        out_json=Path(a.out_json) if a.out_json else None,
    )
    if result.success:
        logger.info(f"Added {result.added_count} movies, backup at {result.backup_file}")
    else:
        logger.error(f"Integration aborted: {result.error}")

if __name__ == "__main__":
    main()
