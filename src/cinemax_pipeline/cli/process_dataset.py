import argparse
from pathlib import Path
import logging

from cinemax_pipeline.pipelines import corpus_pipeline
from cinemax_pipeline import logging_setup

logger = logging.getLogger(__name__)

def main():
    p = argparse.ArgumentParser(description="Parse the movie corpora into full and sample JSON snapshots")
    p.add_argument("--train", help="Path to training corpus (ID ::: TITLE ::: GENRE ::: DESCRIPTION)")
    p.add_argument("--test", help="Path to test corpus (ID ::: TITLE ::: DESCRIPTION)")
    p.add_argument("--out_dir", help="Directory for full-movie-dataset.json and sample-movie-dataset.json")

    p.add_argument("--log_level", default="INFO", help="Logging level (DEBUG, INFO, WARNING, ERROR)")

    a = p.parse_args()

    # Initialize logging
    logging_setup.setup_logging(a.log_level)

    try:
        _, out_full, out_sample = corpus_pipeline.run_corpus_parsing_pipeline(
            train_file=Path(a.train) if a.train else None,
            test_file=Path(a.test) if a.test else None,
            out_dir=Path(a.out_dir) if a.out_dir else None,
        )
    except Exception as e:
        logger.exception(f"Error processing dataset: {e}")
        return

    logger.info(f"Wrote {out_full}")
    logger.info(f"Wrote {out_sample}")

if __name__ == "__main__":
    main()
