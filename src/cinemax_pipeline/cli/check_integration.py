import argparse
from pathlib import Path
import logging

from cinemax_pipeline.pipelines import integration_pipeline
from cinemax_pipeline import logging_setup

logger = logging.getLogger(__name__)

def main():
    p = argparse.ArgumentParser(description="Check that dataset movies were integrated into movies.js")
    p.add_argument("--target", help="Path to movies.js")
    p.add_argument("--log_level", default="INFO", help="Logging level (DEBUG, INFO, WARNING, ERROR)")

    a = p.parse_args()

    logging_setup.setup_logging(a.log_level)

    result = integration_pipeline.run_integration_check_pipeline(
        target_file=Path(a.target) if a.target else None
    )
    logger.info(f"Integration check {'passed' if result['success'] else 'failed'}")

if __name__ == "__main__":
    main()
