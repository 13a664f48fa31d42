import logging
import os
import sys
from typing import Optional

def setup_logging(level: Optional[str] = None) -> None:
    """
    Console logging for the dataset scripts.
    - Uses LOG_LEVEL env if level is None (default INFO).
    - Logs to stdout, where run summaries (genre counts, totals) are expected.
    """
    level_name = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    # Fallback to INFO if user passes something weird
    level_value = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(
        level=level_value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
    )
