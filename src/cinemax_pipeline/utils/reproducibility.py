"""
Utilities for controlling the random source behind synthesized fields.
"""

import numpy as np
import logging
from typing import Optional

logger = logging.getLogger(__name__)


def get_rng(seed: Optional[int] = None) -> np.random.Generator:
    """
    Get the random generator passed to the record synthesizer.

    Args:
        seed: Seed for the generator. If None, the generator is seeded from OS
            entropy and every run produces different placeholder data.

    Returns:
        numpy.random.Generator: generator to inject into synthesis functions
    """
    if seed is None:
        logger.debug("Using an unseeded random generator")
    else:
        logger.info(f"Using random seed {seed}")
    return np.random.default_rng(seed)
