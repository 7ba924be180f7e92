"""
Common utilities and constants for the accessor encoders.
"""

import logging
import numbers
import sys
from typing import Any

# Constants
ZERO_EPSILON = 1.0e-4
BUFFER_ALIGNMENT = 4
MAX_ACCESSOR_COUNT = 2 ** 32 - 1
INVALID_INDEX = -1


def get_logger(name="glbaccessor", level=logging.INFO):
    """Get the logger"""

    logger = logging.getLogger(name)
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger


def log_debug_level(name="glbaccessor"):
    """Switch a logger and the package's encoder loggers to DEBUG output."""
    logging.getLogger(name).setLevel(logging.DEBUG)
    get_logger("glbaccessor", logging.DEBUG)


def region_index(region: Any) -> int:
    """
    Resolve a buffer region reference to its integer id.

    Args:
        region: None, an integer id, or a held object exposing ``ix``

    Returns:
        The region id, or INVALID_INDEX when no region is bound
    """
    if region is None:
        return INVALID_INDEX
    if isinstance(region, bool):
        raise TypeError(f"Buffer region reference cannot be a bool: {region!r}")
    if isinstance(region, numbers.Integral):
        return region
    return int(region.ix)


def padding_for(size: int, alignment: int = BUFFER_ALIGNMENT) -> int:
    """Number of zero bytes needed to bring ``size`` up to ``alignment``."""
    return (alignment - (size % alignment)) % alignment
