"""
Zero predicate deciding which elements a sparse accessor stores.
"""

from typing import Any

import numpy as np

from .common import ZERO_EPSILON
from .gltype import GLType


def zero_mask(elements: Any, gl_type: GLType) -> np.ndarray:
    """
    Evaluate the zero predicate for every element.

    Scalars are zero when ``|value| < ZERO_EPSILON``. Multi-component
    elements are zero when every component has ``|c| <= ZERO_EPSILON``;
    the bound is inclusive for vectors only.

    Args:
        elements: Sequence of elements of ``gl_type``
        gl_type: Element type the elements are read as

    Returns:
        Boolean array with one entry per element
    """
    magnitudes = np.abs(gl_type.coerce(elements).astype(np.float64))
    if gl_type.is_scalar:
        return magnitudes[:, 0] < ZERO_EPSILON
    return np.all(magnitudes <= ZERO_EPSILON, axis=1)


def is_zero(value: Any, gl_type: GLType) -> bool:
    """Return True if a single element counts as zero for sparse encoding."""
    return bool(zero_mask([value], gl_type)[0])
