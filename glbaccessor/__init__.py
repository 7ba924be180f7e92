"""
GLBACCESSOR
===========

Dense and sparse glTF 2.0 accessor encoding into binary buffers.
"""

__version__ = "1.0.0"

from .accessor import AccessorData
from .sparse import SparseAccessorData
from .holder import Holdable, Holder
from .zero import is_zero, zero_mask
from .gltype import (
    ComponentType,
    GLType,
    GLT_FLOAT,
    GLT_UINT,
    GLT_USHORT,
    GLT_UBYTE,
    GLT_VEC2F,
    GLT_VEC3F,
    GLT_VEC4F,
    GLT_VEC4I,
    GLT_MAT4F,
    GLT_QUATF,
)
from .exceptions import AccessorError, TypeMismatchError, CountOverflowError

__all__ = [
    "AccessorData",
    "SparseAccessorData",
    "Holdable",
    "Holder",
    "is_zero",
    "zero_mask",
    "ComponentType",
    "GLType",
    "GLT_FLOAT",
    "GLT_UINT",
    "GLT_USHORT",
    "GLT_UBYTE",
    "GLT_VEC2F",
    "GLT_VEC3F",
    "GLT_VEC4F",
    "GLT_VEC4I",
    "GLT_MAT4F",
    "GLT_QUATF",
    "AccessorError",
    "TypeMismatchError",
    "CountOverflowError",
]
