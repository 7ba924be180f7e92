"""
Sparse accessor encoder.

Only elements that fail the zero predicate are stored. The encoded block
is laid out as the index list, zero padding up to a 4-byte boundary of the
whole output buffer, then the value list.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

import numpy as np
from pygltflib import Accessor, AccessorSparseIndices, AccessorSparseValues, Sparse

from .common import BUFFER_ALIGNMENT, MAX_ACCESSOR_COUNT, padding_for, region_index
from .exceptions import CountOverflowError, TypeMismatchError
from .gltype import GLType
from .holder import Holdable
from .zero import zero_mask

logger = logging.getLogger(__name__)


class SparseAccessorData(Holdable):
    """
    Encodes one array as ascending indices plus the values stored at them.

    Indices and values may use different component types; the accessor's
    declared element type is the value type.
    """

    def __init__(
        self,
        idx_type: GLType,
        val_type: GLType,
        idx_buffer_view: Optional[Any] = None,
        val_buffer_view: Optional[Any] = None,
    ):
        """
        Initialize sparse accessor.

        Args:
            idx_type: Type of the stored indices (unsigned integer SCALAR)
            val_type: Type of the stored values
            idx_buffer_view: Buffer region id for the indices, None if unbound
            val_buffer_view: Buffer region id for the values, None if unbound
        """
        super().__init__()
        self.idx_buffer_view = region_index(idx_buffer_view)
        self.val_buffer_view = region_index(val_buffer_view)
        self.idx_type = idx_type
        self.val_type = val_type

        self.idx_byte_offset = 0
        self.val_byte_offset = 0
        self.count = 0
        self.sparse_count = 0
        self.min: List[float] = []
        self.max: List[float] = []

    def append_as_binary_array(self, elements: Any, out: bytearray) -> Tuple[int, int]:
        """
        Append the index and value blocks to a caller-owned buffer.

        Args:
            elements: Dense sequence of elements matching the value type
            out: Buffer to extend; existing bytes are left untouched

        Returns:
            Tuple of (index block offset, value block offset) in ``out``

        Raises:
            TypeMismatchError: If elements do not match the value type, or the
                index type is not an unsigned integer SCALAR
            CountOverflowError: If the count or a stored index is out of range
        """
        if not (self.idx_type.is_scalar and self.idx_type.component_type.is_unsigned_integer):
            logger.error(f"Invalid sparse index type: {self.idx_type}")
            raise TypeMismatchError(f"Sparse indices must be unsigned integer scalars, got {self.idx_type}")

        array = self.val_type.coerce(elements)
        count = array.shape[0]
        if count > MAX_ACCESSOR_COUNT:
            logger.error(f"Accessor count {count} exceeds {MAX_ACCESSOR_COUNT}")
            raise CountOverflowError(f"Too many elements for one accessor: {count}")

        mask = ~zero_mask(array, self.val_type)
        indices = np.flatnonzero(mask)
        if indices.size and indices[-1] > self.idx_type.component_type.max_value():
            logger.error(f"Sparse index {indices[-1]} does not fit {self.idx_type}")
            raise CountOverflowError(
                f"Sparse index {indices[-1]} exceeds the range of {self.idx_type}"
            )

        idx_out = self.idx_type.pack(indices)
        val_out = self.val_type.pack(array[mask])

        self.count = count
        self.sparse_count = int(indices.size)

        idx_offset = len(out)
        out.extend(idx_out)

        # Align to 4-byte boundary
        padding = padding_for(len(out), BUFFER_ALIGNMENT)
        out.extend(b'\x00' * padding)

        val_offset = len(out)
        out.extend(val_out)

        logger.debug(
            f"{self.sparse_count} / {self.count} sparse elements "
            f"(indices at {idx_offset}, {padding} padding bytes, values at {val_offset})"
        )
        return idx_offset, val_offset

    @property
    def idx_byte_length(self) -> int:
        return self.idx_type.byte_stride() * self.sparse_count

    @property
    def val_byte_length(self) -> int:
        return self.val_type.byte_stride() * self.sparse_count

    def serialize(self) -> Dict[str, Any]:
        result = {
            'componentType': self.val_type.component_type.code,
            'type': self.val_type.data_type,
            'count': self.count,
            'sparse': {'count': self.sparse_count},
        }
        if self.idx_buffer_view >= 0:
            result['sparse']['indices'] = {
                'bufferView': self.idx_buffer_view,
                'byteOffset': self.idx_byte_offset,
                'componentType': self.idx_type.component_type.code,
            }
        if self.val_buffer_view >= 0:
            result['sparse']['values'] = {
                'bufferView': self.val_buffer_view,
                'byteOffset': self.val_byte_offset,
                'componentType': self.val_type.component_type.code,
            }
        if self.min:
            result['min'] = list(self.min)
        if self.max:
            result['max'] = list(self.max)
        return result

    def to_pygltf(self) -> Accessor:
        """Project the descriptor into a pygltflib Accessor with a sparse section."""
        indices = None
        if self.idx_buffer_view >= 0:
            indices = AccessorSparseIndices(
                bufferView=self.idx_buffer_view,
                byteOffset=self.idx_byte_offset,
                componentType=self.idx_type.component_type.code,
            )
        values = None
        if self.val_buffer_view >= 0:
            values = AccessorSparseValues(
                bufferView=self.val_buffer_view,
                byteOffset=self.val_byte_offset,
            )
        return Accessor(
            componentType=self.val_type.component_type.code,
            count=self.count,
            type=self.val_type.data_type,
            sparse=Sparse(count=self.sparse_count, indices=indices, values=values),
            min=list(self.min) if self.min else None,
            max=list(self.max) if self.max else None,
        )
