"""
Dense accessor encoder.
"""

import logging
from typing import Any, Dict, List, Optional

from pygltflib import Accessor

from .common import MAX_ACCESSOR_COUNT, region_index
from .exceptions import CountOverflowError
from .gltype import GLType
from .holder import Holdable

logger = logging.getLogger(__name__)


class AccessorData(Holdable):
    """
    Encodes one array with every element stored contiguously.

    ``byte_offset``, ``min`` and ``max`` are assigned by the caller; this
    class only packs elements and reports them in the descriptor.
    """

    def __init__(self, gl_type: GLType, buffer_view: Optional[Any] = None):
        """
        Initialize dense accessor.

        Args:
            gl_type: Element type descriptor
            buffer_view: Buffer region id (int or held object), None if unbound
        """
        super().__init__()
        self.buffer_view = region_index(buffer_view)
        self.type = gl_type

        self.byte_offset = 0
        self.count = 0
        self.min: List[float] = []
        self.max: List[float] = []

    def append_as_binary_array(self, elements: Any, out: bytearray) -> int:
        """
        Append the encoded elements to a caller-owned buffer.

        Args:
            elements: Sequence of elements matching the bound type
            out: Buffer to extend; existing bytes are left untouched

        Returns:
            Offset in ``out`` where the encoded block starts

        Raises:
            TypeMismatchError: If elements do not match the bound type
            CountOverflowError: If there are more elements than an accessor can count
        """
        array = self.type.coerce(elements)
        count = array.shape[0]
        if count > MAX_ACCESSOR_COUNT:
            logger.error(f"Accessor count {count} exceeds {MAX_ACCESSOR_COUNT}")
            raise CountOverflowError(f"Too many elements for one accessor: {count}")

        offset = len(out)
        out.extend(self.type.pack(array))
        self.count = count

        logger.debug(f"Packed {count} x {self.type} ({len(out) - offset} bytes) at offset {offset}")
        return offset

    @property
    def byte_length(self) -> int:
        return self.type.byte_stride() * self.count

    def serialize(self) -> Dict[str, Any]:
        result = {
            'componentType': self.type.component_type.code,
            'type': self.type.data_type,
            'count': self.count,
        }
        if self.buffer_view >= 0:
            result['bufferView'] = self.buffer_view
            result['byteOffset'] = self.byte_offset
        if self.min:
            result['min'] = list(self.min)
        if self.max:
            result['max'] = list(self.max)
        return result

    def to_pygltf(self) -> Accessor:
        """Project the descriptor into a pygltflib Accessor."""
        bound = self.buffer_view >= 0
        return Accessor(
            bufferView=self.buffer_view if bound else None,
            byteOffset=self.byte_offset if bound else None,
            componentType=self.type.component_type.code,
            count=self.count,
            type=self.type.data_type,
            min=list(self.min) if self.min else None,
            max=list(self.max) if self.max else None,
        )
