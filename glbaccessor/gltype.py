"""
Element type descriptors: glTF component types combined with an element shape.
"""

from dataclasses import dataclass
from typing import Any, Dict

import numpy as np

from .exceptions import TypeMismatchError


@dataclass(frozen=True)
class ComponentType:
    """A primitive numeric encoding of one scalar component."""

    name: str
    code: int
    dtype: str

    @property
    def size(self) -> int:
        return np.dtype(self.dtype).itemsize

    @property
    def is_unsigned_integer(self) -> bool:
        return np.dtype(self.dtype).kind == 'u'

    def max_value(self) -> int:
        """Largest integer this component type can hold."""
        if np.dtype(self.dtype).kind not in 'iu':
            raise TypeError(f"{self.name} is not an integer component type")
        return int(np.iinfo(np.dtype(self.dtype)).max)


BYTE = ComponentType('BYTE', 5120, '<i1')
UNSIGNED_BYTE = ComponentType('UNSIGNED_BYTE', 5121, '<u1')
SHORT = ComponentType('SHORT', 5122, '<i2')
UNSIGNED_SHORT = ComponentType('UNSIGNED_SHORT', 5123, '<u2')
UNSIGNED_INT = ComponentType('UNSIGNED_INT', 5125, '<u4')
FLOAT = ComponentType('FLOAT', 5126, '<f4')

# Component type code to descriptor mapping
COMPONENT_TYPE_MAP: Dict[int, ComponentType] = {
    ct.code: ct for ct in (BYTE, UNSIGNED_BYTE, SHORT, UNSIGNED_SHORT, UNSIGNED_INT, FLOAT)
}

# Type to component count mapping
TYPE_SIZE_MAP = {
    'SCALAR': 1,
    'VEC2': 2,
    'VEC3': 3,
    'VEC4': 4,
    'MAT2': 4,
    'MAT3': 9,
    'MAT4': 16,
}


@dataclass(frozen=True)
class GLType:
    """
    Describes one accessor element: its component type and shape.

    The descriptor reports the byte stride of an element and encodes
    elements as little-endian bytes.
    """

    component_type: ComponentType
    data_type: str

    def __post_init__(self):
        if self.data_type not in TYPE_SIZE_MAP:
            raise ValueError(f"Unknown accessor type: {self.data_type}")

    @classmethod
    def from_codes(cls, component_code: int, data_type: str) -> 'GLType':
        """
        Build a descriptor from a glTF componentType code and type tag.

        Raises:
            TypeMismatchError: If the component type or tag is unknown
        """
        component_type = COMPONENT_TYPE_MAP.get(component_code)
        if component_type is None:
            raise TypeMismatchError(f"Unknown component type: {component_code}")
        if data_type not in TYPE_SIZE_MAP:
            raise TypeMismatchError(f"Unknown accessor type: {data_type}")
        return cls(component_type, data_type)

    @property
    def component_count(self) -> int:
        return TYPE_SIZE_MAP[self.data_type]

    @property
    def is_scalar(self) -> bool:
        return self.data_type == 'SCALAR'

    def byte_stride(self) -> int:
        """Number of bytes one encoded element occupies."""
        return self.component_type.size * self.component_count

    def coerce(self, elements: Any) -> np.ndarray:
        """
        View input elements as a (count, component_count) array.

        Args:
            elements: Sequence of elements, or an array whose trailing
                dimensions hold one element

        Returns:
            Numpy array of shape (count, component_count), input dtype kept

        Raises:
            TypeMismatchError: If the input cannot be read as elements of this type
        """
        try:
            array = np.asarray(elements)
        except (ValueError, TypeError) as e:
            raise TypeMismatchError(f"Cannot read elements as {self}: {e}") from e

        n = self.component_count
        if array.size == 0 and array.ndim <= 1:
            return np.empty((0, n), dtype=np.float64)

        if array.dtype.kind not in 'biuf':
            raise TypeMismatchError(f"Non-numeric elements (dtype={array.dtype}) for {self}")
        if array.ndim == 0:
            raise TypeMismatchError(f"Expected a sequence of {self} elements, got a single value")

        element_shape = array.shape[1:]
        if n > 1 and not element_shape:
            raise TypeMismatchError(f"Expected {n} components per element for {self}, got scalars")
        if int(np.prod(element_shape, dtype=np.int64)) != n:
            raise TypeMismatchError(
                f"Element shape {element_shape} does not match {self} ({n} components)"
            )

        return array.reshape(array.shape[0], n)

    def pack(self, elements: Any) -> bytes:
        """Encode a sequence of elements into contiguous little-endian bytes."""
        array = self.coerce(elements)
        return array.astype(self.component_type.dtype).tobytes()

    def write(self, destination, offset: int, value: Any) -> None:
        """
        Encode one element in place.

        Args:
            destination: Writable buffer (bytearray or memoryview)
            offset: Byte position of the element in destination
            value: One element of this type
        """
        data = self.pack([value])
        destination[offset:offset + len(data)] = data

    def __str__(self):
        return f"{self.component_type.name} {self.data_type}"


# Presets used when converting scene data
GLT_FLOAT = GLType(FLOAT, 'SCALAR')
GLT_UINT = GLType(UNSIGNED_INT, 'SCALAR')
GLT_USHORT = GLType(UNSIGNED_SHORT, 'SCALAR')
GLT_UBYTE = GLType(UNSIGNED_BYTE, 'SCALAR')
GLT_VEC2F = GLType(FLOAT, 'VEC2')
GLT_VEC3F = GLType(FLOAT, 'VEC3')
GLT_VEC4F = GLType(FLOAT, 'VEC4')
GLT_VEC4I = GLType(UNSIGNED_SHORT, 'VEC4')
GLT_MAT4F = GLType(FLOAT, 'MAT4')
GLT_QUATF = GLType(FLOAT, 'VEC4')
