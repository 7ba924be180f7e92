"""
Append-only indexed collection giving held objects a stable index.
"""

import logging
from typing import Any, Dict, Generic, Iterator, List, TypeVar

from .common import INVALID_INDEX

logger = logging.getLogger(__name__)


class Holdable:
    """Base for objects stored in a Holder; ``ix`` is their index there."""

    def __init__(self):
        self.ix = INVALID_INDEX

    def serialize(self) -> Dict[str, Any]:
        raise NotImplementedError


T = TypeVar('T', bound=Holdable)


class Holder(Generic[T]):
    """
    Owns holdable objects and hands out their indices.

    Other objects refer to held items by ``ix`` only, never by reference.
    """

    def __init__(self):
        self._items: List[T] = []

    def hold(self, item: T) -> T:
        """
        Append an item and assign its index.

        Args:
            item: Object not yet held by any holder

        Returns:
            The same item, with ``ix`` set
        """
        if item.ix != INVALID_INDEX:
            raise ValueError(f"Object already held at index {item.ix}")
        item.ix = len(self._items)
        self._items.append(item)
        logger.debug(f"Held {type(item).__name__} at index {item.ix}")
        return item

    def __getitem__(self, ix: int) -> T:
        return self._items[ix]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def serialize(self) -> List[Dict[str, Any]]:
        """Serialize every held item in index order."""
        return [item.serialize() for item in self._items]
