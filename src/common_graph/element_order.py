"""Iteration-order policies for node and edge collections.

Public API:
    OrderType: The kind of ordering an ElementOrder describes.
    ElementOrder: Immutable ordering policy handed to graph builders.
    SortedKeyMap: Mapping whose keys always iterate in sorted order.
"""

from __future__ import annotations

import bisect
from collections.abc import Iterator, MutableMapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable


class OrderType(Enum):
    """How the elements of a collection are ordered."""

    UNORDERED = "unordered"
    INSERTION = "insertion"
    SORTED = "sorted"


@dataclass(frozen=True)
class ElementOrder:
    """Ordering policy for a node set or an incident-edge set.

    Elements ordered with SORTED must be mutually comparable once *key*
    is applied, and that ordering must agree with element equality: two
    distinct elements may not compare as equal. Violating this is a
    caller error and is not detected.

    Attributes:
        type: The kind of ordering.
        key: Sort key applied to each element (SORTED only); None means
            the elements' natural ordering.
        reverse: Iterate in descending order (SORTED only).
    """

    type: OrderType
    key: Callable[[Any], Any] | None = None
    reverse: bool = False

    def __post_init__(self):
        if not isinstance(self.type, OrderType):
            raise TypeError("type must be OrderType enum")
        if self.type is not OrderType.SORTED and (self.key is not None or self.reverse):
            raise ValueError(f"key and reverse only apply to sorted orders, not {self.type.value}")

    @classmethod
    def unordered(cls) -> ElementOrder:
        """No guaranteed iteration order."""
        return cls(OrderType.UNORDERED)

    @classmethod
    def insertion(cls) -> ElementOrder:
        """Iteration follows the order elements were first added."""
        return cls(OrderType.INSERTION)

    @classmethod
    def stable(cls) -> ElementOrder:
        """Alias for insertion()."""
        return cls.insertion()

    @classmethod
    def natural(cls) -> ElementOrder:
        """Sorted by the elements' own ordering."""
        return cls(OrderType.SORTED)

    @classmethod
    def sorted(
        cls, key: Callable[[Any], Any] | None = None, reverse: bool = False
    ) -> ElementOrder:
        """Sorted by *key*, in the manner of the built-in ``sorted``."""
        return cls(OrderType.SORTED, key=key, reverse=reverse)

    @property
    def is_sorted(self) -> bool:
        return self.type is OrderType.SORTED

    def create_map(self, expected_size: int | None = None) -> MutableMapping:
        """Return an empty mapping whose keys iterate in this order.

        *expected_size* is advisory; the returned mapping grows as needed.
        """
        if self.type is OrderType.SORTED:
            return SortedKeyMap(key=self.key, reverse=self.reverse)
        return {}

    def __repr__(self) -> str:
        if self.type is not OrderType.SORTED:
            return f"ElementOrder.{self.type.value}()"
        if self.key is None and not self.reverse:
            return "ElementOrder.natural()"
        return f"ElementOrder.sorted(key={self.key!r}, reverse={self.reverse})"


class SortedKeyMap(MutableMapping):
    """Dict-backed mapping that keeps its keys in sorted order.

    Lookups are O(1); insertions and removals are O(n) in the number of
    keys, which for incident-edge maps is the local degree.
    """

    __slots__ = ("_data", "_keys", "_key", "_reverse")

    def __init__(self, key: Callable[[Any], Any] | None = None, reverse: bool = False) -> None:
        self._data: dict = {}
        self._keys: list = []
        self._key = key
        self._reverse = reverse

    def _sort_key(self, element: Any) -> Any:
        return element if self._key is None else self._key(element)

    def __getitem__(self, k):
        return self._data[k]

    def __setitem__(self, k, value) -> None:
        if k not in self._data:
            bisect.insort(self._keys, k, key=self._sort_key)
        self._data[k] = value

    def __delitem__(self, k) -> None:
        del self._data[k]
        self._keys.remove(k)

    def __contains__(self, k) -> bool:
        return k in self._data

    def __iter__(self) -> Iterator:
        return reversed(self._keys) if self._reverse else iter(self._keys)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {self._data[k]!r}" for k in self)
        return f"SortedKeyMap({{{items}}})"


__all__ = ["OrderType", "ElementOrder", "SortedKeyMap"]
