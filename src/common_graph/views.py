"""Read-only set views returned by graph accessors.

Public API:
    GraphView: Live, read-only ``collections.abc.Set`` over graph storage.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Set
from typing import Any, Callable

from .exceptions import CONCURRENT_MODIFICATION, IterationInvalidatedError


class GraphView(Set):
    """A live, read-only set backed by a graph's internal storage.

    The view re-reads storage on every call, so it reflects later
    changes to the graph. It has no mutating methods. Set algebra
    (``&``, ``|``, ``-``, ``^``) produces frozenset snapshots.

    Structurally modifying the graph while iterating the view raises
    IterationInvalidatedError on the next step of the iteration.

    Args:
        owner: The graph whose modification counter guards iteration.
        iterate: Returns a fresh iterable over the current elements.
        contains: Membership test.
        size: Returns the current number of elements.
    """

    __slots__ = ("_owner", "_iterate", "_contains", "_size")

    def __init__(
        self,
        owner: Any,
        iterate: Callable[[], Iterable[Any]],
        contains: Callable[[Any], bool],
        size: Callable[[], int],
    ) -> None:
        self._owner = owner
        self._iterate = iterate
        self._contains = contains
        self._size = size

    @classmethod
    def _from_iterable(cls, it: Iterable[Any]) -> frozenset:
        return frozenset(it)

    @classmethod
    def of_mapping(cls, owner: Any, mapping: Callable[[], Any]) -> GraphView:
        """View over the keys of the mapping returned by *mapping*."""
        return cls(
            owner,
            iterate=lambda: mapping(),
            contains=lambda element: element is not None and element in mapping(),
            size=lambda: len(mapping()),
        )

    def __iter__(self) -> Iterator[Any]:
        owner = self._owner
        expected = owner._modification_count()
        for element in self._iterate():
            yield element
            # checked before the backing iterator is advanced again
            if owner._modification_count() != expected:
                raise IterationInvalidatedError(CONCURRENT_MODIFICATION)

    def __contains__(self, element: object) -> bool:
        return self._contains(element)

    def __len__(self) -> int:
        return self._size()

    def __repr__(self) -> str:
        return "{" + ", ".join(repr(element) for element in self) + "}"


__all__ = ["GraphView"]
