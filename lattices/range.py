# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Iterator, Optional, Sequence, overload
from dataclasses import dataclass

from .checks import check_dimensionality
from .extent import Extent
from .index import Index

@dataclass(frozen=True, init=False)
class Range:
    """
    Axis-aligned box of coordinate space, defined by its start index and extent.
    The end index ``start + extent`` is exclusive. Iterating a range visits every
    coordinate exactly once, in the order of the default precedence.
    """

    #-------------------------------------------------------------------------
    #members

    #: First coordinate of the range.
    start: Index
    #: Size of the range.
    extent: Extent

    #-------------------------------------------------------------------------
    #constructor

    @overload
    def __init__(self, extent: Extent, /) -> None: ...
    @overload
    def __init__(self, start: Index, extent: Extent, /) -> None: ...
    # implementation
    def __init__(self, start: Index | Extent, extent: Optional[Extent] = None, /) -> None:
        if extent is None:
            if not isinstance(start, Extent):
                raise TypeError("A range needs an extent.")
            extent = start
            start = Index.zero(len(extent))
        check_dimensionality("Start and extent", len(start), len(extent))
        object.__setattr__(self, "start", Index(start))
        object.__setattr__(self, "extent", extent)

    @staticmethod
    def of(*args: Any) -> "Range":
        return Range(*args)

    @staticmethod
    def between(start: Sequence[int], end: Sequence[int]) -> "Range":
        """Range from ``start`` (inclusive) to ``end`` (exclusive)."""
        start = Index(start)
        return Range(start, Extent([e - s for s, e in zip(start, end)]))

    #-------------------------------------------------------------------------
    #methods

    @property
    def dimensionality(self) -> int:
        return len(self.start)

    @property
    def end(self) -> Index:
        return Index([s + e for s, e in zip(self.start, self.extent)])

    def elements(self) -> int:
        return self.extent.elements()

    def fits(self, extent: Extent) -> bool:
        """True if this range lies within ``[0, extent)``."""
        check_dimensionality("Range and extent", self.dimensionality, len(extent))
        return all(s >= 0 and s + e <= size for s, e, size in zip(self.start, self.extent, extent))

    #-------------------------------------------------------------------------
    #some magic

    def __contains__(self, coord: Any) -> bool:
        if not isinstance(coord, Sequence) or len(coord) != self.dimensionality:
            return False
        return all(s <= c < s + e for c, s, e in zip(coord, self.start, self.extent))

    def __len__(self) -> int:
        return self.elements()

    def __iter__(self) -> Iterator[Index]:
        from .iterator import IndexIterator
        return IndexIterator.forward(self)

    def __reversed__(self) -> Iterator[Index]:
        from .iterator import IndexIterator
        return IndexIterator.backward(self)

    def __str__(self) -> str:
        return "[" + ", ".join(f"{s}..{s+e}" for s, e in zip(self.start, self.extent)) + "]"
