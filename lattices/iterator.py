# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Callable, Iterable, Iterator, Optional, Self

from .cursor import IndexCursor, Direction
from .extent import Extent
from .index import Index
from .precedence import Precedence
from .range import Range

class IndexIterator(Iterator[Index]):
    """Iterator which returns the coordinates of a range as :class:`Index` values."""

    _cursor: IndexCursor
    _buffer: list[int]

    def __init__(self, cursor: IndexCursor) -> None:
        self._cursor = cursor
        self._buffer = [0] * cursor.dimensionality

    @staticmethod
    def forward(range: Range, precedence: Optional[Precedence] = None) -> "IndexIterator":
        return IndexIterator(IndexCursor.forward(range, precedence))

    @staticmethod
    def backward(range: Range, precedence: Optional[Precedence] = None) -> "IndexIterator":
        return IndexIterator(IndexCursor.backward(range, precedence))

    @property
    def direction(self) -> Direction:
        return self._cursor.direction

    @property
    def dimensionality(self) -> int:
        return self._cursor.dimensionality

    def has_next(self) -> bool:
        return self._cursor.has_next()

    def __iter__(self) -> Self:
        return self

    def __next__(self) -> Index:
        if not self._cursor.next(self._buffer):
            raise StopIteration
        return Index(self._buffer)

class IndexIterable(Iterable[Index]):
    """
    Re-iterable sequence of the coordinates of a range. Every call of ``iter``
    starts a fresh cursor, so the iterable itself can be shared.
    """

    _range: Range
    _precedence: Optional[Precedence]
    _direction: Direction

    def __init__(self,
                 range: Range | Extent,
                 precedence: Optional[Precedence] = None,
                 direction: Direction = Direction.FORWARD) -> None:
        if isinstance(range, Extent):
            range = Range(range)
        self._range = range
        self._precedence = precedence
        self._direction = direction

    @property
    def range(self) -> Range:
        return self._range

    def reversed(self) -> "IndexIterable":
        """The same coordinates in reversed order."""
        direction = Direction.BACKWARD if self._direction == Direction.FORWARD else Direction.FORWARD
        return IndexIterable(self._range, self._precedence, direction)

    def for_each(self, action: Callable[[Index], None]) -> None:
        for index in self:
            action(index)

    def any_match(self, predicate: Callable[[Index], bool]) -> bool:
        return any(predicate(index) for index in self)

    def all_match(self, predicate: Callable[[Index], bool]) -> bool:
        return all(predicate(index) for index in self)

    def none_match(self, predicate: Callable[[Index], bool]) -> bool:
        return not any(predicate(index) for index in self)

    def __iter__(self) -> IndexIterator:
        return IndexIterator(IndexCursor(self._range, self._precedence, self._direction))

    def __len__(self) -> int:
        return self._range.elements()
