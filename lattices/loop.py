# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Callable, Iterator, Optional, Sequence

from .checks import check_dimensionality
from .cursor import IndexCursor, Direction
from .extent import Extent
from .precedence import Precedence
from .range import Range

Action = Callable[..., Any]
Predicate = Callable[..., bool]

class Loop:
    """
    Tight loops over the coordinates of a range. The callbacks receive one integer
    argument per dimension, e.g. ``loop.for_each(lambda row, col: ...)``. Ranges of
    dimensionality 1, 2 and 3 are traversed with plain nested loops; higher
    dimensionalities fall back to an :class:`IndexCursor`.

    The predicate methods stop as soon as the result is known. For an empty range
    ``all_match`` and ``none_match`` return True and ``any_match`` returns False,
    without calling the predicate.
    """

    _range: Range
    _precedence: Precedence
    _direction: Direction
    _axes: Sequence[range]

    def __init__(self,
                 range: Range | Extent,
                 precedence: Optional[Precedence] = None,
                 direction: Direction = Direction.FORWARD) -> None:
        if isinstance(range, Extent):
            range = Range(range)
        if precedence is None:
            precedence = Precedence.default(range.dimensionality)
        check_dimensionality("Range and precedence", range.dimensionality, len(precedence))
        self._range = range
        self._precedence = precedence
        self._direction = direction
        self._axes = [_axis(s, e, direction) for s, e in zip(range.start, range.extent)]

    @staticmethod
    def forward(range: Range | Extent, precedence: Optional[Precedence] = None) -> "Loop":
        return Loop(range, precedence, Direction.FORWARD)

    @staticmethod
    def backward(range: Range | Extent, precedence: Optional[Precedence] = None) -> "Loop":
        return Loop(range, precedence, Direction.BACKWARD)

    @staticmethod
    def of(extent: Extent) -> "Loop":
        """Forward loop over all coordinates of the extent, in default precedence."""
        return Loop(Range(extent))

    @property
    def range(self) -> Range:
        return self._range

    @property
    def precedence(self) -> Precedence:
        return self._precedence

    @property
    def direction(self) -> Direction:
        return self._direction

    #-------------------------------------------------------------------------
    #loops

    def for_each(self, action: Action) -> None:
        """Call ``action`` for every coordinate of the range."""
        order = self._precedence.order
        match len(order):
            case 1:
                for i0 in self._axes[0]:
                    action(i0)
            case 2:
                r0, r1 = self._axes[order[0]], self._axes[order[1]]
                act = _ordered2(action, order)
                for i1 in r1:
                    for i0 in r0:
                        act(i0, i1)
            case 3:
                r0, r1, r2 = self._axes[order[0]], self._axes[order[1]], self._axes[order[2]]
                act = _ordered3(action, order)
                for i2 in r2:
                    for i1 in r1:
                        for i0 in r0:
                            act(i0, i1, i2)
            case _:
                cursor = IndexCursor(self._range, self._precedence, self._direction)
                index = [0] * cursor.dimensionality
                while cursor.next(index):
                    action(*index)

    def any_match(self, predicate: Predicate) -> bool:
        return any(self._tests(predicate))

    def all_match(self, predicate: Predicate) -> bool:
        return all(self._tests(predicate))

    def none_match(self, predicate: Predicate) -> bool:
        return not any(self._tests(predicate))

    def _tests(self, predicate: Predicate) -> Iterator[bool]:
        # lazily evaluated, consumers stop at the first deciding result
        order = self._precedence.order
        match len(order):
            case 1:
                return (predicate(i0) for i0 in self._axes[0])
            case 2:
                r0, r1 = self._axes[order[0]], self._axes[order[1]]
                pred = _ordered2(predicate, order)
                return (pred(i0, i1) for i1 in r1 for i0 in r0)
            case 3:
                r0, r1, r2 = self._axes[order[0]], self._axes[order[1]], self._axes[order[2]]
                pred = _ordered3(predicate, order)
                return (pred(i0, i1, i2) for i2 in r2 for i1 in r1 for i0 in r0)
            case _:
                return self._cursor_tests(predicate)

    def _cursor_tests(self, predicate: Predicate) -> Iterator[bool]:
        cursor = IndexCursor(self._range, self._precedence, self._direction)
        index = [0] * cursor.dimensionality
        while cursor.next(index):
            yield predicate(*index)

def _axis(start: int, size: int, direction: Direction) -> range:
    if direction == Direction.FORWARD:
        return range(start, start + size)
    return range(start + size - 1, start - 1, -1)

def _ordered2(fn: Callable[..., Any], order: Sequence[int]) -> Callable[..., Any]:
    # arguments arrive fastest dimension first, fn expects dimension order
    if order[0] == 0:
        return fn
    return lambda a, b: fn(b, a)

def _ordered3(fn: Callable[..., Any], order: Sequence[int]) -> Callable[..., Any]:
    match tuple(order):
        case (0, 1, 2):
            return fn
        case (0, 2, 1):
            return lambda a, b, c: fn(a, c, b)
        case (1, 0, 2):
            return lambda a, b, c: fn(b, a, c)
        case (1, 2, 0):
            return lambda a, b, c: fn(c, a, b)
        case (2, 0, 1):
            return lambda a, b, c: fn(b, c, a)
        case (2, 1, 0):
            return lambda a, b, c: fn(c, b, a)
    raise ValueError(f"Invalid precedence order: {order}")
