# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Callable, Optional
from dataclasses import dataclass
from enum import Enum

from .checks import check_dimensionality
from .precedence import Precedence
from .range import Range

class Direction(Enum):
    FORWARD = 0
    BACKWARD = 1

@dataclass
class CursorState:
    """
    Mutable state of an odometer. ``lower`` and ``upper`` are the inclusive bounds
    of every dimension, ``order`` the dimension indexes with the fastest varying
    dimension first.
    """

    lower: list[int]
    upper: list[int]
    order: tuple[int, ...]
    cursor: list[int]
    exhausted: bool

def _forward_has_next(state: CursorState) -> bool:
    last = state.order[-1]
    return not state.exhausted and state.cursor[last] <= state.upper[last]

def _forward_step(state: CursorState) -> None:
    cursor, order = state.cursor, state.order
    for k, i in enumerate(order):
        cursor[i] += 1
        if cursor[i] > state.upper[i] and k < len(order) - 1:
            cursor[i] = state.lower[i]
        else:
            break

def _backward_has_next(state: CursorState) -> bool:
    last = state.order[-1]
    return not state.exhausted and state.cursor[last] >= state.lower[last]

def _backward_step(state: CursorState) -> None:
    cursor, order = state.cursor, state.order
    for k, i in enumerate(order):
        cursor[i] -= 1
        if cursor[i] < state.lower[i] and k < len(order) - 1:
            cursor[i] = state.upper[i]
        else:
            break

_TRANSITIONS: dict[Direction, tuple[Callable[[CursorState], bool], Callable[[CursorState], None]]] = {
    Direction.FORWARD: (_forward_has_next, _forward_step),
    Direction.BACKWARD: (_backward_has_next, _backward_step),
}

class IndexCursor:
    """
    Odometer over the coordinates of a range. Every step increments (forward) or
    decrements (backward) the fastest varying dimension and carries over into the
    next dimension of the precedence order when the bound of a dimension is passed.
    The iteration ends when the dimension with the highest precedence overflows.

    A cursor holds mutable state and must not be shared between threads.

    .. code-block:: python

        cursor = IndexCursor.forward(Range(Index(1, 2), Extent(2, 2)))
        index = [0] * cursor.dimensionality
        while cursor.next(index):
            print(index)
    """

    _state: CursorState
    _direction: Direction

    def __init__(self,
                 range: Range,
                 precedence: Optional[Precedence] = None,
                 direction: Direction = Direction.FORWARD) -> None:
        if precedence is None:
            precedence = Precedence.default(range.dimensionality)
        check_dimensionality("Range and precedence", range.dimensionality, len(precedence))
        lower = list(range.start)
        upper = [e - 1 for e in range.end]
        cursor = list(lower) if direction == Direction.FORWARD else list(upper)
        self._state = CursorState(lower, upper, precedence.order, cursor, range.extent.is_empty())
        self._direction = direction
        self._has_next, self._step = _TRANSITIONS[direction]

    @staticmethod
    def forward(range: Range, precedence: Optional[Precedence] = None) -> "IndexCursor":
        return IndexCursor(range, precedence, Direction.FORWARD)

    @staticmethod
    def backward(range: Range, precedence: Optional[Precedence] = None) -> "IndexCursor":
        return IndexCursor(range, precedence, Direction.BACKWARD)

    @property
    def dimensionality(self) -> int:
        return len(self._state.order)

    @property
    def direction(self) -> Direction:
        return self._direction

    def has_next(self) -> bool:
        return self._has_next(self._state)

    def next(self, index: list[int]) -> bool:
        """
        Write the current coordinate into ``index`` and advance the cursor.
        Returns False, leaving ``index`` untouched, if the range is exhausted.
        """
        if not self._has_next(self._state):
            return False
        index[:] = self._state.cursor
        self._step(self._state)
        return True
