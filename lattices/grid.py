# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Callable, Optional, Sequence
import logging

from .buffer import Buffer
from .extent import Extent
from .loop import Loop
from .projection import Projection
from .structure import Structure
from .view import View

logger = logging.getLogger(__name__)

GridFactory = Callable[[Structure, Buffer], "Grid"]

class Grid:
    """
    N-dimensional grid: a structure addressing the cells of a buffer. Views,
    projections and transpositions share the buffer with the source grid.

    New grids are created with the ``factory`` of the grid, which defaults to
    the grid class itself. Subclasses pass themselves as factory, so the
    transformations of a subclass return instances of the subclass.

    .. code-block:: python

        grid = Grid(Structure(Extent(3, 4)), ArrayBuffer.zeros(12))
        grid[1, 2] = 5.0
        grid.view(Range(Index(1, 1), Extent(2, 2)))[0, 1]  # 5.0
    """

    _structure: Structure
    _buffer: Buffer
    _factory: GridFactory

    def __init__(self, structure: Structure, buffer: Buffer, factory: Optional[GridFactory] = None) -> None:
        structure.check_array_size(len(buffer))
        self._structure = structure
        self._buffer = buffer
        self._factory = factory if factory is not None else Grid

    #-------------------------------------------------------------------------
    #properties

    @property
    def structure(self) -> Structure:
        return self._structure

    @property
    def buffer(self) -> Buffer:
        return self._buffer

    @property
    def extent(self) -> Extent:
        return self._structure.extent

    @property
    def dimensionality(self) -> int:
        return self._structure.dimensionality

    def create(self, structure: Structure, buffer: Buffer) -> "Grid":
        return self._factory(structure, buffer)

    #-------------------------------------------------------------------------
    #element access

    def __getitem__(self, coord: int | Sequence[int]) -> Any:
        return self._buffer.get(self._structure.offset(coord))

    def __setitem__(self, coord: int | Sequence[int], value: Any) -> None:
        self._buffer.set(self._structure.offset(coord), value)

    #-------------------------------------------------------------------------
    #transformations

    def view(self, view: View | Any) -> "Grid":
        return self.create(self._structure.view(view), self._buffer)

    def transpose(self, axes: Optional[Sequence[int]] = None) -> "Grid":
        return self.create(self._structure.transpose(axes), self._buffer)

    def project(self, projection: Projection) -> "Grid":
        return self.create(projection(self._structure), self._buffer)

    def like(self) -> "Grid":
        """Grid of the same extent with a new, dense buffer."""
        structure = self._structure.like()
        return self.create(structure, self._buffer.like(structure.extent.cells()))

    def copy(self) -> "Grid":
        """Dense copy of this grid, which doesn't share the buffer."""
        logger.debug("copy grid with extent %s", self.extent)
        grid = self.like()
        grid.assign(self)
        return grid

    #-------------------------------------------------------------------------
    #bulk operations

    def loop(self) -> Loop:
        return Loop.of(self.extent)

    def assign(self, value: "Grid | Callable[[Any], Any] | Any") -> None:
        """
        Replace all values of the grid. ``value`` is either a grid with the same
        extent, a function mapping the current value of a cell to its new value,
        or a value assigned to every cell.
        """
        if value is self:
            return
        if isinstance(value, Grid):
            self._structure.check_same_extent(value.structure)
            self.for_each(lambda *c: self.__setitem__(c, value[c]))
        elif callable(value):
            self.for_each(lambda *c: self.__setitem__(c, value(self[c])))
        else:
            self.for_each(lambda *c: self.__setitem__(c, value))

    def swap(self, other: "Grid") -> None:
        """Exchange the values of this grid with the values of ``other``."""
        self._structure.check_same_extent(other.structure)
        def exchange(*c: int) -> None:
            tmp = self[c]
            self[c] = other[c]
            other[c] = tmp
        self.for_each(exchange)

    def for_each(self, action: Callable[..., Any]) -> None:
        """Call ``action`` with the coordinate of every cell, one argument per dimension."""
        self.loop().for_each(action)

    def any_match(self, predicate: Callable[..., bool]) -> bool:
        return self.loop().any_match(predicate)

    def all_match(self, predicate: Callable[..., bool]) -> bool:
        return self.loop().all_match(predicate)

    def none_match(self, predicate: Callable[..., bool]) -> bool:
        return self.loop().none_match(predicate)

    #-------------------------------------------------------------------------
    #some magic

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        return isinstance(other, Grid)\
               and self.extent == other.extent\
               and self.all_match(lambda *c: bool(self[c] == other[c]))

    __hash__ = None # type: ignore

    def __repr__(self) -> str:
        return f"{type(self).__name__}(structure={self._structure!r}, buffer={self._buffer!r})"
