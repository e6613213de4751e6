# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Optional, Sequence, overload

from .backend import ArrayNamespace, get_index_dtype, get_namespace
from .band import Band
from .buffer import ArrayBuffer
from .extent import Extent
from .grid import Grid, GridFactory
from .index import Index
from .layout import Layout
from .loop import Loop
from .mapper import Mapper
from .options import IterationOptions, OptionType, PrecedenceKind, set_options, get_options
from .precedence import Precedence
from .projection import Projection
from .range import Range
from .stride import Stride
from .structure import Structure
from .view import View

class Lattices[NDArray: Any]:
    """
    Entry point of the package, bound to one array namespace. Buffers and grids
    created through it are backed by arrays of that namespace.

    .. code-block:: python

        import numpy as np
        lt = Lattices(np)
        grid = lt.grid(lt.extent(3, 4))
        grid[1, 2] = 1.0
    """

    #: Array namespace for the buffers.
    namespace: ArrayNamespace

    #: Index type of vectorized offset calculations.
    index_type: Any

    def __init__(self, namespace: Any) -> None:
        self.namespace = get_namespace(namespace)
        self.index_type = get_index_dtype(self.namespace)

    #-------------------------------------------------------------------------
    # value types

    def extent(self, *sizes: int | Sequence[int], bands: int = 1) -> Extent:
        """Number of elements per dimension and bands per element."""
        return Extent(*sizes, bands=bands)

    def index(self, *values: int | Sequence[int]) -> Index:
        return Index(*values)

    def stride(self, *values: int | Sequence[int]) -> Stride:
        return Stride(*values)

    def band(self, value: int = 0) -> Band:
        return Band(value)

    @overload
    def range(self, extent: Extent, /) -> Range: ...
    @overload
    def range(self, start: Index, extent: Extent, /) -> Range: ...
    # implementation
    def range(self, *args: Any) -> Range:
        """Box of coordinate space, ``[start, start + extent)``."""
        return Range(*args)

    def precedence(self, *order: int | Sequence[int]) -> Precedence:
        return Precedence(*order)

    #-------------------------------------------------------------------------
    # structures and transformations

    def structure(self, extent: Extent, layout: Optional[Mapper] = None) -> Structure:
        """Structure of the extent, with the dense row-major layout if none is given."""
        return Structure(extent, layout)

    def layout(self, start: Index, stride: Stride, band: Band | int = 0) -> Layout:
        return Layout(start, stride, band)

    def view(self, arg: Range | Index | Extent | Stride | Band) -> View:
        return View.of(arg)

    def transpose(self, axes: Optional[Sequence[int]] = None) -> View:
        return View.transpose(axes)

    def projection(self, axis: int, index: int) -> Projection:
        return Projection.axis(axis, index)

    def loop(self, range: Range | Extent, precedence: Optional[Precedence] = None) -> Loop:
        return Loop.forward(range, precedence)

    #-------------------------------------------------------------------------
    # storage

    def buffer(self, length: int, dtype: Any = None) -> ArrayBuffer[NDArray]:
        """Zero filled buffer with ``length`` cells."""
        return ArrayBuffer.zeros(length, dtype=dtype, xp=self.namespace)

    def grid(self,
             extent: Extent | Structure,
             dtype: Any = None,
             factory: Optional[GridFactory] = None) -> Grid:
        """
        Zero filled grid. For an extent the dense structure is used, the buffer
        is sized to hold every cell of the structure.
        """
        structure = extent if isinstance(extent, Structure) else Structure(extent)
        return Grid(structure, self.buffer(structure.extent.cells(), dtype=dtype), factory)

    #-------------------------------------------------------------------------
    # options

    def iteration(self, *, precedence: PrecedenceKind = "reverse") -> IterationOptions:
        """
        Manager for the default traversal order of ranges and loops.
        """
        return IterationOptions(precedence=precedence)

    def set_options(self, options: IterationOptions) -> None:
        """
        Set options globally. The options are stored per thread and used by
        every iteration which doesn't get an explicit precedence.
        """
        set_options(options)

    def get_options(self, otype: OptionType = OptionType.ITERATION) -> IterationOptions:
        return get_options(otype)
