# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Optional, Sequence, TYPE_CHECKING
from dataclasses import dataclass

from .backend import ArrayLike, namespace_of_arrays, get_index_dtype, device
from .checks import check_dimensionality, check_int
from .errors import IndexOutOfBoundsError, UnsupportedTransformError
from .extent import Extent
from .index import Index
from .layout import Layout
from .mapper import Mapper
from .sequenceof import components

if TYPE_CHECKING:
    from .view import View

@dataclass(frozen=True, init=False)
class Structure:
    """
    Pairs the extent of a grid with the mapping of its coordinates onto the offsets
    of the underlying buffer. In contrast to the mapping itself, every conversion of
    a structure is range-checked.

    .. code-block:: python

        structure = Structure(Extent(3, 4))
        structure.offset(1, 2)  # 6
        structure.index(6)      # Index(1, 2)
    """

    #-------------------------------------------------------------------------
    #members

    #: Size of the addressed region.
    extent: Extent
    #: Coordinate to offset mapping, usually a :class:`Layout`.
    layout: Mapper

    #-------------------------------------------------------------------------
    #constructor

    def __init__(self, extent: Extent, layout: Optional[Mapper] = None) -> None:
        if layout is None:
            layout = Layout.dense(extent)
        check_dimensionality("Extent and layout", len(extent), layout.dimensionality)
        object.__setattr__(self, "extent", extent)
        object.__setattr__(self, "layout", layout)

    @staticmethod
    def of(extent: Extent, layout: Optional[Mapper] = None) -> "Structure":
        return Structure(extent, layout)

    #-------------------------------------------------------------------------
    #conversions

    @property
    def dimensionality(self) -> int:
        return len(self.extent)

    def offset(self, *coord: int | Sequence[int]) -> int:
        """Offset of the given coordinate, which must lie within the extent."""
        values = [check_int("Coordinate", c) for c in components(coord)]
        check_dimensionality("Coordinate", self.dimensionality, len(values))
        if not self._inside(values):
            raise IndexOutOfBoundsError(f"Index {list(values)}", self.extent)
        return self.layout.offset(values)

    def index(self, offset: int) -> Index:
        """Coordinate of the given offset, which must be an offset of this structure."""
        offset = check_int("Offset", offset)
        if isinstance(self.layout, Layout):
            idx = self.layout.index(offset, extent=self.extent)
            if not self._inside(idx) or self.layout.offset(idx) != offset:
                # greedy decoding fails for overlapping dimension spans
                idx = self.layout.solve(offset, self.extent)
        else:
            idx = self.layout.index(offset)
        if idx is None or not self._inside(idx) or self.layout.offset(idx) != offset:
            raise IndexOutOfBoundsError(f"Offset {offset}", self.extent)
        return idx

    def offsets[T: ArrayLike](self, idxs: T) -> T:
        """Checked version of :meth:`Layout.offsets`."""
        layout = self.affine()
        xp = namespace_of_arrays(idxs)
        if not self._inside_array(xp, idxs):
            raise IndexOutOfBoundsError("Coordinates", self.extent)
        return layout.offsets(idxs)

    def indexes[T: ArrayLike](self, offsets: T) -> T:
        """Checked version of :meth:`Layout.indexes`."""
        layout = self.affine()
        xp = namespace_of_arrays(offsets)
        int_type = get_index_dtype(xp)
        idxs = layout.indexes(offsets, extent=self.extent)
        valid = xp.all(idxs >= 0, axis=0) & xp.all(idxs < self._upper(xp, idxs), axis=0)\
                & (layout.offsets(idxs) == xp.astype(offsets, int_type))
        if bool(xp.all(valid)):
            return idxs
        # decode the remaining offsets one by one, unknown offsets raise
        flat_offsets = xp.reshape(offsets, (-1,))
        flat_idxs = xp.reshape(idxs, (self.dimensionality, -1))
        for k in xp.nonzero(~xp.reshape(valid, (-1,)))[0]:
            k = int(k)
            idx = self.index(int(flat_offsets[k]))
            flat_idxs[:, k] = xp.asarray(list(idx), dtype=int_type, device=device(idxs))
        return xp.reshape(flat_idxs, idxs.shape)

    def _inside(self, coord: Sequence[int]) -> bool:
        return all(0 <= c < e for c, e in zip(coord, self.extent))

    def _upper(self, xp: Any, idxs: ArrayLike) -> ArrayLike:
        upper = xp.asarray(list(self.extent), dtype=get_index_dtype(xp), device=device(idxs))
        return xp.reshape(upper, (self.dimensionality, *[1]*(len(idxs.shape)-1)))

    def _inside_array(self, xp: Any, idxs: ArrayLike) -> bool:
        check_dimensionality("Coordinate array", self.dimensionality, idxs.shape[0])
        return bool(xp.all(idxs >= 0)) and bool(xp.all(idxs < self._upper(xp, idxs)))

    def affine(self) -> Layout:
        """The mapping as :class:`Layout`; other mappings can't be transformed."""
        if not isinstance(self.layout, Layout):
            raise UnsupportedTransformError(
                f"Transformation not supported for mapping of type {type(self.layout).__name__}.")
        return self.layout

    #-------------------------------------------------------------------------
    #checks

    def like(self) -> "Structure":
        """Dense structure with the same extent."""
        return Structure(self.extent)

    def check_array_size(self, length: int) -> None:
        """Raise a ValueError if a buffer of ``length`` cells can't hold the largest offset."""
        if self.extent.is_empty():
            return
        max_offset = self.layout.offset([e - 1 for e in self.extent])
        if max_offset >= length:
            raise ValueError("The array is smaller than the required maximal index: "
                             f"{length} <= {max_offset}.")

    def check_same_extent(self, other: "Structure | Extent") -> None:
        extent = other.extent if isinstance(other, Structure) else other
        if self.extent != extent:
            raise ValueError(f"Incompatible extent: {self.extent} != {extent}.")

    def is_square(self) -> bool:
        """True for a rank 2 structure with as many rows as columns."""
        return self.dimensionality == 2 and self.extent[0] == self.extent[1]

    def check_square(self) -> None:
        if not self.is_square():
            raise ValueError(f"Grid extent must be square: {self.extent}.")

    def check_rectangular(self) -> None:
        """Raise a ValueError unless the structure is a matrix with at least as many rows as columns."""
        if self.dimensionality != 2 or self.extent[0] < self.extent[1]:
            raise ValueError(f"Grid extent must be rectangular: {self.extent}.")

    #-------------------------------------------------------------------------
    #transformations

    def view(self, view: "View | Any") -> "Structure":
        """Apply a view, or the view created by :meth:`View.of` for the given argument."""
        from .view import View
        if not isinstance(view, View):
            view = View.of(view)
        return view(self)

    def transpose(self, axes: Optional[Sequence[int]] = None) -> "Structure":
        from .view import View
        return View.transpose(axes)(self)

    def project(self, axis: int, index: int) -> "Structure":
        from .projection import Projection
        return Projection.axis(axis, index)(self)

    #-------------------------------------------------------------------------
    #some magic

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Structure)\
               and self.extent == other.extent\
               and self.layout == other.layout

    def __hash__(self) -> int:
        return hash((self.extent, self.layout))

    def __repr__(self) -> str:
        return f"Structure(extent={self.extent!r}, layout={self.layout!r})"
