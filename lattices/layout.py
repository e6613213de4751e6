# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Callable, Optional, Sequence
from dataclasses import dataclass

from .backend import ArrayLike, namespace_of_arrays, get_index_dtype, device
from .band import Band
from .checks import check_dimensionality, check_int
from .extent import Extent
from .index import Index
from .sequenceof import components
from .stride import Stride

OffsetFunction = Callable[[Sequence[int]], int]

@dataclass(frozen=True, init=False)
class Layout:
    """
    Affine mapping of N-dimensional coordinates onto the offsets of a flat buffer,

        ``offset = band + sum(start[i] + coord[i]*stride[i])``.

    Neither :meth:`offset` nor :meth:`index` are range-checked. Layouts are usually
    created by a structure, the direct creation of a layout rarely leads to the
    expected result.
    """

    #-------------------------------------------------------------------------
    #members

    #: Start index, the sum of its components is the offset of the first element.
    start: Index
    #: Number of buffer cells between two adjacent elements, per dimension.
    stride: Stride
    #: Band selected by this layout.
    band: Band

    #-------------------------------------------------------------------------
    #constructor

    def __init__(self, start: Index, stride: Stride, band: Band | int = 0) -> None:
        check_dimensionality("Start and stride", len(start), len(stride))
        if not isinstance(band, Band):
            band = Band(band)
        object.__setattr__(self, "start", start)
        object.__setattr__(self, "stride", stride)
        object.__setattr__(self, "band", band)
        object.__setattr__(self, "_offset", _offset_function(start, stride, band))
        # decoding order for the inverse: largest stride first
        order = sorted(range(len(stride)), key=lambda i: (-stride[i], i))
        object.__setattr__(self, "_decode_order", tuple(order))

    @staticmethod
    def dense(extent: Extent, start: Optional[Index] = None) -> "Layout":
        """Row-major layout of a densely packed extent, optionally shifted by ``start``."""
        if start is None:
            start = Index.zero(len(extent))
        return Layout(start, Stride.dense(extent))

    #-------------------------------------------------------------------------
    #methods

    @property
    def dimensionality(self) -> int:
        return len(self.start)

    def base(self) -> int:
        """Offset of the origin coordinate."""
        return self.band.value + sum(self.start)

    def offset(self, *coord: int | Sequence[int]) -> int:
        """Position of the given coordinate within the flat buffer."""
        values = [check_int("Coordinate", c) for c in components(coord)]
        check_dimensionality("Coordinate", self.dimensionality, len(values))
        return self._offset(values) # type: ignore

    def index(self, offset: int, extent: Optional[Sequence[int]] = None) -> Index:
        """
        Calculate the coordinate of the given offset, the inverse of :meth:`offset`.
        The offset is decomposed along the dimensions with decreasing stride. If an
        ``extent`` is given, every component is limited to the last valid position of
        its dimension before the remainder is passed on, which also inverts layouts
        whose dimensions share a stride.
        """
        rest = offset - self.base()
        coord = [0] * self.dimensionality
        for i in self._decode_order: # type: ignore
            value = rest // self.stride[i]
            if extent is not None and extent[i] > 0:
                value = min(value, extent[i] - 1)
            coord[i] = value
            rest -= value*self.stride[i]
        return Index(coord)

    def solve(self, offset: int, extent: Sequence[int]) -> Optional[Index]:
        """
        Exact inverse within ``[0, extent)``: search the coordinate whose offset is
        ``offset``, or None if there is none. Unlike the greedy :meth:`index` this
        also inverts layouts where the span of a dimension reaches past the stride
        of the next larger one.
        """
        order = self._decode_order # type: ignore
        # largest offset contribution of all dimensions after position k
        spans = [0] * (len(order) + 1)
        for k in range(len(order) - 1, -1, -1):
            i = order[k]
            spans[k] = spans[k+1] + max(extent[i] - 1, 0)*self.stride[i]

        coord = [0] * self.dimensionality
        def search(k: int, rest: int) -> bool:
            if k == len(order):
                return rest == 0
            i = order[k]
            d = self.stride[i]
            upper = min(rest // d, extent[i] - 1)
            lower = max(-(-(rest - spans[k+1]) // d), 0)
            for value in range(upper, lower - 1, -1):
                coord[i] = value
                if search(k + 1, rest - value*d):
                    return True
            return False

        if search(0, offset - self.base()):
            return Index(coord)
        return None

    def offsets[T: ArrayLike](self, idxs: T) -> T:
        """
        Convert coordinates with shape (dimensionality, ...) to offsets with shape (...).
        """
        xp = namespace_of_arrays(idxs)
        int_type = get_index_dtype(xp)
        self._check_input(xp, idxs)
        idxs = xp.astype(idxs, int_type)
        trans = xp.asarray(list(self.stride),
                           dtype=int_type,
                           device=device(idxs))
        trans = xp.reshape(trans, (self.dimensionality, *[1]*(len(idxs.shape)-1)))
        return xp.sum(idxs * trans, axis=0) + self.base()

    def indexes[T: ArrayLike](self, offsets: T, extent: Optional[Sequence[int]] = None) -> T:
        """
        Convert offsets with shape (...) to coordinates with shape (dimensionality, ...).
        """
        xp = namespace_of_arrays(offsets)
        int_type = get_index_dtype(xp)
        if not xp.isdtype(offsets.dtype, "integral"):
            raise ValueError(f"Expected integral offsets, got {offsets.dtype}")
        rest = xp.astype(offsets, int_type) - self.base()
        idxs = xp.zeros((self.dimensionality, *offsets.shape),
                        dtype=int_type,
                        device=device(offsets))
        for i in self._decode_order: # type: ignore
            vals = rest // self.stride[i]
            if extent is not None and extent[i] > 0:
                vals = xp.minimum(vals, xp.asarray(extent[i] - 1, dtype=int_type))
            idxs[i, ...] = vals
            rest = rest - vals*self.stride[i]
        return idxs

    def _check_input(self, xp: Any, idxs: ArrayLike) -> None:
        if not xp.isdtype(idxs.dtype, "integral"):
            raise ValueError(f"Expected integral coordinates, got {idxs.dtype}")
        check_dimensionality("Coordinate array", self.dimensionality, idxs.shape[0])

    #-------------------------------------------------------------------------
    #some magic

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Layout)\
               and self.start == other.start\
               and self.stride == other.stride\
               and self.band == other.band

    def __hash__(self) -> int:
        return hash((self.start, self.stride, self.band))

    def __repr__(self) -> str:
        return f"Layout(start={self.start}, stride={self.stride}, band={self.band.value})"

def _offset_function(start: Index, stride: Stride, band: Band) -> OffsetFunction:
    b = band.value
    match len(start):
        case 1:
            s0, = start
            d0, = stride
            return lambda c: b + s0 + c[0]*d0
        case 2:
            s0, s1 = start
            d0, d1 = stride
            return lambda c: b + s0 + c[0]*d0 + s1 + c[1]*d1
        case 3:
            s0, s1, s2 = start
            d0, d1, d2 = stride
            return lambda c: b + s0 + c[0]*d0 + s1 + c[1]*d1 + s2 + c[2]*d2
        case _:
            pairs = tuple(zip(start, stride))
            return lambda c: b + sum(s + i*d for (s, d), i in zip(pairs, c))
