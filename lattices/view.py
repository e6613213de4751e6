# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Callable, Optional, Sequence
from dataclasses import dataclass
import logging

from .band import Band
from .checks import check_dimensionality, check_permutation
from .errors import IndexOutOfBoundsError
from .extent import Extent
from .index import Index
from .layout import Layout
from .range import Range
from .stride import Stride
from .structure import Structure

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class View:
    """
    Non-copying reinterpretation of a structure. A view is a pure function from
    a structure to a new structure addressing (a part of) the same buffer cells.

    .. code-block:: python

        view = View.of(Range(Index(1, 1), Extent(2, 2)))
        view(Structure(Extent(3, 4))).offset(0, 0)  # 5
    """

    #: The structure transformation.
    fn: Callable[[Structure], Structure]

    def __call__(self, structure: Structure) -> Structure:
        return self.fn(structure)

    def compose(self, before: "View") -> "View":
        """View which applies ``before`` first and this view afterwards."""
        return View(lambda s: self.fn(before.fn(s)))

    def and_then(self, after: "View") -> "View":
        """View which applies this view first and ``after`` afterwards."""
        return View(lambda s: after.fn(self.fn(s)))

    #-------------------------------------------------------------------------
    #factories

    @staticmethod
    def of(arg: Range | Index | Extent | Stride | Band) -> "View":
        """
        Create a view from

        * a :class:`Range`: the sub-region covered by the range,
        * an :class:`Index`: the region from the index to the end of the extent,
        * an :class:`Extent`: the region of the given size at the origin,
        * a :class:`Stride`: every ``k``-th element per dimension,
        * a :class:`Band`: another band of multi-band elements.
        """
        match arg:
            case Range():
                return View(lambda s: _slice(s, arg))
            case Extent():
                return View(lambda s: _slice(s, Range(Index.zero(len(arg)), arg)))
            case Index():
                return View(lambda s: _slice(s, _range_from(s, arg)))
            case Stride():
                return View(lambda s: _downsample(s, arg))
            case Band():
                return View(lambda s: _select_band(s, arg))
        raise TypeError(f"Can't create a view from {type(arg).__name__}.")

    @staticmethod
    def transpose(axes: Optional[Sequence[int]] = None) -> "View":
        """
        Permute the dimensions, dimension ``i`` of the result is dimension ``axes[i]``
        of the source. Without axes the order of all dimensions is reversed, which
        swaps rows and columns of a matrix.
        """
        return View(lambda s: _transpose(s, axes))

def _slice(structure: Structure, range: Range) -> Structure:
    layout = structure.affine()
    check_dimensionality("Range", structure.dimensionality, range.dimensionality)
    if not range.fits(structure.extent):
        raise IndexOutOfBoundsError(f"Range {range}", structure.extent)
    start = Index([s + d*r for s, d, r in zip(layout.start, layout.stride, range.start)])
    extent = Extent(list(range.extent), bands=structure.extent.bands)
    logger.debug("slice view %s of %s", range, structure.extent)
    return Structure(extent, Layout(start, layout.stride, layout.band))

def _range_from(structure: Structure, start: Index) -> Range:
    check_dimensionality("Start", structure.dimensionality, len(start))
    if not all(0 <= s <= e for s, e in zip(start, structure.extent)):
        raise IndexOutOfBoundsError(f"Start {start}", structure.extent)
    return Range(start, Extent([e - s for s, e in zip(start, structure.extent)]))

def _downsample(structure: Structure, stride: Stride) -> Structure:
    layout = structure.affine()
    check_dimensionality("Stride", structure.dimensionality, len(stride))
    # every k-th element starting at zero, ceil(e/k) of them
    extent = Extent([(e - 1)//k + 1 if e > 0 else 0 for e, k in zip(structure.extent, stride)],
                    bands=structure.extent.bands)
    strides = Stride([d*k for d, k in zip(layout.stride, stride)])
    logger.debug("stride view %s of %s", stride, structure.extent)
    return Structure(extent, Layout(layout.start, strides, layout.band))

def _select_band(structure: Structure, band: Band) -> Structure:
    layout = structure.affine()
    if band.value >= structure.extent.bands:
        raise IndexOutOfBoundsError(f"Band {band.value}", f"[0, {structure.extent.bands})")
    logger.debug("band view %d of %s", band.value, structure.extent)
    return Structure(structure.extent, Layout(layout.start, layout.stride, band))

def _transpose(structure: Structure, axes: Optional[Sequence[int]]) -> Structure:
    layout = structure.affine()
    n = structure.dimensionality
    if axes is None:
        axes = list(reversed(range(n)))
    check_dimensionality("Axes", n, len(axes))
    check_permutation(axes)
    extent = Extent([structure.extent[a] for a in axes], bands=structure.extent.bands)
    start = Index([layout.start[a] for a in axes])
    stride = Stride([layout.stride[a] for a in axes])
    logger.debug("transposed view %s of %s", list(axes), structure.extent)
    return Structure(extent, Layout(start, stride, layout.band))
