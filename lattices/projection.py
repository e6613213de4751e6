# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Callable
from dataclasses import dataclass
import logging

from .checks import check_int, check_non_neg
from .errors import IndexOutOfBoundsError, DimensionalityMismatchError
from .extent import Extent
from .index import Index
from .layout import Layout
from .stride import Stride
from .structure import Structure

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class Projection:
    """
    Reduces the dimensionality of a structure by one, by fixing the coordinate of
    one axis. The resulting structure addresses the same buffer cells as the
    fixed hyperplane of the source.

    .. code-block:: python

        row = Projection.row(1)(Structure(Extent(3, 4)))
        row.offset(2)  # 6
    """

    #: The structure transformation.
    fn: Callable[[Structure], Structure]

    def __call__(self, structure: Structure) -> Structure:
        return self.fn(structure)

    @staticmethod
    def axis(axis: int, index: int) -> "Projection":
        """Fix coordinate ``index`` of dimension ``axis``; negative axes count from the end."""
        axis = check_int("Axis", axis)
        index = check_int("Index", index)
        check_non_neg("Projection index", index)
        return Projection(lambda s: _project(s, axis, index))

    @staticmethod
    def row(index: int) -> "Projection":
        return Projection.axis(-2, index)

    @staticmethod
    def col(index: int) -> "Projection":
        return Projection.axis(-1, index)

    @staticmethod
    def slice(index: int) -> "Projection":
        return Projection.axis(-3, index)

def _project(structure: Structure, axis: int, index: int) -> Structure:
    layout = structure.affine()
    n = structure.dimensionality
    if n < 2:
        raise DimensionalityMismatchError(f"Can't project a structure of dimensionality {n}.")
    if not -n <= axis < n:
        raise ValueError(f"Axis {axis} is out of range for dimensionality {n}")
    axis %= n
    if index >= structure.extent[axis]:
        raise IndexOutOfBoundsError(f"Projection index {index}", structure.extent)

    keep = [i for i in range(n) if i != axis]
    # the whole start collapses into the offset of the fixed hyperplane
    base = sum(layout.start) + index*layout.stride[axis]
    start = Index([base] + [0]*(n - 2))
    extent = Extent([structure.extent[i] for i in keep], bands=structure.extent.bands)
    stride = Stride([layout.stride[i] for i in keep])
    logger.debug("projection of axis %d at %d of %s", axis, index, structure.extent)
    return Structure(extent, Layout(start, stride, layout.band))
