# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Sequence, overload
from dataclasses import dataclass
from math import prod

from .checks import INT32_MAX, mult_not_safe, check_int
from .errors import InvalidShapeError
from .sequenceof import SequenceOf, components

@dataclass(frozen=True, init=False)
class Extent(SequenceOf):
    """
    The shape of an N-dimensional coordinate space: the number of elements per
    dimension and the number of bands (interleaved values) stored per element.
    The number of cells, ``elements()*bands``, must fit into a 32-bit signed integer.
    """

    #-------------------------------------------------------------------------
    #members

    #: Number of bands per element, at least one.
    bands: int

    #-------------------------------------------------------------------------
    #constructor

    @overload
    def __init__(self, *sizes: int, bands: int = 1) -> None: ...
    @overload
    def __init__(self, sizes: Sequence[int], /, *, bands: int = 1) -> None: ...
    # implementation
    def __init__(self, *sizes: Any, bands: int = 1) -> None:
        values = components(sizes)
        if len(values) == 0:
            raise InvalidShapeError("Dimensionality must not be zero.")
        super().__init__(values)
        bands = check_int("Bands", bands)
        object.__setattr__(self, "bands", bands)
        self._check_sizes()

    def _check_sizes(self) -> None:
        if any(size < 0 or size > INT32_MAX for size in self)\
           or not 1 <= self.bands <= INT32_MAX\
           or mult_not_safe(self.bands, *self):
            raise InvalidShapeError(list(self), self.bands)

    @staticmethod
    def of(*sizes: Any, bands: int = 1) -> "Extent":
        return Extent(*sizes, bands=bands)

    #-------------------------------------------------------------------------
    #methods

    def elements(self) -> int:
        """Number of elements, the product of the sizes of all dimensions."""
        return prod(self)

    def cells(self) -> int:
        """Length of the array needed for storing all cells: ``elements()*bands``."""
        return self.elements()*self.bands

    def is_empty(self) -> bool:
        return any(size == 0 for size in self)

    #-------------------------------------------------------------------------
    #some magic

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Extent)\
               and self.bands == other.bands\
               and self._seq_data == other._seq_data

    def __hash__(self) -> int:
        return hash((self._seq_data, self.bands))

    def __repr__(self) -> str:
        sizes = ", ".join(str(size) for size in self)
        if self.bands == 1:
            return f"Extent({sizes})"
        return f"Extent({sizes}, bands={self.bands})"
