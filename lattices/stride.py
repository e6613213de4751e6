# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any
from dataclasses import dataclass
from math import prod

from .errors import InvalidShapeError
from .extent import Extent
from .sequenceof import SequenceOf, components

@dataclass(frozen=True, init=False)
class Stride(SequenceOf):
    """
    Number of buffer cells between two adjacent elements along each dimension.
    Strides are always positive, reversed traversal is done by the backward iterators.
    """

    def __init__(self, *values: Any) -> None:
        super().__init__(components(values))
        if any(value < 1 for value in self):
            raise InvalidShapeError(f"Strides must be positive: {self}.")

    @staticmethod
    def dense(extent: Extent) -> "Stride":
        """
        Row-major strides of a densely packed extent, the last dimension varying
        fastest. The band count is folded into every stride.
        """
        sizes = list(extent)
        values = [extent.bands*prod(sizes[i+1:]) for i in range(len(sizes))]
        # empty dimensions still need a valid stride
        return Stride([max(value, 1) for value in values])

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Stride)\
               and self._seq_data == other._seq_data

    def __hash__(self) -> int:
        return hash(("Stride", self._seq_data))
