# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Sequence
from dataclasses import dataclass

from .checks import check_dimensionality
from .sequenceof import SequenceOf, components

@dataclass(frozen=True, init=False)
class Index(SequenceOf):
    """
    A coordinate in N-dimensional space, one integer per dimension. The values are
    given in the usual matrix order, e.g. ``Index(row, col)``.
    """

    def __init__(self, *values: Any) -> None:
        super().__init__(components(values))

    @staticmethod
    def zero(dimensionality: int) -> "Index":
        return Index([0] * dimensionality)

    def plus(self, other: Sequence[int]) -> "Index":
        """Component-wise sum of two coordinates."""
        check_dimensionality("Index", len(self), len(other))
        return Index([a + b for a, b in zip(self, other)])

    def minus(self, other: Sequence[int]) -> "Index":
        """Component-wise difference of two coordinates."""
        check_dimensionality("Index", len(self), len(other))
        return Index([a - b for a, b in zip(self, other)])

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Index)\
               and self._seq_data == other._seq_data

    def __hash__(self) -> int:
        return hash(self._seq_data)
