# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Sequence
from dataclasses import dataclass

from .checks import check_permutation, check_dimensionality
from .options import get_options, OptionType
from .sequenceof import components

@dataclass(frozen=True, init=False)
class Precedence:
    """
    Permutation of the dimension indexes which defines the traversal order of
    ranges and a total order on coordinates. ``order[0]`` is the dimension with
    the lowest precedence, it varies fastest during iteration; ``order[-1]`` has
    the highest precedence and is compared first.
    """

    #: The dimension indexes, lowest precedence first.
    order: tuple[int, ...]

    def __init__(self, *order: Any) -> None:
        values = tuple(components(order))
        check_permutation(values)
        object.__setattr__(self, "order", values)

    #-------------------------------------------------------------------------
    #factories

    @staticmethod
    def natural(length: int) -> "Precedence":
        """The first dimension varies fastest."""
        return Precedence(list(range(length)))

    @staticmethod
    def reverse(length: int) -> "Precedence":
        """The last dimension varies fastest; lexicographic (row-major) order."""
        return Precedence([length - i - 1 for i in range(length)])

    @staticmethod
    def default(length: int) -> "Precedence":
        """The precedence configured by the current iteration options."""
        opts = get_options(OptionType.ITERATION)
        if opts.precedence == "natural":
            return Precedence.natural(length)
        return Precedence.reverse(length)

    #-------------------------------------------------------------------------
    #methods

    def at(self, idx: int) -> int:
        return self.order[idx]

    def compare(self, a: Sequence[int], b: Sequence[int]) -> int:
        """
        Compare two coordinates, starting at the dimension with the highest precedence.
        Returns a negative number, zero or a positive number.
        """
        check_dimensionality("Coordinate", len(self), len(a))
        check_dimensionality("Coordinate", len(self), len(b))
        for i in reversed(self.order):
            if a[i] != b[i]:
                return -1 if a[i] < b[i] else 1
        return 0

    def key(self, value: Sequence[int]) -> tuple[int, ...]:
        """Sort key consistent with :meth:`compare`, e.g. ``sorted(idxs, key=prec.key)``."""
        return tuple(value[i] for i in reversed(self.order))

    def sort(self, values: Sequence[Any]) -> list[Any]:
        """Arrange per-dimension values in precedence order, lowest precedence first."""
        check_dimensionality("Values", len(self), len(values))
        return [values[i] for i in self.order]

    def __len__(self) -> int:
        return len(self.order)

    def __str__(self) -> str:
        return str(list(self.order))
