# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

import sys
from typing import overload, SupportsIndex, Iterator, Sequence, Any
from dataclasses import dataclass

from .checks import check_int

@dataclass(frozen=True, init=False)
class SequenceOf(Sequence[int]):
    """
    Immutable sequence of integers, one value per dimension. Base of the
    extent, index and stride value types.
    """

    _seq_data: tuple[int, ...]

    def __init__(self, data: Sequence[int]) -> None:
        if len(data) == 0:
            raise ValueError("Dimensionality must not be zero.")
        values = tuple(check_int("Component", value) for value in data)
        object.__setattr__(self, "_seq_data", values)

    @property
    def dimensionality(self) -> int:
        """Number of dimensions."""
        return len(self._seq_data)

    def to_tuple(self) -> tuple[int, ...]:
        return self._seq_data

    #-------------------------------------------------------------------------
    #container behaviour

    def __len__(self) -> int:
        return len(self._seq_data)

    def __iter__(self) -> Iterator[int]:
        return self._seq_data.__iter__()

    def __reversed__(self) -> Iterator[int]:
        return self._seq_data.__reversed__()

    @overload
    def __getitem__(self, idx: SupportsIndex) -> int: ...
    @overload
    def __getitem__(self, idx: slice) -> Sequence[int]: ...
    #implementation
    def __getitem__(self, idx: SupportsIndex | slice) -> int | Sequence[int]:
        return self._seq_data[idx]

    def __contains__(self, item: Any) -> bool:
        return item in self._seq_data

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, type(self))\
               and self._seq_data == other._seq_data

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._seq_data))

    def __str__(self) -> str:
        return f"[{', '.join(str(v) for v in self._seq_data)}]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(str(v) for v in self._seq_data)})"

    def index(self, value: int, start: SupportsIndex = 0, stop: SupportsIndex = sys.maxsize) -> int:
        return self._seq_data.index(value, start, stop)

    def count(self, value: int) -> int:
        return self._seq_data.count(value)

def components(values: tuple[Any, ...]) -> Sequence[int]:
    """
    Unpack the arguments of a variadic constructor. ``f(1, 2)``, ``f((1, 2))``
    and ``f(other)`` all denote the components ``(1, 2)``.
    """
    if len(values) == 1 and isinstance(values[0], Sequence):
        return values[0]
    return values
