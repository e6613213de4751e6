# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Protocol, Sequence, runtime_checkable

from .index import Index

@runtime_checkable
class Mapper(Protocol):
    """
    Mapping between N-dimensional coordinates and offsets of a flat buffer.
    Neither direction is range-checked; checking is done by the structure.
    """

    @property
    def dimensionality(self) -> int: ...
    def offset(self, *coord: int | Sequence[int]) -> int: ...
    def index(self, offset: int) -> Index: ...
