from typing import Any, Iterable, Sequence
import numpy as np
import array_api_compat as api

backends = [api.array_namespace(np.zeros(1))]

#import torch as tr
#backends.append(api.array_namespace(tr.zeros(1)))

def all_coords(extent: Sequence[int]) -> list[tuple[int, ...]]:
    """Every coordinate of the extent in row-major order."""
    coords: list[tuple[int, ...]] = [()]
    for size in extent:
        coords = [c + (i,) for c in coords for i in range(size)]
    return coords if all(size > 0 for size in extent) else []

def collect(loop: Any) -> list[tuple[int, ...]]:
    """Coordinates visited by the for_each of a loop or grid."""
    visited = []
    loop.for_each(lambda *c: visited.append(c))
    return visited

def as_tuples(idxs: Iterable[Sequence[int]]) -> list[tuple[int, ...]]:
    return [tuple(idx) for idx in idxs]
