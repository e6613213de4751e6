# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Sequence
from functools import reduce
from operator import index

from .errors import DimensionalityMismatchError

#: Largest value of a 32-bit signed integer; no cell count or offset may exceed it.
INT32_MAX = 2**31 - 1
INT32_MIN = -2**31

def mult_not_safe(*values: int) -> bool:
    """
    True if the product of the given values leaves the 32-bit signed range.
    The product is folded from left to right and stops at the first intermediate
    result which is out of range.
    """
    def step(acc: int | None, value: int) -> int | None:
        if acc is None:
            return None
        acc *= value
        return acc if INT32_MIN <= acc <= INT32_MAX else None
    return reduce(step, values, 1) is None

def check_non_neg(msg: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{msg} must be non-negative, got {value}")

def check_int(msg: str, value: object) -> int:
    try:
        return index(value) # type: ignore
    except TypeError:
        raise TypeError(f"{msg} must be an integer, got {type(value).__name__}") from None

def check_dimensionality(what: str, expected: int, actual: int) -> None:
    if expected != actual:
        raise DimensionalityMismatchError(what, expected, actual)

def check_permutation(order: Sequence[int]) -> None:
    if len(order) == 0:
        raise ValueError("Permutation must not be empty.")
    if sorted(order) != list(range(len(order))):
        raise ValueError(f"Not a permutation of [0, {len(order)}): {list(order)}")
