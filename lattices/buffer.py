# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Optional, Protocol, Self, runtime_checkable

from .backend import ArrayLike, ArrayNamespace, namespace_of_arrays, default_namespace, device, size

@runtime_checkable
class Buffer(Protocol):
    """Flat, linearly addressed storage of the cells of a grid."""

    def get(self, offset: int) -> Any: ...
    def set(self, offset: int, value: Any) -> None: ...
    def __len__(self) -> int: ...
    def like(self, length: Optional[int] = None) -> Self: ...
    def copy(self) -> Self: ...

class ArrayBuffer[T: ArrayLike]:
    """
    Buffer backed by a one dimensional array of any array API namespace.
    The array is not copied, changes through the buffer are visible in the array.
    """

    _data: T

    def __init__(self, data: T) -> None:
        if len(data.shape) != 1:
            raise ValueError(f"Buffer array must be one dimensional, got shape {data.shape}")
        self._data = data

    @staticmethod
    def zeros(length: int, dtype: Any = None, xp: Optional[ArrayNamespace] = None) -> "ArrayBuffer":
        if xp is None:
            xp = default_namespace()
        return ArrayBuffer(xp.zeros(length, dtype=dtype))

    @property
    def data(self) -> T:
        return self._data

    @property
    def namespace(self) -> ArrayNamespace:
        return namespace_of_arrays(self._data)

    @property
    def dtype(self) -> Any:
        return self._data.dtype

    def get(self, offset: int) -> Any:
        return self._data[offset]

    def set(self, offset: int, value: Any) -> None:
        self._data[offset] = value

    def like(self, length: Optional[int] = None) -> "ArrayBuffer[T]":
        """Zero filled buffer with the same dtype and device, of the given length."""
        if length is None:
            length = len(self)
        xp = self.namespace
        return ArrayBuffer(xp.zeros(length, dtype=self._data.dtype, device=device(self._data)))

    def copy(self) -> "ArrayBuffer[T]":
        xp = self.namespace
        return ArrayBuffer(xp.asarray(self._data, copy=True))

    def __len__(self) -> int:
        return size(self._data)

    def __repr__(self) -> str:
        return f"ArrayBuffer(length={len(self)}, dtype={self._data.dtype})"
