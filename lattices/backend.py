# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, TypeAlias
import numpy as np
import array_api_compat as api
from array_api_compat import device
from array_api_compat import size as _size

#: Any array implementing the array API standard (numpy, cupy, torch, ...).
ArrayLike: TypeAlias = Any
#: The array API namespace of such arrays.
ArrayNamespace: TypeAlias = Any

__all__ = ["ArrayLike", "ArrayNamespace", "device", "get_namespace", "namespace_of_arrays",
           "get_index_dtype", "size", "default_namespace"]

def get_namespace(obj: Any) -> ArrayNamespace:
    """Return the array API namespace of an array or of a module like ``numpy``."""
    if not api.is_array_api_obj(obj):
        try:
            obj = obj.zeros(1)
        except AttributeError:
            raise TypeError("Provided object is not a recognized array or namespace.") from None
    return api.array_namespace(obj)

def default_namespace() -> ArrayNamespace:
    return api.array_namespace(np.zeros(1))

def namespace_of_arrays(*arrays: ArrayLike) -> ArrayNamespace:
    return api.array_namespace(*arrays)

def get_index_dtype(xp: ArrayNamespace) -> Any:
    """Signed integer dtype used for coordinates and offsets; offsets get subtracted."""
    info = xp.__array_namespace_info__()
    dtypes = info.dtypes(kind=None)
    for name in ["int64", "int32"]:
        if name in dtypes:
            return dtypes[name]
    raise ValueError("No suitable index dtype found")

def size(array: ArrayLike) -> int:
    val = _size(array)
    if val is None:
        raise ValueError("Array size is unknown (None).")
    return val
