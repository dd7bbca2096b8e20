"""Typed array helpers shared by the writers.

Arrays are numpy ndarrays of one of the element types a VTK reader understands. Binary
payloads are always produced in little-endian byte order.
"""

from typing import Any

import numpy as np

BYTE_ORDER = "LittleEndian"

_DATA_TYPE_NAMES: dict[tuple[str, int], str] = {
    ("i", 1): "Int8",
    ("i", 2): "Int16",
    ("i", 4): "Int32",
    ("i", 8): "Int64",
    ("u", 1): "UInt8",
    ("u", 2): "UInt16",
    ("u", 4): "UInt32",
    ("u", 8): "UInt64",
    ("f", 4): "Float32",
    ("f", 8): "Float64",
}


def data_type_string(dtype: Any) -> str:
    """Return the VTK type name (``Int32``, ``Float64``, ...) for a numpy dtype.

    Raises:
        TypeError: If the dtype has no VTK counterpart (bool, complex, float16, objects).
    """
    dtype = np.dtype(dtype)
    try:
        return _DATA_TYPE_NAMES[(dtype.kind, dtype.itemsize)]
    except KeyError:
        raise TypeError(f"Unsupported element type for VTK output: {dtype}") from None


def as_typed_array(data: Any) -> np.ndarray:
    """Flatten ``data`` into a 1-D C-ordered array of a supported element type."""

    array = np.asarray(data)
    data_type_string(array.dtype)
    return array.reshape(-1)


def payload_bytes(array: np.ndarray) -> bytes:
    """Copy the array elements into a little-endian byte string."""

    little_endian = array.dtype.newbyteorder("<")
    return np.ascontiguousarray(array, dtype=little_endian).tobytes()
