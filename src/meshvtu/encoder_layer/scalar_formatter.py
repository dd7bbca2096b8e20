"""Decimal text rendering of array elements for ASCII output.

Integers render as exact decimals. Floats render as the shortest text that reads back to
the same value at the element's own precision, so ``float32(0.1)`` is written as ``0.1``.
"""

from collections.abc import Callable, Iterable
from typing import Any

import numpy as np

from meshvtu.encoder_layer.typed_array import as_typed_array, data_type_string

# One-byte signed values are widened so they are never rendered as characters.
_WIDENED: dict[np.dtype, np.dtype] = {np.dtype(np.int8): np.dtype(np.int16)}


def _format_integers(values: np.ndarray) -> Iterable[str]:
    return map(str, values.tolist())


def _format_floats(values: np.ndarray) -> Iterable[str]:
    return (str(value) for value in values)


_FORMATTERS: dict[str, Callable[[np.ndarray], Iterable[str]]] = {
    "i": _format_integers,
    "u": _format_integers,
    "f": _format_floats,
}


def _widen(values: np.ndarray) -> np.ndarray:
    widened = _WIDENED.get(values.dtype)
    return values.astype(widened) if widened is not None else values


def format_value(value: Any, dtype: Any) -> str:
    """Render one value of the given element type as decimal text.

    Args:
        value: Scalar to render.
        dtype: Element type the value belongs to.

    Returns:
        str: Decimal text without separators.

    Raises:
        TypeError: If the element type is not supported.
    """
    dtype = np.dtype(dtype)
    data_type_string(dtype)
    values = _widen(np.array([value], dtype=dtype))
    return next(iter(_FORMATTERS[values.dtype.kind](values)))


def format_array(data: Any) -> str:
    """Render every element followed by one space, then a single newline."""

    values = _widen(as_typed_array(data))
    return "".join(f"{text} " for text in _FORMATTERS[values.dtype.kind](values)) + "\n"
