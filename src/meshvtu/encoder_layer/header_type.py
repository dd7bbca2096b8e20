"""Fixed-width unsigned integer used for the byte-count header in front of every payload."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from meshvtu.encoder_layer.typed_array import data_type_string

_HEADER_DTYPES: dict[str, np.dtype] = {
    data_type_string(dtype): np.dtype(dtype).newbyteorder("<")
    for dtype in (np.uint32, np.uint64)
}


@dataclass(frozen=True)
class HeaderType:
    """Header Type in effect for one output file.

    Attributes:
        name: VTK name reported to the reader as ``header_type``, ``UInt32`` or ``UInt64``.
    """

    name: str = "UInt64"

    def __post_init__(self) -> None:
        if self.name not in _HEADER_DTYPES:
            raise ValueError(
                f"Unsupported header type {self.name!r}. Valid types: {sorted(_HEADER_DTYPES)}"
            )

    @classmethod
    def from_name(cls, name: HeaderType | str) -> HeaderType:
        """Build a HeaderType from a case-insensitive name such as ``"uint32"``."""

        if isinstance(name, HeaderType):
            return name
        for known in _HEADER_DTYPES:
            if known.lower() == str(name).lower():
                return cls(known)
        raise ValueError(f"Unsupported header type {name!r}. Valid types: {sorted(_HEADER_DTYPES)}")

    @property
    def dtype(self) -> np.dtype:
        return _HEADER_DTYPES[self.name]

    @property
    def size(self) -> int:
        """Width of one header in bytes."""
        return self.dtype.itemsize

    def pack(self, number_of_bytes: int) -> bytes:
        """Encode a payload byte count as one little-endian header value.

        Raises:
            OverflowError: If the count does not fit in this header type.
        """
        if not 0 <= number_of_bytes <= np.iinfo(self.dtype).max:
            raise OverflowError(
                f"Payload of {number_of_bytes} bytes does not fit in a {self.name} header"
            )
        return np.array([number_of_bytes], dtype=self.dtype).tobytes()
