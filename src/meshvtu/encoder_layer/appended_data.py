"""Recorded payloads of the appended writers.

The appended writers return an offset for each array long before its bytes are written.
``AppendedData`` copies the payload at registration, keeps the running offset and later
yields the header+payload blocks in registration order.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

from meshvtu.encoder_layer.header_type import HeaderType
from meshvtu.encoder_layer.typed_array import as_typed_array, payload_bytes
from meshvtu.log import logger


class AppendedData:
    """Payloads waiting for the appended section of one file.

    Args:
        header_type (HeaderType): Header written in front of every payload.
        block_size (Callable[[int], int]): Maps the raw size of one header+payload block
            to the number of bytes it occupies in the appended section.
    """

    def __init__(self, header_type: HeaderType, block_size: Callable[[int], int]) -> None:
        self._header_type = header_type
        self._block_size = block_size
        self._payloads: list[bytes] = []
        self._offset = 0

    def __len__(self) -> int:
        return len(self._payloads)

    @property
    def offset(self) -> int:
        """Position in the appended section where the next recorded block will start."""
        return self._offset

    def record(self, data: Any) -> None:
        """Copy the array's bytes and advance the offset past its block."""
        payload = payload_bytes(as_typed_array(data))
        self._header_type.pack(len(payload))

        start = self._offset
        self._payloads.append(payload)
        self._offset += self._block_size(self._header_type.size + len(payload))

        logger.debug(
            "Recorded appended block %d: %d payload bytes at offset %d",
            len(self._payloads) - 1,
            len(payload),
            start,
        )

    def blocks(self) -> Iterator[bytes]:
        """Yield header+payload for every recorded array, in registration order."""

        for payload in self._payloads:
            yield self._header_type.pack(len(payload)) + payload
