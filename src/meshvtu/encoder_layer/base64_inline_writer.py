"""Inline base64 writer: header and payload encoded together inside the DataArray element."""

from __future__ import annotations

from typing import Any, BinaryIO

from meshvtu.encoder_layer.base64_codec import base64_encode
from meshvtu.encoder_layer.header_type import HeaderType
from meshvtu.encoder_layer.typed_array import as_typed_array, payload_bytes


class Base64InlineWriter:
    """Writes ``base64(header + payload)`` followed by a newline for every array.

    Args:
        header_type (HeaderType | str): Unsigned type of the byte-count header.
    """

    def __init__(self, header_type: HeaderType | str = "UInt64") -> None:
        self.header_type = HeaderType.from_name(header_type)

    def write_data(self, output: BinaryIO, data: Any) -> None:
        payload = payload_bytes(as_typed_array(data))
        output.write(base64_encode(self.header_type.pack(len(payload)) + payload))
        output.write(b"\n")

    def write_appended(self, output: BinaryIO) -> None:
        pass

    def add_header_attributes(self, attributes: dict[str, str]) -> None:
        attributes["header_type"] = self.header_type.name

    def add_data_attributes(self, attributes: dict[str, str]) -> None:
        attributes["format"] = "binary"

    def appended_attributes(self) -> dict[str, str]:
        return {}
