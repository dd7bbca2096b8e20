"""Appended base64 writer: payloads are collected and base64 encoded after the markup.

Offsets count encoded characters, since the reader seeks inside the encoded text of the
appended section.
"""

from __future__ import annotations

from typing import Any, BinaryIO

from meshvtu.encoder_layer.appended_data import AppendedData
from meshvtu.encoder_layer.base64_codec import base64_encode, encoded_number_of_bytes
from meshvtu.encoder_layer.header_type import HeaderType
from meshvtu.log import logger


class Base64AppendedWriter:
    """Defers every array to the appended section, encoding each header+payload block.

    Args:
        header_type (HeaderType | str): Unsigned type of the byte-count header.
    """

    def __init__(self, header_type: HeaderType | str = "UInt64") -> None:
        self.header_type = HeaderType.from_name(header_type)
        self._appended = AppendedData(self.header_type, encoded_number_of_bytes)

    @property
    def offset(self) -> int:
        return self._appended.offset

    def write_data(self, output: BinaryIO, data: Any) -> None:
        self._appended.record(data)

    def write_appended(self, output: BinaryIO) -> None:
        logger.debug("Writing %d base64 appended blocks", len(self._appended))
        for block in self._appended.blocks():
            # Header and payload share one encoding call; separate calls would pad the header.
            output.write(base64_encode(block))
        output.write(b"\n")

    def add_header_attributes(self, attributes: dict[str, str]) -> None:
        attributes["header_type"] = self.header_type.name

    def add_data_attributes(self, attributes: dict[str, str]) -> None:
        attributes["format"] = "appended"
        attributes["offset"] = str(self._appended.offset)

    def appended_attributes(self) -> dict[str, str]:
        return {"encoding": "base64"}
