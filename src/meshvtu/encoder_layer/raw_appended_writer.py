"""Appended raw writer: header and payload bytes are written unencoded after the markup.

The resulting file is not well-formed XML, but it is the smallest and fastest to write.
"""

from __future__ import annotations

from typing import Any, BinaryIO

from meshvtu.encoder_layer.appended_data import AppendedData
from meshvtu.encoder_layer.header_type import HeaderType
from meshvtu.log import logger


def _raw_block_size(number_of_bytes: int) -> int:
    return number_of_bytes


class RawAppendedWriter:
    """Defers every array to the appended section and writes it as raw bytes.

    Args:
        header_type (HeaderType | str): Unsigned type of the byte-count header.
    """

    def __init__(self, header_type: HeaderType | str = "UInt64") -> None:
        self.header_type = HeaderType.from_name(header_type)
        self._appended = AppendedData(self.header_type, _raw_block_size)

    @property
    def offset(self) -> int:
        return self._appended.offset

    def write_data(self, output: BinaryIO, data: Any) -> None:
        self._appended.record(data)

    def write_appended(self, output: BinaryIO) -> None:
        logger.debug("Writing %d raw appended blocks", len(self._appended))
        for block in self._appended.blocks():
            output.write(block)
        output.write(b"\n")

    def add_header_attributes(self, attributes: dict[str, str]) -> None:
        attributes["header_type"] = self.header_type.name

    def add_data_attributes(self, attributes: dict[str, str]) -> None:
        attributes["format"] = "appended"
        attributes["offset"] = str(self._appended.offset)

    def appended_attributes(self) -> dict[str, str]:
        return {"encoding": "raw"}
