"""Plain-text writer: every element as decimal text inside the DataArray element."""

from typing import Any, BinaryIO

from meshvtu.encoder_layer.scalar_formatter import format_array


class AsciiWriter:
    """Writes arrays as space separated decimal text terminated by a newline.

    ASCII output carries no binary headers and has no appended section.
    """

    def write_data(self, output: BinaryIO, data: Any) -> None:
        output.write(format_array(data).encode("ascii"))

    def write_appended(self, output: BinaryIO) -> None:
        pass

    def add_header_attributes(self, attributes: dict[str, str]) -> None:
        pass

    def add_data_attributes(self, attributes: dict[str, str]) -> None:
        attributes["format"] = "ascii"

    def appended_attributes(self) -> dict[str, str]:
        return {}
