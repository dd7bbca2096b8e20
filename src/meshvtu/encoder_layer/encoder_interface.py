"""Exposed interface for the array writers of the encoder layer."""

from typing import Any, BinaryIO, Protocol, runtime_checkable


@runtime_checkable
class WriterInterface(Protocol):
    """Defines how one typed array is turned into bytes of a VTK XML document.

    One writer instance serves exactly one output file: every array of the file goes
    through ``write_data`` and ``write_appended`` is called once at the end.
    """

    def write_data(self, output: BinaryIO, data: Any) -> None:
        """Write or record one typed array.

        Args:
            output (BinaryIO): Stream positioned inside the array's DataArray element.
            data (Any): Array-like of a supported element type."""

        ...

    def write_appended(self, output: BinaryIO) -> None:
        """Write the appended data section, if the writer defers its payloads."""

        ...

    def add_header_attributes(self, attributes: dict[str, str]) -> None:
        """Add the document-scoped attributes (header type) to ``attributes``."""

        ...

    def add_data_attributes(self, attributes: dict[str, str]) -> None:
        """Add the per-array attributes (format, offset) to ``attributes``."""

        ...

    def appended_attributes(self) -> dict[str, str]:
        """Return the attributes of the AppendedData element (empty when unused)."""

        ...
