"""Writer Handler to select one array writer per output file.

The handler maps a write mode name to one of the four writers, and the module offers the
scoped session that guarantees the appended section is written exactly once before the
caller closes the document.

Write modes (not case sensitive):

* ``Ascii``: decimal text, easy to debug, slow to read.
* ``Base64Inline``: base64 binary inside each DataArray element.
* ``Base64Appended``: base64 binary in the AppendedData section, valid XML.
* ``RawBinary``: raw bytes in the AppendedData section, smallest and fastest.
* ``RawBinaryCompressed``: accepted for compatibility, written as ``RawBinary``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import BinaryIO, ClassVar

from meshvtu.encoder_layer.ascii_writer import AsciiWriter
from meshvtu.encoder_layer.base64_appended_writer import Base64AppendedWriter
from meshvtu.encoder_layer.base64_inline_writer import Base64InlineWriter
from meshvtu.encoder_layer.encoder_interface import WriterInterface
from meshvtu.encoder_layer.header_type import HeaderType
from meshvtu.encoder_layer.raw_appended_writer import RawAppendedWriter
from meshvtu.encoder_layer.typed_array import BYTE_ORDER
from meshvtu.log import logger


@dataclass
class WriterParameters:
    write_mode: str = "RawBinary"
    header_type: str = "UInt64"


class WriterHandler:
    """Creates a fresh writer for each output file from a set of WriterParameters.

    Writers keep per-file offsets, so ``create_writer`` must be called once per file
    (or per partition file) and the result never shared.
    """

    _WRITERS: ClassVar[dict[str, Callable[[HeaderType], WriterInterface]]] = {
        "ascii": lambda header_type: AsciiWriter(),
        "base64inline": Base64InlineWriter,
        "base64appended": Base64AppendedWriter,
        "rawbinary": RawAppendedWriter,
    }
    _FALLBACKS: ClassVar[dict[str, str]] = {
        "rawbinarycompressed": "rawbinary",
    }

    def __init__(self, parameters: WriterParameters | None = None) -> None:
        self.parameters = parameters if parameters is not None else WriterParameters()
        self._mode = self._resolve_mode(self.parameters.write_mode)
        self._header_type = HeaderType.from_name(self.parameters.header_type)

    @property
    def write_mode(self) -> str:
        """Normalized (lower case) name of the writer this handler creates."""
        return self._mode

    def _resolve_mode(self, write_mode: str) -> str:
        """Normalize a write mode name, applying fallbacks for unsupported modes.

        Raises:
            ValueError: If the mode name is unknown.
        """
        mode = write_mode.lower()

        if mode in self._FALLBACKS:
            fallback = self._FALLBACKS[mode]
            logger.warning(
                f"Write mode {write_mode} is not available, using {fallback} instead"
            )
            mode = fallback

        if mode not in self._WRITERS:
            raise ValueError(
                f"Unsupported write mode: {write_mode}. "
                f"Valid modes: {sorted(self._WRITERS) + sorted(self._FALLBACKS)}"
            )
        return mode

    def create_writer(self) -> WriterInterface:
        """Return a new writer for one output file."""

        logger.info(f"Creating {self._mode} writer with {self._header_type.name} headers")
        return self._WRITERS[self._mode](self._header_type)


@contextmanager
def writer_session(writer: WriterInterface, output: BinaryIO) -> Iterator[WriterInterface]:
    """Scope a writer to one document and write its appended section on exit.

    The appended section is written on every exit path, including when the body raises,
    so the caller only has to close the document afterwards.
    """
    try:
        yield writer
    finally:
        writer.write_appended(output)


def document_attributes(writer: WriterInterface) -> dict[str, str]:
    """Attributes of the VTKFile root element for an unstructured grid document."""

    attributes = {
        "type": "UnstructuredGrid",
        "version": "0.1",
        "byte_order": BYTE_ORDER,
    }
    writer.add_header_attributes(attributes)
    return attributes
