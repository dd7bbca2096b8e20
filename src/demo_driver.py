"""
demo_driver.py

This script demonstrates the encoder layer of meshvtu by writing the same two-triangle mesh
once per write mode. Field data is fed through the DataSetHandler, the writer is selected by
name through the WriterHandler, and a minimal VTKFile document is assembled around the
arrays so the results can be opened in ParaView.
"""

import os
from typing import BinaryIO

import numpy as np
import pandas as pd

from meshvtu.encoder_layer.encoder_interface import WriterInterface
from meshvtu.encoder_layer.typed_array import data_type_string
from meshvtu.encoder_layer.writer_handler import (
    WriterHandler,
    WriterParameters,
    document_attributes,
    writer_session,
)
from meshvtu.input_layer.data_set import DataSet, DataSetType
from meshvtu.input_layer.data_set_handler import DataSetHandler, data_array_attributes

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
OUTPUT_PATH = os.path.join(PROJECT_ROOT, "out")

WRITE_MODES = ["Ascii", "Base64Inline", "Base64Appended", "RawBinary"]

VTK_TRIANGLE = 5


def _tag(name: str, attributes: dict[str, str], close: bool = False) -> bytes:
    text = " ".join(f'{key}="{value}"' for key, value in attributes.items())
    return f"<{name} {text}{'/' if close else ''}>\n".encode("ascii")


def _write_data_array(
    output: BinaryIO, writer: WriterInterface, attributes: dict[str, str], values: np.ndarray
) -> None:
    # Appended arrays are empty elements pointing into the AppendedData section.
    appended = "offset" in attributes
    output.write(_tag("DataArray", attributes, close=appended))
    writer.write_data(output, values)
    if not appended:
        output.write(b"</DataArray>\n")


def write_array(
    output: BinaryIO, writer: WriterInterface, name: str, values: np.ndarray, components: int = 1
) -> None:
    attributes = {
        "type": data_type_string(values.dtype),
        "Name": name,
        "NumberOfComponents": str(components),
    }
    writer.add_data_attributes(attributes)
    _write_data_array(output, writer, attributes, values)


def write_data_sets(output: BinaryIO, writer: WriterInterface, data_sets: list[DataSet]) -> None:
    for data_set in data_sets:
        attributes = data_array_attributes(writer, data_set)
        _write_data_array(output, writer, attributes, data_set.values)


def write_demo_file(path: str, write_mode: str) -> None:
    points = np.array([0, 0, 0, 1, 0, 0, 1, 1, 0, 0, 1, 0], dtype=np.float64)
    connectivity = np.array([0, 1, 2, 0, 2, 3], dtype=np.int64)
    offsets = np.array([3, 6], dtype=np.int64)
    types = np.array([VTK_TRIANGLE, VTK_TRIANGLE], dtype=np.uint8)

    handler = DataSetHandler()
    point_data = handler.input_data(
        pd.DataFrame(
            {
                "temperature": [20.5, 21.0, 22.25, 19.75],
                "vx": [0.0, 1.0, 1.0, 0.0],
                "vy": [0.0, 0.0, 1.0, 1.0],
                "vz": [0.0, 0.0, 0.0, 0.0],
            }
        ),
        DataSetType.POINT_DATA,
        components={"velocity": ["vx", "vy", "vz"]},
    )
    cell_data = handler.input_data(
        {"material": np.array([1, 2], dtype=np.int8)}, DataSetType.CELL_DATA
    )

    writer = WriterHandler(WriterParameters(write_mode=write_mode)).create_writer()

    with open(path, "wb") as output:
        output.write(b'<?xml version="1.0"?>\n')
        output.write(_tag("VTKFile", document_attributes(writer)))
        output.write(b"<UnstructuredGrid>\n")
        output.write(_tag("Piece", {"NumberOfPoints": "4", "NumberOfCells": "2"}))

        with writer_session(writer, output):
            output.write(b"<Points>\n")
            write_array(output, writer, "Points", points, components=3)
            output.write(b"</Points>\n<Cells>\n")
            write_array(output, writer, "connectivity", connectivity)
            write_array(output, writer, "offsets", offsets)
            write_array(output, writer, "types", types)
            output.write(b"</Cells>\n<PointData>\n")
            write_data_sets(output, writer, point_data)
            output.write(b"</PointData>\n<CellData>\n")
            write_data_sets(output, writer, cell_data)
            output.write(b"</CellData>\n</Piece>\n</UnstructuredGrid>\n")

            appended_attributes = writer.appended_attributes()
            if appended_attributes:
                output.write(_tag("AppendedData", appended_attributes) + b"_")

        if appended_attributes:
            output.write(b"</AppendedData>\n")
        output.write(b"</VTKFile>\n")


if __name__ == "__main__":
    os.makedirs(OUTPUT_PATH, exist_ok=True)
    for mode in WRITE_MODES:
        filename = os.path.join(OUTPUT_PATH, f"demo_{mode.lower()}.vtu")
        write_demo_file(filename, mode)
        print(f"{mode}: wrote {os.path.getsize(filename)} bytes to {filename}")
