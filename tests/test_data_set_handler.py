"""
tests.test_data_set_handler
"""

from io import BytesIO
from pathlib import Path

import numpy as np
import pandas as pd
import pytest

from meshvtu.encoder_layer.ascii_writer import AsciiWriter
from meshvtu.encoder_layer.raw_appended_writer import RawAppendedWriter
from meshvtu.input_layer.data_set import DataSet, DataSetInfo, DataSetType
from meshvtu.input_layer.data_set_handler import DataSetHandler, data_array_attributes
from meshvtu.input_layer.input_interface import InputInterface


@pytest.fixture
def handler() -> DataSetHandler:
    return DataSetHandler()


@pytest.fixture
def point_frame() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "temperature": [20.5, 21.0, 22.25],
            "vx": [1.0, 2.0, 3.0],
            "vy": [4.0, 5.0, 6.0],
            "vz": [7.0, 8.0, 9.0],
        }
    )


def test_handler_implements_interface(handler):
    assert isinstance(handler, InputInterface)


def test_each_column_becomes_a_data_set(handler, point_frame):
    # Act
    data_sets = handler.input_data(point_frame, DataSetType.POINT_DATA)

    # Assert
    assert [data_set.info.name for data_set in data_sets] == ["temperature", "vx", "vy", "vz"]
    assert all(data_set.info.number_of_components == 1 for data_set in data_sets)
    assert data_sets[0].values.tolist() == [20.5, 21.0, 22.25]
    assert handler.data is point_frame


def test_grouped_columns_are_interleaved(handler, point_frame):
    # Act
    data_sets = handler.input_data(
        point_frame, DataSetType.POINT_DATA, components={"velocity": ["vx", "vy", "vz"]}
    )

    # Assert
    assert [data_set.info for data_set in data_sets] == [
        DataSetInfo("temperature", DataSetType.POINT_DATA, 1),
        DataSetInfo("velocity", DataSetType.POINT_DATA, 3),
    ]
    assert data_sets[1].values.tolist() == [1.0, 4.0, 7.0, 2.0, 5.0, 8.0, 3.0, 6.0, 9.0]
    assert data_sets[1].number_of_tuples == 3


def test_dict_input_keeps_dtypes(handler):
    data_sets = handler.input_data(
        {"material": np.array([1, 2], dtype=np.int8)}, DataSetType.CELL_DATA
    )

    assert data_sets[0].values.dtype == np.int8
    assert data_sets[0].info.data_set_type is DataSetType.CELL_DATA


def test_load_csv(tmp_path: Path, handler):
    # Arrange
    csv_path = tmp_path / "fields.csv"
    csv_path.write_text("pressure,density\n1,2.5\n3,4.5\n")

    # Act
    data_sets = handler.input_data(str(csv_path), DataSetType.POINT_DATA)

    # Assert
    assert [data_set.info.name for data_set in data_sets] == ["pressure", "density"]
    assert data_sets[0].values.tolist() == [1, 3]
    assert data_sets[1].values.dtype == np.float64


def test_load_json_from_path_object(tmp_path: Path, handler):
    json_path = tmp_path / "fields.json"
    pd.DataFrame({"pressure": [1.5, 2.5]}).to_json(json_path)

    data_sets = handler.input_data(json_path, DataSetType.CELL_DATA)

    assert data_sets[0].values.tolist() == [1.5, 2.5]


def test_missing_file(tmp_path: Path, handler):
    with pytest.raises(FileNotFoundError):
        handler.input_data(str(tmp_path / "missing.csv"), DataSetType.POINT_DATA)


def test_unsupported_file_type(tmp_path: Path, handler):
    text_path = tmp_path / "fields.txt"
    text_path.write_text("1\n2\n")
    with pytest.raises(ValueError):
        handler.input_data(str(text_path), DataSetType.POINT_DATA)


def test_unsupported_input_type(handler):
    with pytest.raises(TypeError):
        handler.input_data([1, 2, 3], DataSetType.POINT_DATA)


@pytest.mark.parametrize(
    "frame, components",
    [
        (pd.DataFrame(), None),
        (pd.DataFrame([[1, 2]], columns=["a", "a"]), None),
        (pd.DataFrame({"a": [1.0, 2.0], "b": [None, None]}), None),
        (pd.DataFrame({"a": [1, 2], "name": ["x", "y"]}), None),
        (pd.DataFrame({"vx": [1.0], "vy": [2.0]}), {"velocity": ["vx", "vy", "vz"]}),
        (pd.DataFrame({"vx": [1.0], "vy": [2.0]}), {"u": ["vx", "vy"], "w": ["vy"]}),
        (pd.DataFrame({"velocity": [0.0], "vx": [1.0]}), {"velocity": ["vx"]}),
        (pd.DataFrame({"a": [1.0, 2.0]}), {"velocity": []}),
    ],
    ids=[
        "empty",
        "duplicate-columns",
        "all-nan-column",
        "non-numeric-column",
        "missing-component",
        "column-in-two-groups",
        "name-clash",
        "empty-component-group",
    ],
)
def test_validation_errors(handler, frame, components):
    with pytest.raises(ValueError):
        handler.input_data(frame, DataSetType.POINT_DATA, components)


def test_data_set_rejects_partial_tuples():
    with pytest.raises(ValueError):
        DataSet(DataSetInfo("velocity", DataSetType.POINT_DATA, 3), np.zeros(4))


def test_data_set_rejects_zero_components():
    with pytest.raises(ValueError):
        DataSet(DataSetInfo("velocity", DataSetType.POINT_DATA, 0), np.zeros(3))


def test_data_array_attributes_track_appended_offsets(handler, point_frame):
    # Arrange
    data_sets = handler.input_data(
        point_frame, DataSetType.POINT_DATA, components={"velocity": ["vx", "vy", "vz"]}
    )
    writer = RawAppendedWriter()
    output = BytesIO()

    # Act
    attributes = []
    for data_set in data_sets:
        attributes.append(data_array_attributes(writer, data_set))
        writer.write_data(output, data_set.values)

    # Assert
    assert attributes == [
        {
            "type": "Float64",
            "Name": "temperature",
            "NumberOfComponents": "1",
            "format": "appended",
            "offset": "0",
        },
        {
            "type": "Float64",
            "Name": "velocity",
            "NumberOfComponents": "3",
            "format": "appended",
            "offset": "32",
        },
    ]


def test_data_array_attributes_for_ascii(handler):
    data_sets = handler.input_data({"ids": np.array([1, 2], dtype=np.int32)}, DataSetType.CELL_DATA)

    attributes = data_array_attributes(AsciiWriter(), data_sets[0])

    assert attributes == {
        "type": "Int32",
        "Name": "ids",
        "NumberOfComponents": "1",
        "format": "ascii",
    }
