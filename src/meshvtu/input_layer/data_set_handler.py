"""DataSetHandler to turn tabular field data into point or cell data sets.

input_data call paths:
1. File path input -> _load_from_file -> _validate_data -> _build_data_sets
2. DataFrame / dict input -> _to_dataframe -> _validate_data -> _build_data_sets

Each column becomes a one-component data set. Columns listed in ``components`` are
interleaved row by row into a single multi-component data set, e.g.
``{"velocity": ["vx", "vy", "vz"]}``.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from typing import Any, ClassVar

import pandas as pd

from meshvtu.encoder_layer.encoder_interface import WriterInterface
from meshvtu.encoder_layer.typed_array import data_type_string
from meshvtu.input_layer.data_set import DataSet, DataSetInfo, DataSetType
from meshvtu.log import logger


class DataSetHandler:
    """
    Entry point for shuttling tabular field data into validated data sets.

    One row of the frame belongs to one point (or one cell). All public APIs make sure that:

    * Supported payloads (DataFrames, dicts of columns, CSV or JSON files) become a DataFrame.
    * The frame is numeric, non-empty and free of duplicate or all-NaN columns.
    * Grouped columns exist and are interleaved in the order they were listed.
    """

    _DATAFRAME_READERS: ClassVar[dict[str, Callable[[str], pd.DataFrame]]] = {
        ".csv": pd.read_csv,
        ".json": pd.read_json,
    }

    def __init__(self) -> None:
        self._data: pd.DataFrame = pd.DataFrame()
        """The most recently ingested frame."""

    @property
    def data(self) -> pd.DataFrame:
        return self._data

    def input_data(
        self,
        input_source: Any,
        data_set_type: DataSetType,
        components: dict[str, list[str]] | None = None,
    ) -> list[DataSet]:
        """
        Ingest a payload, validate it and split it into data sets.

        Args:
            input_source: A DataFrame, a dict of equally long columns, or a path (str or
                          path-like) to a CSV or JSON file.
            data_set_type: Whether the rows describe points or cells.
            components: Optional mapping from data set name to the columns forming its
                        components, in component order.

        Returns:
            list[DataSet]: One data set per ungrouped column and per group, in column order.

        Raises:
            FileNotFoundError: If a path is supplied but does not exist.
            TypeError: When the payload type cannot be coerced into a DataFrame.
            ValueError: If validation fails (empty frame, duplicate, missing, all-NaN or
                        non-numeric columns).
        """
        components = components or {}

        if isinstance(input_source, (str, os.PathLike)):
            self._data = self._load_from_file(os.fspath(input_source))
        else:
            self._data = self._to_dataframe(input_source)

        self._validate_data(components)
        return self._build_data_sets(data_set_type, components)

    def _load_from_file(self, filepath: str) -> pd.DataFrame:
        """Load a frame with the pandas reader matching the file extension.

        Raises:
            FileNotFoundError: If the path does not exist.
            ValueError: If the file type is unsupported.
        """
        file_extension = os.path.splitext(filepath)[1].lower()
        if not os.path.exists(filepath):
            raise FileNotFoundError(f"No file found at {filepath}")

        try:
            logger.info(f"Loading data sets from {filepath}")

            if file_extension in self._DATAFRAME_READERS:
                return self._DATAFRAME_READERS[file_extension](filepath)
            raise ValueError(f"Unsupported file type: {file_extension}")

        except Exception as e:
            logger.error(f"Error loading file {filepath}: {e}")
            raise

    def _to_dataframe(self, data: Any) -> pd.DataFrame:
        """Convert a DataFrame or a dict of columns into a DataFrame.

        Raises:
            TypeError: If the input data type is unsupported.
        """
        if isinstance(data, pd.DataFrame):
            return data
        if isinstance(data, dict):
            return pd.DataFrame(data)
        raise TypeError(
            "Unsupported data type for conversion to data sets. Supported types: "
            "DataFrame, dict of columns, CSV or JSON file path."
        )

    def _validate_data(self, components: dict[str, list[str]]) -> bool:
        """
        Run structural checks on the current DataFrame.

        Returns:
            bool: True when the frame passes all checks.

        Raises:
            ValueError: When any check fails.
        """
        logger.info("validating data sets...")

        # Check empty
        if self._data.empty:
            raise ValueError("DataFrame is empty")

        # Check for duplicate columns
        if self._data.columns.duplicated().any():
            raise ValueError("DataFrame has duplicate column names.")

        # Check for all-NaN columns
        nan_cols = self._data.columns[self._data.isna().all()].tolist()
        if nan_cols:
            raise ValueError(f"Columns with all NaN values: {nan_cols}")

        # Check for non-numeric columns
        non_numeric = self._data.select_dtypes(exclude=["number"])
        if len(non_numeric.columns):
            raise ValueError(f"Non-numeric columns: {non_numeric.columns.tolist()}")

        # Check grouped columns
        for name, columns in components.items():
            if not columns:
                raise ValueError(f"Data set {name} has no component columns")
        grouped = [column for columns in components.values() for column in columns]
        missing = [column for column in grouped if column not in self._data.columns]
        if missing:
            raise ValueError(f"Missing component columns: {missing}")
        if len(grouped) != len(set(grouped)):
            raise ValueError("A column can belong to only one multi-component data set.")
        clashing = [
            name for name in components if name in self._data.columns and name not in grouped
        ]
        if clashing:
            raise ValueError(f"Data set names clash with ungrouped columns: {clashing}")

        logger.info("data sets have been validated")
        return True

    def _build_data_sets(
        self, data_set_type: DataSetType, components: dict[str, list[str]]
    ) -> list[DataSet]:
        """Split the validated frame into data sets, keeping the column order."""

        group_of = {column: name for name, columns in components.items() for column in columns}
        data_sets: list[DataSet] = []
        emitted: set[str] = set()

        for column in self._data.columns:
            name = group_of.get(column, column)
            if name in emitted:
                continue
            emitted.add(name)

            columns = components.get(name, [column])
            data_sets.append(
                DataSet(
                    DataSetInfo(str(name), data_set_type, len(columns)),
                    self._data[columns].to_numpy().reshape(-1),
                )
            )

        logger.info(f"Built {len(data_sets)} {data_set_type.value} data sets")
        return data_sets


def data_array_attributes(writer: WriterInterface, data_set: DataSet) -> dict[str, str]:
    """
    Attributes of the DataArray element holding ``data_set``.

    Must be called right before ``writer.write_data`` for the same data set, since appended
    writers report the offset the next registered array will get.
    """
    attributes = {
        "type": data_type_string(data_set.values.dtype),
        "Name": data_set.info.name,
        "NumberOfComponents": str(data_set.info.number_of_components),
    }
    writer.add_data_attributes(attributes)
    return attributes
