"""Input layer interface contract"""

from typing import Any, Protocol, runtime_checkable

from meshvtu.input_layer.data_set import DataSet, DataSetType


@runtime_checkable
class InputInterface(Protocol):
    """Interface for data set handlers."""

    def input_data(
        self,
        input_source: Any,
        data_set_type: DataSetType,
        components: dict[str, list[str]] | None = None,
    ) -> list[DataSet]:
        """Turn tabular field data into data sets ready to be written."""
        ...
