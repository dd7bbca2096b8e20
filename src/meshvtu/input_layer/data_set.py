"""Point and cell data sets attached to an unstructured grid."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import numpy as np

from meshvtu.encoder_layer.typed_array import as_typed_array


class DataSetType(Enum):
    POINT_DATA = "PointData"
    CELL_DATA = "CellData"


@dataclass(frozen=True)
class DataSetInfo:
    name: str
    data_set_type: DataSetType
    number_of_components: int = 1


@dataclass
class DataSet:
    """One named field. ``values`` holds the components interleaved per point or cell."""

    info: DataSetInfo
    values: np.ndarray

    def __post_init__(self) -> None:
        self.values = as_typed_array(self.values)
        if self.info.number_of_components < 1:
            raise ValueError(
                f"Data set {self.info.name} needs at least one component, "
                f"got {self.info.number_of_components}"
            )
        if self.values.size % self.info.number_of_components:
            raise ValueError(
                f"Data set {self.info.name} has {self.values.size} values, "
                f"not a multiple of {self.info.number_of_components} components"
            )

    @property
    def number_of_tuples(self) -> int:
        return self.values.size // self.info.number_of_components
