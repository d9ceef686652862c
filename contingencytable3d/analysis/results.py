"""Plain structured outputs of one analysis run, for any report renderer."""
from dataclasses import dataclass
from typing import NamedTuple

import numpy as np
from numpy.typing import NDArray

from contingencytable3d.ion_data.provider import Extents
from contingencytable3d.ion_data.provider import IonTypeEntry
from contingencytable3d.analysis.options import AnalysisOptions
from contingencytable3d.analysis.grid_geometry import GridGeometry
from contingencytable3d.analysis.statistics import ContingencyStatistics
from contingencytable3d.analysis.contingency_table import bin_labels


class IonSummary(NamedTuple):
    ion_types: tuple[IonTypeEntry, ...]
    total_ranged_ions: int
    total_ions: int


@dataclass(frozen=True)
class PairResult:
    """Experimental matrix of one element pair, and its statistics if defined."""
    type_a: int
    type_b: int
    name_a: str
    name_b: str
    experimental: NDArray[np.int64]
    statistics: ContingencyStatistics | None

    @property
    def is_defined(self) -> bool:
        return self.statistics is not None


@dataclass(frozen=True)
class ContingencyAnalysisResult:
    options: AnalysisOptions
    extents: Extents
    ion_summary: IonSummary
    element_names: tuple[str, ...]
    geometry: GridGeometry
    rows: int
    total_blocks: int
    pairs: tuple[PairResult, ...]

    def bin_labels(self) -> list[str]:
        return bin_labels(self.rows, self.options.bin_size, self.options.block_size)

    def get_pair(self, name_a: str, name_b: str) -> PairResult:
        for pair in self.pairs:
            if (pair.name_a, pair.name_b) == (name_a, name_b):
                return pair
        raise KeyError(f'No contingency table for pair ({name_a}, {name_b}).')
