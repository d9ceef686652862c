"""An ion data provider backed by numpy arrays held in memory."""

from typing import Iterator
from typing import Sequence

import numpy as np
from numpy.typing import ArrayLike

from contingencytable3d.ion_data.provider import IonDataProvider
from contingencytable3d.ion_data.provider import IonDataChunk
from contingencytable3d.ion_data.provider import IonTypeEntry
from contingencytable3d.ion_data.provider import Extents
from contingencytable3d.ion_data.provider import UNRANGED_ION_TYPE
from contingencytable3d.standalone_utilities.log_formats import colorized_logger

logger = colorized_logger(__name__)

DEFAULT_CHUNK_SIZE = 1_000_000


class InMemoryIonData(IonDataProvider):
    """Serves positions and type codes in chunks of at most ``chunk_size`` records.

    Ion type counts are tallied from the data itself. Records with the
    unranged sentinel code are kept in the stream but are not counted.
    """

    def __init__(self,
        positions: ArrayLike,
        ion_types: ArrayLike,
        names: Sequence[str],
        formulas: Sequence[dict[str, int]] | None = None,
        extents: Extents | None = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ):
        self.positions = np.asarray(positions, dtype=np.float64).reshape(-1, 3)
        self.ion_types = np.asarray(ion_types, dtype=np.uint8).reshape(-1)
        if self.positions.shape[0] != self.ion_types.shape[0]:
            raise ValueError(
                f'Positions ({self.positions.shape[0]}) and ion types '
                f'({self.ion_types.shape[0]}) are not aligned.'
            )
        if chunk_size < 1:
            raise ValueError(f'Chunk size must be positive, got {chunk_size}.')
        self.chunk_size = chunk_size
        self.names = list(names)
        if formulas is None:
            formulas = [{} for _ in self.names]
        if len(formulas) != len(self.names):
            raise ValueError('Supply exactly one formula per ion type name.')
        self.formulas = [dict(formula) for formula in formulas]
        ranged = self.ion_types[self.ion_types != UNRANGED_ION_TYPE]
        if ranged.size > 0 and int(ranged.max()) >= len(self.names):
            raise ValueError(f'Ion type code {int(ranged.max())} has no name.')
        self._counts = np.bincount(ranged, minlength=len(self.names))
        self._extents = extents if extents is not None else self._compute_extents()

    def _compute_extents(self) -> Extents:
        if self.positions.shape[0] == 0:
            return Extents((0.0, 0.0, 0.0), (0.0, 0.0, 0.0))
        lower = tuple(float(v) for v in self.positions.min(axis=0))
        upper = tuple(float(v) for v in self.positions.max(axis=0))
        return Extents(lower, upper)

    @property
    def extents(self) -> Extents:
        return self._extents

    @property
    def ion_count(self) -> int:
        return int(self.ion_types.shape[0])

    def get_ion_type_counts(self) -> dict[int, IonTypeEntry]:
        return {
            code: IonTypeEntry(code, name, int(self._counts[code]), self.formulas[code])
            for code, name in enumerate(self.names)
        }

    def iterate_chunks(self) -> Iterator[IonDataChunk]:
        total = self.ion_count
        for start in range(0, total, self.chunk_size):
            stop = min(start + self.chunk_size, total)
            logger.debug('Serving records %s to %s of %s.', start, stop, total)
            yield IonDataChunk(self.positions[start:stop], self.ion_types[start:stop])
