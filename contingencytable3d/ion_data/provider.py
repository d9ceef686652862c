"""The interface through which the analysis consumes an ion dataset."""

from abc import ABC
from abc import abstractmethod
from typing import Iterator
from typing import NamedTuple

from numpy import array
from numpy import float64
from numpy.typing import NDArray

UNRANGED_ION_TYPE = 255


class Extents(NamedTuple):
    """Axis-aligned bounding box of the reconstructed volume."""
    min: tuple[float, float, float]
    max: tuple[float, float, float]

    def diff(self) -> NDArray[float64]:
        return array(self.max, dtype=float64) - array(self.min, dtype=float64)


class IonTypeEntry(NamedTuple):
    """One ranged ion type: its raw code, name, ion count and elemental formula."""
    code: int
    name: str
    count: int
    formula: dict[str, int]


class IonDataChunk(NamedTuple):
    """Column-oriented slice of the ion records.

    ``positions`` has shape (n, 3) and ``ion_types`` has shape (n,), aligned by index.
    """
    positions: NDArray
    ion_types: NDArray


class IonDataProvider(ABC):
    """Source of extents, ion type catalog, and chunked ion records."""

    @property
    @abstractmethod
    def extents(self) -> Extents:
        pass

    @property
    @abstractmethod
    def ion_count(self) -> int:
        """Total number of events, ranged or not."""

    @abstractmethod
    def get_ion_type_counts(self) -> dict[int, IonTypeEntry]:
        """The ion type catalog, ordered by raw type code."""

    @abstractmethod
    def iterate_chunks(self) -> Iterator[IonDataChunk]:
        """Starts a fresh pass over all records."""

    def total_ranged_ions(self) -> int:
        return sum(entry.count for entry in self.get_ion_type_counts().values())
