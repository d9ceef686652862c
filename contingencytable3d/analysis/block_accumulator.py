"""Streaming accumulation of per-column element counts into closed blocks."""
from typing import Iterable
from typing import NamedTuple

import numpy as np
from numpy.typing import NDArray

from contingencytable3d.ion_data.provider import IonDataChunk
from contingencytable3d.ion_data.provider import UNRANGED_ION_TYPE
from contingencytable3d.analysis.grid_geometry import GridGeometry
from contingencytable3d.analysis.type_resolver import TypeResolution
from contingencytable3d.analysis.errors import PositionOutOfExtentsError
from contingencytable3d.standalone_utilities.log_formats import colorized_logger

logger = colorized_logger(__name__)


class BlockCounts(NamedTuple):
    """Element counts of every closed block, one row per block in closing order."""
    counts: NDArray[np.int64]

    @property
    def total_blocks(self) -> int:
        return int(self.counts.shape[0])

    def pair(self, element_a: int, element_b: int) -> tuple[NDArray[np.int64], NDArray[np.int64]]:
        return self.counts[:, element_a], self.counts[:, element_b]


class BlockAccumulator:
    """
    Keeps a running total and running per-element counts for each grid column.
    Whenever a column's total reaches the block size, a snapshot of its element
    counts is stored as the next block (global ordering across all columns) and
    the column starts over from zero.

    Each atom of a decomposed ion counts toward the total. If a block closes
    before all atoms of an ion have been counted, the remaining atoms of that
    ion are dropped rather than carried into the next block.
    """

    def __init__(self,
        geometry: GridGeometry,
        origin: tuple[float, float, float],
        block_size: int,
        resolution: TypeResolution,
    ):
        self.geometry = geometry
        self.origin_x = float(origin[0])
        self.origin_y = float(origin[1])
        self.block_size = block_size
        self.resolution = resolution
        shape = (geometry.num_grid_x, geometry.num_grid_y)
        self.column_totals = np.zeros(shape, dtype=np.int64)
        self.column_counts = np.zeros(shape + (resolution.number_elements,), dtype=np.int64)
        self.blocks: list[NDArray[np.int64]] = []
        self.ions_consumed = 0

    def column_coordinates(self, positions: NDArray) -> tuple[NDArray[np.int64], NDArray[np.int64]]:
        spacing = self.geometry.spacing
        grid_x = np.floor((positions[:, 0] - self.origin_x) / spacing).astype(np.int64)
        grid_y = np.floor((positions[:, 1] - self.origin_y) / spacing).astype(np.int64)
        outside = (grid_x < 0) | (grid_x >= self.geometry.num_grid_x) | \
            (grid_y < 0) | (grid_y >= self.geometry.num_grid_y)
        if np.any(outside):
            index = int(np.argmax(outside))
            raise PositionOutOfExtentsError(
                f'Ion at {tuple(positions[index])} falls outside the '
                f'{self.geometry.num_grid_x} x {self.geometry.num_grid_y} grid.'
            )
        return grid_x, grid_y

    def consume(self, chunk: IonDataChunk) -> None:
        ranged = chunk.ion_types != UNRANGED_ION_TYPE
        positions = np.asarray(chunk.positions)[ranged]
        codes = np.asarray(chunk.ion_types)[ranged]
        grid_x, grid_y = self.column_coordinates(positions)
        constituents = self.resolution.constituents
        totals = self.column_totals
        block_size = self.block_size
        for x, y, code in zip(grid_x.tolist(), grid_y.tolist(), codes.tolist()):
            counts = self.column_counts[x, y]
            for element in constituents[code]:
                counts[element] += 1
                totals[x, y] += 1
                if totals[x, y] >= block_size:
                    self.blocks.append(counts.copy())
                    counts[:] = 0
                    totals[x, y] = 0
                    break
        self.ions_consumed += int(codes.shape[0])

    def result(self) -> BlockCounts:
        if len(self.blocks) == 0:
            return BlockCounts(np.zeros((0, self.resolution.number_elements), dtype=np.int64))
        return BlockCounts(np.vstack(self.blocks))


def accumulate_blocks(
    chunks: Iterable[IonDataChunk],
    geometry: GridGeometry,
    origin: tuple[float, float, float],
    block_size: int,
    resolution: TypeResolution,
) -> BlockCounts:
    """One pass over the records, closing blocks for all elements at once."""
    accumulator = BlockAccumulator(geometry, origin, block_size, resolution)
    for index, chunk in enumerate(chunks):
        accumulator.consume(chunk)
        logger.debug('Chunk %s consumed, %s blocks closed so far.', index, len(accumulator.blocks))
    blocks = accumulator.result()
    logger.info(
        'Closed %s blocks from %s ranged ions.',
        blocks.total_blocks,
        accumulator.ions_consumed,
    )
    return blocks
