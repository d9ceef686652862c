"""Binned co-occurrence matrices of element counts over blocks."""
from itertools import combinations
from typing import Iterator

import numpy as np
from numpy.typing import NDArray
from scipy.sparse import coo_matrix  # type: ignore

from contingencytable3d.analysis.block_accumulator import BlockCounts


def bin_labels(rows: int, bin_size: int, block_size: int) -> list[str]:
    """Inclusive count range of each bin, e.g. ``0-24``. The last bin stops at the block size."""
    return [
        f'{k * bin_size}-{min((k + 1) * bin_size - 1, block_size)}'
        for k in range(rows)
    ]


def element_pairs(number_elements: int) -> Iterator[tuple[int, int]]:
    """Unordered pairs ``(a, b)`` with ``a < b``, in lexicographic order."""
    return combinations(range(number_elements), 2)


def build_contingency_matrix(
    counts_a: NDArray[np.int64],
    counts_b: NDArray[np.int64],
    bin_size: int,
    rows: int,
) -> NDArray[np.int64]:
    """Cell ``[i, j]`` counts the blocks whose first element falls in bin ``i``
    and whose second element falls in bin ``j``.
    """
    bins_a = np.asarray(counts_a, dtype=np.int64) // bin_size
    bins_b = np.asarray(counts_b, dtype=np.int64) // bin_size
    if bins_a.size > 0 and (bins_a.max() >= rows or bins_b.max() >= rows):
        raise ValueError(f'Block count exceeds the {rows} bins of width {bin_size}.')
    ones = np.ones(bins_a.shape[0], dtype=np.int64)
    matrix = coo_matrix((ones, (bins_a, bins_b)), shape=(rows, rows), dtype=np.int64)
    return matrix.toarray()


def build_pair_matrix(
    blocks: BlockCounts,
    element_a: int,
    element_b: int,
    bin_size: int,
    rows: int,
) -> NDArray[np.int64]:
    counts_a, counts_b = blocks.pair(element_a, element_b)
    return build_contingency_matrix(counts_a, counts_b, bin_size, rows)
