"""Block spacing and 2D column grid dimensions."""
from math import floor
from typing import NamedTuple

from contingencytable3d.ion_data.provider import Extents
from contingencytable3d.analysis.errors import DegenerateGeometryError


class GridGeometry(NamedTuple):
    spacing: float
    num_grid_x: int
    num_grid_y: int

    @property
    def grid_elements(self) -> int:
        return self.num_grid_x * self.num_grid_y


def compute_grid_geometry(extents: Extents, block_size: int, total_ranged_ions: int) -> GridGeometry:
    """The spacing is the edge of a cube whose volume is the volume per block.

    Only X and Y are partitioned; each grid cell is a column spanning all of Z.
    """
    if total_ranged_ions <= 0:
        raise DegenerateGeometryError('No ranged ions, so block spacing is undefined.')
    diff = extents.diff()
    volume = float(diff[0] * diff[1] * diff[2])
    if volume <= 0:
        raise DegenerateGeometryError(f'Extents enclose no volume: {extents}')
    spacing = (volume * block_size / total_ranged_ions) ** (1.0 / 3.0)
    if spacing <= 0:
        raise DegenerateGeometryError(f'Non-positive block spacing {spacing} for block size {block_size}.')
    return GridGeometry(
        spacing=spacing,
        num_grid_x=floor(diff[0] / spacing) + 1,
        num_grid_y=floor(diff[1] / spacing) + 1,
    )
