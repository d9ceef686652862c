"""User-editable options of the contingency table analysis."""
from dataclasses import dataclass

from contingencytable3d.analysis.errors import InvalidConfigurationError
from contingencytable3d.standalone_utilities.log_formats import colorized_logger

logger = colorized_logger(__name__)

MAXIMUM_INTENDED_BLOCK_SIZE = 1000


@dataclass(frozen=True)
class AnalysisOptions:
    """
    :param block_size: Number of atoms per spatial block.
    :param bin_size: Width, in atoms, of one contingency table bin. No greater than block size.
    :param decomposing: Whether compound ions count as their elemental constituents.
    """
    block_size: int
    bin_size: int
    decomposing: bool = True

    def validate(self) -> None:
        if self.bin_size > self.block_size:
            raise InvalidConfigurationError('Block size must be greater than or equal to bin size.')
        if self.bin_size < 1:
            raise InvalidConfigurationError('Bin size must be at least 1.')
        if self.block_size > MAXIMUM_INTENDED_BLOCK_SIZE:
            logger.warning(
                'Block size %s is outside the intended range 0-%s.',
                self.block_size,
                MAXIMUM_INTENDED_BLOCK_SIZE,
            )

    @property
    def rows(self) -> int:
        rows, remainder = divmod(self.block_size + 1, self.bin_size)
        if remainder > 0:
            rows += 1
        return rows
