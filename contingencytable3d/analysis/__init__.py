"""
The contingency table analysis is made of five parts, each usable on its own:

1. The **type resolver** maps raw ion type codes to dense element indices, expanding
   compound ions into their atoms when decomposing.
2. The **grid geometry** derives the block spacing and the 2D column grid from the
   extents, the block size and the number of ranged ions.
3. The **block accumulator** streams ion records once, closing a block for a column
   whenever the column collects ``block_size`` atoms.
4. The **contingency table** builder bins the block counts of each element pair.
5. The **statistics** give expected values under independence, chi-square, and trends.

``ContingencyTable3DAnalysis`` runs them in order over an ion data provider.
"""
from contingencytable3d.analysis.options import AnalysisOptions
from contingencytable3d.analysis.core import ContingencyTable3DAnalysis
from contingencytable3d.analysis.results import ContingencyAnalysisResult
from contingencytable3d.analysis.results import PairResult
from contingencytable3d.analysis.errors import ContingencyTableError
from contingencytable3d.analysis.errors import InvalidConfigurationError
from contingencytable3d.analysis.errors import DegenerateGeometryError
from contingencytable3d.analysis.errors import DegenerateStatisticsError
from contingencytable3d.analysis.errors import PositionOutOfExtentsError

__all__ = [
    'AnalysisOptions',
    'ContingencyTable3DAnalysis',
    'ContingencyAnalysisResult',
    'PairResult',
    'ContingencyTableError',
    'InvalidConfigurationError',
    'DegenerateGeometryError',
    'DegenerateStatisticsError',
    'PositionOutOfExtentsError',
]
