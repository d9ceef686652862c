"""The contingency table analysis of one ion dataset, from extents to per-pair statistics."""
from logging import DEBUG

from contingencytable3d.ion_data.provider import IonDataProvider
from contingencytable3d.analysis.options import AnalysisOptions
from contingencytable3d.analysis.type_resolver import resolve_types
from contingencytable3d.analysis.grid_geometry import compute_grid_geometry
from contingencytable3d.analysis.block_accumulator import accumulate_blocks
from contingencytable3d.analysis.block_accumulator import BlockCounts
from contingencytable3d.analysis.contingency_table import build_pair_matrix
from contingencytable3d.analysis.contingency_table import element_pairs
from contingencytable3d.analysis.statistics import analyze_contingency
from contingencytable3d.analysis.results import ContingencyAnalysisResult
from contingencytable3d.analysis.results import IonSummary
from contingencytable3d.analysis.results import PairResult
from contingencytable3d.analysis.errors import DegenerateStatisticsError
from contingencytable3d.standalone_utilities.performance_timer import PerformanceTimer
from contingencytable3d.standalone_utilities.log_formats import colorized_logger

logger = colorized_logger(__name__)


class ContingencyTable3DAnalysis:
    """
    Partitions the volume into columns, closes blocks of ``block_size`` atoms,
    and cross-tabulates the binned block counts of every pair of element types.
    """

    def __init__(self, options: AnalysisOptions):
        self.options = options
        self.timer = PerformanceTimer()

    def run(self, ion_data: IonDataProvider) -> ContingencyAnalysisResult:
        """The main exposed entrypoint into the calculation.

        Raises ``InvalidConfigurationError`` before touching the data if the
        options are inconsistent.
        """
        self.options.validate()
        logger.info(
            'Started contingency table analysis, block size %s, bin size %s, %s.',
            self.options.block_size,
            self.options.bin_size,
            'decomposing ions' if self.options.decomposing else 'ions as units',
        )
        self.timer.record_timepoint('Started')
        catalog = ion_data.get_ion_type_counts()
        summary = IonSummary(
            ion_types=tuple(catalog[code] for code in sorted(catalog)),
            total_ranged_ions=ion_data.total_ranged_ions(),
            total_ions=ion_data.ion_count,
        )
        resolution = resolve_types(catalog, self.options.decomposing)
        self.timer.record_timepoint('Resolved ion types')

        extents = ion_data.extents
        geometry = compute_grid_geometry(extents, self.options.block_size, summary.total_ranged_ions)
        logger.info(
            'Spacing %.4f, grid %s x %s (%s columns).',
            geometry.spacing,
            geometry.num_grid_x,
            geometry.num_grid_y,
            geometry.grid_elements,
        )
        self.timer.record_timepoint('Computed grid geometry')

        blocks = accumulate_blocks(
            ion_data.iterate_chunks(),
            geometry,
            extents.min,
            self.options.block_size,
            resolution,
        )
        self.timer.record_timepoint('Accumulated blocks')

        pairs = tuple(self._analyze_pairs(blocks, resolution.element_names))
        self.timer.record_timepoint('Analyzed pairs')
        if logger.isEnabledFor(DEBUG):
            logger.debug('Timing:\n%s', self.timer.report(as_string=True))
        logger.info('Completed contingency table analysis of %s pairs.', len(pairs))
        return ContingencyAnalysisResult(
            options=self.options,
            extents=extents,
            ion_summary=summary,
            element_names=resolution.element_names,
            geometry=geometry,
            rows=self.options.rows,
            total_blocks=blocks.total_blocks,
            pairs=pairs,
        )

    def _analyze_pairs(self, blocks: BlockCounts, names: tuple[str, ...]):
        rows = self.options.rows
        for type_a, type_b in element_pairs(len(names)):
            experimental = build_pair_matrix(blocks, type_a, type_b, self.options.bin_size, rows)
            try:
                statistics = analyze_contingency(experimental)
                logger.info(
                    '%s/%s: chi-square %.3f, df %s (reduced %s).',
                    names[type_a],
                    names[type_b],
                    statistics.chi_square,
                    statistics.degrees_of_freedom,
                    statistics.reduced_degrees_of_freedom,
                )
            except DegenerateStatisticsError as error:
                logger.warning('%s/%s skipped: %s', names[type_a], names[type_b], error)
                statistics = None
            yield PairResult(type_a, type_b, names[type_a], names[type_b], experimental, statistics)
