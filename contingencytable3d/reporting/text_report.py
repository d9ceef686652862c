"""The tab-separated plain-text report of a contingency table analysis."""
from io import StringIO

from numpy.typing import NDArray

from contingencytable3d.analysis.results import ContingencyAnalysisResult
from contingencytable3d.analysis.results import PairResult
from contingencytable3d.reporting.tables import ROUNDING_LENGTH


def render_text_report(result: ContingencyAnalysisResult) -> str:
    out = StringIO()
    _write_ion_info(out, result)
    _write_limits(out, result)
    _write_geometry(out, result)
    labels = result.bin_labels()
    for pair in result.pairs:
        _write_pair(out, pair, labels)
    return out.getvalue()


def _write_ion_info(out, result):
    summary = result.ion_summary
    for index, entry in enumerate(summary.ion_types):
        out.write(f'range {index + 1}: {entry.name} \t=\t{entry.count}\n')
    out.write(f'Total Ions \t=\t{summary.total_ions}\n\n')
    out.write(f'Ions in ranges = {summary.total_ranged_ions}, total events = {summary.total_ions}\n\n')


def _write_limits(out, result):
    extents = result.extents
    for axis, dimension in enumerate(('X', 'Y', 'Z')):
        lower = f'{extents.min[axis]:.{ROUNDING_LENGTH}f}'
        upper = f'{extents.max[axis]:.{ROUNDING_LENGTH}f}'
        out.write(f'{dimension} limits: {lower} to {upper}\n')
    out.write('\n')


def _write_geometry(out, result):
    geometry = result.geometry
    options = result.options
    out.write(f'Block size = {options.block_size}, bin size = {options.bin_size}, '
              f'decomposing = {options.decomposing}\n')
    out.write(f'Spacing = {geometry.spacing:.{ROUNDING_LENGTH}f}, grid = '
              f'{geometry.num_grid_x} x {geometry.num_grid_y}\n')
    out.write(f'Total blocks = {result.total_blocks}, rows = {result.rows}\n\n')


def _write_pair(out, pair: PairResult, labels: list[str]):
    statistics = pair.statistics
    if statistics is None:
        out.write(_format_table(pair, labels, pair.experimental, 'Experimental Observations', 'd'))
        out.write(f'{pair.name_a}/{pair.name_b}: no observations, statistics skipped.\n\n')
        return
    out.write(_format_table(
        pair, labels, pair.experimental, 'Experimental Observations', 'd',
        statistics.row_totals, statistics.column_totals, statistics.total_observations,
    ))
    out.write(_format_table(pair, labels, statistics.expected, 'Estimated Values', '.1f'))
    out.write(_format_table(pair, labels, statistics.difference, 'Difference', '.1f'))
    out.write(_format_table(pair, labels, statistics.trend, 'Trend', 's'))
    p_value = 'undefined' if statistics.p_value is None else f'{statistics.p_value:.4g}'
    out.write(
        f'Chi-square = {statistics.chi_square:.{ROUNDING_LENGTH}f}, '
        f'degrees of freedom = {statistics.degrees_of_freedom}, '
        f'reduced degrees of freedom = {statistics.reduced_degrees_of_freedom}, '
        f'p = {p_value}\n\n'
    )


def _format_table(
    pair: PairResult,
    labels: list[str],
    data: NDArray,
    title: str,
    cell_format: str,
    row_totals: NDArray | None = None,
    column_totals: NDArray | None = None,
    total_observations: int | None = None,
) -> str:
    lines = [title, f'\t{pair.name_b}']
    header = f'{pair.name_a}\t' + ''.join(f'{label}\t' for label in labels)
    if row_totals is not None:
        header += 'total'
    lines.append(header)
    for row, label in enumerate(labels):
        cells = ''.join(f'{_format_cell(value, cell_format)}\t' for value in data[row])
        if row_totals is not None:
            cells += str(int(row_totals[row]))
        lines.append(f'{label}\t{cells}')
    if row_totals is not None and column_totals is not None:
        totals = ''.join(f'{int(value)}\t' for value in column_totals)
        lines.append(f'total\t{totals}{total_observations}')
    return '\n'.join(lines) + '\n\n'


def _format_cell(value, cell_format: str) -> str:
    if cell_format == 's':
        return str(value)
    if cell_format == 'd':
        return str(int(value))
    return format(float(value), cell_format)
