"""Tabular views of analysis results."""
import numpy as np
from numpy.typing import NDArray
from pandas import DataFrame

from contingencytable3d.ion_data.provider import Extents
from contingencytable3d.ion_data.formula import format_formula
from contingencytable3d.analysis.results import IonSummary

ROUNDING_LENGTH = 3


def range_count_table(summary: IonSummary) -> DataFrame:
    """One row per range, numbered from 1."""
    return DataFrame([
        {
            'Number': index + 1,
            'Name': entry.name,
            'Formula': format_formula(entry.formula),
            'Count': entry.count,
        }
        for index, entry in enumerate(summary.ion_types)
    ], columns=['Number', 'Name', 'Formula', 'Count'])


def limits_table(extents: Extents) -> DataFrame:
    return DataFrame([
        {
            'Dimension': dimension,
            'Min': f'{extents.min[axis]:.{ROUNDING_LENGTH}f}',
            'Max': f'{extents.max[axis]:.{ROUNDING_LENGTH}f}',
        }
        for axis, dimension in enumerate(('X', 'Y', 'Z'))
    ], columns=['Dimension', 'Min', 'Max'])


def matrix_frame(
    matrix: NDArray,
    labels: list[str],
    row_totals: NDArray | None = None,
    column_totals: NDArray | None = None,
    total_observations: int | None = None,
) -> DataFrame:
    """Bins of the first element index the rows, bins of the second index the columns."""
    frame = DataFrame(np.asarray(matrix), index=list(labels), columns=list(labels))
    if row_totals is not None:
        frame['total'] = np.asarray(row_totals)
    if column_totals is not None:
        totals = list(np.asarray(column_totals))
        if row_totals is not None:
            totals.append(total_observations)
        frame.loc['total'] = totals
    return frame
