"""
Independence statistics of one contingency matrix: expected values, the
chi-square statistic, degrees of freedom, and the trend of each cell.
"""
from dataclasses import dataclass
from enum import Enum

import numpy as np
from numpy.typing import NDArray
from scipy.stats import chi2  # type: ignore

from contingencytable3d.analysis.errors import DegenerateStatisticsError

MINIMUM_EXPECTED_VALUE = 0.01


class TrendSign(Enum):
    NEGATIVE = '-'
    POSITIVE = '+'
    NEUTRAL = '0'

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class ContingencyStatistics:
    row_totals: NDArray[np.int64]
    column_totals: NDArray[np.int64]
    total_observations: int
    expected: NDArray[np.float64]
    difference: NDArray[np.float64]
    trend: NDArray[np.object_]
    non_zero_rows: int
    non_zero_columns: int
    chi_square: float
    degrees_of_freedom: int
    reduced_degrees_of_freedom: int
    p_value: float | None


def marginal_totals(experimental: NDArray) -> tuple[NDArray[np.int64], NDArray[np.int64], int]:
    experimental = np.asarray(experimental, dtype=np.int64)
    return experimental.sum(axis=1), experimental.sum(axis=0), int(experimental.sum())


def expected_values(
    row_totals: NDArray[np.int64],
    column_totals: NDArray[np.int64],
    total_observations: int,
) -> NDArray[np.float64]:
    if total_observations <= 0:
        raise DegenerateStatisticsError('No observations, so expected values are undefined.')
    return np.outer(row_totals, column_totals).astype(np.float64) / total_observations


def chi_square_statistic(experimental: NDArray, expected: NDArray[np.float64]) -> float:
    """Sums over cells whose expected value exceeds ``MINIMUM_EXPECTED_VALUE`` only."""
    included = expected > MINIMUM_EXPECTED_VALUE
    deviations = np.asarray(experimental, dtype=np.float64)[included] - expected[included]
    return float(np.sum(deviations * deviations / expected[included]))


def trend_signs(experimental: NDArray, expected: NDArray[np.float64]) -> NDArray[np.object_]:
    """Exact comparison of observed against expected, cell by cell."""
    observed = np.asarray(experimental, dtype=np.float64)
    signs = np.full(observed.shape, TrendSign.NEUTRAL, dtype=object)
    signs[observed > expected] = TrendSign.POSITIVE
    signs[observed < expected] = TrendSign.NEGATIVE
    return signs


def analyze_contingency(experimental: NDArray) -> ContingencyStatistics:
    rows = experimental.shape[0]
    row_totals, column_totals, total_observations = marginal_totals(experimental)
    expected = expected_values(row_totals, column_totals, total_observations)
    non_zero_rows = int(np.count_nonzero(row_totals > 0))
    non_zero_columns = int(np.count_nonzero(column_totals > 0))
    chi_square = chi_square_statistic(experimental, expected)
    reduced = max(non_zero_columns - 1, 0) * max(non_zero_rows - 1, 0)
    return ContingencyStatistics(
        row_totals=row_totals,
        column_totals=column_totals,
        total_observations=total_observations,
        expected=expected,
        difference=np.asarray(experimental, dtype=np.float64) - expected,
        trend=trend_signs(experimental, expected),
        non_zero_rows=non_zero_rows,
        non_zero_columns=non_zero_columns,
        chi_square=chi_square,
        degrees_of_freedom=(rows - 1) ** 2,
        reduced_degrees_of_freedom=reduced,
        p_value=float(chi2.sf(chi_square, reduced)) if reduced > 0 else None,
    )
