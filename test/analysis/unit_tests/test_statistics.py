from math import isfinite

import numpy as np
import pytest

from contingencytable3d.analysis.statistics import analyze_contingency
from contingencytable3d.analysis.statistics import expected_values
from contingencytable3d.analysis.statistics import TrendSign
from contingencytable3d.analysis.errors import DegenerateStatisticsError

PLUS = TrendSign.POSITIVE
MINUS = TrendSign.NEGATIVE
ZERO = TrendSign.NEUTRAL


def test_diagonal_association():
    statistics = analyze_contingency(np.array([[10, 0], [0, 10]]))
    assert statistics.row_totals.tolist() == [10, 10]
    assert statistics.column_totals.tolist() == [10, 10]
    assert statistics.total_observations == 20
    assert np.allclose(statistics.expected, 5.0)
    assert statistics.difference.tolist() == [[5.0, -5.0], [-5.0, 5.0]]
    assert statistics.trend.tolist() == [[PLUS, MINUS], [MINUS, PLUS]]
    assert statistics.chi_square == pytest.approx(20.0)
    assert statistics.degrees_of_freedom == 1
    assert statistics.reduced_degrees_of_freedom == 1
    assert 0 < statistics.p_value < 0.001


def test_independent_table_has_no_deviation():
    statistics = analyze_contingency(np.array([[4, 6], [2, 3]]))
    assert statistics.expected.tolist() == [[4.0, 6.0], [2.0, 3.0]]
    assert statistics.chi_square == pytest.approx(0.0)
    assert statistics.trend.tolist() == [[ZERO, ZERO], [ZERO, ZERO]]
    assert statistics.p_value == pytest.approx(1.0)


def test_sparse_table_reduces_degrees_of_freedom():
    experimental = np.array([[5, 0, 0], [0, 0, 0], [0, 0, 5]])
    statistics = analyze_contingency(experimental)
    assert statistics.non_zero_rows == 2
    assert statistics.non_zero_columns == 2
    assert statistics.degrees_of_freedom == 4
    assert statistics.reduced_degrees_of_freedom == 1
    assert statistics.chi_square == pytest.approx(10.0)
    assert statistics.trend[1, 1] is ZERO
    assert statistics.trend[0, 1] is ZERO


def test_cells_with_tiny_expectation_are_excluded():
    statistics = analyze_contingency(np.array([[1, 0], [0, 200]]))
    assert statistics.expected[0, 0] < 0.01
    assert statistics.trend[0, 0] is PLUS
    off_diagonal = 200 / 201
    corner = 40000 / 201
    expected_chi_square = 2 * off_diagonal + (200 - corner) ** 2 / corner
    assert statistics.chi_square == pytest.approx(expected_chi_square)
    assert statistics.chi_square < 3


def test_single_row_has_no_reduced_degrees_of_freedom():
    statistics = analyze_contingency(np.array([[2000, 1], [0, 0]]))
    assert statistics.expected[1, 0] == 0.0
    assert statistics.non_zero_rows == 1
    assert statistics.reduced_degrees_of_freedom == 0
    assert statistics.p_value is None
    assert isfinite(statistics.chi_square)
    assert statistics.chi_square >= 0


def test_marginals_and_expected_preserve_totals():
    rng = np.random.default_rng(7)
    experimental = rng.integers(0, 20, size=(6, 6))
    statistics = analyze_contingency(experimental)
    total = experimental.sum()
    assert statistics.row_totals.sum() == statistics.column_totals.sum() == total
    assert statistics.total_observations == total
    assert statistics.expected.sum() == pytest.approx(total)
    assert np.allclose(statistics.expected.sum(axis=1), statistics.row_totals)
    assert statistics.chi_square >= 0
    assert statistics.degrees_of_freedom >= statistics.reduced_degrees_of_freedom >= 0


def test_trend_signs_match_difference_exactly():
    rng = np.random.default_rng(11)
    experimental = rng.integers(0, 5, size=(4, 4))
    statistics = analyze_contingency(experimental)
    positive = experimental > statistics.expected
    negative = experimental < statistics.expected
    assert ((statistics.trend == PLUS) == positive).all()
    assert ((statistics.trend == MINUS) == negative).all()
    assert ((statistics.trend == ZERO) == ~(positive | negative)).all()


def test_no_observations():
    with pytest.raises(DegenerateStatisticsError):
        analyze_contingency(np.zeros((3, 3), dtype=np.int64))
    with pytest.raises(DegenerateStatisticsError):
        expected_values(np.zeros(2), np.zeros(2), 0)


def test_trend_symbols():
    assert [str(sign) for sign in (MINUS, PLUS, ZERO)] == ['-', '+', '0']
