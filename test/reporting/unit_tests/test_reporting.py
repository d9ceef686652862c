import numpy as np

from contingencytable3d.ion_data.provider import Extents
from contingencytable3d.ion_data.in_memory import InMemoryIonData
from contingencytable3d.analysis.options import AnalysisOptions
from contingencytable3d.analysis.core import ContingencyTable3DAnalysis
from contingencytable3d.reporting.tables import range_count_table
from contingencytable3d.reporting.tables import limits_table
from contingencytable3d.reporting.tables import matrix_frame
from contingencytable3d.reporting.text_report import render_text_report

EXTENTS = Extents((0.0, 0.0, 0.0), (10.0, 10.0, 10.0))


def get_result(block_size=40, bin_size=10):
    rng = np.random.default_rng(1)
    ion_data = InMemoryIonData(
        rng.uniform(0.0, 10.0, size=(800, 3)),
        rng.integers(0, 3, size=800),
        ['Fe', 'Ni', 'CrO'],
        formulas=[{'Fe': 1}, {'Ni': 1}, {'Cr': 1, 'O': 1}],
        extents=EXTENTS,
    )
    options = AnalysisOptions(block_size=block_size, bin_size=bin_size, decomposing=False)
    return ContingencyTable3DAnalysis(options).run(ion_data)


def test_range_count_table():
    table = range_count_table(get_result().ion_summary)
    assert list(table.columns) == ['Number', 'Name', 'Formula', 'Count']
    assert table['Number'].tolist() == [1, 2, 3]
    assert table['Formula'].tolist() == ['Fe', 'Ni', 'CrO']
    assert table['Count'].sum() == 800


def test_limits_table_rounds_to_three_places():
    table = limits_table(Extents((0.12345, -1.0, 2.0), (1.0, 2.5, 3.0)))
    assert table['Dimension'].tolist() == ['X', 'Y', 'Z']
    assert table['Min'].tolist() == ['0.123', '-1.000', '2.000']


def test_matrix_frame_with_totals():
    matrix = np.array([[1, 2], [3, 4]])
    frame = matrix_frame(matrix, ['0-4', '5-5'], np.array([3, 7]), np.array([4, 6]), 10)
    assert frame.shape == (3, 3)
    assert frame.loc['total', 'total'] == 10
    assert frame.loc['0-4', 'total'] == 3
    assert frame.loc['total', '5-5'] == 6


def test_text_report_sections():
    result = get_result()
    report = render_text_report(result)
    assert 'range 1: Fe \t=\t' in report
    assert 'Total Ions \t=\t800' in report
    assert 'X limits: 0.000 to 10.000' in report
    assert report.count('Experimental Observations') == 3
    assert report.count('Estimated Values') == 3
    assert report.count('Trend') == 3
    assert report.count('Chi-square = ') == 3
    assert '\tNi\nFe\t0-9\t10-19\t20-29\t30-39\t40-40\ttotal\n' in report


def test_text_report_marks_skipped_pairs():
    report = render_text_report(get_result(block_size=1000, bin_size=500))
    assert 'statistics skipped' in report
    assert 'Estimated Values' not in report
