from math import isfinite

import numpy as np
import pytest

from contingencytable3d.ion_data.provider import Extents
from contingencytable3d.ion_data.provider import IonDataProvider
from contingencytable3d.ion_data.in_memory import InMemoryIonData
from contingencytable3d.analysis.options import AnalysisOptions
from contingencytable3d.analysis.core import ContingencyTable3DAnalysis
from contingencytable3d.analysis.errors import InvalidConfigurationError
from contingencytable3d.analysis.errors import DegenerateGeometryError

EXTENTS = Extents((0.0, 0.0, 0.0), (10.0, 10.0, 10.0))


def uniform_fe_ni(seed=0, unranged=0):
    rng = np.random.default_rng(seed)
    positions = rng.uniform(0.0, 10.0, size=(1000, 3))
    ion_types = np.array([0] * 600 + [1] * 400, dtype=np.uint8)
    rng.shuffle(ion_types)
    if unranged > 0:
        insert_at = np.sort(rng.integers(0, 1000, size=unranged))
        positions = np.insert(positions, insert_at, rng.uniform(0.0, 10.0, size=(unranged, 3)), axis=0)
        ion_types = np.insert(ion_types, insert_at, 255)
    return InMemoryIonData(positions, ion_types, ['Fe', 'Ni'], extents=EXTENTS, chunk_size=128)


def test_two_type_scenario():
    options = AnalysisOptions(block_size=100, bin_size=25, decomposing=False)
    result = ContingencyTable3DAnalysis(options).run(uniform_fe_ni())
    assert result.rows == 5
    assert result.element_names == ('Fe', 'Ni')
    assert (result.geometry.num_grid_x, result.geometry.num_grid_y) == (3, 3)
    assert result.ion_summary.total_ranged_ions == 1000
    assert result.total_blocks >= 1
    assert len(result.pairs) == 1
    pair = result.get_pair('Fe', 'Ni')
    assert pair.experimental.shape == (5, 5)
    assert pair.experimental.sum() == result.total_blocks
    statistics = pair.statistics
    assert statistics is not None
    assert statistics.total_observations == result.total_blocks
    assert statistics.chi_square >= 0
    assert isfinite(statistics.chi_square)
    assert statistics.expected.sum() == pytest.approx(result.total_blocks)


def test_every_pair_sums_to_total_blocks():
    rng = np.random.default_rng(3)
    positions = rng.uniform(0.0, 10.0, size=(3000, 3))
    ion_types = rng.integers(0, 4, size=3000)
    ion_data = InMemoryIonData(
        positions,
        ion_types,
        ['Fe', 'FeO', 'Ni', 'Cr'],
        formulas=[{'Fe': 1}, {'Fe': 1, 'O': 1}, {'Ni': 1}, {}],
        extents=EXTENTS,
        chunk_size=500,
    )
    result = ContingencyTable3DAnalysis(AnalysisOptions(block_size=60, bin_size=10)).run(ion_data)
    assert result.element_names == ('Fe', 'O', 'Ni', 'Cr')
    assert [(p.name_a, p.name_b) for p in result.pairs] == [
        ('Fe', 'O'), ('Fe', 'Ni'), ('Fe', 'Cr'), ('O', 'Ni'), ('O', 'Cr'), ('Ni', 'Cr'),
    ]
    assert result.total_blocks > 0
    for pair in result.pairs:
        assert pair.experimental.sum() == result.total_blocks
        assert pair.statistics.row_totals.sum() == pair.statistics.column_totals.sum()


def test_unranged_records_change_nothing():
    options = AnalysisOptions(block_size=100, bin_size=25, decomposing=False)
    plain = ContingencyTable3DAnalysis(options).run(uniform_fe_ni(seed=5))
    noisy = ContingencyTable3DAnalysis(options).run(uniform_fe_ni(seed=5, unranged=250))
    assert noisy.ion_summary.total_ions == plain.ion_summary.total_ions + 250
    assert noisy.total_blocks == plain.total_blocks
    assert noisy.geometry == plain.geometry
    for pair_plain, pair_noisy in zip(plain.pairs, noisy.pairs):
        assert (pair_plain.experimental == pair_noisy.experimental).all()
        assert (pair_plain.statistics.row_totals == pair_noisy.statistics.row_totals).all()
        assert (pair_plain.statistics.column_totals == pair_noisy.statistics.column_totals).all()


class UntouchableIonData(IonDataProvider):
    @property
    def extents(self):
        raise AssertionError('Extents read despite invalid options.')

    @property
    def ion_count(self):
        raise AssertionError('Ion count read despite invalid options.')

    def get_ion_type_counts(self):
        raise AssertionError('Catalog read despite invalid options.')

    def iterate_chunks(self):
        raise AssertionError('Records read despite invalid options.')


def test_invalid_options_abort_before_reading_data():
    options = AnalysisOptions(block_size=25, bin_size=50)
    with pytest.raises(InvalidConfigurationError):
        ContingencyTable3DAnalysis(options).run(UntouchableIonData())


def test_pairs_without_blocks_are_skipped():
    ion_data = InMemoryIonData(
        [(1.0, 1.0, 1.0), (2.0, 2.0, 2.0), (3.0, 3.0, 3.0)],
        [0, 1, 0],
        ['Fe', 'Ni'],
        extents=EXTENTS,
    )
    result = ContingencyTable3DAnalysis(AnalysisOptions(block_size=10, bin_size=5)).run(ion_data)
    assert result.total_blocks == 0
    assert len(result.pairs) == 1
    assert not result.pairs[0].is_defined
    assert result.pairs[0].experimental.sum() == 0


def test_no_ranged_ions():
    ion_data = InMemoryIonData([(1.0, 1.0, 1.0)], [255], ['Fe'], extents=EXTENTS)
    with pytest.raises(DegenerateGeometryError):
        ContingencyTable3DAnalysis(AnalysisOptions(block_size=10, bin_size=5)).run(ion_data)
