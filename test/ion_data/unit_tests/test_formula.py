from contingencytable3d.ion_data.formula import parse_formula
from contingencytable3d.ion_data.formula import format_formula


def test_parse_compound_names():
    assert parse_formula('Fe2O3') == {'Fe': 2, 'O': 3}
    assert parse_formula('H2O') == {'H': 2, 'O': 1}
    assert parse_formula('Fe') == {'Fe': 1}
    assert parse_formula(' CrO ') == {'Cr': 1, 'O': 1}


def test_repeated_symbols_accumulate():
    assert parse_formula('CrO2Cr') == {'Cr': 2, 'O': 2}


def test_unparseable_names_have_no_formula():
    assert parse_formula('') == {}
    assert parse_formula('Fe++') == {}
    assert parse_formula('range 1') == {}
    assert parse_formula('fe') == {}
    assert parse_formula('Fe0') == {}


def test_format_formula():
    assert format_formula({'Fe': 2, 'O': 3}) == 'Fe2O3'
    assert format_formula({'Ni': 1}) == 'Ni'
    assert format_formula({}) == ''
