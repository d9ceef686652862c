"""Loads a delimited text table of ion positions into an in-memory provider."""
from pandas import read_csv

from contingencytable3d.ion_data.in_memory import InMemoryIonData
from contingencytable3d.ion_data.in_memory import DEFAULT_CHUNK_SIZE
from contingencytable3d.ion_data.formula import parse_formula
from contingencytable3d.ion_data.provider import UNRANGED_ION_TYPE
from contingencytable3d.standalone_utilities.log_formats import colorized_logger

logger = colorized_logger(__name__)

POSITION_COLUMNS = ('x', 'y', 'z')


def read_ion_table(
    filename: str,
    ion_column: str = 'ion',
    formula_column: str = 'formula',
    sep: str | None = None,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> InMemoryIonData:
    """Reads one ion per row, with ``x``, ``y``, ``z`` and an ion name column.

    An empty ion name marks an unranged event. Raw type codes are assigned by
    first appearance. If ``formula_column`` is present, its first non-empty
    value for each ion name gives the elemental formula, otherwise the formula
    is parsed from the name.
    """
    if sep is None:
        sep = '\t' if filename.endswith(('.tsv', '.txt')) else ','
    table = read_csv(filename, sep=sep, na_filter=False, dtype={ion_column: str})
    missing = [c for c in POSITION_COLUMNS + (ion_column,) if c not in table.columns]
    if missing:
        raise ValueError(f'Ion table {filename} lacks columns: {missing}')

    names = [name for name in table[ion_column].str.strip().unique() if name != '']
    if len(names) >= UNRANGED_ION_TYPE:
        raise ValueError(f'Too many distinct ion types ({len(names)}) for byte codes.')
    codes = {name: code for code, name in enumerate(names)}
    codes[''] = UNRANGED_ION_TYPE

    formulas = [_lookup_formula(table, ion_column, formula_column, name) for name in names]
    ion_types = table[ion_column].str.strip().map(codes).to_numpy()
    positions = table[list(POSITION_COLUMNS)].to_numpy(dtype=float)
    logger.info('Read %s events of %s ranged ion types from %s.', len(table), len(names), filename)
    return InMemoryIonData(positions, ion_types, names, formulas=formulas, chunk_size=chunk_size)


def _lookup_formula(table, ion_column, formula_column, name) -> dict[str, int]:
    if formula_column in table.columns:
        values = table.loc[table[ion_column].str.strip() == name, formula_column].astype(str)
        given = [v.strip() for v in values if v.strip() != '']
        if given:
            return parse_formula(given[0])
    return parse_formula(name)
