"""Ion data providers: extents, ion type catalog, and chunked ion records."""
from contingencytable3d.ion_data.provider import IonDataProvider
from contingencytable3d.ion_data.provider import IonDataChunk
from contingencytable3d.ion_data.provider import IonTypeEntry
from contingencytable3d.ion_data.provider import Extents
from contingencytable3d.ion_data.provider import UNRANGED_ION_TYPE
from contingencytable3d.ion_data.in_memory import InMemoryIonData
from contingencytable3d.ion_data.tabular import read_ion_table
from contingencytable3d.ion_data.formula import parse_formula

__all__ = [
    'IonDataProvider',
    'IonDataChunk',
    'IonTypeEntry',
    'Extents',
    'UNRANGED_ION_TYPE',
    'InMemoryIonData',
    'read_ion_table',
    'parse_formula',
]
