"""Resolution of raw ion type codes to the element axes of the contingency tables."""
from dataclasses import dataclass

from contingencytable3d.ion_data.provider import IonTypeEntry
from contingencytable3d.standalone_utilities.log_formats import colorized_logger

logger = colorized_logger(__name__)


@dataclass(frozen=True)
class TypeResolution:
    """Read-only lookup from raw type codes to dense element indices.

    ``constituents[code]`` lists one element index per atom of the ion type,
    repeated according to multiplicity. Without decomposition it is just
    ``(code,)`` and ``element_names`` are the ion type names.
    """
    element_names: tuple[str, ...]
    constituents: tuple[tuple[int, ...], ...]
    decomposing: bool

    @property
    def number_elements(self) -> int:
        return len(self.element_names)

    def constituents_of(self, code: int) -> tuple[int, ...]:
        return self.constituents[code]


def resolve_types(catalog: dict[int, IonTypeEntry], decomposing: bool) -> TypeResolution:
    """Builds the lookup once for a run.

    Catalog codes are expected to be dense, ``0..N-1``. Element indices are
    assigned in order of first appearance of each symbol while walking the
    catalog in code order. A type with an empty formula is treated as one atom
    of an element named after the type.
    """
    entries = [catalog[code] for code in sorted(catalog.keys())]
    for expected, entry in enumerate(entries):
        if entry.code != expected:
            raise ValueError(f'Ion type codes are not dense: expected {expected}, got {entry.code}.')

    if not decomposing:
        names = tuple(entry.name for entry in entries)
        return TypeResolution(names, tuple((code,) for code in range(len(entries))), False)

    element_index: dict[str, int] = {}
    for entry in entries:
        for symbol in _formula_or_self(entry):
            if symbol not in element_index:
                element_index[symbol] = len(element_index)

    constituents = []
    for entry in entries:
        expanded: list[int] = []
        for symbol, multiplicity in _formula_or_self(entry).items():
            expanded.extend([element_index[symbol]] * multiplicity)
        constituents.append(tuple(expanded))
        logger.debug('Ion type %s decomposes to element indices %s.', entry.name, expanded)

    names = tuple(sorted(element_index, key=lambda symbol: element_index[symbol]))
    logger.info('Decomposed %s ion types into %s elements: %s', len(entries), len(names), ', '.join(names))
    return TypeResolution(names, tuple(constituents), True)


def _formula_or_self(entry: IonTypeEntry) -> dict[str, int]:
    if entry.formula:
        return entry.formula
    return {entry.name: 1}
