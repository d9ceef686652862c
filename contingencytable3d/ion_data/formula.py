"""Elemental formula parsing for compound ion names like ``Fe2O3`` or ``CrO``."""
import re

ELEMENT_TOKEN = re.compile(r'([A-Z][a-z]?)(\d*)')


def parse_formula(name: str) -> dict[str, int]:
    """Returns the element symbol multiplicities spelled by ``name``.

    Symbols appear in order of first occurrence; repeated symbols accumulate.
    A name that is not entirely made of element tokens (charge suffixes,
    spaces, range labels) yields an empty formula.
    """
    compact = name.strip()
    if compact == '' or ''.join(m.group(0) for m in ELEMENT_TOKEN.finditer(compact)) != compact:
        return {}
    formula: dict[str, int] = {}
    for match in ELEMENT_TOKEN.finditer(compact):
        symbol, multiplicity = match.group(1), match.group(2)
        formula[symbol] = formula.get(symbol, 0) + (int(multiplicity) if multiplicity else 1)
    if any(count == 0 for count in formula.values()):
        return {}
    return formula


def format_formula(formula: dict[str, int]) -> str:
    return ''.join(
        symbol if count == 1 else f'{symbol}{count}'
        for symbol, count in formula.items()
    )
