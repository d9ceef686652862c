"""Reads analysis options from an INI-style configuration file."""

from configparser import ConfigParser
from typing import Any

from contingencytable3d.analysis.options import AnalysisOptions
from contingencytable3d.analysis.errors import InvalidConfigurationError

GENERAL_SECTION_NAME = 'general'
CONTINGENCY_SECTION_NAME = 'contingency-table'

TRUE_VALUES = {'1', 'true', 'yes', 'on'}
FALSE_VALUES = {'0', 'false', 'no', 'off'}


def _read_config_file(
    config_file_path: str | None,
    section: str,
    config_file_string: str | None = None,
) -> dict[str, Any]:
    config_file = ConfigParser()
    if config_file_path is not None:
        config_file.read(config_file_path)
    elif config_file_string is not None:
        config_file.read_string(config_file_string)
    else:
        raise ValueError('Either config_file_path or config_file_string must be provided.')
    config: dict[str, Any] = \
        dict(config_file[GENERAL_SECTION_NAME]) if (GENERAL_SECTION_NAME in config_file) else {}
    if section in config_file:
        config.update(dict(config_file[section]))
    for key, value in config.items():
        if isinstance(value, str) and value.lower() in {'none', 'null', ''}:
            config[key] = None
    return config


def _parse_bool(key: str, value: str) -> bool:
    if value.lower() in TRUE_VALUES:
        return True
    if value.lower() in FALSE_VALUES:
        return False
    raise InvalidConfigurationError(f'Value of "{key}" is not a boolean: {value}')


def _parse_int(key: str, value: str) -> int:
    try:
        return int(value)
    except ValueError as error:
        raise InvalidConfigurationError(f'Value of "{key}" is not an integer: {value}') from error


def read_analysis_config(
    config_file_path: str | None,
    config_file_string: str | None = None,
    **overrides: int | bool | None,
) -> AnalysisOptions:
    f"""Read the '{CONTINGENCY_SECTION_NAME}' section, layered over '{GENERAL_SECTION_NAME}'.

    Keyword overrides that are not None take precedence over file values.
    """
    config = _read_config_file(config_file_path, CONTINGENCY_SECTION_NAME, config_file_string)
    block_size = overrides.get('block_size')
    if block_size is None:
        if config.get('block_size') is None:
            raise InvalidConfigurationError('No block size given.')
        block_size = _parse_int('block_size', config['block_size'])

    bin_size = overrides.get('bin_size')
    if bin_size is None:
        if config.get('bin_size') is None:
            raise InvalidConfigurationError('No bin size given.')
        bin_size = _parse_int('bin_size', config['bin_size'])

    decomposing = overrides.get('decomposing')
    if decomposing is None:
        decomposing_str = config.get('decomposing')
        decomposing = True if decomposing_str is None else _parse_bool('decomposing', decomposing_str)
    return AnalysisOptions(
        block_size=int(block_size),
        bin_size=int(bin_size),
        decomposing=bool(decomposing),
    )
