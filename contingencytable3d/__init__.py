"""Spatial contingency table statistics of ion pairs in atom probe datasets."""
from contingencytable3d.standalone_utilities.configuration_settings import get_version

submodule_names = ['analysis']

__version__ = get_version()
