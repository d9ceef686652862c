"""Exceptions raised by the contingency table analysis."""


class ContingencyTableError(Exception):
    """Base class for analysis failures."""


class InvalidConfigurationError(ContingencyTableError, ValueError):
    """Block/bin sizes that do not admit a contingency table."""


class DegenerateGeometryError(ContingencyTableError):
    """Block spacing cannot be derived, e.g. there are no ranged ions."""


class PositionOutOfExtentsError(ContingencyTableError):
    """A ranged ion lies outside the grid laid over the extents."""


class DegenerateStatisticsError(ContingencyTableError):
    """A contingency matrix with no observations has no expected values."""
