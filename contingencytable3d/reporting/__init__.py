"""Renders analysis results as pandas tables and as the plain-text report."""
from contingencytable3d.reporting.tables import range_count_table
from contingencytable3d.reporting.tables import limits_table
from contingencytable3d.reporting.tables import matrix_frame
from contingencytable3d.reporting.text_report import render_text_report

__all__ = ['range_count_table', 'limits_table', 'matrix_frame', 'render_text_report']
