"""
Module: output

Purpose:
    Presentation of finished sessions: score line, text table, PDF sheet.

Key Functions:
    - report(): Percentage summary line
    - render_table(): Aligned plain-text results table
    - render_results_pdf(): A4 results sheet (ReportLab)
"""

from .scorer import report, score_ratio
from .table import render_table, result_box
from .renderer import render_results_pdf

__all__ = [
    "report",
    "score_ratio",
    "render_table",
    "result_box",
    "render_results_pdf",
]
