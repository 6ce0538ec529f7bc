"""
Output features: console rendering and report files.
"""

from .console import render_console
from .report import REPORT_FORMATS, ReportGenerator, infer_report_format

__all__ = [
    "REPORT_FORMATS",
    "ReportGenerator",
    "infer_report_format",
    "render_console",
]
