"""
Export Module

Turns the pass ledger into files the operator can hand over.
"""

from .csv_report import (
    ExportError,
    build_report_bytes,
    build_report_text,
    report_filename,
    write_report,
)

__all__ = [
    "ExportError",
    "build_report_bytes",
    "build_report_text",
    "report_filename",
    "write_report",
]
