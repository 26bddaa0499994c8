"""
Module: core.export.csv_report

Purpose:
    Serialize the pass ledger as a spreadsheet-friendly CSV report:
    UTF-8 with BOM, semicolon-delimited, comma decimal separator for
    time and heat input (French Excel conventions).

Key Functions:
    - build_report_text(passes): CSV text, or None when empty
    - build_report_bytes(passes): Encoded report, or None when empty
    - report_filename(today): 'Report_YYYYMMDD.csv'
    - write_report(passes, directory): Main entry point

Used By:
    - core.session.WeldSession.export_report
    - gui.widgets.history_panel: Export button
"""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from ..models.passes import WeldingPass
from ..models.results import format_decimal_comma, format_plain_number

logger = logging.getLogger(__name__)

BOM = "\ufeff"
DELIMITER = ";"
NEWLINE = "\n"

HEADERS = (
    "Date",
    "Time",
    "Project",
    "Welder",
    "WeldRef",
    "Process",
    "Voltage",
    "Current",
    "Length",
    "Time",
    "kFactor",
    "HeatInput",
)

DATE_FORMAT = "%d/%m/%Y"
TIME_FORMAT = "%H:%M"


class ExportError(Exception):
    """Error while writing the report to disk."""
    pass


def quote(text: Optional[str]) -> str:
    """Wrap free text in double quotes, doubling inner quotes."""
    return '"' + (text or "").replace('"', '""') + '"'


def format_row(welding_pass: WeldingPass) -> str:
    """One CSV line for a pass, in HEADERS order."""
    fields = [
        welding_pass.timestamp.strftime(DATE_FORMAT),
        welding_pass.timestamp.strftime(TIME_FORMAT),
        quote(welding_pass.project_name),
        quote(welding_pass.welder_name),
        quote(welding_pass.weld_name),
        quote(welding_pass.process.label),
        format_plain_number(welding_pass.voltage),
        format_plain_number(welding_pass.current),
        format_plain_number(welding_pass.length),
        format_decimal_comma(welding_pass.time, 1),
        format_plain_number(welding_pass.k_factor),
        format_decimal_comma(welding_pass.heat_input, 3),
    ]
    return DELIMITER.join(fields)


def build_report_text(passes: Iterable[WeldingPass]) -> Optional[str]:
    """
    Render the report, BOM included.

    Rows follow the given order (the ledger's newest-first order) and are
    joined with bare '\\n'; there is no trailing newline.

    Returns:
        Report text, or None if there are no passes
    """
    rows: List[str] = [format_row(p) for p in passes]
    if not rows:
        return None
    return BOM + NEWLINE.join([DELIMITER.join(HEADERS), *rows])


def build_report_bytes(passes: Iterable[WeldingPass]) -> Optional[bytes]:
    text = build_report_text(passes)
    if text is None:
        return None
    return text.encode("utf-8")


def report_filename(today: Optional[date] = None) -> str:
    today = today or date.today()
    return f"Report_{today:%Y%m%d}.csv"


def write_report(
    passes: Sequence[WeldingPass],
    directory: Path,
    *,
    today: Optional[date] = None,
) -> Optional[Path]:
    """
    Write the report into a directory.

    Args:
        passes: Ledger snapshot
        directory: Target folder (created if missing)
        today: Date used in the file name (defaults to today)

    Returns:
        Path of the written file, or None if there was nothing to export

    Raises:
        ExportError: If the file cannot be written
    """
    content = build_report_bytes(passes)
    if content is None:
        logger.info("Export skipped: no passes recorded")
        return None

    output_path = Path(directory) / report_filename(today)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(content)
    except OSError as e:
        raise ExportError(f"Failed to write report to {output_path}: {e}") from e

    logger.info(f"Exported {len(passes)} passes to {output_path}")
    return output_path
