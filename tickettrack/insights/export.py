"""
CSV export.

Serializes the visible record set for spreadsheets. Output only; nothing
is read back from these files.
"""

import csv
import logging
import os
import re
from typing import Optional, Sequence

from tickettrack.insights.metrics import records_to_frame
from tickettrack.models.survey import SurveyRecord

logger = logging.getLogger(__name__)

# Record attribute -> CSV header, in column order
EXPORT_COLUMNS = {
    "id": "ID",
    "ticket_id": "Ticket",
    "customer_id": "Customer",
    "ease_rating": "Ease",
    "process_rating": "Process",
    "solution_rating": "Solution",
    "comment": "Comment",
    "timestamp": "Date",
}

FREE_TEXT_COLUMNS = ("customer_id", "comment")

_LINE_BREAKS = re.compile(r"[\r\n]+")


def export_csv(records: Sequence[SurveyRecord], path: Optional[str] = None) -> str:
    """
    Serialize records as semicolon-delimited CSV.

    Text fields are quoted with embedded quotes doubled; line breaks inside
    free text become single spaces so every record stays on one row.

    Args:
        records: Records to export (usually the filtered dashboard view)
        path: If given, also write the CSV to this file

    Returns:
        The CSV text
    """
    df = records_to_frame(records)[list(EXPORT_COLUMNS)].copy()

    for column in FREE_TEXT_COLUMNS:
        df[column] = df[column].astype(str).str.replace(_LINE_BREAKS, " ", regex=True)

    df = df.rename(columns=EXPORT_COLUMNS)
    text = df.to_csv(
        sep=";",
        index=False,
        quoting=csv.QUOTE_NONNUMERIC,
        doublequote=True,
        lineterminator="\n"
    )

    if path:
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(path, 'w', encoding='utf-8', newline='') as f:
            f.write(text)
        logger.info(f"Exported {len(df)} records to {path}")

    return text
