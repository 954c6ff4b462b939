"""Output file naming for mandate files."""

import os
from datetime import date as date_type
from datetime import datetime
from typing import Optional, Union

MANDATE_TAG = "mandate"
PDF_SUFFIX = ".pdf"


def format_date_ddmmyyyy(value: Union[date_type, datetime]) -> str:
    """Format a calendar date as ``DDMMYYYY`` (e.g. 5 Jan 2026 -> ``05012026``)."""
    return f"{value.day:02d}{value.month:02d}{value.year:04d}"


def generate_output_filename(
    input_path: str, date: Optional[Union[date_type, datetime]] = None
) -> str:
    """Build the mandate filename for ``input_path``.

    Exactly one trailing ``.pdf`` is stripped from the last path segment, so
    ``doc.v2.final.pdf`` keeps its inner dots. The match is case-sensitive.

    Args:
        input_path: Source PDF path (only the last segment is used)
        date: Date to embed. If None, the current local date is used.

    Returns:
        Filename in the form ``{name}_mandate_{DDMMYYYY}.pdf``
    """
    if date is None:
        date = datetime.now()

    name = os.path.basename(input_path)
    if name.endswith(PDF_SUFFIX) and name != PDF_SUFFIX:
        name = name[: -len(PDF_SUFFIX)]

    return f"{name}_{MANDATE_TAG}_{format_date_ddmmyyyy(date)}{PDF_SUFFIX}"
