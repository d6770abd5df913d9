"""File name parser for page-range-tagged project and rendered files.

File names look like ``S 12 BudgetReport`` or ``BEST 3 9 Interview``: a
series marker, a start page, an optional end page and an optional article
name. Extensions must be stripped before parsing.
"""

import logging
import re

from schemas.parsed_name import ParsedName, Series

from ..exceptions import NoMatchError

logger = logging.getLogger(__name__)

# The single-letter marker is listed first; alternation order is the tie-break.
NAME_PATTERN = re.compile(
    r"^(S|BEST)\s+(\d{1,3})(?!\d)(?:\s+(\d{1,3})(?!\d))?\s*(.+)?$",
    re.IGNORECASE,
)

_SERIES_BY_MARKER = {series.value: series for series in Series}


def parse_name(file_name: str) -> ParsedName:
    """Parse a file name (without extension) into its components.

    Args:
        file_name: File stem such as "BEST 3 9 Interview"

    Returns:
        ParsedName with series, start page, optional end page and name

    Raises:
        NoMatchError: If the name does not start with a series marker
            followed by a page number
    """
    match = NAME_PATTERN.match(file_name)
    if match is None:
        raise NoMatchError(file_name)

    marker, start, end, article_name = match.groups()
    if int(start) < 1:
        raise NoMatchError(file_name, f"Start page must be positive in {file_name!r}")
    if end is not None and int(end) < int(start):
        raise NoMatchError(file_name, f"End page precedes start page in {file_name!r}")
    if article_name is not None:
        article_name = article_name.strip() or None

    return ParsedName(
        series=_SERIES_BY_MARKER[marker.upper()],
        start_page=int(start),
        end_page=int(end) if end is not None else None,
        article_name=article_name,
    )
