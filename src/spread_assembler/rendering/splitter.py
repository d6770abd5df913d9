"""Split physical rendered sheets into logical pages.

A rendered document prints a standalone leading or trailing page on a full
sheet, while interior pages pair up two per sheet. The splitter walks the
sheets in order with a logical-page cursor:

- a sheet is copied whole when the cursor is at an odd start page or at an
  even end page; the cursor advances by one;
- otherwise the sheet is bisected, the left half becoming the cursor page and
  the right half the next page (when still inside the range); the cursor
  advances by two.

Example: pages 4-7 over two sheets give 4 and 5 from the first sheet and 6
and 7 from the second; page 5 alone is a full copy of one sheet.
"""

import logging
from collections.abc import Iterable
from typing import Any

from ..exceptions import InvalidCoverageError, MissingPagesError
from .backend import CropSide, SheetBackend, crop_rect

logger = logging.getLogger(__name__)


class PageSplitter:
    """Turn an ordered sequence of sheets into single-page content per page number."""

    def __init__(self, backend: SheetBackend) -> None:
        self.backend = backend

    def split(self, sheets: Iterable[Any], start: int, end: int) -> dict[int, Any]:
        """Map every page number in ``start..end`` to its single-page content.

        Args:
            sheets: Physical sheets in document order
            start: First logical page (inclusive)
            end: Last logical page (inclusive)

        Returns:
            Dictionary from page number to cropped single-page content

        Raises:
            InvalidCoverageError: If start is below 1 or end precedes start
            MissingPagesError: If the sheets run out before ``end`` is reached
        """
        if start < 1 or end < start:
            raise InvalidCoverageError(start, end)

        pages: dict[int, Any] = {}
        remaining = iter(sheets)
        cursor = start

        while cursor <= end:
            sheet = next(remaining, _EXHAUSTED)
            if sheet is _EXHAUSTED:
                raise MissingPagesError(range(start, end + 1), sorted(pages))

            bounds = self.backend.bounds(sheet)
            if self._is_full_page(cursor, start, end):
                pages[cursor] = self.backend.crop(sheet, crop_rect(bounds, CropSide.FULL))
                logger.debug(f"Page {cursor}: full sheet")
                cursor += 1
                continue

            pages[cursor] = self.backend.crop(sheet, crop_rect(bounds, CropSide.LEFT))
            if cursor + 1 <= end:
                pages[cursor + 1] = self.backend.crop(sheet, crop_rect(bounds, CropSide.RIGHT))
                logger.debug(f"Pages {cursor}-{cursor + 1}: split sheet")
            else:
                logger.debug(f"Page {cursor}: left half of sheet")
            cursor += 2

        return pages

    @staticmethod
    def _is_full_page(cursor: int, start: int, end: int) -> bool:
        return (cursor == start and start % 2 == 1) or (cursor == end and end % 2 == 0)


_EXHAUSTED = object()
