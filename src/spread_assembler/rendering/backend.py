"""Base class for rendering backends.

A backend is the geometry primitive the page splitter relies on: it opens a
rendered document as a sequence of physical sheets, reports a sheet's bounding
box for a named box kind, and produces a new single-page document from a
rectangular crop of a sheet.
"""

from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path
from typing import Any, ContextManager

BOX_KINDS = ("mediabox", "cropbox", "bleedbox", "trimbox", "artbox")
DEFAULT_BOX = "trimbox"

# A4 in PDF points, used when no page size was observed
A4_SIZE = (595.0, 842.0)

Rect = tuple[float, float, float, float]


class CropSide(Enum):
    """Part of a sheet that becomes a logical page."""

    LEFT = "left"
    RIGHT = "right"
    FULL = "full"


def crop_rect(bounds: Rect, side: CropSide) -> Rect:
    """Return the rectangle for one side of a sheet.

    Halves bisect the width around the box's own origin and keep the full
    height.

    Args:
        bounds: Sheet box as (x0, y0, x1, y1)
        side: Which part of the sheet to keep

    Returns:
        Crop rectangle as (x0, y0, x1, y1)
    """
    x0, y0, x1, y1 = bounds
    if side is CropSide.FULL:
        return (x0, y0, x1, y1)

    middle = x0 + (x1 - x0) / 2
    if side is CropSide.LEFT:
        return (x0, y0, middle, y1)
    return (middle, y0, x1, y1)


class SheetBackend(ABC):
    """Abstract base class for rendering backends.

    Attributes:
        box: Box kind used to measure and crop sheets
    """

    box: str = DEFAULT_BOX

    @abstractmethod
    def open(self, path: Path) -> ContextManager[Any]:
        """Open a rendered document.

        Args:
            path: Path to the rendered document

        Returns:
            A context manager yielding the open document

        Raises:
            PageCollectionError: If the document cannot be opened
        """
        pass

    @abstractmethod
    def sheets(self, document: Any) -> list[Any]:
        """Return the physical sheets of an open document, in order."""
        pass

    @abstractmethod
    def bounds(self, sheet: Any, box: str | None = None) -> Rect:
        """Return the sheet's bounding box for ``box`` (default: ``self.box``)."""
        pass

    @abstractmethod
    def crop(self, sheet: Any, rect: Rect) -> Any:
        """Produce a new single-page document showing ``rect`` of ``sheet``."""
        pass

    @abstractmethod
    def page_size(self, content: Any, box: str) -> tuple[float, float] | None:
        """Return (width, height) of single-page content for ``box``, if known."""
        pass
