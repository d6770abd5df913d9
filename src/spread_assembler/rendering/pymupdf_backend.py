"""Rendering backend built on PyMuPDF."""

import logging
from pathlib import Path

import fitz  # PyMuPDF

from ..exceptions import PageCollectionError
from .backend import BOX_KINDS, DEFAULT_BOX, Rect, SheetBackend

logger = logging.getLogger(__name__)

# Boxes that must stay inside the new crop box after cropping
_INNER_BOXES = ("trimbox", "bleedbox", "artbox")


class PyMuPDFBackend(SheetBackend):
    """Open, measure and crop PDF sheets with PyMuPDF.

    Crops are written as a copy of the source page in a fresh one-page
    document whose crop, trim, bleed and art boxes are narrowed to the
    requested rectangle. The source document is never modified.
    """

    def __init__(self, box: str = DEFAULT_BOX) -> None:
        """Initialize the backend.

        Args:
            box: Box kind used to measure and crop sheets (default: trimbox)
        """
        if box not in BOX_KINDS:
            raise ValueError(f"Unknown box kind {box!r}, expected one of {BOX_KINDS}")
        self.box = box

    def open(self, path: Path) -> fitz.Document:
        try:
            return fitz.open(str(path))
        except Exception as e:
            raise PageCollectionError(f"Cannot open rendered document {path}: {e}") from e

    def sheets(self, document: fitz.Document) -> list[fitz.Page]:
        return list(document)

    def bounds(self, sheet: fitz.Page, box: str | None = None) -> Rect:
        rect = getattr(sheet, box or self.box)
        return (rect.x0, rect.y0, rect.x1, rect.y1)

    def crop(self, sheet: fitz.Page, rect: Rect) -> fitz.Document:
        single = fitz.open()
        single.insert_pdf(sheet.parent, from_page=sheet.number, to_page=sheet.number)
        page = single[0]

        target = fitz.Rect(rect) & page.mediabox
        page.set_cropbox(target)
        for name in _INNER_BOXES:
            inner = fitz.Rect(getattr(page, name)) & target
            if inner.is_empty:
                inner = target
            getattr(page, f"set_{name}")(inner)

        logger.debug(f"Cropped sheet {sheet.number} to {tuple(target)}")
        return single

    def page_size(self, content: fitz.Document, box: str) -> tuple[float, float] | None:
        if content is None or len(content) == 0:
            return None
        rect = getattr(content[0], box)
        return (rect.width, rect.height)
