"""Rendering backends and sheet splitting."""

from .backend import A4_SIZE, BOX_KINDS, DEFAULT_BOX, CropSide, SheetBackend, crop_rect
from .pymupdf_backend import PyMuPDFBackend
from .splitter import PageSplitter

__all__ = [
    "A4_SIZE",
    "BOX_KINDS",
    "CropSide",
    "DEFAULT_BOX",
    "PageSplitter",
    "PyMuPDFBackend",
    "SheetBackend",
    "crop_rect",
]
