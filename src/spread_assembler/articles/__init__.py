"""Article construction, loading and source discovery."""

from .builder import build_article, find_rendered_match, is_inside
from .discovery import PDF_FOLDER, SourceListing, discover_sources
from .loader import PublicationLoader

__all__ = [
    "PDF_FOLDER",
    "PublicationLoader",
    "SourceListing",
    "build_article",
    "discover_sources",
    "find_rendered_match",
    "is_inside",
]
