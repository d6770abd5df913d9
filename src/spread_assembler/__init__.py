"""Spread assembly for page-range-tagged magazine articles."""

from .layout import Arrangement, LayoutEnumerator, generate_layouts

__all__ = ["Arrangement", "LayoutEnumerator", "generate_layouts"]
