"""Arrangement enumeration and spread building."""

from .arrangement import COVER_PAGE_COUNT, SIGNATURE_SIZE, Arrangement
from .conflicts import group_conflicts, partition_conflicts
from .enumerator import LayoutEnumerator, enumerate_layouts, fingerprint, generate_layouts
from .spreads import PageSizeTracker, SpreadBuilder

__all__ = [
    "Arrangement",
    "COVER_PAGE_COUNT",
    "LayoutEnumerator",
    "PageSizeTracker",
    "SIGNATURE_SIZE",
    "SpreadBuilder",
    "enumerate_layouts",
    "fingerprint",
    "generate_layouts",
    "group_conflicts",
    "partition_conflicts",
]
