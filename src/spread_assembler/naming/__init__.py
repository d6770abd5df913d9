"""File name parsing and fuzzy name matching."""

from .parser import NAME_PATTERN, parse_name
from .similarity import is_name_too_similar, levenshtein_distance, similarity

__all__ = [
    "NAME_PATTERN",
    "is_name_too_similar",
    "levenshtein_distance",
    "parse_name",
    "similarity",
]
