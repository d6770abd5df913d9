"""Parsed file name domain object."""

from dataclasses import dataclass
from enum import Enum


class Series(Enum):
    """Series marker that prefixes every project and rendered file name."""

    STORY = "S"
    BEST = "BEST"


@dataclass(frozen=True)
class ParsedName:
    """Result of parsing a page-range-tagged file name.

    Attributes:
        series: Series marker found at the start of the name
        start_page: First page covered by the file
        end_page: Last page covered by the file, if the name carries one
        article_name: Free-form trailing name, whitespace-trimmed
    """

    series: Series
    start_page: int
    end_page: int | None = None
    article_name: str | None = None

    @property
    def coverage(self) -> range:
        """Inclusive page range; the end defaults to the start page."""
        end = self.end_page if self.end_page is not None else self.start_page
        return range(self.start_page, end + 1)
