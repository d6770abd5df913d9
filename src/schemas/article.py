"""Article domain object."""

from dataclasses import dataclass, field
from pathlib import Path

from .page import Page
from .parsed_name import Series


@dataclass(frozen=True)
class Article:
    """Represents a single article placed on a contiguous page range.

    Two articles are the same article when they come from the same project
    file and the same rendered document.

    Attributes:
        name: Article name from the file name, or the file stem without one
        series: Series marker of the project file
        start_page: First page covered by the article
        end_page: Last page covered by the article (inclusive)
        project_path: Path to the source project file
        rendered_path: Path to the matched rendered document
        pages: One page per covered page number, in page order
        has_final_pdf: Whether the rendered document came from the final PDF folder
    """

    name: str = field(compare=False)
    series: Series = field(compare=False)
    start_page: int = field(compare=False)
    end_page: int = field(compare=False)
    project_path: Path
    rendered_path: Path
    pages: tuple[Page, ...] = field(default=(), compare=False, repr=False)
    has_final_pdf: bool = field(default=False, compare=False)

    @property
    def article_id(self) -> str:
        return str(self.project_path)

    @property
    def coverage(self) -> range:
        return range(self.start_page, self.end_page + 1)

    def overlaps(self, other: "Article") -> bool:
        """Check whether the two inclusive page ranges share any page."""
        return self.start_page <= other.end_page and other.start_page <= self.end_page

    def page(self, page_number: int) -> Page | None:
        for page in self.pages:
            if page.page_number == page_number:
                return page
        return None
