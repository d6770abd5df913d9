"""Layout report schemas.

These models summarize articles, arrangements and spreads for command-line
output. They are a diagnostic view of the engine's results and are rebuilt on
every run.
"""

from pydantic import BaseModel


class ArticleSummary(BaseModel):
    """An article as seen by a report.

    Attributes:
        name: Article name
        series: Series marker ("S" or "BEST")
        start_page: First covered page
        end_page: Last covered page
        project_path: Path to the project file
        rendered_path: Path to the matched rendered document
        has_final_pdf: Whether the rendered document is the final PDF
    """

    name: str
    series: str
    start_page: int
    end_page: int
    project_path: str
    rendered_path: str
    has_final_pdf: bool = False


class SpreadSummary(BaseModel):
    """A left/right page pair.

    Attributes:
        left_page: Left page number
        right_page: Right page number
        left_article: Name of the article on the left, if any
        right_article: Name of the article on the right, if any
    """

    left_page: int
    right_page: int
    left_article: str | None = None
    right_article: str | None = None


class ArrangementSummary(BaseModel):
    """One conflict-free arrangement.

    Attributes:
        index: Position of the arrangement in the enumeration result
        articles: Member articles in admission order
        page_count: Total number of covered pages
        max_page_number: Highest covered page
        printing_page_count: Pages to print, including the cover
        spreads: Page pairs, filled only when requested
    """

    index: int
    articles: list[ArticleSummary] = []
    page_count: int = 0
    max_page_number: int = 0
    printing_page_count: int = 0
    spreads: list[SpreadSummary] = []


class LayoutReport(BaseModel):
    """Summary of a publication folder and its possible arrangements.

    Attributes:
        folder: Publication folder that was scanned
        articles: Every article that could be constructed
        non_conflicting: Names of articles that overlap no other article
        conflict_groups: Names of mutually overlapping articles, per group
        arrangements: Enumerated arrangements
        errors: Files that were skipped, with the reason
    """

    folder: str
    articles: list[ArticleSummary] = []
    non_conflicting: list[str] = []
    conflict_groups: list[list[str]] = []
    arrangements: list[ArrangementSummary] = []
    errors: list[str] = []

    model_config = {"extra": "forbid"}
