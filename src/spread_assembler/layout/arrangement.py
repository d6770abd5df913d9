"""Arrangement of non-overlapping articles."""

from collections.abc import Iterable, Iterator

from schemas.article import Article
from schemas.page import Page
from schemas.page_pair import PagePair

from ..rendering import SheetBackend
from .spreads import PageSizeTracker, SpreadBuilder

COVER_PAGE_COUNT = 4
SIGNATURE_SIZE = 8


class Arrangement:
    """An ordered collection of articles whose page ranges never overlap.

    Articles are kept in admission order. Two arrangements are equal only
    when they hold the same articles in the same order.

    Attributes:
        page_sizes: Largest page size seen per box kind while building spreads
    """

    def __init__(self, articles: Iterable[Article] = ()):
        self._articles: list[Article] = []
        self.page_sizes = PageSizeTracker()
        for article in articles:
            self.add(article)

    def add(self, article: Article) -> bool:
        """Admit ``article`` unless it overlaps an article already placed.

        Returns:
            True if the article was added, False on a page range conflict
        """
        if any(placed.overlaps(article) for placed in self._articles):
            return False
        self._articles.append(article)
        return True

    def copy(self) -> "Arrangement":
        """Return an arrangement with the same articles and a fresh size tracker."""
        clone = Arrangement()
        clone._articles = list(self._articles)
        return clone

    @property
    def articles(self) -> tuple[Article, ...]:
        return tuple(self._articles)

    @property
    def is_empty(self) -> bool:
        return not self._articles

    @property
    def pages(self) -> list[Page]:
        """All pages of all articles, ordered by page number."""
        return sorted(
            (page for article in self._articles for page in article.pages),
            key=lambda page: page.page_number,
        )

    @property
    def max_page_number(self) -> int:
        return max((article.end_page for article in self._articles), default=0)

    @property
    def page_count(self) -> int:
        return sum(len(article.coverage) for article in self._articles)

    @property
    def printing_page_count(self) -> int:
        """Pages to print: inner pages rounded up to a full signature, plus the cover."""
        inner_pages = max(self.max_page_number - COVER_PAGE_COUNT, 0)
        remainder = inner_pages % SIGNATURE_SIZE
        if remainder:
            inner_pages += SIGNATURE_SIZE - remainder
        return inner_pages + COVER_PAGE_COUNT

    def article_for(self, page: Page) -> Article | None:
        """Resolve the article a page belongs to."""
        for article in self._articles:
            if article.article_id == page.article_id:
                return article
        return None

    def page_pairs(
        self, max_page_count: int, backend: SheetBackend | None = None
    ) -> list[PagePair]:
        """Lay out the arrangement as spreads and record page sizes.

        Args:
            max_page_count: Last page to show; rounded up to an even number
            backend: Backend used to measure page content

        Returns:
            Page pairs from (none, 1) onwards
        """
        builder = SpreadBuilder(self.pages, self.page_sizes, backend)
        return builder.build(max_page_count)

    def max_page_size(self, box: str) -> tuple[float, float]:
        return self.page_sizes.max_page_size(box)

    def __iter__(self) -> Iterator[Article]:
        return iter(self._articles)

    def __len__(self) -> int:
        return len(self._articles)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Arrangement):
            return NotImplemented
        return self._articles == other._articles

    def __hash__(self) -> int:
        return hash(tuple(self._articles))

    def __repr__(self) -> str:
        names = ", ".join(
            f"{article.name} [{article.start_page}-{article.end_page}]"
            for article in self._articles
        )
        return f"Arrangement({names})"
