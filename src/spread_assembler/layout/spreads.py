"""Spread building and page size tracking."""

import logging
import threading
from collections.abc import Iterable

from schemas.page import Page
from schemas.page_pair import PagePair

from ..rendering import A4_SIZE, BOX_KINDS, PyMuPDFBackend, SheetBackend

logger = logging.getLogger(__name__)


class PageSizeTracker:
    """Running maximum page width and height per box kind.

    Values only ever grow. Updates are serialized with a lock and readers get
    a copy of the committed values.
    """

    def __init__(self, kinds: Iterable[str] = BOX_KINDS) -> None:
        self._lock = threading.Lock()
        self._sizes: dict[str, tuple[float, float]] = {kind: (0.0, 0.0) for kind in kinds}

    def observe(self, kind: str, width: float, height: float) -> None:
        with self._lock:
            current_width, current_height = self._sizes.get(kind, (0.0, 0.0))
            self._sizes[kind] = (max(current_width, width), max(current_height, height))

    def size(self, kind: str) -> tuple[float, float]:
        with self._lock:
            return self._sizes.get(kind, (0.0, 0.0))

    def snapshot(self) -> dict[str, tuple[float, float]]:
        with self._lock:
            return dict(self._sizes)

    def max_page_size(self, kind: str) -> tuple[float, float]:
        """Largest observed size for ``kind``, or A4 when nothing was observed."""
        size = self.size(kind)
        return size if size != (0.0, 0.0) else A4_SIZE


class SpreadBuilder:
    """Lay out the pages of an arrangement as left/right pairs.

    Pair 0 holds page 1 on its right side only; every following pair holds an
    even page on the left and the next odd page on the right. Page numbers no
    article covers stay empty. Every page visited is measured into the
    tracker for each box kind.
    """

    def __init__(
        self,
        pages: Iterable[Page],
        tracker: PageSizeTracker,
        backend: SheetBackend | None = None,
    ) -> None:
        """Initialize the builder.

        Args:
            pages: Pages of the arrangement
            tracker: Accumulator receiving page sizes
            backend: Backend used to measure page content (default: PyMuPDFBackend)
        """
        self._pages = {page.page_number: page for page in pages}
        self.tracker = tracker
        self.backend = backend or PyMuPDFBackend()

    def build(self, max_page_count: int) -> list[PagePair]:
        """Build pairs covering pages ``0..max_page_count``.

        Args:
            max_page_count: Last page to show; rounded up to an even number

        Returns:
            One PagePair per even left page number below the adjusted count
        """
        adjusted = max_page_count + max_page_count % 2
        pairs: list[PagePair] = []

        for left_number in range(0, adjusted, 2):
            left = self._pages.get(left_number) if left_number > 0 else None
            right = self._pages.get(left_number + 1)
            for page in (left, right):
                if page is not None:
                    self._measure(page)
            pairs.append(PagePair(left_number=left_number, left=left, right=right))

        logger.debug(f"Built {len(pairs)} page pairs for {max_page_count} pages")
        return pairs

    def _measure(self, page: Page) -> None:
        if page.content is None:
            return
        for kind in BOX_KINDS:
            size = self.backend.page_size(page.content, kind)
            if size is not None:
                self.tracker.observe(kind, *size)
