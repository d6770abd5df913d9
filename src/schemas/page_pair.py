"""Page pair (spread) domain object."""

from dataclasses import dataclass

from .page import Page


@dataclass(frozen=True)
class PagePair:
    """Two facing pages printed or viewed together.

    Either side may be empty when no article covers that page number. The
    first pair of a publication always has an empty left side.

    Attributes:
        left_number: Page number of the left (even) side
        left: Page on the left side, if covered
        right: Page on the right side, if covered
    """

    left_number: int
    left: Page | None = None
    right: Page | None = None

    @property
    def right_number(self) -> int:
        return self.left_number + 1

    @property
    def coverage(self) -> range:
        return range(self.left_number, self.right_number + 1)

    def page(self, page_number: int) -> Page | None:
        """Return the side showing ``page_number``, or None outside the pair."""
        if page_number == self.left_number:
            return self.left
        if page_number == self.right_number:
            return self.right
        return None
