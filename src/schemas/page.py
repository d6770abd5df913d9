"""Page domain object."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Page:
    """Represents one logical page of an article.

    The page refers back to its article by identifier only; the article is
    resolved through an arrangement or any other registry of articles.

    Attributes:
        page_number: Logical page number within the publication
        article_id: Identifier of the owning article
        content: Single-page rendered document owned by this page
    """

    page_number: int
    article_id: str
    content: Any = field(default=None, compare=False, repr=False)
