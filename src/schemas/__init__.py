"""Schema definitions for spread assembly."""

from .article import Article
from .page import Page
from .page_pair import PagePair
from .parsed_name import ParsedName, Series
from .report import ArrangementSummary, ArticleSummary, LayoutReport, SpreadSummary

__all__ = [
    "Article",
    "ArrangementSummary",
    "ArticleSummary",
    "LayoutReport",
    "Page",
    "PagePair",
    "ParsedName",
    "Series",
    "SpreadSummary",
]
