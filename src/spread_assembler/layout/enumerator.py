"""Enumeration of conflict-free article arrangements.

Articles that overlap nothing form a base arrangement shared by every result.
Every permutation of the overlapping articles is then admitted, in order, on
top of a copy of the base; a permutation whose articles cannot all be
admitted is discarded as a whole. When no permutation survives, the base
arrangement alone is the result.

Enumeration is exhaustive: ``k`` overlapping articles cost ``O(k! * k)``
admissions. Callers must keep ``k`` small.
"""

import itertools
import logging
import threading
from collections.abc import Sequence

from schemas.article import Article

from .arrangement import Arrangement
from .conflicts import partition_conflicts

logger = logging.getLogger(__name__)


def fingerprint(articles: Sequence[Article]) -> str:
    """Canonical cache key for an article set, independent of input order."""
    return "|".join(
        sorted(f"{article.name}_{article.start_page}...{article.end_page}" for article in articles)
    )


def enumerate_layouts(articles: Sequence[Article]) -> list[Arrangement]:
    """Compute every arrangement that admits all overlapping articles.

    Args:
        articles: Articles of the publication

    Returns:
        Distinct arrangements; the base arrangement alone when no
        permutation admits every overlapping article
    """
    base_articles, variable = partition_conflicts(articles)

    base = Arrangement(base_articles)
    if not variable:
        return [base]

    logger.debug(f"Trying every order of {len(variable)} overlapping articles")

    layouts: list[Arrangement] = []
    seen: set[Arrangement] = set()
    for order in itertools.permutations(variable):
        candidate = base.copy()
        if not all(candidate.add(article) for article in order):
            continue
        if candidate not in seen:
            seen.add(candidate)
            layouts.append(candidate)

    if not layouts:
        logger.info(
            f"No arrangement admits all {len(variable)} overlapping articles, "
            f"using the {len(base)} non-overlapping ones"
        )
        return [base]

    return layouts


class LayoutEnumerator:
    """Cached arrangement enumeration.

    Results are cached by article set fingerprint. At most one computation
    runs per fingerprint; concurrent callers for the same fingerprint wait for
    it and then read the cached result.
    """

    def __init__(self) -> None:
        self._cache: dict[str, list[Arrangement]] = {}
        self._lock = threading.Lock()
        self._in_flight: dict[str, threading.Lock] = {}

    def generate(self, articles: Sequence[Article]) -> list[Arrangement]:
        """Return every arrangement for ``articles``, computing it at most once.

        Args:
            articles: Articles of the publication

        Returns:
            Arrangements in enumeration order
        """
        key = fingerprint(articles)

        with self._lock:
            cached = self._cache.get(key)
            if cached is None:
                key_lock = self._in_flight.setdefault(key, threading.Lock())

        if cached is not None:
            logger.debug(f"Layout cache hit for {len(articles)} articles")
            return list(cached)

        with key_lock:
            with self._lock:
                cached = self._cache.get(key)
            if cached is not None:
                return list(cached)

            layouts = enumerate_layouts(articles)
            with self._lock:
                self._cache[key] = layouts
                self._in_flight.pop(key, None)

        logger.info(f"Generated {len(layouts)} layouts for {len(articles)} articles")
        return list(layouts)

    def clear(self) -> None:
        """Drop every cached result."""
        with self._lock:
            self._cache.clear()

    def __contains__(self, articles: Sequence[Article]) -> bool:
        with self._lock:
            return fingerprint(articles) in self._cache


_default_enumerator = LayoutEnumerator()


def generate_layouts(articles: Sequence[Article]) -> list[Arrangement]:
    """Return every conflict-free arrangement of ``articles`` using a shared cache."""
    return _default_enumerator.generate(articles)
