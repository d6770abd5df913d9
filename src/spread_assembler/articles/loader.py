"""Bulk article loading for a publication."""

import logging
from collections.abc import Iterable
from pathlib import Path

from schemas.article import Article

from ..exceptions import SpreadError
from ..rendering import PyMuPDFBackend, SheetBackend
from .builder import build_article

logger = logging.getLogger(__name__)


class PublicationLoader:
    """Build every article of a publication, skipping the ones that fail.

    A file that cannot become an article is logged and reported, and never
    stops the remaining files from loading.

    Example:
        loader = PublicationLoader(preferred_folder=folder / "__PDF__")
        articles, errors = loader.load(listing.project_paths, listing.rendered_paths)
    """

    def __init__(
        self,
        backend: SheetBackend | None = None,
        preferred_folder: Path | None = None,
    ):
        """Initialize the loader.

        Args:
            backend: Rendering backend shared by all articles (default: PyMuPDFBackend)
            preferred_folder: Folder whose rendered documents win every match
        """
        self.backend = backend or PyMuPDFBackend()
        self.preferred_folder = preferred_folder

    def load(
        self, project_paths: Iterable[Path], rendered_paths: Iterable[Path]
    ) -> tuple[list[Article], list[str]]:
        """Build articles for every project file.

        Args:
            project_paths: Project files, one per article
            rendered_paths: Rendered documents available for matching

        Returns:
            Tuple of (articles in input order, error messages for skipped files)
        """
        candidates = list(rendered_paths)
        articles: list[Article] = []
        errors: list[str] = []

        for project_path in project_paths:
            try:
                article = build_article(
                    project_path,
                    candidates,
                    backend=self.backend,
                    preferred_folder=self.preferred_folder,
                )
            except SpreadError as e:
                logger.warning(f"Skipping {project_path.name}: {e.message}")
                errors.append(f"{project_path.name}: {e.message}")
                continue

            articles.append(article)

        logger.info(f"Loaded {len(articles)} articles, skipped {len(errors)}")
        return articles, errors
