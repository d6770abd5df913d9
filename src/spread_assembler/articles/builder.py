"""Article construction from a project file and its rendered counterparts."""

import logging
from collections.abc import Iterable
from pathlib import Path

from schemas.article import Article
from schemas.page import Page
from schemas.parsed_name import ParsedName

from ..exceptions import NoMatchError, NoPdfMatchError
from ..naming import parse_name, similarity
from ..rendering import PageSplitter, PyMuPDFBackend, SheetBackend

logger = logging.getLogger(__name__)


def find_rendered_match(
    project_name: str,
    parsed: ParsedName,
    candidates: Iterable[Path],
    preferred_folder: Path | None = None,
) -> Path | None:
    """Pick the rendered document that belongs to a project file.

    Only candidates whose own name parses to exactly the same page range are
    considered. Among those, a candidate inside ``preferred_folder`` wins
    outright; otherwise the highest name similarity wins, comparing names
    with their series marker and page numbers removed. There is no minimum
    score, and the first candidate wins a tie.

    Args:
        project_name: Project file stem
        parsed: Parsed project file name
        candidates: Rendered document paths to choose from
        preferred_folder: Folder holding final rendered documents, if any

    Returns:
        The best candidate, or None if no candidate shares the page range
    """
    project_key = parsed.article_name or project_name
    best: tuple[Path, float] | None = None

    for candidate in candidates:
        try:
            candidate_parsed = parse_name(candidate.stem)
        except NoMatchError:
            continue
        if candidate_parsed.coverage != parsed.coverage:
            continue

        if preferred_folder is not None and is_inside(candidate, preferred_folder):
            score = float("inf")
        else:
            score = similarity(project_key, candidate_parsed.article_name or candidate.stem)

        if best is None or score > best[1]:
            best = (candidate, score)

    return best[0] if best else None


def is_inside(path: Path, folder: Path) -> bool:
    """Check whether ``path`` lies below ``folder`` (and is not the folder itself)."""
    resolved_path = path.resolve()
    resolved_folder = folder.resolve()
    return resolved_path != resolved_folder and resolved_path.is_relative_to(resolved_folder)


def build_article(
    project_path: Path,
    rendered_paths: Iterable[Path],
    backend: SheetBackend | None = None,
    preferred_folder: Path | None = None,
) -> Article:
    """Construct an article from a project file and the available rendered documents.

    Args:
        project_path: Path to the project file, e.g. "S 4 7 Travel.indd"
        rendered_paths: Candidate rendered documents
        backend: Rendering backend (default: PyMuPDFBackend)
        preferred_folder: Folder holding final rendered documents, if any

    Returns:
        Article whose pages exactly cover its page range

    Raises:
        NoMatchError: If the project file name cannot be parsed
        NoPdfMatchError: If no candidate shares the exact page range
        PageCollectionError: If the pages cannot be collected from the match
    """
    backend = backend or PyMuPDFBackend()
    project_name = project_path.stem
    parsed = parse_name(project_name)
    coverage = parsed.coverage

    rendered_path = find_rendered_match(
        project_name, parsed, rendered_paths, preferred_folder
    )
    if rendered_path is None:
        raise NoPdfMatchError(project_name, coverage)

    logger.debug(f"Matched {project_path.name} with {rendered_path.name}")

    article_id = str(project_path)
    splitter = PageSplitter(backend)
    with backend.open(rendered_path) as document:
        contents = splitter.split(backend.sheets(document), coverage.start, coverage.stop - 1)

    pages = tuple(
        Page(page_number=number, article_id=article_id, content=contents[number])
        for number in coverage
    )

    return Article(
        name=parsed.article_name or project_name,
        series=parsed.series,
        start_page=coverage.start,
        end_page=coverage.stop - 1,
        project_path=project_path,
        rendered_path=rendered_path,
        pages=pages,
        has_final_pdf=preferred_folder is not None and is_inside(rendered_path, preferred_folder),
    )
