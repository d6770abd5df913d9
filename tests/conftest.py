"""Pytest fixtures for spread-assembler tests."""

from contextlib import nullcontext
from pathlib import Path

import fitz  # PyMuPDF
import pytest

from schemas import Article, Page, Series
from spread_assembler.rendering import SheetBackend

SPREAD_SIZE = (1190, 842)
SINGLE_SIZE = (595, 842)


class FakeBackend(SheetBackend):
    """In-memory backend whose sheets are (sheet_id, width, height) tuples.

    Crops are returned as (sheet_id, rect) tuples so tests can check which
    part of which sheet became a page.
    """

    def __init__(self):
        self.crops = []

    def open(self, path):
        return nullcontext(path)

    def sheets(self, document):
        return list(document)

    def bounds(self, sheet, box=None):
        _, width, height = sheet
        return (0.0, 0.0, float(width), float(height))

    def crop(self, sheet, rect):
        content = (sheet[0], rect)
        self.crops.append(content)
        return content

    def page_size(self, content, box):
        if content is None:
            return None
        _, (x0, y0, x1, y1) = content
        return (x1 - x0, y1 - y0)


def make_pdf(path: Path, sizes: list[tuple[float, float]]) -> Path:
    """Write a PDF with one page per (width, height) in ``sizes``."""
    doc = fitz.open()
    for i, (width, height) in enumerate(sizes):
        page = doc.new_page(width=width, height=height)
        page.insert_text((50, 100), f"Sheet {i + 1}")
    path.parent.mkdir(parents=True, exist_ok=True)
    doc.save(str(path))
    doc.close()
    return path


@pytest.fixture
def fake_backend():
    """Fresh in-memory rendering backend."""
    return FakeBackend()


@pytest.fixture
def make_article():
    """Factory for articles with empty page content.

    Usage: make_article("Travel", 4, 7)
    """

    def _make(
        name: str,
        start: int,
        end: int | None = None,
        series: Series = Series.STORY,
        folder: Path = Path("/publication"),
    ) -> Article:
        end = start if end is None else end
        project_path = folder / f"{series.value} {start} {end} {name}.indd"
        article_id = str(project_path)
        pages = tuple(
            Page(page_number=number, article_id=article_id)
            for number in range(start, end + 1)
        )
        return Article(
            name=name,
            series=series,
            start_page=start,
            end_page=end,
            project_path=project_path,
            rendered_path=project_path.with_suffix(".pdf"),
            pages=pages,
        )

    return _make


@pytest.fixture
def publication_folder(tmp_path):
    """Publication folder with two placeable articles and one conflict.

    - "S 2 3 Alpha": one spread sheet, pages 2-3
    - "S 4 Beta": one single sheet, page 4
    - "S 4 5 Gamma": one spread sheet, pages 4-5 (overlaps Beta)
    - "notes": project file that does not follow the naming scheme
    """
    folder = tmp_path / "2026-11"
    folder.mkdir()

    for stem in ("S 2 3 Alpha", "S 4 Beta", "S 4 5 Gamma", "notes"):
        (folder / f"{stem}.indd").touch()

    make_pdf(folder / "S 2 3 Alpha.pdf", [SPREAD_SIZE])
    make_pdf(folder / "S 4 Beta.pdf", [SINGLE_SIZE])
    make_pdf(folder / "S 4 5 Gamma.pdf", [SPREAD_SIZE])

    return folder
