"""Listing of project and rendered files in a publication folder.

A publication folder holds workflow folders (final PDFs, laid-out pages,
proofread pages, print-ready pages) plus any number of working subfolders.
Workflow folders are listed first; files from working subfolders are skipped
when a file with a nearly identical name has already been listed.
"""

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path

from ..naming import is_name_too_similar

logger = logging.getLogger(__name__)

PROJECT_EXTENSION = ".indd"
RENDERED_EXTENSION = ".pdf"

PDF_FOLDER = "__PDF__"
LAYOUT_FOLDER = "__TORDELVE"
WORKFLOW_FOLDERS = (
    PDF_FOLDER,
    LAYOUT_FOLDER,
    f"{LAYOUT_FOLDER}/__OLVASVA",
    f"{LAYOUT_FOLDER}/__OLVASVA/__LEVILAGITHATO",
    f"{LAYOUT_FOLDER}/__OLVASVA/__LEVIL__",
)

# Working folders with this name hold discarded material
EXCLUDED_FOLDER_PATTERN = re.compile(r"^nemkell$", re.IGNORECASE)

DUPLICATE_THRESHOLD = 0.8


@dataclass
class SourceListing:
    """Files found in a publication folder.

    Attributes:
        folder: Publication folder
        project_paths: Project files, one per article
        rendered_paths: Rendered documents
    """

    folder: Path
    project_paths: list[Path] = field(default_factory=list)
    rendered_paths: list[Path] = field(default_factory=list)

    @property
    def pdf_folder(self) -> Path:
        return self.folder / PDF_FOLDER


def discover_sources(folder: Path) -> SourceListing:
    """List project and rendered files in a publication folder.

    Args:
        folder: Publication folder

    Returns:
        SourceListing with project and rendered paths in discovery order
    """
    listing = SourceListing(folder=folder)

    for workflow_folder in [folder, *(folder / name for name in WORKFLOW_FOLDERS)]:
        for path in _files_in(workflow_folder):
            suffix = path.suffix.lower()
            if suffix == PROJECT_EXTENSION:
                listing.project_paths.append(path)
            elif suffix == RENDERED_EXTENSION:
                listing.rendered_paths.append(path)

    for working_folder in _working_folders(folder):
        for path in _files_in(working_folder):
            suffix = path.suffix.lower()
            if suffix == PROJECT_EXTENSION:
                target = listing.project_paths
            elif suffix == RENDERED_EXTENSION:
                target = listing.rendered_paths
            else:
                continue

            if is_name_too_similar(path.stem, target, threshold=DUPLICATE_THRESHOLD):
                logger.debug(f"Skipping near-duplicate {path}")
                continue
            target.append(path)

    logger.info(
        f"Found {len(listing.project_paths)} project files and "
        f"{len(listing.rendered_paths)} rendered documents in {folder}"
    )
    return listing


def _files_in(folder: Path) -> list[Path]:
    if not folder.is_dir():
        return []
    return sorted(
        path for path in folder.iterdir()
        if path.is_file() and not path.name.startswith(".")
    )


def _working_folders(folder: Path) -> list[Path]:
    if not folder.is_dir():
        return []
    return sorted(
        path for path in folder.iterdir()
        if path.is_dir()
        and not path.name.startswith((".", "_"))
        and not EXCLUDED_FOLDER_PATTERN.match(path.name)
    )
