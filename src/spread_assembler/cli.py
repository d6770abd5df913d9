"""Command-line interface for spread-assembler."""

import argparse
import logging
import sys
from pathlib import Path

from schemas.article import Article

from .articles import PublicationLoader, discover_sources
from .exceptions import NoMatchError
from .layout import LayoutEnumerator, group_conflicts, partition_conflicts
from .naming import parse_name
from .rendering import BOX_KINDS, DEFAULT_BOX, PyMuPDFBackend
from .reporting import build_report, summarize_arrangement

DEFAULT_MAX_PAGE_COUNT = 8


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def _describe(article: Article) -> str:
    return f"{article.name} [{article.start_page}-{article.end_page}]"


def _load_articles(
    folder: Path, box: str, pdf_folder: Path | None, logger: logging.Logger
) -> tuple[list[Article], list[str]] | None:
    """Discover and build the articles of a publication folder.

    Returns:
        Tuple of (articles, errors), or None if the folder does not exist
    """
    folder = folder.resolve()
    if not folder.is_dir():
        logger.error(f"Publication folder not found: {folder}")
        return None

    listing = discover_sources(folder)
    loader = PublicationLoader(
        backend=PyMuPDFBackend(box=box),
        preferred_folder=pdf_folder or listing.pdf_folder,
    )
    return loader.load(listing.project_paths, listing.rendered_paths)


def _log_errors(errors: list[str], logger: logging.Logger) -> None:
    if errors:
        logger.warning(f"  Skipped: {len(errors)}")
        for error in errors:
            logger.warning(f"    - {error}")


def parse_names(args: argparse.Namespace) -> int:
    """Execute the parse command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 if every name parsed, 1 otherwise)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    failures = 0
    for name in args.names:
        try:
            parsed = parse_name(Path(name).stem if args.strip_extension else name)
        except NoMatchError as e:
            logger.error(e.message)
            failures += 1
            continue

        end = parsed.end_page if parsed.end_page is not None else "-"
        logger.info(
            f"{name}: series={parsed.series.value} start={parsed.start_page} "
            f"end={end} name={parsed.article_name or '-'}"
        )

    return 1 if failures else 0


def list_articles(args: argparse.Namespace) -> int:
    """Execute the articles command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        loaded = _load_articles(args.folder, args.box, args.pdf_folder, logger)
        if loaded is None:
            return 1
        articles, errors = loaded

        logger.info(f"Articles: {len(articles)}")
        for article in articles:
            final = " (final)" if article.has_final_pdf else ""
            logger.info(f"  {_describe(article)} <- {article.rendered_path.name}{final}")
        _log_errors(errors, logger)

        return 0

    except Exception as e:
        logger.error(f"Failed to load articles: {e}")
        return 1


def show_conflicts(args: argparse.Namespace) -> int:
    """Execute the conflicts command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        loaded = _load_articles(args.folder, args.box, args.pdf_folder, logger)
        if loaded is None:
            return 1
        articles, errors = loaded

        non_conflicting, conflicting = partition_conflicts(articles)
        logger.info(f"Non-conflicting articles: {len(non_conflicting)}")
        for article in non_conflicting:
            logger.info(f"  {_describe(article)}")

        logger.info(f"Conflicting articles: {len(conflicting)}")
        for index, group in enumerate(group_conflicts(conflicting), start=1):
            logger.info(f"  Group {index}: " + ", ".join(_describe(a) for a in group))
        _log_errors(errors, logger)

        return 0

    except Exception as e:
        logger.error(f"Failed to detect conflicts: {e}")
        return 1


def show_layouts(args: argparse.Namespace) -> int:
    """Execute the layouts command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        loaded = _load_articles(args.folder, args.box, args.pdf_folder, logger)
        if loaded is None:
            return 1
        articles, errors = loaded

        layouts = LayoutEnumerator().generate(articles)

        if args.json:
            report = build_report(args.folder.resolve(), articles, layouts, errors)
            sys.stdout.write(report.model_dump_json(indent=2) + "\n")
            return 0

        logger.info(f"Layouts: {len(layouts)}")
        for index, layout in enumerate(layouts):
            logger.info(
                f"  [{index}] {len(layout)} articles, {layout.page_count} pages, "
                f"print {layout.printing_page_count}"
            )
            for article in layout:
                logger.info(f"      {_describe(article)}")
        _log_errors(errors, logger)

        return 0

    except Exception as e:
        logger.error(f"Failed to generate layouts: {e}")
        return 1


def show_spreads(args: argparse.Namespace) -> int:
    """Execute the spreads command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        loaded = _load_articles(args.folder, args.box, args.pdf_folder, logger)
        if loaded is None:
            return 1
        articles, errors = loaded

        layouts = LayoutEnumerator().generate(articles)
        if not 0 <= args.layout < len(layouts):
            logger.error(f"Layout {args.layout} out of range (0-{len(layouts) - 1})")
            return 1

        layout = layouts[args.layout]
        max_pages = args.max_pages or max(layout.printing_page_count, DEFAULT_MAX_PAGE_COUNT)
        backend = PyMuPDFBackend(box=args.box)
        pairs = layout.page_pairs(max_pages, backend=backend)
        summary = summarize_arrangement(args.layout, layout, pairs)

        if args.json:
            sys.stdout.write(summary.model_dump_json(indent=2) + "\n")
            return 0

        logger.info(f"Layout {args.layout}: {len(pairs)} spreads")
        for spread in summary.spreads:
            left = spread.left_article or "-"
            right = spread.right_article or "-"
            logger.info(f"  {spread.left_page:>3} {left} | {spread.right_page:<3} {right}")

        width, height = layout.max_page_size(args.box)
        logger.info(f"  Max {args.box} size: {width:.1f} x {height:.1f} pt")
        _log_errors(errors, logger)

        return 0

    except Exception as e:
        logger.error(f"Failed to build spreads: {e}")
        return 1


def _add_folder_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "folder",
        type=Path,
        help="Publication folder containing project files and rendered PDFs",
    )
    parser.add_argument(
        "--box",
        choices=BOX_KINDS,
        default=DEFAULT_BOX,
        help=f"PDF box used to measure and split sheets (default: {DEFAULT_BOX})",
    )
    parser.add_argument(
        "--pdf-folder",
        type=Path,
        default=None,
        help="Folder of final PDFs that win every match (default: <folder>/__PDF__)",
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="spread-assembler",
        description="Assemble magazine spreads from page-range-tagged articles",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    parse_parser = subparsers.add_parser(
        "parse",
        help="Parse file names into series, page range and article name",
        description="Parse page-range-tagged file names such as 'S 12 BudgetReport' or 'BEST 3 9 Interview'.",
    )
    parse_parser.add_argument(
        "names",
        nargs="+",
        help="File names to parse",
    )
    parse_parser.add_argument(
        "--strip-extension",
        action="store_true",
        help="Remove a file extension before parsing",
    )
    parse_parser.set_defaults(func=parse_names)

    articles_parser = subparsers.add_parser(
        "articles",
        help="List the articles found in a publication folder",
        description="Match every project file with its rendered PDF and split the PDF into pages.",
    )
    _add_folder_arguments(articles_parser)
    articles_parser.set_defaults(func=list_articles)

    conflicts_parser = subparsers.add_parser(
        "conflicts",
        help="Show which articles compete for the same pages",
        description="Partition articles into non-conflicting and conflicting ones and group the conflicts.",
    )
    _add_folder_arguments(conflicts_parser)
    conflicts_parser.set_defaults(func=show_conflicts)

    layouts_parser = subparsers.add_parser(
        "layouts",
        help="Enumerate conflict-free arrangements",
        description="Enumerate every arrangement of the publication's articles in which no page ranges collide.",
    )
    _add_folder_arguments(layouts_parser)
    layouts_parser.add_argument(
        "--json",
        action="store_true",
        help="Print a JSON report to stdout",
    )
    layouts_parser.set_defaults(func=show_layouts)

    spreads_parser = subparsers.add_parser(
        "spreads",
        help="Show the spreads of one arrangement",
        description="Lay out one arrangement as left/right page pairs and report the largest page size.",
    )
    _add_folder_arguments(spreads_parser)
    spreads_parser.add_argument(
        "--layout",
        type=int,
        default=0,
        help="Index of the arrangement to lay out (default: 0)",
    )
    spreads_parser.add_argument(
        "--max-pages",
        type=int,
        default=None,
        help="Last page to show (default: the arrangement's printing page count)",
    )
    spreads_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the arrangement summary as JSON to stdout",
    )
    spreads_parser.set_defaults(func=show_spreads)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
