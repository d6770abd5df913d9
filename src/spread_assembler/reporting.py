"""Build report models from engine results."""

from collections.abc import Sequence
from pathlib import Path

from schemas.article import Article
from schemas.page_pair import PagePair
from schemas.report import ArrangementSummary, ArticleSummary, LayoutReport, SpreadSummary

from .layout import Arrangement, group_conflicts, partition_conflicts


def summarize_article(article: Article) -> ArticleSummary:
    return ArticleSummary(
        name=article.name,
        series=article.series.value,
        start_page=article.start_page,
        end_page=article.end_page,
        project_path=str(article.project_path),
        rendered_path=str(article.rendered_path),
        has_final_pdf=article.has_final_pdf,
    )


def summarize_spreads(arrangement: Arrangement, pairs: Sequence[PagePair]) -> list[SpreadSummary]:
    summaries = []
    for pair in pairs:
        left = arrangement.article_for(pair.left) if pair.left else None
        right = arrangement.article_for(pair.right) if pair.right else None
        summaries.append(
            SpreadSummary(
                left_page=pair.left_number,
                right_page=pair.right_number,
                left_article=left.name if left else None,
                right_article=right.name if right else None,
            )
        )
    return summaries


def summarize_arrangement(
    index: int,
    arrangement: Arrangement,
    pairs: Sequence[PagePair] | None = None,
) -> ArrangementSummary:
    return ArrangementSummary(
        index=index,
        articles=[summarize_article(article) for article in arrangement],
        page_count=arrangement.page_count,
        max_page_number=arrangement.max_page_number,
        printing_page_count=arrangement.printing_page_count,
        spreads=summarize_spreads(arrangement, pairs) if pairs else [],
    )


def build_report(
    folder: Path,
    articles: Sequence[Article],
    arrangements: Sequence[Arrangement],
    errors: Sequence[str] = (),
) -> LayoutReport:
    """Summarize a publication folder, its articles and their arrangements.

    Args:
        folder: Publication folder that was scanned
        articles: Articles that were constructed
        arrangements: Arrangements enumerated for the articles
        errors: Messages for files that were skipped

    Returns:
        LayoutReport ready for JSON output
    """
    non_conflicting, conflicting = partition_conflicts(articles)
    return LayoutReport(
        folder=str(folder),
        articles=[summarize_article(article) for article in articles],
        non_conflicting=[article.name for article in non_conflicting],
        conflict_groups=[
            [article.name for article in group] for group in group_conflicts(conflicting)
        ],
        arrangements=[
            summarize_arrangement(index, arrangement)
            for index, arrangement in enumerate(arrangements)
        ],
        errors=list(errors),
    )
