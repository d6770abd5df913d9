"""Page range conflict detection between articles."""

from collections.abc import Sequence

from schemas.article import Article


def partition_conflicts(articles: Sequence[Article]) -> tuple[list[Article], list[Article]]:
    """Split articles into those that overlap nothing and those that overlap something.

    Every article is tested against every other article in the list, so an
    article conflicts even when its only overlap is with a same-named article.

    Args:
        articles: Articles to classify

    Returns:
        Tuple of (non-conflicting, conflicting), each in input order
    """
    non_conflicting: list[Article] = []
    conflicting: list[Article] = []

    for i, article in enumerate(articles):
        has_conflict = any(
            article.overlaps(other)
            for j, other in enumerate(articles)
            if i != j
        )
        if has_conflict:
            conflicting.append(article)
        else:
            non_conflicting.append(article)

    return non_conflicting, conflicting


def group_conflicts(articles: Sequence[Article]) -> list[list[Article]]:
    """Cluster articles into groups connected by page range overlaps.

    An article joins a group when it overlaps any article already in it, so
    groups are closed under chains of overlaps. Groups and their members keep
    input order. Articles that overlap nothing form single-member groups.
    """
    groups: list[list[Article]] = []
    remaining = list(articles)

    while remaining:
        group = [remaining.pop(0)]
        grown = True
        while grown:
            grown = False
            for candidate in list(remaining):
                if any(candidate.overlaps(member) for member in group):
                    group.append(candidate)
                    remaining.remove(candidate)
                    grown = True
        groups.append(group)

    return groups
