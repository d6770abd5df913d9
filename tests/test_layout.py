"""Tests for arrangements, conflict detection and layout enumeration."""

import logging
import random
import time
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from unittest import mock

import pytest

from schemas import Page
from spread_assembler import Arrangement, LayoutEnumerator, generate_layouts
from spread_assembler.layout import (
    enumerate_layouts,
    fingerprint,
    group_conflicts,
    partition_conflicts,
)

ENUMERATOR = "spread_assembler.layout.enumerator"


def _random_articles(make_article, rng: random.Random, count: int):
    articles = []
    for i in range(count):
        start = rng.randint(1, 30)
        end = start + rng.randint(0, 4)
        articles.append(make_article(f"Article{i}", start, end))
    return articles


class TestArrangement:
    """Tests for Arrangement."""

    def test_add_disjoint(self, make_article):
        arrangement = Arrangement()

        assert arrangement.add(make_article("Alpha", 2, 3))
        assert arrangement.add(make_article("Beta", 4, 5))
        assert len(arrangement) == 2

    def test_add_overlapping_rejected(self, make_article):
        """An overlapping article is refused and the arrangement is unchanged."""
        arrangement = Arrangement([make_article("Alpha", 2, 5)])

        assert not arrangement.add(make_article("Beta", 5, 6))
        assert [article.name for article in arrangement] == ["Alpha"]

    def test_shared_boundary_page_overlaps(self, make_article):
        """Ranges are inclusive: [2, 4] and [4, 6] share page 4."""
        arrangement = Arrangement([make_article("Alpha", 2, 4)])

        assert not arrangement.add(make_article("Beta", 4, 6))

    def test_same_article_twice(self, make_article):
        article = make_article("Alpha", 2, 3)
        arrangement = Arrangement([article])

        assert not arrangement.add(article)

    def test_empty(self):
        arrangement = Arrangement()

        assert arrangement.is_empty
        assert arrangement.pages == []
        assert arrangement.max_page_number == 0
        assert arrangement.page_count == 0

    def test_pages_sorted_by_number(self, make_article):
        arrangement = Arrangement([make_article("Late", 6, 7), make_article("Early", 1, 2)])

        assert [page.page_number for page in arrangement.pages] == [1, 2, 6, 7]

    def test_page_totals(self, make_article):
        arrangement = Arrangement([make_article("Alpha", 2, 3), make_article("Beta", 9)])

        assert arrangement.page_count == 3
        assert arrangement.max_page_number == 9

    @pytest.mark.parametrize(
        "max_page, expected",
        [(10, 12), (12, 12), (4, 4), (5, 12), (13, 20)],
    )
    def test_printing_page_count(self, make_article, max_page, expected):
        """Inner pages round up to a signature of 8, plus a 4-page cover."""
        arrangement = Arrangement([make_article("Last", max_page)])

        assert arrangement.printing_page_count == expected

    def test_printing_page_count_empty(self):
        assert Arrangement().printing_page_count == 4

    def test_equality_is_order_sensitive(self, make_article):
        alpha = make_article("Alpha", 2, 3)
        beta = make_article("Beta", 4, 5)

        assert Arrangement([alpha, beta]) == Arrangement([alpha, beta])
        assert Arrangement([alpha, beta]) != Arrangement([beta, alpha])
        assert hash(Arrangement([alpha, beta])) == hash(Arrangement([alpha, beta]))

    def test_copy_is_independent(self, make_article):
        original = Arrangement([make_article("Alpha", 2, 3)])
        clone = original.copy()

        clone.add(make_article("Beta", 4, 5))

        assert len(original) == 1
        assert len(clone) == 2

    def test_article_for(self, make_article):
        alpha = make_article("Alpha", 2, 3)
        arrangement = Arrangement([alpha])

        assert arrangement.article_for(alpha.pages[0]) is alpha
        assert arrangement.article_for(Page(page_number=9, article_id="elsewhere")) is None

    def test_repr_lists_articles(self, make_article):
        arrangement = Arrangement([make_article("Alpha", 2, 3)])

        assert repr(arrangement) == "Arrangement(Alpha [2-3])"


class TestPartitionConflicts:
    """Tests for partition_conflicts."""

    def test_disjoint_articles(self, make_article):
        articles = [make_article("Alpha", 2, 3), make_article("Beta", 4, 5)]

        assert partition_conflicts(articles) == (articles, [])

    def test_overlapping_articles(self, make_article):
        alpha = make_article("Alpha", 2, 3)
        beta = make_article("Beta", 4)
        gamma = make_article("Gamma", 4, 5)

        assert partition_conflicts([alpha, beta, gamma]) == ([alpha], [beta, gamma])

    def test_same_name_articles_conflict(self, make_article):
        """Overlapping articles conflict even when they share a name."""
        first = make_article("Travel", 4, 5, folder=Path("/a"))
        second = make_article("Travel", 4, 5, folder=Path("/b"))

        assert partition_conflicts([first, second]) == ([], [first, second])

    def test_empty(self):
        assert partition_conflicts([]) == ([], [])

    def test_random_partition_is_consistent(self, make_article):
        """Non-conflicting articles overlap nothing; conflicting ones overlap something."""
        rng = random.Random(1234)
        for _ in range(50):
            articles = _random_articles(make_article, rng, rng.randint(0, 8))
            non_conflicting, conflicting = partition_conflicts(articles)

            assert len(non_conflicting) + len(conflicting) == len(articles)
            for article in non_conflicting:
                assert not any(article.overlaps(other) for other in articles if other is not article)
            for article in conflicting:
                assert any(article.overlaps(other) for other in articles if other is not article)


class TestGroupConflicts:
    """Tests for group_conflicts."""

    def test_chains_form_one_group(self, make_article):
        """A overlaps B and B overlaps C, so all three share a group."""
        a = make_article("A", 1, 2)
        b = make_article("B", 2, 3)
        c = make_article("C", 3, 4)
        d = make_article("D", 6)

        assert group_conflicts([a, b, c, d]) == [[a, b, c], [d]]

    def test_members_keep_input_order(self, make_article):
        late = make_article("Late", 8, 9)
        early = make_article("Early", 1, 2)
        wide = make_article("Wide", 2, 8)

        assert group_conflicts([late, early, wide]) == [[late, wide, early]]

    def test_empty(self):
        assert group_conflicts([]) == []


class TestEnumerateLayouts:
    """Tests for enumerate_layouts."""

    def test_no_conflicts(self, make_article):
        """Without overlaps there is exactly one arrangement holding everything."""
        articles = [make_article("Alpha", 2, 3), make_article("Beta", 4, 5)]

        layouts = enumerate_layouts(articles)

        assert layouts == [Arrangement(articles)]

    def test_empty_input(self):
        layouts = enumerate_layouts([])

        assert len(layouts) == 1
        assert layouts[0].is_empty

    def test_conflicts_fall_back_to_base(self, make_article, caplog):
        """When no order admits every overlapping article, the base is returned."""
        alpha = make_article("Alpha", 2, 3)
        beta = make_article("Beta", 4)
        gamma = make_article("Gamma", 4, 5)

        with caplog.at_level(logging.INFO):
            layouts = enumerate_layouts([alpha, beta, gamma])

        assert layouts == [Arrangement([alpha])]
        assert "No arrangement admits all 2 overlapping articles" in caplog.text

    def test_permutations_of_admissible_articles(self, make_article):
        """Every admissible order of the variable articles is a distinct arrangement."""
        base = make_article("Base", 1)
        first = make_article("First", 2, 3)
        second = make_article("Second", 4, 5)

        with mock.patch(
            f"{ENUMERATOR}.partition_conflicts", return_value=([base], [first, second])
        ):
            layouts = enumerate_layouts([base, first, second])

        assert layouts == [
            Arrangement([base, first, second]),
            Arrangement([base, second, first]),
        ]

    def test_random_layouts_never_overlap(self, make_article):
        """Every arrangement holds the non-conflicting articles and no overlaps."""
        rng = random.Random(99)
        for _ in range(30):
            articles = _random_articles(make_article, rng, rng.randint(0, 6))
            non_conflicting, _ = partition_conflicts(articles)

            for arrangement in enumerate_layouts(articles):
                members = list(arrangement)
                for article in non_conflicting:
                    assert article in members
                for i, article in enumerate(members):
                    assert not any(article.overlaps(other) for other in members[i + 1:])


class TestFingerprint:
    """Tests for fingerprint."""

    def test_format(self, make_article):
        assert fingerprint([make_article("Alpha", 2, 3)]) == "Alpha_2...3"

    def test_order_insensitive(self, make_article):
        alpha = make_article("Alpha", 2, 3)
        beta = make_article("Beta", 4, 5)

        assert fingerprint([alpha, beta]) == fingerprint([beta, alpha])

    def test_distinguishes_ranges(self, make_article):
        assert fingerprint([make_article("Alpha", 2, 3)]) != fingerprint(
            [make_article("Alpha", 2, 4)]
        )


class TestLayoutEnumerator:
    """Tests for LayoutEnumerator caching."""

    def test_cache_hit(self, make_article):
        """Repeated and reordered requests are computed once."""
        alpha = make_article("Alpha", 2, 3)
        beta = make_article("Beta", 4, 5)
        enumerator = LayoutEnumerator()

        with mock.patch(
            f"{ENUMERATOR}.enumerate_layouts", wraps=enumerate_layouts
        ) as computed:
            first = enumerator.generate([alpha, beta])
            second = enumerator.generate([beta, alpha])

        assert computed.call_count == 1
        assert first == second
        assert [alpha, beta] in enumerator

    def test_result_list_is_a_copy(self, make_article):
        enumerator = LayoutEnumerator()
        articles = [make_article("Alpha", 2, 3)]

        enumerator.generate(articles).clear()

        assert len(enumerator.generate(articles)) == 1

    def test_clear(self, make_article):
        enumerator = LayoutEnumerator()
        articles = [make_article("Alpha", 2, 3)]
        enumerator.generate(articles)

        enumerator.clear()

        assert articles not in enumerator

    def test_concurrent_requests_compute_once(self, make_article):
        """Concurrent callers for the same article set share one computation."""
        articles = [make_article("Alpha", 2, 3), make_article("Beta", 4, 5)]
        enumerator = LayoutEnumerator()

        def slow_enumerate(requested):
            time.sleep(0.05)
            return enumerate_layouts(requested)

        with mock.patch(
            f"{ENUMERATOR}.enumerate_layouts", side_effect=slow_enumerate
        ) as computed:
            with ThreadPoolExecutor(max_workers=8) as pool:
                results = list(pool.map(lambda _: enumerator.generate(articles), range(8)))

        assert computed.call_count == 1
        assert all(result == results[0] for result in results)

    def test_generate_layouts(self, make_article):
        articles = [make_article("Solo", 3, 4, folder=Path("/shared-cache"))]

        assert generate_layouts(articles) == [Arrangement(articles)]
