"""Tests for the diagram statistics extractor."""

import pytest

from legal_diagrams.core.diagram import EntityCategory, compute_stats


class TestEmptyAndMalformedInput:
    """Counting never fails and defaults every category to zero."""

    @pytest.mark.parametrize("text", [None, "", "garbage text with no diagram syntax"])
    def test_zero_stats(self, text) -> None:
        """No tags and no markers yields all-zero stats."""
        stats = compute_stats(text)

        assert stats.total_entities == 0
        assert stats.total_relationships == 0
        assert set(stats.entities_by_type) == set(EntityCategory)
        assert all(count == 0 for count in stats.entities_by_type.values())

    def test_invalid_diagram_is_still_counted(self) -> None:
        """Counting does not depend on validity."""
        stats = compute_stats("chart XX\n a[Alice:::person --> b")

        assert stats.entities_by_type[EntityCategory.PERSON] == 1
        assert stats.total_relationships == 1


class TestEntityCounts:
    """Entity counts per category."""

    def test_sample_diagram_counts(self, persons_diagram: str) -> None:
        """Counts match the tags in the sample."""
        stats = compute_stats(persons_diagram)

        assert stats.entities_by_type[EntityCategory.PERSON] == 2
        assert stats.entities_by_type[EntityCategory.ORGANISATION] == 1
        assert stats.entities_by_type[EntityCategory.CASE] == 1
        assert stats.entities_by_type[EntityCategory.LOCATION] == 0
        assert stats.total_entities == 4
        assert stats.total_relationships == 2

    def test_repeated_tags_on_one_node_all_count(self) -> None:
        """Counting is lexical; duplicate tags are not collapsed."""
        stats = compute_stats("graph TD\n a[Alice]:::person:::person")

        assert stats.entities_by_type[EntityCategory.PERSON] == 2

    def test_unknown_and_near_miss_tags_are_ignored(self) -> None:
        """Only exact category tokens are counted."""
        stats = compute_stats("a[A]:::plaintiff\nb[B]:::persons\nc[C]:::legal_issue")

        assert stats.total_entities == 1
        assert stats.entities_by_type[EntityCategory.LEGAL_ISSUE] == 1

    def test_category_prefix_of_longer_token_not_counted(self) -> None:
        """A token extending a category name is not that category."""
        stats = compute_stats("a[A]:::personnel\nb[B]:::eventual")

        assert stats.entities_by_type[EntityCategory.PERSON] == 0
        assert stats.entities_by_type[EntityCategory.EVENT] == 0
        assert stats.total_entities == 0

    @pytest.mark.parametrize(
        "text",
        [
            "a:::case b:::event c:::event",
            "x[Y]:::document:::location:::plaintiff",
            "::::person",
            "graph TD\n a[A]:::organisation --> b[B]:::organisation",
        ],
    )
    def test_category_counts_sum_to_total(self, text: str) -> None:
        """entities_by_type always sums to total_entities."""
        stats = compute_stats(text)

        assert sum(stats.entities_by_type.values()) == stats.total_entities


class TestRelationshipCounts:
    """Relationship markers are the ``--`` arrow family."""

    def test_arrow_family(self) -> None:
        """-->, --- and --| each count once."""
        stats = compute_stats("a --> b\nb --- c\nc--|label|d")

        assert stats.total_relationships == 3

    def test_dotted_arrows_are_not_counted(self) -> None:
        """-.-> is outside the marker family."""
        stats = compute_stats("a -.-> b")

        assert stats.total_relationships == 0

    def test_long_arrow_counts_once(self) -> None:
        """Markers are consumed left to right without overlap."""
        stats = compute_stats("a ----> b")

        assert stats.total_relationships == 1


class TestSerialization:
    """Statistics serialization."""

    def test_to_dict_uses_category_names(self, persons_diagram: str) -> None:
        """Keys are the category values and all seven are present."""
        data = compute_stats(persons_diagram).to_dict()

        assert data["total_entities"] == 4
        assert data["total_relationships"] == 2
        assert data["entities_by_type"] == {
            "case": 1,
            "person": 2,
            "organisation": 1,
            "legal_issue": 0,
            "event": 0,
            "document": 0,
            "location": 0,
        }
