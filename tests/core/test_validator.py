"""
Test suite for the diagram grammar validator.

Covers empty input, each error rule, each advisory warning, and the
ordering of reported problems.
"""

import pytest

from legal_diagrams.core.diagram import validate_diagram
from legal_diagrams.core.diagram.validator import (
    EMPTY_DIAGRAM_ERROR,
    NO_ENTITIES_ERROR,
    NO_GROUPS_WARNING,
    NO_RELATIONSHIPS_WARNING,
    NO_STYLING_WARNING,
    ORIENTATION_ERROR,
    UNBALANCED_BRACKETS_ERROR,
    invalid_category_error,
)


class TestEmptyInput:
    """Empty input short-circuits with a single error."""

    @pytest.mark.parametrize("text", ["", "   ", "\n\t\n", None])
    def test_empty_input_yields_single_error(self, text) -> None:
        """Empty, whitespace-only and None all report the diagram as empty."""
        verdict = validate_diagram(text)

        assert verdict.is_valid is False
        assert verdict.errors == (EMPTY_DIAGRAM_ERROR,)
        assert verdict.warnings == ()


class TestValidDiagrams:
    """Well-formed diagrams pass with no errors."""

    def test_complete_diagram_is_valid_without_warnings(self, persons_diagram: str) -> None:
        """Grouped, related and styled diagram produces a clean verdict."""
        verdict = validate_diagram(persons_diagram)

        assert verdict.is_valid is True
        assert verdict.errors == ()
        assert verdict.warnings == ()

    def test_second_sample_is_valid(self, events_diagram: str) -> None:
        """LR diagram with dangling relationship references is still valid."""
        verdict = validate_diagram(events_diagram)

        assert verdict.is_valid is True
        assert verdict.errors == ()

    def test_leading_whitespace_is_ignored(self) -> None:
        """Header may follow blank lines and indentation."""
        verdict = validate_diagram("\n\n   graph RL\n    a[Alice]:::person\n")

        assert verdict.is_valid is True


class TestOrientationRule:
    """The diagram must open with a graph/flowchart orientation declaration."""

    @pytest.mark.parametrize(
        "header",
        ["graph TD", "graph LR", "graph BT", "graph RL", "flowchart LR", "GRAPH td", "Flowchart Bt"],
    )
    def test_accepted_headers(self, header: str) -> None:
        """Keyword and orientation are case-insensitive."""
        verdict = validate_diagram(f"{header}\n    a[Alice]:::person")

        assert ORIENTATION_ERROR not in verdict.errors
        assert verdict.is_valid is True

    @pytest.mark.parametrize(
        "header",
        ["chart TD", "graph TB", "graph", "graph TDX", "sequenceDiagram", "a[Alice] graph TD"],
    )
    def test_rejected_headers(self, header: str) -> None:
        """Unknown keywords, unknown orientations and missing headers are errors."""
        verdict = validate_diagram(f"{header}\n    a[Alice]:::person")

        assert verdict.is_valid is False
        assert ORIENTATION_ERROR in verdict.errors


class TestCategoryRule:
    """Every category tag must be one of the seven entity categories."""

    def test_unknown_category_is_named_in_error(self) -> None:
        """A plaintiff tag is rejected and the error names it."""
        verdict = validate_diagram("graph TD\n    p1[John Smith]:::plaintiff")

        assert verdict.is_valid is False
        assert any("plaintiff" in error for error in verdict.errors)

    def test_error_lists_allowed_categories(self) -> None:
        """Message follows the documented format."""
        verdict = validate_diagram("graph TD\n    p1[John Smith]:::plaintiff")

        assert verdict.errors == (
            "Invalid entity class: plaintiff. Allowed: case, person, organisation, "
            "legal_issue, event, document, location",
        )

    def test_each_distinct_unknown_category_reported_once(self) -> None:
        """Repeated unknown tags collapse; distinct ones keep first-seen order."""
        text = (
            "graph TD\n"
            "    p1[Alice]:::plaintiff\n"
            "    p2[Bob]:::judge\n"
            "    p3[Carol]:::plaintiff\n"
        )

        verdict = validate_diagram(text)

        assert verdict.errors == (
            invalid_category_error("plaintiff"),
            invalid_category_error("judge"),
        )

    def test_all_known_categories_accepted(self) -> None:
        """All seven categories validate."""
        text = "graph TD\n" + "\n".join(
            f"    n{index}[Node {index}]:::{category}"
            for index, category in enumerate(
                ["case", "person", "organisation", "legal_issue", "event", "document", "location"]
            )
        )

        verdict = validate_diagram(text)

        assert verdict.is_valid is True

    def test_category_match_is_exact(self) -> None:
        """A plural tag is not a known category."""
        verdict = validate_diagram("graph TD\n    p1[Alice]:::persons")

        assert invalid_category_error("persons") in verdict.errors


class TestNodeAndBracketRules:
    """Node presence and bracket balance."""

    def test_unclosed_bracket_reports_imbalance(self) -> None:
        """One opening bracket and no closing bracket is unbalanced."""
        verdict = validate_diagram("graph TD\n a[Alice")

        assert verdict.is_valid is False
        assert UNBALANCED_BRACKETS_ERROR in verdict.errors

    def test_no_nodes_is_an_error(self) -> None:
        """A header alone declares no entities."""
        verdict = validate_diagram("graph TD\n    a --> b")

        assert NO_ENTITIES_ERROR in verdict.errors
        assert UNBALANCED_BRACKETS_ERROR not in verdict.errors

    def test_empty_label_does_not_count_as_node(self) -> None:
        """Brackets with nothing inside declare no entity."""
        verdict = validate_diagram("graph TD\n    a[ ]:::person")

        assert NO_ENTITIES_ERROR in verdict.errors

    def test_labels_with_spaces_count_as_nodes(self) -> None:
        """Display labels are arbitrary text."""
        verdict = validate_diagram("graph TD\n    a[Re: Smith & Co. (1998)]:::case")

        assert NO_ENTITIES_ERROR not in verdict.errors

    def test_extra_closing_bracket_is_unbalanced(self) -> None:
        """Imbalance is detected in either direction."""
        verdict = validate_diagram("graph TD\n    a[Alice]]:::person")

        assert UNBALANCED_BRACKETS_ERROR in verdict.errors


class TestWarnings:
    """Advisory warnings never affect validity."""

    def test_bare_diagram_gets_all_three_warnings_in_order(self) -> None:
        """Missing groups, relationships and styling are reported in that order."""
        verdict = validate_diagram("graph TD\n    a[Alice]:::person")

        assert verdict.is_valid is True
        assert verdict.warnings == (
            NO_GROUPS_WARNING,
            NO_RELATIONSHIPS_WARNING,
            NO_STYLING_WARNING,
        )

    def test_open_line_relationship_satisfies_relationship_rule(self) -> None:
        """Any arrow-family marker counts as a relationship."""
        verdict = validate_diagram("graph TD\n    a[Alice]:::person --- b[Bob]:::person")

        assert NO_RELATIONSHIPS_WARNING not in verdict.warnings

    def test_subgraph_must_be_a_whole_word(self) -> None:
        """An identifier merely containing the keyword is not a group."""
        verdict = validate_diagram("graph TD\n    mysubgraph persons\n    a[Alice]:::person")

        assert NO_GROUPS_WARNING in verdict.warnings

    def test_trailing_subgraph_keyword_without_name(self) -> None:
        """Grouping requires a name after the keyword."""
        verdict = validate_diagram("graph TD\n    a[Alice]:::person\n    subgraph")

        assert NO_GROUPS_WARNING in verdict.warnings

    def test_classdef_keyword_is_case_insensitive(self) -> None:
        """Styling detection accepts any casing of classDef."""
        verdict = validate_diagram("graph TD\n    a[Alice]:::person\n    CLASSDEF person fill:#fff")

        assert NO_STYLING_WARNING not in verdict.warnings


class TestErrorOrdering:
    """Errors preserve detection order."""

    def test_errors_reported_in_rule_order(self) -> None:
        """Orientation, category, node presence, then bracket balance."""
        verdict = validate_diagram("chart TD\n a[Alice:::plaintiff")

        assert verdict.errors == (
            ORIENTATION_ERROR,
            invalid_category_error("plaintiff"),
            NO_ENTITIES_ERROR,
            UNBALANCED_BRACKETS_ERROR,
        )

    def test_to_dict_shape(self) -> None:
        """Serialized verdict exposes validity, errors and warnings as lists."""
        verdict = validate_diagram("graph TD\n a[Alice")

        data = verdict.to_dict()

        assert data["is_valid"] is False
        assert isinstance(data["errors"], list)
        assert isinstance(data["warnings"], list)
