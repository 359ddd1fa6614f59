"""Tests for style-rule models."""
import pytest
from pydantic import ValidationError

from css_order_analyzer.models.style import (
    MatchedRule,
    RuleOrigin,
    Selector,
    SelectorText,
    SourceRange,
    Specificity,
)


class TestSpecificity:
    """Tests for the Specificity vector."""

    def test_equality_is_component_wise(self) -> None:
        """Test equal components mean equal vectors."""
        assert Specificity(0, 0, 1, 1) == Specificity(0, 0, 1, 1)
        assert Specificity(0, 0, 1, 1) != Specificity(0, 0, 1, 2)

    def test_ordering_follows_cascade(self) -> None:
        """Test one id outweighs any number of classes."""
        assert Specificity(0, 1, 0, 0) > Specificity(0, 0, 12, 3)
        assert Specificity(1, 0, 0, 0) > Specificity(0, 5, 0, 0)

    def test_named_components(self) -> None:
        """Test components are reachable by name."""
        spec = Specificity(0, 1, 2, 3)
        assert (spec.inline, spec.ids, spec.classes, spec.tags) == (0, 1, 2, 3)


class TestSourceRange:
    """Tests for SourceRange model."""

    def test_accepts_protocol_keys(self) -> None:
        """Test camelCase protocol keys populate the fields."""
        source_range = SourceRange.model_validate(
            {"startLine": 1, "startColumn": 2, "endLine": 3, "endColumn": 4}
        )
        assert source_range.start_line == 1
        assert source_range.end_column == 4

    def test_is_frozen(self) -> None:
        """Test ranges are immutable."""
        source_range = SourceRange(start_line=0, start_column=0, end_line=0, end_column=1)
        with pytest.raises(ValidationError):
            source_range.start_line = 5  # type: ignore[misc]


class TestSelector:
    """Tests for Selector model."""

    def test_equality(self) -> None:
        """Test selectors with equal text, stylesheet and span are equal."""
        first = Selector(text="p", stylesheet_id="1.1")
        assert first == Selector(text="p", stylesheet_id="1.1")
        assert first != Selector(text="p", stylesheet_id="1.2")

    def test_model_forbids_extra_fields(self) -> None:
        """Test that extra fields are forbidden."""
        with pytest.raises(ValidationError):
            Selector(text="p", stylesheet_id="1", specificity=1)  # type: ignore[call-arg]


class TestMatchedRule:
    """Tests for MatchedRule model."""

    def make(self, origin: str = "regular", matching: list[int] | None = None) -> MatchedRule:
        return MatchedRule(
            origin=origin,
            stylesheet_id="1.1",
            selectors=[SelectorText(text="h1"), SelectorText(text="p")],
            matching_selectors=[1] if matching is None else matching,
            properties=["color"],
        )

    def test_is_author_rule(self) -> None:
        """Test only the regular origin is an author rule."""
        assert self.make(RuleOrigin.REGULAR.value).is_author_rule is True
        assert self.make(RuleOrigin.USER_AGENT.value).is_author_rule is False
        assert self.make(RuleOrigin.INJECTED.value).is_author_rule is False
        assert self.make(RuleOrigin.INSPECTOR.value).is_author_rule is False

    def test_matched_selectors(self) -> None:
        """Test matching indices resolve to selectors with the stylesheet id."""
        selectors = self.make().matched_selectors()

        assert selectors == [Selector(text="p", stylesheet_id="1.1")]

    def test_rejects_out_of_range_index(self) -> None:
        """Test indices outside the selector list are rejected."""
        with pytest.raises(ValidationError, match="outside the selector list"):
            self.make(matching=[2])

    def test_rejects_negative_index(self) -> None:
        """Test negative indices are rejected."""
        with pytest.raises(ValidationError):
            self.make(matching=[-1])

    def test_missing_stylesheet_id(self) -> None:
        """Test rules without a stylesheet resolve to an empty id."""
        rule = MatchedRule(
            origin="regular",
            selectors=[SelectorText(text="p")],
            matching_selectors=[0],
        )
        assert rule.matched_selectors()[0].stylesheet_id == ""
