"""Style-rule Pydantic models for css-order-analyzer."""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple, Optional

from pydantic import BaseModel, Field, model_validator


class Specificity(NamedTuple):
    """Specificity vector of a single selector.

    Compared component-wise, so tuples of equal specificity are equal and
    the natural tuple ordering matches the cascade ordering.
    """

    inline: int
    ids: int
    classes: int
    tags: int


class RuleOrigin(str, Enum):
    """Origin of a style rule as classified by the browser."""

    REGULAR = "regular"
    USER_AGENT = "user-agent"
    INJECTED = "injected"
    INSPECTOR = "inspector"


class SourceRange(BaseModel):
    """Source span of a selector inside its stylesheet.

    Line and column values are kept exactly as the engine reports them.
    """

    model_config = {"extra": "ignore", "frozen": True, "populate_by_name": True}

    start_line: int = Field(alias="startLine", description="Start line")
    start_column: int = Field(alias="startColumn", description="Start column")
    end_line: int = Field(alias="endLine", description="End line")
    end_column: int = Field(alias="endColumn", description="End column")


class SelectorText(BaseModel):
    """One entry of a rule's selector list."""

    model_config = {"extra": "forbid", "frozen": True}

    text: str = Field(description="Selector source text")
    range: Optional[SourceRange] = Field(
        default=None, description="Span of the selector in its stylesheet"
    )


class Selector(BaseModel):
    """A selector that matched an element, bound to its stylesheet."""

    model_config = {"extra": "forbid", "frozen": True}

    text: str = Field(description="Selector source text")
    stylesheet_id: str = Field(description="Identifier of the owning stylesheet")
    range: Optional[SourceRange] = Field(
        default=None, description="Span of the selector in its stylesheet"
    )


class MatchedRule(BaseModel):
    """A style rule that matched one element.

    Only the selectors listed in ``matching_selectors`` matched the element;
    the rest of ``selectors`` belong to the rule but not to this match.
    """

    model_config = {"extra": "forbid"}

    origin: str = Field(description="Rule origin (regular, user-agent, ...)")
    stylesheet_id: Optional[str] = Field(
        default=None, description="Identifier of the stylesheet holding the rule"
    )
    selectors: list[SelectorText] = Field(
        default_factory=list, description="Complete selector list of the rule"
    )
    matching_selectors: list[int] = Field(
        default_factory=list,
        description="Indices into selectors that matched the element",
    )
    properties: list[str] = Field(
        default_factory=list, description="Property names declared by the rule"
    )

    @model_validator(mode="after")
    def _check_matching_indices(self) -> MatchedRule:
        for index in self.matching_selectors:
            if index < 0 or index >= len(self.selectors):
                raise ValueError(
                    f"matching selector index {index} is outside the selector "
                    f"list of length {len(self.selectors)}"
                )
        return self

    @property
    def is_author_rule(self) -> bool:
        """Check if the rule comes from an author stylesheet.

        Returns:
            True only for the ``regular`` origin.
        """
        return self.origin == RuleOrigin.REGULAR.value

    def matched_selectors(self) -> list[Selector]:
        """Resolve the matching indices into selectors.

        Duplicate indices produce duplicate selectors.

        Returns:
            Selectors in index order, each carrying the rule's stylesheet id.
        """
        stylesheet_id = self.stylesheet_id or ""
        return [
            Selector(
                text=self.selectors[index].text,
                stylesheet_id=stylesheet_id,
                range=self.selectors[index].range,
            )
            for index in self.matching_selectors
        ]
