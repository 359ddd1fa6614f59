"""Configuration Pydantic models for css-order-analyzer."""
from __future__ import annotations

import re
from typing import List, Literal, Optional, get_args

from pydantic import BaseModel, Field, field_validator

WaitUntil = Literal["load", "domcontentloaded", "networkidle", "commit"]

# Page load states accepted by Playwright's goto
WAIT_STATES: tuple[str, ...] = get_args(WaitUntil)

# Custom properties keep their case; every other name is ASCII case-insensitive
_CUSTOM_PROPERTY = re.compile(r"^--[^\s:;{}]+$")
_PROPERTY_NAME = re.compile(r"^-?[a-z][a-z0-9-]*$")


class AnalyzerConfig(BaseModel):
    """Configuration for css-order-analyzer.

    Every field has a default so partial configuration files are valid.
    """

    model_config = {"extra": "forbid"}

    ignored_properties: Optional[List[str]] = Field(
        default=None,
        description="Property names that are never reported as conflicts.",
    )
    wait_until: WaitUntil = Field(
        default="load",
        description="Page load state to wait for before scanning.",
    )
    timeout_ms: int = Field(
        default=30000,
        gt=0,
        description="Navigation timeout in milliseconds.",
    )
    headless: bool = Field(
        default=True,
        description="Run the browser without a visible window.",
    )
    fail_fast: bool = Field(
        default=False,
        description="Stop scanning after the first element with a conflict.",
    )

    @field_validator("ignored_properties")
    @classmethod
    def normalize_property_names(cls, names: Optional[List[str]]) -> Optional[List[str]]:
        """Match names the way the browser reports them.

        Standard and vendor-prefixed names are lowercased, custom properties
        are kept as written, and duplicates are dropped.

        Raises:
            ValueError: If an entry is not a CSS property name.
        """
        if names is None:
            return None
        normalized: list[str] = []
        for raw in names:
            name = raw.strip()
            if _CUSTOM_PROPERTY.match(name):
                normalized.append(name)
            elif _PROPERTY_NAME.match(name.lower()):
                normalized.append(name.lower())
            else:
                raise ValueError(f"{raw!r} is not a CSS property name")
        return list(dict.fromkeys(normalized))
