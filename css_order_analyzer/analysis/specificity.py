"""Selector specificity calculation and hashing."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

import tinycss2

from css_order_analyzer.exceptions import MalformedSelectorError
from css_order_analyzer.models.style import Specificity

ZERO = Specificity(0, 0, 0, 0)

# Combinators and weightless simple selectors (universal, nesting, namespace bar)
_WEIGHTLESS_LITERALS = frozenset({">", "+", "~", "||", "*", "&", "|"})

# Pseudo-elements that may still be written with a single colon
_LEGACY_PSEUDO_ELEMENTS = frozenset({"before", "after", "first-line", "first-letter"})

# Functional pseudo-classes weighing as much as their most specific argument
_MAX_OF_ARGUMENTS = frozenset({"is", "matches", "not", "has"})

# Functional pseudo-classes weighing one pseudo-class plus their argument
_CLASS_PLUS_ARGUMENT = frozenset({"host", "host-context"})

_NTH_OF_SELECTOR = frozenset({"nth-child", "nth-last-child"})


class SpecificityCalculator(ABC):
    """Abstract capability computing specificity from selector text."""

    @abstractmethod
    def calculate(self, selector_text: str) -> list[Specificity]:
        """Compute the specificity of every selector in the text.

        Args:
            selector_text: Selector or comma-separated selector list.

        Returns:
            One specificity per selector found in the text.

        Raises:
            MalformedSelectorError: If the text cannot be parsed.
        """


class SelectorSpecificityCalculator(SpecificityCalculator):
    """Selectors Level 4 specificity computed over tinycss2 component values.

    Understands selector-list pseudo-classes (``:is``, ``:not``, ``:has``,
    ``:where``), ``:nth-child(An+B of S)``, ``:host()``, ``::slotted()``,
    vendor pseudo-elements and the nesting selector ``&``. The nesting
    selector weighs nothing since the parent rule is not known here.
    Selectors matched from stylesheets never carry inline weight, so the
    first component is always zero.
    """

    def calculate(self, selector_text: str) -> list[Specificity]:
        nodes = tinycss2.parse_component_value_list(selector_text, skip_comments=True)
        try:
            return [_complex_specificity(part) for part in _split_selector_list(nodes)]
        except ValueError as e:
            raise MalformedSelectorError(
                f'Cannot parse selector "{selector_text}": {e}'
            ) from e


def _add(left: Specificity, right: Specificity) -> Specificity:
    return Specificity(*(a + b for a, b in zip(left, right)))


def _is_literal(node: Any, value: str) -> bool:
    return node is not None and node.type == "literal" and node.value == value


def _split_selector_list(nodes: list[Any]) -> list[list[Any]]:
    """Split component values on top-level commas."""
    parts: list[list[Any]] = [[]]
    for node in nodes:
        if _is_literal(node, ","):
            parts.append([])
        else:
            parts[-1].append(node)
    return parts


def _max_specificity(nodes: list[Any]) -> Specificity:
    """Specificity of the most specific selector in a forgiving list.

    Empty entries weigh nothing, as in ``:is()``.
    """
    weights = [
        _complex_specificity(part)
        for part in _split_selector_list(nodes)
        if any(node.type != "whitespace" for node in part)
    ]
    return max(weights, default=ZERO)


def _complex_specificity(nodes: list[Any]) -> Specificity:
    """Sum the weight of every simple selector in a complex selector.

    Raises:
        ValueError: If a component value is not valid selector syntax.
    """
    tokens = [node for node in nodes if node.type != "whitespace"]
    if not tokens:
        raise ValueError("empty selector")

    total = ZERO
    position = 0
    while position < len(tokens):
        node = tokens[position]
        following = tokens[position + 1] if position + 1 < len(tokens) else None

        if node.type == "ident":
            # An identifier before "|" is a namespace prefix, not a type
            if not _is_literal(following, "|"):
                total = _add(total, Specificity(0, 0, 0, 1))
            position += 1
        elif node.type == "hash":
            if not node.is_identifier:
                raise ValueError(f"invalid id selector #{node.value}")
            total = _add(total, Specificity(0, 1, 0, 0))
            position += 1
        elif node.type == "[] block":
            total = _add(total, Specificity(0, 0, 1, 0))
            position += 1
        elif _is_literal(node, "."):
            if following is None or following.type != "ident":
                raise ValueError("expected a class name after '.'")
            total = _add(total, Specificity(0, 0, 1, 0))
            position += 2
        elif _is_literal(node, ":"):
            weight, position = _pseudo_specificity(tokens, position + 1)
            total = _add(total, weight)
        elif node.type == "literal" and node.value in _WEIGHTLESS_LITERALS:
            position += 1
        elif node.type == "error":
            raise ValueError(node.message)
        else:
            raise ValueError(f"unexpected {tinycss2.serialize([node])!r}")
    return total


def _pseudo_specificity(tokens: list[Any], position: int) -> tuple[Specificity, int]:
    """Weigh the pseudo-class or pseudo-element following a colon.

    Returns:
        The weight and the position just past the pseudo selector.
    """
    node = tokens[position] if position < len(tokens) else None

    if _is_literal(node, ":"):
        target = tokens[position + 1] if position + 1 < len(tokens) else None
        if target is not None and target.type == "ident":
            return Specificity(0, 0, 0, 1), position + 2
        if target is not None and target.type == "function":
            weight = Specificity(0, 0, 0, 1)
            if target.lower_name == "slotted":
                weight = _add(weight, _max_specificity(target.arguments))
            return weight, position + 2
        raise ValueError("expected a pseudo-element name after '::'")

    if node is not None and node.type == "ident":
        if node.lower_value in _LEGACY_PSEUDO_ELEMENTS:
            return Specificity(0, 0, 0, 1), position + 1
        return Specificity(0, 0, 1, 0), position + 1

    if node is not None and node.type == "function":
        name = node.lower_name
        if name == "where":
            return ZERO, position + 1
        if name in _MAX_OF_ARGUMENTS:
            return _max_specificity(node.arguments), position + 1
        weight = Specificity(0, 0, 1, 0)
        if name in _CLASS_PLUS_ARGUMENT:
            weight = _add(weight, _max_specificity(node.arguments))
        elif name in _NTH_OF_SELECTOR:
            weight = _add(weight, _max_specificity(_of_selector(node.arguments)))
        return weight, position + 1

    raise ValueError("expected a pseudo-class name after ':'")


def _of_selector(arguments: list[Any]) -> list[Any]:
    """Selector list after ``of`` in an ``An+B of S`` argument, if any."""
    for index, node in enumerate(arguments):
        if node.type == "ident" and node.lower_value == "of":
            return arguments[index + 1:]
    return []


_default_calculator: Optional[SpecificityCalculator] = None


def get_default_calculator() -> SpecificityCalculator:
    """Get the shared default specificity calculator."""
    global _default_calculator
    if _default_calculator is None:
        _default_calculator = SelectorSpecificityCalculator()
    return _default_calculator


def specificity_of(
    selector_text: str,
    calculator: Optional[SpecificityCalculator] = None,
) -> Specificity:
    """Compute the specificity of a single selector.

    Args:
        selector_text: Text of exactly one selector (not a selector list).
        calculator: Specificity capability to use. Defaults to the tinycss2-backed one.

    Returns:
        The selector's specificity vector.

    Raises:
        MalformedSelectorError: If the calculator reports anything other
            than exactly one specificity for the text.
    """
    calc = calculator if calculator is not None else get_default_calculator()
    specificities = calc.calculate(selector_text)
    if len(specificities) != 1:
        raise MalformedSelectorError(
            f'Expected one specificity for selector "{selector_text}", '
            f"but got {len(specificities)}"
        )
    return specificities[0]


def hash_specificity(spec: Specificity) -> str:
    """Encode a specificity vector as a grouping key.

    Components are non-negative integers joined with ``-``, so distinct
    vectors never share a key. The key is never used for ordering.

    Args:
        spec: Specificity vector.

    Returns:
        Key of the form ``inline-ids-classes-tags``, e.g. ``0-0-1-1``.
    """
    inline, ids, classes, tags = spec
    return f"{inline}-{ids}-{classes}-{tags}"
