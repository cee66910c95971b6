"""Inline stylesheet rules into element style attributes."""

import logging
from typing import List, NamedTuple, Sequence, Union

from bs4 import Tag

from .selectors import find_matching_elements
from ..utils.config import PRESERVED_AT_RULES
from ..utils.css import (
    at_rule_name,
    declarations,
    is_style_rule,
    parse_css,
    rule_text,
    selector_text,
    selector_texts,
)
from ..utils.style import merge_styles

logger = logging.getLogger(__name__)

class InlineResult(NamedTuple):
    """Outcome of inlining a stylesheet into a tree."""
    root: Tag
    preserved_css: str

def collect_declarations(rule) -> List[str]:
    """Serialize every declaration of a style rule as ``property:value``.

    Source order is kept, repeated properties are all returned and values
    are left as written.
    """
    return [f"{name}:{value}" for name, value in declarations(rule)]

def _matching_elements(root, rule) -> List[Tag]:
    # Members of a selector group are matched one by one; an element
    # matched by several members is only returned once.
    seen = set()
    elements = []
    for selector in selector_texts(rule):
        for element in find_matching_elements(root, selector):
            if id(element) not in seen:
                seen.add(id(element))
                elements.append(element)
    return elements

def apply_css(root, css: Union[str, Sequence, None]) -> InlineResult:
    """Inline a stylesheet into the elements of a tree.

    Top-level ``@font-face``, ``@import``, ``@keyframes`` and ``@media``
    rules and every rule whose selector contains ``:`` cannot be inlined;
    their source is returned as preserved CSS instead. Other top-level
    rules are merged into the ``style`` attribute of each matching element,
    in stylesheet order, so later rules win on the same property.

    Args:
        root: Parsed document, mutated in place
        css: Stylesheet text or rules returned by ``parse_css``

    Returns:
        The mutated root and the preserved CSS text
    """
    rules = parse_css(css) if css is None or isinstance(css, str) else css
    preserved_rules = []

    # First pass: at-rules that must survive as CSS
    for rule in rules:
        if at_rule_name(rule) in PRESERVED_AT_RULES:
            preserved_rules.append(rule_text(rule))

    # Second pass: inline plain rules, keep pseudo selectors as CSS
    inlined = 0
    for rule in rules:
        if not is_style_rule(rule):
            continue

        selector = selector_text(rule)
        if ':' in selector:
            logger.debug(f"Preserving pseudo selector rule {selector!r}")
            preserved_rules.append(rule_text(rule))
            continue

        new_declarations = collect_declarations(rule)
        if not new_declarations:
            continue

        new_style = ';'.join(new_declarations)
        for element in _matching_elements(root, rule):
            element['style'] = merge_styles(element.get('style', ''), new_style)
            inlined += 1

    logger.debug(f"Inlined {inlined} rule application(s), preserved {len(preserved_rules)} rule(s)")
    return InlineResult(root, '\n'.join(preserved_rules))

__all__ = ['InlineResult', 'collect_declarations', 'apply_css']
