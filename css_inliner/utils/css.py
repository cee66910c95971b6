"""Stylesheet parsing helpers built on tinycss2.

Rules are kept as token trees, so preludes and declaration values serialize
back to the text they were written with. Selectors are never validated:
a prelude the selector engine does not understand is still a rule.
"""

import logging
from typing import List, Optional

import tinycss2

logger = logging.getLogger(__name__)

def parse_css(css_text: Optional[str]) -> list:
    """Parse stylesheet text into its top-level rules.

    Comments, whitespace and parse errors between rules are dropped.
    ``@import`` targets are never loaded; the rule is kept as text.

    Args:
        css_text: CSS source, may be empty or None

    Returns:
        Top-level qualified rules and at-rules in source order
    """
    nodes = tinycss2.parse_stylesheet(css_text or '', skip_comments=True, skip_whitespace=True)

    rules = []
    for node in nodes:
        if node.type == 'error':
            logger.debug(f"Skipping unparsable CSS at {node.source_line}:{node.source_column}: {node.message}")
            continue
        rules.append(node)

    logger.debug(f"Parsed stylesheet with {len(rules)} top-level rule(s)")
    return rules

def is_style_rule(rule) -> bool:
    """Check if a rule is a plain ``selector { ... }`` rule."""
    return rule.type == 'qualified-rule'

def at_rule_name(rule) -> Optional[str]:
    """Get the lowercase name of an at-rule, e.g. ``media``.

    Returns:
        The name without ``@``, or None for style rules
    """
    if rule.type != 'at-rule':
        return None
    return rule.lower_at_keyword

def rule_text(rule) -> str:
    """Source text of a whole rule."""
    return rule.serialize().strip()

def selector_text(rule) -> str:
    """Source text of a style rule's selector group."""
    return tinycss2.serialize(rule.prelude).strip()

def selector_texts(rule) -> List[str]:
    """Get each selector of a rule's selector group.

    The group is split on commas outside of brackets and functions.
    """
    selectors = []
    current = []
    for token in rule.prelude:
        if token.type == 'literal' and token.value == ',':
            selectors.append(current)
            current = []
        else:
            current.append(token)
    selectors.append(current)

    texts = (tinycss2.serialize(tokens).strip() for tokens in selectors)
    return [text for text in texts if text]

def declarations(rule) -> List[tuple]:
    """Get the ``(property, value)`` pairs of a style rule.

    Values are the declaration's source text with ``!important`` removed.
    Repeated properties are all returned in source order; nested rules and
    malformed declarations are ignored.
    """
    if not rule.content:
        return []

    nodes = tinycss2.parse_blocks_contents(rule.content, skip_comments=True, skip_whitespace=True)
    return [
        (node.name, tinycss2.serialize(node.value).strip())
        for node in nodes
        if node.type == 'declaration'
    ]

__all__ = [
    'parse_css',
    'is_style_rule',
    'at_rule_name',
    'rule_text',
    'selector_text',
    'selector_texts',
    'declarations',
]
