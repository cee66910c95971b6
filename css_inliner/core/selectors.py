"""Restricted CSS selector matching over BeautifulSoup trees.

Supported grammar, tried in this order:

* descendant selectors (``.nav a``, ``div.card p``),
* compound selectors (``div.note``, ``.btn.primary``),
* simple selectors (``*``, ``.note``, ``p``).

Ids, attribute selectors, pseudo selectors and combinators other than
whitespace are not part of the grammar. Such selectors match nothing or
match loosely; they never raise.
"""

import logging
from typing import Iterator, List, Optional

from bs4 import BeautifulSoup, Tag

logger = logging.getLogger(__name__)

def is_element(node) -> bool:
    """Check if a node is an element (the document object is not)."""
    return isinstance(node, Tag) and not isinstance(node, BeautifulSoup)

def iter_elements(root) -> Iterator[Tag]:
    """Yield every element under root, root included, in document order."""
    if is_element(root):
        yield root
    if isinstance(root, Tag):
        for node in root.descendants:
            if is_element(node):
                yield node

def class_tokens(element: Tag) -> List[str]:
    """Get the class tokens of an element.

    Works for ``class`` kept as a string as well as bs4's list form.
    """
    value = element.get('class')
    if not value:
        return []
    if isinstance(value, str):
        return value.split()
    return [token for item in value for token in item.split()]

def is_compound_selector(selector: str) -> bool:
    """Check for ``tag.cls...`` or ``.cls1.cls2...`` shapes."""
    dots = selector.count('.')
    return dots > 1 or (dots == 1 and not selector.startswith('.'))

def _matches_compound(element: Tag, selector: str) -> bool:
    parts = [part for part in selector.split('.') if part]
    if selector.startswith('.'):
        tag_name, classes = None, parts
    else:
        tag_name, classes = parts[0], parts[1:]

    if tag_name and element.name != tag_name:
        return False

    tokens = set(class_tokens(element))
    return all(cls in tokens for cls in classes)

def _matches_simple(element: Tag, selector: str) -> bool:
    if selector == '*':
        return True
    if selector.startswith('.'):
        return selector[1:] in class_tokens(element)
    return element.name == selector

def matches_selector(element: Tag, selector: str) -> bool:
    """Check a single element against a simple or compound selector."""
    if is_compound_selector(selector):
        return _matches_compound(element, selector)
    return _matches_simple(element, selector)

def _has_ancestor_chain(element: Tag, ancestors: List[str]) -> bool:
    # Parts are consumed right to left; each one is satisfied by the nearest
    # remaining ancestor that matches it, and the search never backtracks.
    index = len(ancestors) - 1
    current: Optional[Tag] = element.parent
    while current is not None and index >= 0:
        if is_element(current) and matches_selector(current, ancestors[index]):
            index -= 1
        current = current.parent
    return index < 0

def find_descendant_matches(root, selector: str) -> List[Tag]:
    """Find elements matching a whitespace-separated descendant selector."""
    parts = selector.split()
    if len(parts) < 2:
        return []

    *ancestors, last = parts
    return [
        element for element in iter_elements(root)
        if matches_selector(element, last) and _has_ancestor_chain(element, ancestors)
    ]

def find_compound_matches(root, selector: str) -> List[Tag]:
    """Find elements matching a compound selector."""
    return [element for element in iter_elements(root) if _matches_compound(element, selector)]

def find_simple_matches(root, selector: str) -> List[Tag]:
    """Find elements matching ``*``, ``.cls`` or a bare tag name."""
    return [element for element in iter_elements(root) if _matches_simple(element, selector)]

def find_matching_elements(root, selector: str) -> List[Tag]:
    """Find all elements under root matching a selector.

    Args:
        root: Document or element to search, included in the search
        selector: Selector text in the supported grammar

    Returns:
        Matching elements in document order
    """
    selector = selector.strip()
    if not selector:
        return []

    if len(selector.split()) > 1:
        matches = find_descendant_matches(root, selector)
    elif is_compound_selector(selector):
        matches = find_compound_matches(root, selector)
    else:
        matches = find_simple_matches(root, selector)

    logger.debug(f"Selector {selector!r} matched {len(matches)} element(s)")
    return matches

__all__ = [
    'is_element',
    'iter_elements',
    'class_tokens',
    'is_compound_selector',
    'matches_selector',
    'find_descendant_matches',
    'find_compound_matches',
    'find_simple_matches',
    'find_matching_elements',
]
