"""Turn inline style attributes back into stylesheet rules."""

import logging
from typing import Dict, List, NamedTuple, Optional

from bs4 import Tag

from .selectors import class_tokens, is_element
from ..utils.config import AUTO_CLASS_PREFIX, GLOBAL_TAGS
from ..utils.style import normalize_style

logger = logging.getLogger(__name__)

class StyleEntry(NamedTuple):
    """One element's inline style, keyed for deduplication."""
    selector: str
    normalized_style: str
    element: Tag

def find_parent_with_class(node) -> Optional[Tag]:
    """Find the nearest element, starting at node and going up, with a class."""
    while node is not None:
        if is_element(node) and class_tokens(node):
            return node
        node = node.parent
    return None

def build_css(entries: List[StyleEntry]) -> str:
    """Group entries sharing a style into one rule each.

    Rules come out in the order their style was first seen; a rule lists
    every distinct selector of its group, one per line.
    """
    groups: Dict[str, Dict[str, None]] = {}
    for entry in entries:
        groups.setdefault(entry.normalized_style, {})[entry.selector] = None

    rules = []
    for style, selectors in groups.items():
        selector_list = ',\n'.join(selectors)
        declarations = '\n'.join(f"  {declaration};" for declaration in style.split(';'))
        rules.append(f"{selector_list} {{\n{declarations}\n}}")

    return '\n\n'.join(rules)

class InlineStyleExtractor:
    """Extract inline styles from a tree into deduplicated CSS rules.

    Each call to :meth:`extract` numbers generated classes from 1, so
    extractor instances can be reused.
    """

    def __init__(self, auto_class_prefix: str = AUTO_CLASS_PREFIX):
        """Initialize the extractor.

        Args:
            auto_class_prefix: Prefix of classes added to elements that
                have no class and no class-bearing ancestor
        """
        self.auto_class_prefix = auto_class_prefix
        self._auto_class_count = 0
        self._entries: List[StyleEntry] = []

    def extract(self, root) -> str:
        """Remove every inline style under root and return equivalent CSS.

        Args:
            root: Parsed document, mutated in place

        Returns:
            Generated CSS text, empty when no element carried a style
        """
        self._auto_class_count = 0
        self._entries = []

        self._walk(root, None)

        css = build_css(self._entries)
        logger.debug(
            f"Extracted {len(self._entries)} inline style(s), "
            f"{self._auto_class_count} generated class(es)"
        )
        return css

    def _walk(self, node, parent) -> None:
        if not isinstance(node, Tag):
            return

        if is_element(node) and node.has_attr('style'):
            inline_style = node['style'].strip()
            if inline_style:
                self._entries.append(StyleEntry(
                    selector=self.generate_selector(node, parent),
                    normalized_style=normalize_style(inline_style),
                    element=node,
                ))
            del node['style']

        for child in list(node.children):
            self._walk(child, node)

    def generate_selector(self, element: Tag, parent) -> str:
        """Pick a selector for an element.

        In order of preference: the element's first class, its nearest
        class-bearing ancestor followed by its tag, a bare tag for
        document-level elements, or a newly generated class.
        """
        tokens = class_tokens(element)
        if tokens:
            return f".{tokens[0]}"

        ancestor = find_parent_with_class(parent)
        if ancestor is not None:
            return f".{class_tokens(ancestor)[0]} {element.name}"

        if element.name in GLOBAL_TAGS:
            return element.name

        self._auto_class_count += 1
        auto_class = f"{self.auto_class_prefix}-{self._auto_class_count}"
        self._add_class(element, auto_class)
        logger.debug(f"Generated class {auto_class!r} for <{element.name}>")
        return f".{auto_class}"

    @staticmethod
    def _add_class(element: Tag, class_name: str) -> None:
        current = element.get('class')
        if isinstance(current, list):
            element['class'] = current + [class_name]
        elif current and current.strip():
            element['class'] = f"{current} {class_name}"
        else:
            element['class'] = class_name

def reverse_inline_styles(root, auto_class_prefix: str = AUTO_CLASS_PREFIX) -> str:
    """Extract inline styles under root into CSS with a fresh extractor."""
    return InlineStyleExtractor(auto_class_prefix).extract(root)

__all__ = [
    'StyleEntry',
    'InlineStyleExtractor',
    'find_parent_with_class',
    'build_css',
    'reverse_inline_styles',
]
