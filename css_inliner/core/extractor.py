"""Forward (inline) and reverse (extract) conversion pipelines."""

import logging
from typing import NamedTuple, Optional

from bs4 import BeautifulSoup

from .apply import apply_css
from .reverse import reverse_inline_styles
from ..utils.config import AUTO_CLASS_PREFIX, DEFAULT_STYLESHEET_HREF, REQUEST_TIMEOUT
from ..utils.html import (
    collect_existing_css,
    extract_style_blocks,
    inject_style,
    inject_stylesheet_link,
    is_valid_url,
    load_html,
    parse_html,
    serialize_html,
)

logger = logging.getLogger(__name__)

class ConversionResult(NamedTuple):
    """HTML plus the stylesheet it links to, for the external variants."""
    html: str
    css: str

def _load_document(source: str, timeout: int, verify_ssl: bool) -> BeautifulSoup:
    return parse_html(load_html(source, timeout=timeout, verify_ssl=verify_ssl))

def _inline(source: str, base: Optional[str], timeout: int, verify_ssl: bool):
    dom = _load_document(source, timeout, verify_ssl)
    if base is None and is_valid_url(source):
        base = source.strip()

    css_text = extract_style_blocks(dom, base, timeout=timeout, verify_ssl=verify_ssl)
    return apply_css(dom, css_text)

def inline_css_to_tree(source: str, base: Optional[str] = None,
                       timeout: int = REQUEST_TIMEOUT, verify_ssl: bool = True) -> BeautifulSoup:
    """Inline a document's stylesheets into its elements.

    Rules that cannot be inlined (preserved at-rules and pseudo selectors)
    are put back in a single ``<style>`` block in the head.

    Args:
        source: HTML text or URL of the document
        base: Base URL or directory for relative stylesheet links; defaults
            to the document URL when source is one
        timeout: Request timeout in seconds
        verify_ssl: Whether to verify SSL certificates

    Returns:
        The converted document tree

    Raises:
        NetworkError: If the document or a linked stylesheet cannot be fetched
    """
    dom, preserved_css = _inline(source, base, timeout, verify_ssl)

    if preserved_css.strip():
        inject_style(dom, preserved_css)

    return dom

def inline_css(source: str, base: Optional[str] = None,
               timeout: int = REQUEST_TIMEOUT, verify_ssl: bool = True) -> str:
    """Inline a document's stylesheets and return the HTML text."""
    return serialize_html(inline_css_to_tree(source, base, timeout=timeout, verify_ssl=verify_ssl))

def inline_css_external(source: str, href: str = DEFAULT_STYLESHEET_HREF, base: Optional[str] = None,
                        timeout: int = REQUEST_TIMEOUT, verify_ssl: bool = True) -> ConversionResult:
    """Inline a document's stylesheets, linking the rules that must stay CSS.

    Returns:
        The HTML and the preserved CSS to be written at href
    """
    dom, preserved_css = _inline(source, base, timeout, verify_ssl)

    if preserved_css.strip():
        inject_stylesheet_link(dom, href)

    return ConversionResult(serialize_html(dom), preserved_css)

def _reverse(source: str, timeout: int, verify_ssl: bool, auto_class_prefix: str):
    dom = _load_document(source, timeout, verify_ssl)

    existing_css = collect_existing_css(dom)
    reversed_css = reverse_inline_styles(dom, auto_class_prefix)

    all_css = '\n\n'.join(css for css in (existing_css, reversed_css) if css and css.strip())
    logger.debug(f"Reverse conversion produced {len(all_css)} characters of CSS")
    return dom, all_css

def reverse_css(source: str, timeout: int = REQUEST_TIMEOUT, verify_ssl: bool = True,
                auto_class_prefix: str = AUTO_CLASS_PREFIX) -> BeautifulSoup:
    """Move a document's inline styles into a ``<style>`` block.

    Existing ``<style>`` blocks are merged into the new one, ahead of the
    generated rules.

    Args:
        source: HTML text or URL of the document
        timeout: Request timeout in seconds
        verify_ssl: Whether to verify SSL certificates
        auto_class_prefix: Prefix of generated class names

    Returns:
        The converted document tree
    """
    dom, all_css = _reverse(source, timeout, verify_ssl, auto_class_prefix)

    if all_css:
        inject_style(dom, all_css)

    return dom

def reverse_css_internal(source: str, timeout: int = REQUEST_TIMEOUT, verify_ssl: bool = True,
                         auto_class_prefix: str = AUTO_CLASS_PREFIX) -> str:
    """Move a document's inline styles into a ``<style>`` block, as HTML text."""
    return serialize_html(reverse_css(source, timeout=timeout, verify_ssl=verify_ssl,
                                      auto_class_prefix=auto_class_prefix))

def reverse_css_external(source: str, href: str = DEFAULT_STYLESHEET_HREF,
                         timeout: int = REQUEST_TIMEOUT, verify_ssl: bool = True,
                         auto_class_prefix: str = AUTO_CLASS_PREFIX) -> ConversionResult:
    """Move a document's inline styles into an external stylesheet.

    Returns:
        The HTML, linking href when any CSS was produced, and the CSS text
    """
    dom, all_css = _reverse(source, timeout, verify_ssl, auto_class_prefix)

    if all_css:
        inject_stylesheet_link(dom, href)

    return ConversionResult(serialize_html(dom), all_css)

__all__ = [
    'ConversionResult',
    'inline_css_to_tree',
    'inline_css',
    'inline_css_external',
    'reverse_css',
    'reverse_css_internal',
    'reverse_css_external',
]
