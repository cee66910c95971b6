"""HTML content handling functionality."""

import os
import logging
from typing import Optional
from urllib.parse import urljoin, urlparse

import requests
from bs4 import BeautifulSoup, Tag
from bs4.element import Stylesheet
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .config import MAX_RETRIES, REQUEST_TIMEOUT, USER_AGENT
from .error import NetworkError
from .file import read_text_file

logger = logging.getLogger(__name__)

def is_valid_url(url: str) -> bool:
    """Check if string is an absolute http(s) URL.

    Args:
        url: URL to check

    Returns:
        True if valid URL
    """
    try:
        result = urlparse(url.strip())
    except (AttributeError, ValueError):
        return False
    return result.scheme in ('http', 'https') and bool(result.netloc)

def fetch_text(url: str, timeout: int = REQUEST_TIMEOUT, verify_ssl: bool = True,
               max_retries: int = MAX_RETRIES) -> str:
    """Fetch a document or stylesheet as text.

    Connection errors and 5xx responses are retried with backoff by the
    transport adapter.

    Args:
        url: URL to fetch
        timeout: Request timeout in seconds
        verify_ssl: Whether to verify SSL certificates
        max_retries: Retry budget of the transport adapter

    Returns:
        Response body as text

    Raises:
        NetworkError: If the request ultimately fails
    """
    session = requests.Session()
    adapter = HTTPAdapter(max_retries=Retry(
        total=max_retries,
        backoff_factor=0.5,
        status_forcelist=[500, 502, 503, 504],
        allowed_methods=['GET']
    ))
    session.mount('http://', adapter)
    session.mount('https://', adapter)

    try:
        logger.info(f"Fetching {url}")
        response = session.get(url, headers={'User-Agent': USER_AGENT},
                               timeout=timeout, verify=verify_ssl)
        response.raise_for_status()
        return response.text
    except requests.RequestException as e:
        logger.error(f"Error fetching URL {url}: {e}")
        raise NetworkError(f"Failed to fetch {url}: {e}") from e
    finally:
        session.close()

def load_html(source: str, timeout: int = REQUEST_TIMEOUT, verify_ssl: bool = True) -> str:
    """Get HTML from a URL, or return the source when it is markup already."""
    if is_valid_url(source):
        return fetch_text(source.strip(), timeout=timeout, verify_ssl=verify_ssl)
    return source

def parse_html(html: Optional[str]) -> BeautifulSoup:
    """Parse HTML content.

    ``class`` stays a single space-separated string instead of bs4's
    default list so that attributes round-trip exactly as written.
    """
    return BeautifulSoup(html or '', 'html.parser', multi_valued_attributes=None)

def serialize_html(root) -> str:
    """Render a tree back to HTML text."""
    return str(root)

def find_node(root, name: str) -> Optional[Tag]:
    """Find the first element with the given tag name, root included."""
    if isinstance(root, Tag) and not isinstance(root, BeautifulSoup) and root.name == name:
        return root
    return root.find(name)

def _new_tag(root, name: str, attrs: Optional[dict] = None) -> Tag:
    top = root
    while top.parent is not None:
        top = top.parent
    factory = top if isinstance(top, BeautifulSoup) else BeautifulSoup('', 'html.parser')
    return factory.new_tag(name, attrs=attrs or {})

def _insert_in_head(root, tag: Tag) -> None:
    head = find_node(root, 'head')
    if head is not None:
        head.append(tag)
    else:
        # Fragments without a head get the block up front
        root.insert(0, tag)

def inject_style(root, css: str) -> Tag:
    """Add a ``<style>`` block holding css to the document head.

    Args:
        root: Parsed document
        css: Stylesheet text

    Returns:
        The inserted style element
    """
    style = _new_tag(root, 'style')
    style.string = Stylesheet(f"\n{css}\n")
    _insert_in_head(root, style)
    return style

def inject_stylesheet_link(root, href: str) -> Tag:
    """Add a ``<link rel="stylesheet">`` to the document head."""
    link = _new_tag(root, 'link', {'rel': 'stylesheet', 'href': href})
    _insert_in_head(root, link)
    return link

def _is_stylesheet_link(link: Tag) -> bool:
    rel = link.get('rel') or ''
    tokens = rel.split() if isinstance(rel, str) else rel
    return 'stylesheet' in (token.lower() for token in tokens)

def load_stylesheet(href: str, base: Optional[str] = None, timeout: int = REQUEST_TIMEOUT,
                    verify_ssl: bool = True) -> str:
    """Get the text of a linked stylesheet.

    Args:
        href: Value of the link's href
        base: Base URL or local directory that relative hrefs resolve against
        timeout: Request timeout in seconds
        verify_ssl: Whether to verify SSL certificates

    Returns:
        Stylesheet text, empty when a relative href cannot be resolved

    Raises:
        NetworkError: If a remote stylesheet cannot be fetched
    """
    if is_valid_url(href):
        return fetch_text(href, timeout=timeout, verify_ssl=verify_ssl)

    if base and is_valid_url(base):
        return fetch_text(urljoin(base, href), timeout=timeout, verify_ssl=verify_ssl)

    if base:
        css_path = os.path.join(base, href)
        if os.path.isfile(css_path):
            return read_text_file(css_path)
        logger.warning(f"Linked stylesheet not found: {css_path}")
        return ''

    logger.warning(f"Cannot resolve stylesheet link {href!r} without a base URL")
    return ''

def extract_style_blocks(root, base: Optional[str] = None, timeout: int = REQUEST_TIMEOUT,
                         verify_ssl: bool = True) -> str:
    """Pull the stylesheet text out of a document for inlining.

    ``<style>`` blocks are read and removed. Linked stylesheets are loaded
    and appended after them; the ``<link>`` elements stay in place.

    Returns:
        Combined stylesheet text
    """
    css_content = []

    for style in root.find_all('style'):
        text = style.get_text()
        if text:
            css_content.append(text)
        style.decompose()

    for link in root.find_all('link'):
        href = link.get('href')
        if href and _is_stylesheet_link(link):
            css_content.append(load_stylesheet(href, base, timeout=timeout, verify_ssl=verify_ssl))

    return '\n'.join(css for css in css_content if css)

def collect_existing_css(root) -> str:
    """Collect and remove every ``<style>`` block of a document.

    Returns:
        Stripped block texts separated by blank lines
    """
    styles = root.find_all('style')
    css_blocks = [text for text in (style.get_text().strip() for style in styles) if text]

    for style in styles:
        style.extract()

    return '\n\n'.join(css_blocks)

# Exported functions
__all__ = [
    'is_valid_url',
    'fetch_text',
    'load_html',
    'parse_html',
    'serialize_html',
    'find_node',
    'inject_style',
    'inject_stylesheet_link',
    'load_stylesheet',
    'extract_style_blocks',
    'collect_existing_css',
]
