"""Convert between stylesheets and inline style attributes."""

from .utils.config import VERSION
from .utils.style import merge_styles
from .core import (
    apply_css,
    calc_specificity,
    find_matching_elements,
    inline_css,
    inline_css_external,
    inline_css_to_tree,
    reverse_css,
    reverse_css_external,
    reverse_css_internal,
    reverse_inline_styles,
)

__version__ = VERSION

__all__ = [
    'merge_styles',
    'apply_css',
    'calc_specificity',
    'find_matching_elements',
    'inline_css',
    'inline_css_external',
    'inline_css_to_tree',
    'reverse_css',
    'reverse_css_external',
    'reverse_css_internal',
    'reverse_inline_styles',
]
