"""Core selector matching, inlining and extraction functionality."""

from .selectors import find_matching_elements, matches_selector
from .specificity import calc_specificity
from .apply import apply_css, InlineResult
from .reverse import InlineStyleExtractor, reverse_inline_styles
from .extractor import (
    ConversionResult,
    inline_css,
    inline_css_to_tree,
    inline_css_external,
    reverse_css,
    reverse_css_internal,
    reverse_css_external,
)

__all__ = [
    'find_matching_elements',
    'matches_selector',
    'calc_specificity',
    'apply_css',
    'InlineResult',
    'InlineStyleExtractor',
    'reverse_inline_styles',
    'ConversionResult',
    'inline_css',
    'inline_css_to_tree',
    'inline_css_external',
    'reverse_css',
    'reverse_css_internal',
    'reverse_css_external',
]
