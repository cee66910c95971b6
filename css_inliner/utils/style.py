"""Inline style attribute handling."""

from typing import Dict, Optional

def parse_style(style: Optional[str], into: Optional[Dict[str, str]] = None) -> Dict[str, str]:
    """Parse a ``;``-separated inline style into a property map.

    Fragments are split on their first ``:``. Fragments missing a property
    or a value are dropped. Double quotes in values become single quotes so
    the result stays safe inside a double-quoted HTML attribute.

    Args:
        style: Inline style text, may be None
        into: Existing map to update; a property already present keeps its
            position and takes the new value

    Returns:
        The updated property map
    """
    styles = {} if into is None else into

    for fragment in (style or '').split(';'):
        name, _, value = fragment.partition(':')
        name = name.strip()
        value = value.strip()
        if name and value:
            styles[name] = value.replace('"', "'")

    return styles

def format_style(styles: Dict[str, str]) -> str:
    """Render a property map back to inline style text."""
    return ';'.join(f"{name}:{value}" for name, value in styles.items())

def merge_styles(old_style: Optional[str] = None, new_style: Optional[str] = None) -> str:
    """Merge two inline styles, new values overriding old ones.

    A property keeps the position of its first occurrence across both
    inputs and the value of its last one.

    >>> merge_styles("color:red;font-size:14px", "color:blue;margin:10px")
    'color:blue;font-size:14px;margin:10px'
    """
    styles = parse_style(old_style)
    parse_style(new_style, into=styles)
    return format_style(styles)

def normalize_style(style: Optional[str]) -> str:
    """Order-independent signature of an inline style.

    Declarations are trimmed, empty ones dropped and the rest sorted as
    whole ``property:value`` strings.
    """
    declarations = [part.strip() for part in (style or '').split(';')]
    return ';'.join(sorted(part for part in declarations if part))

# Exported functions
__all__ = ['parse_style', 'format_style', 'merge_styles', 'normalize_style']
