"""Selector specificity summary."""

import re

_NAMED_TOKEN = re.compile(r'[#.][\w-]+')

def calc_specificity(selector: str) -> int:
    """Compute a weight from the textual shape of a selector.

    Ids count 100, classes 10 and a remaining tag part 1. The inlining
    pipeline does not consult this value: stylesheet order alone decides
    which declaration wins there.

    Args:
        selector: Selector text

    Returns:
        Specificity weight
    """
    ids = selector.count('#')
    classes = selector.count('.')
    tag = 1 if _NAMED_TOKEN.sub('', selector).strip() else 0
    return ids * 100 + classes * 10 + tag

__all__ = ['calc_specificity']
