"""
Identifier sanitizing for container and network names.
"""

import string
from typing import Any

_ALPHA = frozenset(string.ascii_letters)
_TAIL = _ALPHA | frozenset(string.digits) | {"_"}


def sanitize(val: Any) -> str:
    """Reduce ``val`` to an identifier-shaped string.

    Characters before the first ASCII letter are skipped. After it, ASCII
    letters, digits and underscores are kept and everything else dropped.
    Non-string or empty input yields an empty string.

    Examples:
        >>> sanitize("123abc")
        'abc'
        >>> sanitize("abc-def_42")
        'abcdef_42'
    """
    if not isinstance(val, str) or not val:
        return ""

    new_name = []
    for char in val:
        if not new_name:
            if char in _ALPHA:
                new_name.append(char)
        elif char in _TAIL:
            new_name.append(char)
    return "".join(new_name)
