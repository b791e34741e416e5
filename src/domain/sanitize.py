"""Default string sanitizer for free-text profile fields.

Character policy:

- markup tags (``<...>``, or an unterminated ``<...`` run to the end) are removed
- any remaining ``<`` or ``>`` is removed
- ASCII control characters, NUL and DEL included, are removed
- quotes are kept as-is
- the result is trimmed
"""

import re
from collections.abc import Callable

Sanitizer = Callable[[str], str]

_TAG_RE = re.compile(r"<[^>]*>?")
_UNSAFE_RE = re.compile(r"[<>\x00-\x1f\x7f]")


def sanitize_string(value: str) -> str:
    """Strip markup and control characters from ``value``."""
    value = _TAG_RE.sub("", value)
    value = _UNSAFE_RE.sub("", value)
    return value.strip()
