"""Backslash-escaped list values.

A list value is a single string whose elements are separated by ``,``. A
backslash escapes the character that follows it, so an element may contain a
literal comma (``\\,``) or a literal backslash (``\\\\``).

    >>> split(r"a,b\\,c,d")
    ['a', 'b,c', 'd']
    >>> join(["a", "b,c", "d"])
    'a,b\\\\,c,d'

Empty elements are never produced: leading, trailing and repeated delimiters
are skipped. A backslash at the very end of the input has nothing to escape
and is kept as a literal backslash.
"""

from collections.abc import Iterable

DELIMITER = ","
ESCAPE = "\\"


def split(text: str | None) -> list[str]:
    """Split a delimited list value into its elements.

    The input is scanned left to right as a sequence of delimiter runs,
    literal runs and escaped characters. Literal runs and escaped characters
    accumulate into the current element until the next unescaped delimiter.

    Args:
        text: The list value. ``None`` is treated as an empty value.

    Returns:
        The elements in order of appearance. Never contains empty strings.
    """
    if not text:
        return []

    items: list[str] = []
    parts: list[str] = []
    i = 0
    length = len(text)
    while i < length:
        ch = text[i]
        if ch == DELIMITER:
            if parts:
                items.append("".join(parts))
                parts = []
            while i < length and text[i] == DELIMITER:
                i += 1
        elif ch == ESCAPE:
            if i + 1 < length:
                parts.append(text[i + 1])
                i += 2
            else:
                parts.append(ESCAPE)
                i += 1
        else:
            end = i + 1
            while end < length and text[end] not in (DELIMITER, ESCAPE):
                end += 1
            parts.append(text[i:end])
            i = end
    if parts:
        items.append("".join(parts))
    return items


def _escape(item: str) -> str:
    return item.replace(ESCAPE, ESCAPE * 2).replace(DELIMITER, ESCAPE + DELIMITER)


def join(items: Iterable[str]) -> str:
    """Join elements into a list value, escaping delimiters and backslashes.

    ``split(join(items)) == list(items)`` holds whenever no element is empty.
    Empty elements are written out but dropped again by :func:`split`.

    Args:
        items: Elements to join.

    Returns:
        The escaped, comma-separated list value.
    """
    return DELIMITER.join(_escape(item) for item in items)
