"""Split camel-hump identifiers into lower-case words.

``skewer`` turns ``camelCase``, ``PascalCase`` and ``ALLCAPS`` runs into a
separator-delimited lower-case string, e.g. for deriving property names from
attribute or method names::

    >>> skewer("camelCase")
    'camel-case'
    >>> skewer("HTTPServer")
    'http-server'
    >>> skewer("maxPoolSize", "_")
    'max_pool_size'
"""

from propnames.errors import EmptyIdentifierError

DEFAULT_SEPARATOR = "-"


def skewer(identifier: str, separator: str = DEFAULT_SEPARATOR) -> str:
    """Split a camel-hump identifier into lower-cased words.

    A word starts at the beginning of the identifier and at every upper-case
    letter that follows a lower-case run. In an all-caps run the last
    upper-case letter before a lower-case letter begins the next word.
    Digits and punctuation stay in the word they appear in, so existing
    separators pass through unchanged.

    Args:
        identifier: The identifier to split.
        separator: Text inserted between words.

    Returns:
        The lower-cased, separated identifier.

    Raises:
        EmptyIdentifierError: If ``identifier`` is empty.
    """
    if not identifier:
        raise EmptyIdentifierError()

    length = len(identifier)
    out: list[str] = []
    start = 0
    while True:
        first = identifier[start]
        out.append(first.lower())
        i = start + 1
        if i == length:
            break

        if first.isupper() and identifier[i].isupper():
            # `WORD`, possibly followed by the start of a `Word`
            while i < length:
                ch = identifier[i]
                if ch.islower():
                    break
                if ch.isupper() and i + 1 < length and identifier[i + 1].islower():
                    break
                out.append(ch.lower())
                i += 1
        else:
            # `word` or `Word`
            while i < length and not identifier[i].isupper():
                out.append(identifier[i])
                i += 1

        if i == length:
            break
        out.append(separator)
        start = i
    return "".join(out)
