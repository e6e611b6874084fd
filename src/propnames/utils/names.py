"""Property names and their environment-variable form.

A canonical property name is dotted, optionally indexed and quoted, and may
carry a profile marker::

    my.prop[0].key
    %dev.my."quoted.segment".key

Its environment-variable form only uses ASCII letters, digits and
underscores::

    MY_PROP_0__KEY
    _DEV_MY__QUOTED_SEGMENT__KEY

The two directions are independent one-way transforms. Encoding is lossy
(``my.prop`` and ``my-prop`` both encode to ``my_prop``), so decoding is a
best-effort reconstruction and does not round-trip for every input. Use
:func:`equals_ignore_case_replacing_non_alphanumeric_by_underscores` to test
whether an environment name refers to a given canonical name.
"""

UNDERSCORE = "_"
QUOTE = '"'
PROFILE_MARKER = "%"


def _is_ascii_alphanumeric(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def is_numeric(text: str, start: int = 0, end: int | None = None) -> bool:
    """Return True if ``text[start:end]`` is a non-empty run of decimal digits.

    Args:
        text: The string to inspect.
        start: First index of the range (inclusive).
        end: Last index of the range (exclusive). Defaults to ``len(text)``.

    Returns:
        False for an empty range, otherwise whether every character in the
        range is a decimal digit.
    """
    if end is None:
        end = len(text)
    if start >= end:
        return False
    return all(text[i].isdecimal() for i in range(start, end))


def replace_non_alphanumeric_by_underscores(name: str) -> str:
    """Encode a property name into its environment-variable form.

    Every character that is not an ASCII letter or digit becomes ``_``. A
    trailing ``"`` is written as ``__`` so that a closing quote can be told
    apart from an ordinary separator.

    Args:
        name: The canonical property name.

    Returns:
        The encoded name. Case is preserved; callers upper-case it if needed.

    Example:
        >>> replace_non_alphanumeric_by_underscores("my.prop[0]")
        'my_prop_0_'
        >>> replace_non_alphanumeric_by_underscores('a."b"')
        'a__b__'
    """
    encoded = [ch if _is_ascii_alphanumeric(ch) else UNDERSCORE for ch in name]
    if name.endswith(QUOTE):
        encoded.append(UNDERSCORE)
    return "".join(encoded)


def equals_ignore_case_replacing_non_alphanumeric_by_underscores(
    candidate: str, canonical: str
) -> bool:
    """Compare an environment-variable name against a canonical property name.

    Letters and digits of ``canonical`` must match ``candidate``
    case-insensitively; every other character of ``canonical`` must line up
    with an ``_`` in ``candidate``. The only length mismatch accepted is the
    trailing-quote case written by
    :func:`replace_non_alphanumeric_by_underscores`, so that
    ``matches(encode(name), name)`` holds for every name.

    Args:
        candidate: The encoded name, e.g. an environment variable name.
        canonical: The dotted/indexed/quoted property name.

    Returns:
        True if ``candidate`` is an encoding of ``canonical``.
    """
    length = len(canonical)
    if len(candidate) != length:
        if length == 0 or len(candidate) != length + 1:
            return False
        if (
            canonical[-1] == QUOTE
            and candidate[length - 1] == UNDERSCORE
            and candidate[length] == UNDERSCORE
        ):
            length -= 1
        else:
            return False

    for i in range(length):
        expected = canonical[i]
        actual = candidate[i]
        if not _is_ascii_alphanumeric(expected):
            if actual != UNDERSCORE:
                return False
        elif actual.isascii():
            if actual.lower() != expected.lower():
                return False
        elif actual.casefold() != expected.casefold():
            return False
    return True


def to_lower_case_and_dotted(name: str) -> str:
    """Decode an environment-variable name into a canonical property name.

    The name is lower-cased and its underscores are read as follows:

    - a leading ``_`` is the profile marker ``%``;
    - ``_`` after an all-digit segment closes an index: ``foo_0_`` becomes
      ``foo[0]``, while ``foo_0_bar`` and ``foo_0__bar`` both become
      ``foo[0].bar``;
    - ``__`` opens a quoted segment, the next ``__`` closes it;
    - any other ``_`` is a ``.``.

    This is a heuristic. Digits-only segments are always read as indices and
    the first segment is never one.

    Args:
        name: The encoded name.

    Returns:
        The reconstructed property name.

    Example:
        >>> to_lower_case_and_dotted("MY_PROP_0__KEY")
        'my.prop[0].key'
        >>> to_lower_case_and_dotted("_dev_a__b__c")
        '%dev.a."b".c'
    """
    length = len(name)
    # one entry per consumed input character, so indices line up with `name`
    out: list[str] = []
    begin_segment = 0
    quotes_open = False
    i = 0
    while i < length:
        ch = name[i]
        if ch != UNDERSCORE:
            out.append(ch.lower())
            i += 1
            continue

        if i == 0:
            out.append(PROFILE_MARKER)
            i += 1
            continue

        nxt = i + 1
        double = nxt < length and name[nxt] == UNDERSCORE

        if begin_segment > 0 and is_numeric(name, begin_segment, i):
            out[begin_segment - 1] = "["
            if double:
                out.extend(("]", "."))
                begin_segment = nxt + 1
                i = nxt + 1
            elif nxt < length:
                # `foo_0_bar`: one entry for the single consumed underscore
                out.append("].")
                i = nxt
            else:
                out.append("]")
                i = nxt
            continue

        if double and not quotes_open:
            out.append(".")
            out.append(QUOTE)
            quotes_open = True
            i = nxt
        elif double:
            out.append(QUOTE)
            if nxt + 1 < length:
                out.append(".")
            quotes_open = False
            i = nxt
        else:
            out.append(".")
        begin_segment = nxt
        i += 1
    return "".join(out)
