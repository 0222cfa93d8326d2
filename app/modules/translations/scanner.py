"""Tokenizer for ``t(key[, default])`` call sites in arbitrary source text.

The scanner walks the text once. At every bare ``t`` identifier followed by
``(`` it tries to read the call arguments with an explicit string-literal
state machine that understands three delimiters (``"``, ``'`` and the
multi-line backtick) and backslash escapes. Anything outside that grammar
simply fails to match; the scanner never raises on malformed input.

Recognized forms:

- ``t("key")``
- ``t("key", <non-string expression>, ...)`` (no default value)
- ``t("key", "default")`` and ``t("key", "default", <options>)``
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Set, Tuple

DELIMITERS = frozenset("\"'`")
IDENTIFIER_CHARS = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_$"
)
ESCAPES = {"n": "\n", "t": "\t", "r": "\r"}


@dataclass(frozen=True)
class CallSite:
    """One matched call.

    Attributes:
        key: Raw contents of the first literal (not yet validated).
        default_value: Raw contents of the second literal, if one was given.
        offset: Index of the ``t`` identifier in the scanned text.
    """

    key: str
    default_value: Optional[str]
    offset: int


class LiteralState(Enum):
    """States of the string-literal reader."""

    OPEN = "open"
    ESCAPE = "escape"
    CLOSED = "closed"


def read_string_literal(text: str, pos: int) -> Optional[Tuple[str, int]]:
    """Read a string literal starting at ``text[pos]``.

    Args:
        text: Source text.
        pos: Index of the opening delimiter.

    Returns:
        ``(contents, end)`` where ``end`` is the index just after the closing
        delimiter, or None if ``pos`` is not a delimiter or the literal is
        unterminated.
    """
    if pos >= len(text) or text[pos] not in DELIMITERS:
        return None

    delimiter = text[pos]
    chars: List[str] = []
    state = LiteralState.OPEN
    index = pos + 1

    while index < len(text):
        char = text[index]
        if state is LiteralState.ESCAPE:
            chars.append(ESCAPES.get(char, char))
            state = LiteralState.OPEN
        elif char == "\\":
            state = LiteralState.ESCAPE
        elif char == delimiter:
            state = LiteralState.CLOSED
            break
        else:
            chars.append(char)
        index += 1

    if state is not LiteralState.CLOSED:
        return None
    return "".join(chars), index + 1


def _skip_whitespace(text: str, pos: int) -> int:
    while pos < len(text) and text[pos].isspace():
        pos += 1
    return pos


def _is_call_head(text: str, pos: int) -> bool:
    """True if ``text[pos]`` starts a bare ``t(`` not used as a member call."""
    if text[pos] != "t" or text[pos + 1 : pos + 2] != "(":
        return False
    if pos == 0:
        return True
    previous = text[pos - 1]
    return previous != "." and previous not in IDENTIFIER_CHARS


def parse_call(text: str, pos: int) -> Optional[Tuple[CallSite, int]]:
    """Parse the call whose ``t`` identifier is at ``pos``.

    Returns:
        ``(call_site, end)`` with ``end`` just past the consumed arguments,
        or None if the text at ``pos`` is not a recognized call.
    """
    if not _is_call_head(text, pos):
        return None

    cursor = _skip_whitespace(text, pos + 2)
    first = read_string_literal(text, cursor)
    if first is None:
        return None
    key, cursor = first

    cursor = _skip_whitespace(text, cursor)
    if cursor >= len(text):
        return None
    if text[cursor] == ")":
        return CallSite(key=key, default_value=None, offset=pos), cursor + 1
    if text[cursor] != ",":
        return None

    cursor = _skip_whitespace(text, cursor + 1)
    if cursor < len(text) and text[cursor] in DELIMITERS:
        second = read_string_literal(text, cursor)
        if second is None:
            return None
        default_value, after = second
        after = _skip_whitespace(text, after)
        if after < len(text) and text[after] in "),":
            return CallSite(key=key, default_value=default_value, offset=pos), after + 1

    # Second argument is an expression (options object, variable, ...)
    return CallSite(key=key, default_value=None, offset=pos), cursor


def iter_call_sites(text: str) -> Iterator[CallSite]:
    """Yield every call site in ``text`` in source order.

    A physical call site is reported at most once, keyed by
    ``(key, offset)``.
    """
    seen: Set[Tuple[str, int]] = set()
    pos = 0
    length = len(text)

    while pos < length - 1:
        pos = text.find("t(", pos)
        if pos == -1:
            return
        parsed = parse_call(text, pos)
        if parsed is None:
            pos += 1
            continue
        call_site, end = parsed
        marker = (call_site.key, call_site.offset)
        if marker not in seen:
            seen.add(marker)
            yield call_site
        pos = max(end, pos + 1)


def scan_call_sites(text: str) -> List[CallSite]:
    """Return every call site in ``text`` as a list."""
    return list(iter_call_sites(text))
