"""Comment- and string-aware scanning of .proto source text.

A single state machine walks the text and decides, for every character,
whether it is code or belongs to a comment or quoted string.  Brace matching
and the masked views used for keyword and field searches are built on it.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import Iterator, Optional

MASK_CHAR = "\x00"


class ScanMode(Enum):
    NORMAL = auto()
    LINE_COMMENT = auto()
    BLOCK_COMMENT = auto()
    DOUBLE_QUOTED = auto()
    SINGLE_QUOTED = auto()


_QUOTE_MODES = {
    '"': ScanMode.DOUBLE_QUOTED,
    "'": ScanMode.SINGLE_QUOTED,
}


def iter_code_positions(text: str, start: int = 0) -> Iterator[int]:
    """Yield the offset of every character scanned in NORMAL mode.

    Comment delimiters, comment bodies, quotes and string contents are never
    yielded.  Scanning always begins in NORMAL mode at ``start``.
    """
    mode = ScanMode.NORMAL
    i = start
    n = len(text)

    while i < n:
        ch = text[i]
        nxt = text[i + 1] if i + 1 < n else ""

        if mode == ScanMode.NORMAL:
            if ch == "/" and nxt == "/":
                mode = ScanMode.LINE_COMMENT
                i += 2
                continue
            if ch == "/" and nxt == "*":
                mode = ScanMode.BLOCK_COMMENT
                i += 2
                continue
            if ch in _QUOTE_MODES:
                mode = _QUOTE_MODES[ch]
                i += 1
                continue
            yield i
            i += 1
            continue

        if mode == ScanMode.LINE_COMMENT:
            if ch == "\n":
                mode = ScanMode.NORMAL
            i += 1
            continue

        if mode == ScanMode.BLOCK_COMMENT:
            if ch == "*" and nxt == "/":
                mode = ScanMode.NORMAL
                i += 2
                continue
            i += 1
            continue

        # Inside a quoted string: a backslash escapes whatever follows it.
        if ch == "\\" and nxt:
            i += 2
            continue
        if _QUOTE_MODES.get(ch) == mode:
            mode = ScanMode.NORMAL
        i += 1


def match_brace(text: str, open_pos: int) -> Optional[int]:
    """Return the offset of the ``}`` matching the ``{`` at ``open_pos``.

    Braces inside ``//`` and ``/* */`` comments or quoted strings are ignored.
    Returns None when ``open_pos`` does not hold a ``{`` or the text ends
    before the brace is closed.
    """
    if not 0 <= open_pos < len(text) or text[open_pos] != "{":
        return None

    depth = 0
    for i in iter_code_positions(text, open_pos):
        ch = text[i]
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return i
    return None


def mask_non_code(text: str, fill: str = MASK_CHAR) -> str:
    """Return a same-length copy of ``text`` with comments and strings masked.

    Every non-code character other than ``\\n`` is replaced by ``fill`` so
    line structure and offsets are preserved.
    """
    chars = [ch if ch == "\n" else fill for ch in text]
    for i in iter_code_positions(text):
        chars[i] = text[i]
    return "".join(chars)
