"""Renumber the field tags of a single message body."""

from __future__ import annotations

import re
from typing import List, Tuple

from proto_renumber.scanner.brace_matcher import MASK_CHAR, mask_non_code
from proto_renumber.scanner.span_finder import find_message_spans

# [label] type name = tag [options] ;
# A declaration starts at a line start or right after ; { } or masked text.
FIELD_PATTERN = re.compile(
    r"(?:^|(?<=[;{}\x00]))"
    r"[ \t]*"
    r"(?:(?:optional|required|repeated)[ \t]+)?"
    r"(?!option\b)"
    r"(?:map<[^>\n]+>|[A-Za-z0-9_.<>]+)"
    r"[ \t]+[A-Za-z_][A-Za-z0-9_]*[ \t]*=[ \t]*"
    r"(?P<tag>\d+)"
    r"[ \t]*(?:\[[^\]]*\])?[ \t]*;",
    re.MULTILINE,
)


def _field_view(body: str) -> str:
    """Mask comments, strings and nested message blocks out of ``body``.

    The closing brace of each nested message stays visible so a declaration
    following it on the same line still starts a statement.
    """
    view = mask_non_code(body)
    for span in find_message_spans(body):
        view = view[:span.open] + MASK_CHAR * (span.close - span.open) + view[span.close:]
    return view


def renumber_body_counted(body: str) -> Tuple[str, int]:
    """Renumber ``body`` and report how many tags actually changed value."""
    pieces: List[str] = []
    counter = 1
    changed = 0
    last = 0

    for match in FIELD_PATTERN.finditer(_field_view(body)):
        start, end = match.span("tag")
        new_tag = str(counter)
        counter += 1
        if body[start:end] != new_tag:
            changed += 1
        pieces.append(body[last:start])
        pieces.append(new_tag)
        last = end

    pieces.append(body[last:])
    return "".join(pieces), changed


def renumber_body(body: str) -> str:
    """Assign tags 1, 2, 3, ... to the direct field declarations of ``body``.

    Only the tag digits are replaced; labels, types, names, options and all
    text outside declarations are copied through unchanged.  Members of a
    ``oneof`` share the enclosing message's counter.  Declarations inside
    comments, strings or nested messages are left alone.
    """
    return renumber_body_counted(body)[0]
