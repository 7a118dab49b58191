from __future__ import annotations

import re
from typing import List

from proto_renumber.models import MessageSpan

from .brace_matcher import mask_non_code, match_brace

MESSAGE_PATTERN = re.compile(r"\bmessage\s+([A-Za-z_][A-Za-z0-9_]*)\s*\{")


def find_message_spans(text: str) -> List[MessageSpan]:
    """Locate every ``message Name { ... }`` block, nested ones included.

    The keyword search runs over a masked view so commented-out or quoted
    declarations are not picked up.  Occurrences whose brace is never closed
    are skipped.  Spans are returned in ascending order of their ``{``.
    """
    masked = mask_non_code(text)
    spans: List[MessageSpan] = []
    pos = 0

    while True:
        match = MESSAGE_PATTERN.search(masked, pos)
        if match is None:
            break
        # Resume just past the match start, not its end.
        pos = match.start() + 1

        open_pos = match.start() + match.group(0).rindex("{")
        close_pos = match_brace(text, open_pos)
        if close_pos is None:
            continue
        spans.append(MessageSpan(open=open_pos, close=close_pos, name=match.group(1)))

    return spans
