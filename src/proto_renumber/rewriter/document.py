from __future__ import annotations

import dataclasses
from typing import List

from proto_renumber.models import MessageSpan, RewriteResult
from proto_renumber.scanner.span_finder import find_message_spans

from .renumberer import renumber_body_counted


def _shift_enclosing(spans: List[MessageSpan], edited: MessageSpan, delta: int) -> List[MessageSpan]:
    """Move the ``close`` of spans enclosing ``edited`` by ``delta``."""
    return [
        dataclasses.replace(s, close=s.close + delta) if s.contains(edited) else s
        for s in spans
    ]


def process_document(text: str) -> RewriteResult:
    """Renumber every message in ``text``, innermost messages first.

    Bodies are spliced back into a working copy of the text.  When a splice
    changes the buffer length, the pending enclosing spans are shifted so
    their offsets stay valid.
    """
    spans = find_message_spans(text)
    pending = sorted(spans, key=lambda s: s.open, reverse=True)

    buffer = text
    changed = False
    fields_renumbered = 0

    for idx in range(len(pending)):
        span = pending[idx]
        body = span.body(buffer)
        new_body, count = renumber_body_counted(body)
        if new_body == body:
            continue

        buffer = buffer[:span.open + 1] + new_body + buffer[span.close:]
        changed = True
        fields_renumbered += count

        delta = len(new_body) - len(body)
        if delta:
            pending[idx + 1:] = _shift_enclosing(pending[idx + 1:], span, delta)

    return RewriteResult(
        result=buffer,
        changed=changed,
        spans=spans,
        fields_renumbered=fields_renumbered,
    )
