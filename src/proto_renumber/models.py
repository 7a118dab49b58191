from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional


@dataclass(frozen=True)
class MessageSpan:
    """Offsets of a message's opening ``{`` and its matching ``}``."""

    open: int
    close: int
    name: str = ""

    def body(self, text: str) -> str:
        return text[self.open + 1:self.close]

    def contains(self, other: MessageSpan) -> bool:
        return self.open < other.open and other.close < self.close


@dataclass
class RewriteResult:
    result: str
    changed: bool
    spans: List[MessageSpan] = field(default_factory=list)
    fields_renumbered: int = 0


class OutcomeStatus(Enum):
    CHANGED = auto()
    UNCHANGED = auto()
    NOT_FOUND = auto()
    ERROR = auto()


@dataclass
class FileOutcome:
    path: str
    status: OutcomeStatus
    backup_path: Optional[str] = None
    fields_renumbered: int = 0
    error: Optional[str] = None
