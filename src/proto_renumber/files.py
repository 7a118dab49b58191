from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import List, Optional


class ProtoFileError(Exception):
    """Raised when a .proto file cannot be read, backed up or written."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


def find_proto_files(root: str) -> List[str]:
    """Recursively find .proto files under ``root``, sorted for stable output."""
    return sorted(str(p) for p in Path(root).rglob("*.proto"))


def load_proto_file(path: str) -> str:
    """Read ``path`` as UTF-8, keeping its line endings as they are."""
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ProtoFileError(path, str(e)) from e


def _write_text(path: str, text: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(text)


def _backup_path(backup_dir: str, path: str) -> str:
    """Return ``<basename>.bak`` in ``backup_dir``, or a unique name if taken."""
    name = os.path.basename(path)
    candidate = os.path.join(backup_dir, f"{name}.bak")
    if not os.path.exists(candidate):
        return candidate
    fd, unique = tempfile.mkstemp(dir=backup_dir, prefix=f"{name}.", suffix=".bak")
    os.close(fd)
    return unique


def write_with_backup(
    path: str,
    original: str,
    result: str,
    backup_dir: Optional[str] = None,
) -> str:
    """Save ``original`` as a ``.bak`` copy then overwrite ``path``.

    Without ``backup_dir`` a fresh temporary directory is created for the
    backup.  An existing backup in ``backup_dir`` is never overwritten; a
    unique ``<basename>.<random>.bak`` name is used instead.  Returns the
    backup file path.
    """
    try:
        if backup_dir is None:
            backup_dir = tempfile.mkdtemp(prefix="proto-renumber-")
        else:
            os.makedirs(backup_dir, exist_ok=True)
        backup_path = _backup_path(backup_dir, path)
        _write_text(backup_path, original)
        _write_text(path, result)
    except OSError as e:
        raise ProtoFileError(path, str(e)) from e
    return backup_path
