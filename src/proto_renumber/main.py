from __future__ import annotations

import argparse
import os
import sys
from typing import List, Optional

from proto_renumber.files import (
    ProtoFileError,
    find_proto_files,
    load_proto_file,
    write_with_backup,
)
from proto_renumber.models import FileOutcome, OutcomeStatus
from proto_renumber.report import render_report
from proto_renumber.rewriter.document import process_document


def _expand_paths(paths: List[str]) -> List[str]:
    """Replace directory arguments with the .proto files found under them."""
    expanded: List[str] = []
    for p in paths:
        if os.path.isdir(p):
            found = find_proto_files(p)
            if not found:
                print(f"No .proto files found under {p}")
            expanded.extend(found)
        else:
            expanded.append(p)
    return expanded


def renumber_file(
    path: str,
    dry_run: bool = False,
    backup_dir: Optional[str] = None,
    verbose: bool = False,
) -> FileOutcome:
    """Renumber one file in place, keeping a backup of the original."""
    path = os.path.abspath(path)
    if not os.path.isfile(path):
        return FileOutcome(path=path, status=OutcomeStatus.NOT_FOUND)

    try:
        original = load_proto_file(path)
    except ProtoFileError as e:
        return FileOutcome(path=path, status=OutcomeStatus.ERROR, error=str(e))

    rewrite = process_document(original)
    if verbose:
        print(f"  {path}: {len(rewrite.spans)} message(s)")
        for span in rewrite.spans:
            print(f"    message {span.name} [{span.open}, {span.close}]")

    if not rewrite.changed:
        return FileOutcome(path=path, status=OutcomeStatus.UNCHANGED)

    backup_path = None
    if not dry_run:
        try:
            backup_path = write_with_backup(path, original, rewrite.result, backup_dir)
        except ProtoFileError as e:
            return FileOutcome(path=path, status=OutcomeStatus.ERROR, error=str(e))

    return FileOutcome(
        path=path,
        status=OutcomeStatus.CHANGED,
        backup_path=backup_path,
        fields_renumbered=rewrite.fields_renumbered,
    )


def run(
    paths: List[str],
    dry_run: bool = False,
    backup_dir: Optional[str] = None,
    check: bool = False,
    verbose: bool = False,
) -> int:
    """Renumber every given file (or .proto files under given directories).

    Returns the process exit code: 1 when any file is missing or unreadable,
    or, with ``check``, when any file would change; 0 otherwise.
    """
    if check:
        dry_run = True

    outcomes: List[FileOutcome] = []
    for path in _expand_paths(paths):
        outcomes.append(
            renumber_file(path, dry_run=dry_run, backup_dir=backup_dir, verbose=verbose)
        )

    print(render_report(outcomes, dry_run=dry_run), end="")

    failed = any(o.status in (OutcomeStatus.NOT_FOUND, OutcomeStatus.ERROR) for o in outcomes)
    if failed:
        return 1
    if check and any(o.status == OutcomeStatus.CHANGED for o in outcomes):
        return 1
    return 0


def main():
    parser = argparse.ArgumentParser(
        description="Renumber protobuf message field tags sequentially from 1",
    )
    parser.add_argument(
        "paths",
        nargs="+",
        help=".proto files, or directories to search recursively for .proto files",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Report which files would change without writing anything",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Like --dry-run, but exit with status 1 if any file would change",
    )
    parser.add_argument(
        "--backup-dir",
        help="Directory for .bak copies of rewritten files (defaults to a new temp directory)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print the message blocks found in each file",
    )

    args = parser.parse_args()
    sys.exit(
        run(
            args.paths,
            dry_run=args.dry_run,
            backup_dir=args.backup_dir,
            check=args.check,
            verbose=args.verbose,
        )
    )


if __name__ == "__main__":
    main()
