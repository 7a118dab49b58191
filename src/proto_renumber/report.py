from __future__ import annotations

from pathlib import Path
from typing import Dict, List

from jinja2 import Environment, FileSystemLoader

from proto_renumber.models import FileOutcome, OutcomeStatus


def _get_template_env() -> Environment:
    template_dir = Path(__file__).parent / "templates"
    return Environment(
        loader=FileSystemLoader(str(template_dir)),
        keep_trailing_newline=True,
    )


def count_outcomes(outcomes: List[FileOutcome]) -> Dict[str, int]:
    counts = {status.name: 0 for status in OutcomeStatus}
    for outcome in outcomes:
        counts[outcome.status.name] += 1
    return counts


def render_report(outcomes: List[FileOutcome], dry_run: bool = False) -> str:
    """Render one line per processed file followed by a totals line."""
    env = _get_template_env()
    template = env.get_template("report.txt.j2")
    return template.render(
        outcomes=outcomes,
        counts=count_outcomes(outcomes),
        dry_run=dry_run,
    )
