"""Human-readable Markdown rendering of a report."""

from __future__ import annotations

from typing import Any


def _status(result: dict[str, Any]) -> str:
    if result.get("error"):
        return f"error: {result['error'].get('message', '')}"
    return "yes" if result.get("contained") else "no"


def render_summary(report: dict[str, Any]) -> str:
    """Return a Markdown string with totals and one row per candidate."""
    totals = report.get("totals", {})
    entries = report.get("entries", [])

    lines = []
    lines.append("# jnlp-version Summary")
    lines.append("")
    lines.append(
        f"Specifications: {totals.get('specifications', 0)} | "
        f"Candidates: {totals.get('candidates', 0)} | "
        f"Contained: {totals.get('contained', 0)}"
    )
    lines.append("")
    lines.append("| Name | Specification | Candidate | Contained |")
    lines.append("| --- | --- | --- | --- |")

    has_rows = False
    for entry in entries:
        name = entry.get("name", "")
        spec = entry.get("specification", "")
        for result in entry.get("results") or []:
            lines.append(f"| {name} | `{spec}` | `{result.get('candidate', '')}` | {_status(result)} |")
            has_rows = True

    if not has_rows:
        lines.append("| (nothing checked) | n/a | n/a | n/a |")

    return "\n".join(lines) + "\n"
