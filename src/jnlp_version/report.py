"""Report building and schema-friendly output."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .errors import MalformedGrammarError
from .specification import VersionSpecification


def evaluate(
    specification: VersionSpecification,
    candidates: Iterable[str],
    name: str | None = None,
) -> dict[str, Any]:
    """Check each candidate against ``specification``.

    A malformed candidate is recorded with its error instead of being
    counted as a non-match.
    """
    results: list[dict[str, Any]] = []
    for candidate in candidates:
        try:
            contained = specification.contains(candidate)
        except MalformedGrammarError as exc:
            results.append({"candidate": candidate, "contained": None, "error": exc.to_dict()})
            continue
        results.append({"candidate": candidate, "contained": contained})

    return {
        "name": name or str(specification),
        "specification": str(specification),
        "singleVersionId": specification.contains_single_version_id(),
        "results": results,
    }


def aggregate(entries: list[dict[str, Any]]) -> dict[str, Any]:
    """Combine per-specification entries into a single report with totals."""
    results = [r for entry in entries for r in entry.get("results", [])]
    contained = sum(1 for r in results if r.get("contained") is True)
    errors = sum(1 for r in results if r.get("error"))

    return {
        "version": "1",
        "allContained": bool(results) and contained == len(results),
        "hasErrors": errors > 0,
        "entries": entries,
        "totals": {
            "specifications": len(entries),
            "candidates": len(results),
            "contained": contained,
            "notContained": len(results) - contained - errors,
            "errors": errors,
        },
    }
