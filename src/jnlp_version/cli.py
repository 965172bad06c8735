"""Command line entrypoint for checking versions against version strings.

Usage:
  jnlp-version check "1.4+ 1.3*" 1.5.0_02 1.2
  jnlp-version constraints --file constraints.json 1.6.0
  jnlp-version explain "1.4.0_04 1.4*&1.4.1_02+"
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from .config import ConfigError, load_constraints
from .errors import VersionStringError
from .report import aggregate, evaluate
from .specification import VersionSpecification
from .summary import render_summary

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_NOT_CONTAINED = 10


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="jnlp-version", description=__doc__.splitlines()[0])
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--format",
        choices=("json", "markdown"),
        default="json",
        help="Output format for check results",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    check = sub.add_parser("check", help="Check candidates against one version string")
    check.add_argument("specification", help="Version string, e.g. '1.4+ 1.3*'")
    check.add_argument("candidates", nargs="+", help="Concrete version-ids to test")

    constraints = sub.add_parser("constraints", help="Check candidates against a constraints file")
    constraints.add_argument(
        "--file",
        type=Path,
        default=None,
        help="Constraints JSON file (defaults to $JNLP_VERSION_CONSTRAINTS or ./constraints.json)",
    )
    constraints.add_argument("candidates", nargs="+", help="Concrete version-ids to test")

    explain = sub.add_parser("explain", help="Print the parsed structure of a version string")
    explain.add_argument("specification", help="Version string to parse")

    return parser.parse_args(argv)


def _emit(report: dict[str, Any], fmt: str) -> None:
    if fmt == "markdown":
        sys.stdout.write(render_summary(report))
    else:
        print(json.dumps(report, indent=2))


def _exit_code(report: dict[str, Any]) -> int:
    totals = report.get("totals", {})
    if report.get("hasErrors"):
        return EXIT_ERROR
    if totals.get("notContained", 0) > 0:
        return EXIT_NOT_CONTAINED
    if not totals.get("candidates"):
        logger.warning("no enabled constraints; nothing was checked")
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(levelname)s] %(name)s: %(message)s",
    )

    try:
        if args.command == "explain":
            specification = VersionSpecification.parse(args.specification)
            print(json.dumps(specification.to_dict(), indent=2))
            return EXIT_OK

        if args.command == "check":
            specification = VersionSpecification.parse(args.specification)
            entries = [evaluate(specification, args.candidates)]
        else:
            constraint_set = load_constraints(args.file)
            entries = [
                evaluate(constraint.specification, args.candidates, name=constraint.id)
                for constraint in constraint_set.get_enabled()
            ]
    except VersionStringError as exc:
        print(f"ERROR: Invalid version string: {exc}", file=sys.stderr)
        return EXIT_ERROR
    except ConfigError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_ERROR

    report = aggregate(entries)
    _emit(report, args.format)
    logger.debug("totals: %s", report["totals"])
    return _exit_code(report)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
