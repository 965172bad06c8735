"""Loader for named version constraints.

Reads a JSON file (default: ``constraints.json`` in the working directory)
holding a list of named version strings, validates it against the bundled
JSON Schema and parses every specification up front so that a bad entry is
reported when the file is loaded rather than when it is first used.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator, ValidationError

from .errors import VersionStringError
from .specification import VersionSpecification

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parent / "constraints.schema.json"
DEFAULT_CONFIG_NAME = "constraints.json"
CONFIG_PATH_ENV_VAR = "JNLP_VERSION_CONSTRAINTS"


class ConfigError(RuntimeError):
    """Raised when the constraints file cannot be loaded or is invalid."""


@dataclass(slots=True, frozen=True)
class Constraint:
    """A named, parsed version specification."""

    id: str
    specification: VersionSpecification
    enabled: bool = True
    description: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Constraint:
        constraint_id = data["id"]
        try:
            specification = VersionSpecification.parse(data["specification"])
        except VersionStringError as exc:
            raise ConfigError(f"Constraint '{constraint_id}' has an invalid specification: {exc}") from exc
        return cls(
            id=constraint_id,
            specification=specification,
            enabled=data.get("enabled", True),
            description=data.get("description", ""),
        )

    def to_dict(self) -> dict[str, object]:
        return {
            "id": self.id,
            "specification": str(self.specification),
            "enabled": self.enabled,
            "description": self.description,
        }


@dataclass(slots=True, frozen=True)
class ConstraintSet:
    """All constraints from one file, in file order."""

    constraints: tuple[Constraint, ...]

    def get_enabled(self) -> list[Constraint]:
        return [constraint for constraint in self.constraints if constraint.enabled]

    def get_by_id(self, constraint_id: str) -> Constraint | None:
        for constraint in self.constraints:
            if constraint.id == constraint_id:
                return constraint
        return None


def _resolve_config_path(path: Path | str | None = None) -> Path:
    """Resolve the constraints file path.

    Priority:
    1. Explicit path argument
    2. JNLP_VERSION_CONSTRAINTS environment variable
    3. constraints.json in the current working directory
    """
    if path is not None:
        return Path(path)

    env_path = os.environ.get(CONFIG_PATH_ENV_VAR)
    if env_path:
        return Path(env_path)

    return Path.cwd() / DEFAULT_CONFIG_NAME


def _format_errors(errors: Iterable[ValidationError]) -> str:
    messages = []
    for error in errors:
        pointer = "/".join(str(p) for p in error.path)
        messages.append(f"- {pointer or '<root>'}: {error.message}")
    return "\n".join(messages)


def validate_document(document: Any) -> None:
    """Raise ConfigError if ``document`` does not match the bundled schema."""
    schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
    validator = Draft202012Validator(schema)
    errors = sorted(validator.iter_errors(document), key=lambda e: list(e.path))
    if errors:
        raise ConfigError("Constraints file failed validation:\n" + _format_errors(errors))


def load_constraints(path: Path | str | None = None) -> ConstraintSet:
    """Load, validate and parse a constraints file.

    Raises:
        ConfigError: If the file cannot be read, is not valid JSON, does not
            match the schema, repeats an id, or holds an unparsable
            specification.
    """
    config_path = _resolve_config_path(path)

    if not config_path.exists():
        raise ConfigError(f"Constraints file not found: {config_path}")

    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read constraints file: {exc}") from exc

    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in constraints file: {exc}") from exc

    validate_document(data)

    constraints: list[Constraint] = []
    seen_ids: set[str] = set()
    for entry in data["constraints"]:
        constraint = Constraint.from_dict(entry)
        if constraint.id in seen_ids:
            raise ConfigError(f"Duplicate constraint ID: '{constraint.id}'")
        seen_ids.add(constraint.id)
        constraints.append(constraint)

    logger.info("loaded %d constraint(s) from %s", len(constraints), config_path)
    return ConstraintSet(constraints=tuple(constraints))
