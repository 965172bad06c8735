"""Top-level version string: an OR-list of AND-groups.

A version string such as ``"1.4.0_04 1.4*&1.4.1_02+"`` is parsed once into an
immutable ``VersionSpecification``. Candidates are single concrete version-ids
and are tested with ``contains``. ``str()`` returns the original text
unchanged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .errors import ErrorKind, VersionStringError
from .models.ranges import AndGroup
from .models.version_id import VersionId
from .parsers.version_string import parse_groups

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class VersionSpecification:
    """Parsed version string; matches a candidate if any clause matches."""

    groups: tuple[AndGroup, ...]
    text: str

    def __post_init__(self) -> None:
        if not self.groups:
            raise ValueError("VersionSpecification must contain at least one clause")

    def __str__(self) -> str:
        return self.text

    @classmethod
    def parse(cls, text: str | None) -> VersionSpecification:
        """Parse ``text`` or raise a ``VersionStringError`` subclass."""
        return cls(groups=parse_groups(text), text=text)

    def contains(self, candidate: str | VersionId | None) -> bool:
        """Return True if the concrete version ``candidate`` satisfies any clause.

        Raises:
            MalformedGrammarError: if ``candidate`` is not a well-formed
                version-id. An invalid candidate is never reported as False.
        """
        if not isinstance(candidate, VersionId):
            candidate = VersionId.parse(candidate)
        result = any(group.matches(candidate) for group in self.groups)
        logger.debug("%r contains %r -> %s", self.text, candidate.text, result)
        return result

    def contains_single_version_id(self) -> bool:
        """True when there is exactly one whitespace-separated clause."""
        return len(self.groups) == 1

    def to_dict(self) -> dict[str, object]:
        return {
            "text": self.text,
            "singleVersionId": self.contains_single_version_id(),
            "groups": [group.to_dict() for group in self.groups],
        }


@dataclass(slots=True, frozen=True)
class ParseResult:
    """Outcome of ``try_parse``: exactly one of specification or error is set."""

    specification: VersionSpecification | None = None
    error: VersionStringError | None = None

    def __post_init__(self) -> None:
        if (self.specification is None) == (self.error is None):
            raise ValueError("ParseResult needs exactly one of specification or error")

    def __bool__(self) -> bool:
        return self.ok

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> ErrorKind | None:
        return None if self.error is None else self.error.kind


def parse(text: str | None) -> VersionSpecification:
    return VersionSpecification.parse(text)


def try_parse(text: str | None) -> ParseResult:
    """Parse ``text`` without raising on invalid input."""
    try:
        return ParseResult(specification=VersionSpecification.parse(text))
    except VersionStringError as exc:
        logger.debug("rejected version string %r: %s", text, exc)
        return ParseResult(error=exc)
