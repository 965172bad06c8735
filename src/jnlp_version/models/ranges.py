"""Modified ranges and the AND-groups that combine them."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from .version_id import VersionId

logger = logging.getLogger(__name__)


class Modifier(str, Enum):
    """Comparison mode selected by the trailing character of a range."""

    EXACT = ""
    AT_LEAST = "+"
    PREFIX_WILDCARD = "*"

    @classmethod
    def from_suffix(cls, text: str) -> Modifier:
        if text.endswith(cls.AT_LEAST.value):
            return cls.AT_LEAST
        if text.endswith(cls.PREFIX_WILDCARD.value):
            return cls.PREFIX_WILDCARD
        return cls.EXACT


@dataclass(slots=True, frozen=True)
class ModifiedRange:
    """A version-id plus the modifier that decides how candidates match."""

    version_id: VersionId
    modifier: Modifier
    text: str

    def __post_init__(self) -> None:
        if self.text != self.version_id.text + self.modifier.value:
            raise ValueError(f"Range text {self.text!r} does not match its parts")

    def __str__(self) -> str:
        return self.text

    def matches(self, candidate: VersionId) -> bool:
        if self.modifier is Modifier.EXACT:
            result = self.version_id == candidate
        elif self.modifier is Modifier.AT_LEAST:
            result = self.version_id.compare(candidate) <= 0
        else:
            result = self.version_id.is_prefix_of(candidate)
        logger.debug("range %s vs %s -> %s", self.text, candidate.text, result)
        return result

    def to_dict(self) -> dict[str, object]:
        return {
            "text": self.text,
            "modifier": self.modifier.name.lower(),
            "versionId": self.version_id.to_dict(),
        }


@dataclass(slots=True, frozen=True)
class AndGroup:
    """One or more ranges joined by ``&``; a candidate must satisfy all of them."""

    ranges: tuple[ModifiedRange, ...]
    text: str

    def __post_init__(self) -> None:
        if not self.ranges:
            raise ValueError("AndGroup must contain at least one range")

    def __str__(self) -> str:
        return self.text

    def __len__(self) -> int:
        return len(self.ranges)

    def matches(self, candidate: VersionId) -> bool:
        return all(member.matches(candidate) for member in self.ranges)

    def to_dict(self) -> dict[str, object]:
        return {
            "text": self.text,
            "ranges": [member.to_dict() for member in self.ranges],
        }
