"""Split a version string into OR-clauses, AND-members and modifiers."""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..errors import EmptyInputError, MalformedGrammarError, NullInputError
from ..models.ranges import AndGroup, ModifiedRange, Modifier
from ..models.version_id import VersionId

logger = logging.getLogger(__name__)

AND_SEPARATOR = "&"


def _split(
    text: str, offset: int, is_separator: Callable[[str], bool]
) -> list[tuple[int, str]]:
    """Split ``text`` and pair each piece with its absolute start position."""
    pieces: list[tuple[int, str]] = []
    start = 0
    for index, ch in enumerate(text):
        if is_separator(ch):
            pieces.append((offset + start, text[start:index]))
            start = index + 1
    pieces.append((offset + start, text[start:]))
    return pieces


def parse_range(text: str, offset: int = 0) -> ModifiedRange:
    """Parse one version-id with an optional trailing ``+`` or ``*``."""
    modifier = Modifier.from_suffix(text)
    body = text[: len(text) - len(modifier.value)]
    if not body:
        raise MalformedGrammarError("modifier without a version-id", position=offset, fragment=text)
    version_id = VersionId.parse(body, offset)
    return ModifiedRange(version_id=version_id, modifier=modifier, text=text)


def parse_group(text: str, offset: int = 0) -> AndGroup:
    ranges: list[ModifiedRange] = []
    for position, piece in _split(text, offset, lambda ch: ch == AND_SEPARATOR):
        if not piece:
            raise MalformedGrammarError("empty member in '&' group", position=position, fragment=text)
        ranges.append(parse_range(piece, position))
    return AndGroup(ranges=tuple(ranges), text=text)


def parse_groups(text: str | None) -> tuple[AndGroup, ...]:
    """Parse a whole version string into its OR-list of AND-groups.

    Clauses are separated by exactly one whitespace character, so leading,
    trailing or repeated whitespace yields an empty clause and is rejected.

    Raises:
        NullInputError: if ``text`` is None.
        EmptyInputError: if ``text`` is empty or whitespace only.
        MalformedGrammarError: on any structural violation.
    """
    if text is None:
        raise NullInputError()
    if not text.strip():
        raise EmptyInputError()

    groups: list[AndGroup] = []
    for position, clause in _split(text, 0, str.isspace):
        if not clause:
            raise MalformedGrammarError("empty clause", position=position, fragment=text)
        groups.append(parse_group(clause, position))

    logger.debug("parsed %r into %d clause(s)", text, len(groups))
    return tuple(groups)
