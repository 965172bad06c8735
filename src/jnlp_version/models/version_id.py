"""Concrete version-id model."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import total_ordering

from ..errors import MalformedGrammarError
from .tokens import Token


@total_ordering
@dataclass(slots=True, frozen=True)
class VersionId:
    """Immutable token sequence paired with the text it was parsed from.

    Equality, hashing and ordering look at the tokens only, so ``1.01``
    equals ``1-1``. ``str()`` always returns the verbatim source text.
    """

    tokens: tuple[Token, ...]
    text: str = field(compare=False)

    def __post_init__(self) -> None:
        if not self.tokens:
            raise ValueError("VersionId must contain at least one token")

    def __str__(self) -> str:
        return self.text

    def __len__(self) -> int:
        return len(self.tokens)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, VersionId):
            return NotImplemented
        return self.sort_key < other.sort_key

    @property
    def sort_key(self) -> tuple[tuple[int | str, ...], ...]:
        # A shorter sequence that is a prefix of a longer one sorts first.
        return tuple(token.sort_key for token in self.tokens)

    def compare(self, other: VersionId) -> int:
        """Return -1, 0 or 1 as this id sorts below, equal to or above ``other``."""
        if self.sort_key < other.sort_key:
            return -1
        if self.sort_key > other.sort_key:
            return 1
        return 0

    def is_prefix_of(self, other: VersionId) -> bool:
        count = len(self.tokens)
        return count <= len(other.tokens) and other.tokens[:count] == self.tokens

    def to_dict(self) -> dict[str, object]:
        return {
            "text": self.text,
            "tokens": [token.to_dict() for token in self.tokens],
        }

    @classmethod
    def parse(cls, text: str | None, offset: int = 0) -> VersionId:
        """Parse a single concrete version-id.

        Every failure, including absent or empty text, is reported as a
        ``MalformedGrammarError``.
        """
        from ..parsers.tokenizer import tokenize

        if text is None:
            raise MalformedGrammarError("version-id is absent", position=offset, fragment="")
        return cls(tokens=tokenize(text, offset), text=text)
