"""Structured errors raised while parsing version strings."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Closed set of failure categories."""

    NULL_INPUT = "null-input"
    EMPTY_INPUT = "empty-input"
    MALFORMED_GRAMMAR = "malformed-grammar"


class VersionStringError(ValueError):
    """Base error for version string failures."""

    kind: ErrorKind = ErrorKind.MALFORMED_GRAMMAR

    def to_dict(self) -> dict[str, object]:
        return {"kind": self.kind.value, "message": str(self)}


class NullInputError(VersionStringError):
    """Raised when no version string was supplied at all."""

    kind = ErrorKind.NULL_INPUT

    def __init__(self, message: str = "version string must not be None") -> None:
        super().__init__(message)


class EmptyInputError(VersionStringError):
    """Raised when the version string is empty or whitespace only."""

    kind = ErrorKind.EMPTY_INPUT

    def __init__(self, message: str = "version string must not be empty") -> None:
        super().__init__(message)


class MalformedGrammarError(VersionStringError):
    """Raised on a structural violation of the version string grammar.

    ``position`` is the zero-based offset into the text being parsed and
    ``fragment`` is the piece of text that could not be accepted.
    """

    kind = ErrorKind.MALFORMED_GRAMMAR

    def __init__(self, message: str, *, position: int, fragment: str) -> None:
        self.position = position
        self.fragment = fragment
        super().__init__(f"{message} at position {position}: {fragment!r}")

    def to_dict(self) -> dict[str, object]:
        data = super().to_dict()
        data["position"] = self.position
        data["fragment"] = self.fragment
        return data
