"""Immutable value types for version-ids and version strings."""

from __future__ import annotations

from .ranges import AndGroup, ModifiedRange, Modifier
from .tokens import AlphaToken, NumericToken, Token
from .version_id import VersionId

__all__ = [
    "AlphaToken",
    "AndGroup",
    "ModifiedRange",
    "Modifier",
    "NumericToken",
    "Token",
    "VersionId",
]
