"""JNLP-style version string parsing and matching.

Typical use::

    from jnlp_version import parse

    spec = parse("1.4+ 1.3.1*")
    spec.contains("1.5.0_02")  # True
    str(spec)                  # "1.4+ 1.3.1*"
"""

from .errors import (
    EmptyInputError,
    ErrorKind,
    MalformedGrammarError,
    NullInputError,
    VersionStringError,
)
from .models import AlphaToken, AndGroup, ModifiedRange, Modifier, NumericToken, VersionId
from .specification import ParseResult, VersionSpecification, parse, try_parse

__all__ = [
    "AlphaToken",
    "AndGroup",
    "EmptyInputError",
    "ErrorKind",
    "MalformedGrammarError",
    "ModifiedRange",
    "Modifier",
    "NullInputError",
    "NumericToken",
    "ParseResult",
    "VersionId",
    "VersionSpecification",
    "VersionStringError",
    "parse",
    "try_parse",
]
