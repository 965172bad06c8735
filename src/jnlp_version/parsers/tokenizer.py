"""Split a version-id into numeric and alphabetic tokens."""

from __future__ import annotations

from ..errors import MalformedGrammarError
from ..models.tokens import AlphaToken, NumericToken, Token

SEPARATORS = frozenset("._-")
# Characters that belong to the version string grammar and never to a version-id.
RESERVED = frozenset("&+*")


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def tokenize(text: str, offset: int = 0) -> tuple[Token, ...]:
    """Return the tokens of ``text`` in order.

    ``offset`` is added to reported error positions so that callers parsing
    a larger string get positions relative to that string.

    Raises:
        MalformedGrammarError: on empty text, a separator at either end,
            adjacent separators, or a reserved or whitespace character.
    """
    if not text:
        raise MalformedGrammarError("empty version-id", position=offset, fragment=text)

    tokens: list[Token] = []
    start = 0
    previous_separator = True

    for index, ch in enumerate(text):
        if ch in RESERVED or ch.isspace():
            raise MalformedGrammarError(
                "unexpected character in version-id", position=offset + index, fragment=ch
            )
        if ch in SEPARATORS:
            if previous_separator:
                raise MalformedGrammarError(
                    "empty token in version-id", position=offset + index, fragment=text
                )
            tokens.append(_make_token(text[start:index]))
            start = index + 1
            previous_separator = True
            continue
        if not previous_separator and _is_digit(ch) != _is_digit(text[index - 1]):
            tokens.append(_make_token(text[start:index]))
            start = index
        previous_separator = False

    if previous_separator:
        raise MalformedGrammarError(
            "version-id must not end with a separator",
            position=offset + len(text) - 1,
            fragment=text,
        )
    tokens.append(_make_token(text[start:]))
    return tuple(tokens)


def _make_token(segment: str) -> Token:
    if _is_digit(segment[0]):
        return NumericToken.from_text(segment)
    return AlphaToken(segment)
