from __future__ import annotations

import pytest

from jnlp_version import parse
from jnlp_version.errors import MalformedGrammarError
from jnlp_version.models import AlphaToken, NumericToken, VersionId


def v(text: str) -> VersionId:
    return VersionId.parse(text)


def test_keeps_verbatim_text() -> None:
    assert str(v("1.04_0-beta")) == "1.04_0-beta"
    assert v("1.04").text == "1.04"


def test_numeric_ordering_is_by_value() -> None:
    assert v("1.2") < v("1.10")
    assert v("1.10") > v("1.9")
    assert v("2.0") > v("1.99.99")


def test_alpha_ordering_is_by_character_code() -> None:
    assert v("1.0-alpha") < v("1.0-beta")
    assert v("1.0-Z") < v("1.0-a")


def test_numeric_sorts_below_alpha_at_same_position() -> None:
    assert v("1.0.5") < v("1.0.a")
    assert v("1.0.a").compare(v("1.0.5")) == 1


def test_shorter_prefix_sorts_first() -> None:
    assert v("1.0") < v("1.0.0")
    assert v("1.0") < v("1.0-beta")
    assert v("1.0").compare(v("1.0.0")) == -1


def test_equality_ignores_separators_and_leading_zeros() -> None:
    assert v("1.01") == v("1-1")
    assert v("1.0_5").compare(v("1.0.5")) == 0
    assert hash(v("1.01")) == hash(v("1_1"))
    assert v("1.0") != v("1.0.0")


def test_is_prefix_of() -> None:
    assert v("1.1").is_prefix_of(v("1.1"))
    assert v("1.1").is_prefix_of(v("1.1.8"))
    assert v("1.1").is_prefix_of(v("1.1-beta"))
    assert not v("1.1").is_prefix_of(v("1.10"))
    assert not v("1.1").is_prefix_of(v("1.2"))
    assert not v("1.1.8").is_prefix_of(v("1.1"))


def test_tokens_are_typed() -> None:
    assert v("1a").tokens == (NumericToken("1"), AlphaToken("a"))
    assert NumericToken("1") != AlphaToken("a")


def test_parse_rejects_absent_and_empty_text() -> None:
    with pytest.raises(MalformedGrammarError):
        VersionId.parse(None)
    with pytest.raises(MalformedGrammarError):
        VersionId.parse("")


def test_to_dict() -> None:
    assert v("1.0b").to_dict() == {
        "text": "1.0b",
        "tokens": [
            {"kind": "numeric", "value": "1"},
            {"kind": "numeric", "value": "0"},
            {"kind": "alpha", "value": "b"},
        ],
    }


def test_is_immutable() -> None:
    with pytest.raises(AttributeError):
        v("1.0").text = "2.0"  # type: ignore[misc]


def test_value_types_use_slots() -> None:
    spec = parse("1.0a+&2")
    group = spec.groups[0]
    version_id = group.ranges[0].version_id
    for value in (spec, group, group.ranges[0], version_id, *version_id.tokens):
        assert not hasattr(value, "__dict__")
