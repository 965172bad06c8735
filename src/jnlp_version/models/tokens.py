"""Typed version-id segments."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(slots=True, frozen=True)
class NumericToken:
    """A maximal run of digits, compared by numeric value.

    ``digits`` holds the run without leading zeros (``"0"`` for all zeros).
    Ordering works on the digit string so arbitrarily long runs never go
    through ``int()``.
    """

    digits: str

    def __post_init__(self) -> None:
        if not self.digits or any(not "0" <= ch <= "9" for ch in self.digits):
            raise ValueError(f"Numeric token must be ASCII digits: {self.digits!r}")
        if len(self.digits) > 1 and self.digits.startswith("0"):
            raise ValueError(f"Numeric token must not have leading zeros: {self.digits!r}")

    @classmethod
    def from_text(cls, text: str) -> NumericToken:
        return cls(text.lstrip("0") or "0")

    @property
    def sort_key(self) -> tuple[int, int, str]:
        # Without leading zeros a shorter run is always the smaller number.
        return (0, len(self.digits), self.digits)

    def to_dict(self) -> dict[str, object]:
        return {"kind": "numeric", "value": self.digits}


@dataclass(slots=True, frozen=True)
class AlphaToken:
    """A maximal run of non-digit, non-separator characters."""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("Alpha token must be non-empty")
        if any("0" <= ch <= "9" for ch in self.value):
            raise ValueError(f"Alpha token must not contain digits: {self.value!r}")

    # Numeric tokens sort below alpha tokens at the same position.
    @property
    def sort_key(self) -> tuple[int, str]:
        return (1, self.value)

    def to_dict(self) -> dict[str, object]:
        return {"kind": "alpha", "value": self.value}


Token = Union[NumericToken, AlphaToken]
