"""Semantic version triple used in game metadata."""

from __future__ import annotations

import re
from dataclasses import dataclass

from duckengine.errors import EngineError, ErrorType

_UINT_MASK = 0xFFFFFFFF
_VERSION_RE = re.compile(r"\s*([+-]?\d+)\.\s*([+-]?\d+)\.\s*([+-]?\d+)")


@dataclass(frozen=True)
class Version:
    """A major.minor.patch version made of unsigned 32-bit components."""

    major: int = 0
    minor: int = 0
    patch: int = 0

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            object.__setattr__(self, name, getattr(self, name) & _UINT_MASK)

    @classmethod
    def from_string(cls, text: str) -> Version:
        """Parse a leading ``major.minor.patch``; trailing text is ignored."""
        match = _VERSION_RE.match(text)
        if match is None:
            raise EngineError(ErrorType.INVALID_FORMAT, f"Invalid version: {text!r}")
        return cls(*(int(part) for part in match.groups()))

    @classmethod
    def max(cls) -> Version:
        """The largest representable version."""
        return cls(_UINT_MASK, _UINT_MASK, _UINT_MASK)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"