"""Kernel encoding – radix-64 alphabets."""
from __future__ import annotations

import enum
import string

_COMMON = string.ascii_uppercase + string.ascii_lowercase + string.digits


class Alphabet(enum.Enum):
    """Radix-64 alphabet variants (RFC 4648 §4 and §5)."""

    STANDARD = "standard"
    URL_SAFE = "url_safe"

    @property
    def characters(self) -> str:
        """The 64 data symbols, in value order."""
        if self is Alphabet.URL_SAFE:
            return _COMMON + "-_"
        return _COMMON + "+/"

    @property
    def altchars(self) -> bytes | None:
        """``altchars`` argument for :mod:`base64`, ``None`` for the standard set."""
        if self is Alphabet.URL_SAFE:
            return b"-_"
        return None

    @classmethod
    def parse(cls, value: "str | Alphabet") -> "Alphabet":
        """Accept an enum member or its name/value in any case (``"url-safe"`` too)."""
        if isinstance(value, Alphabet):
            return value
        normalised = str(value).strip().lower().replace("-", "_")
        for member in cls:
            if member.value == normalised:
                return member
        raise ValueError(f"Unknown radix-64 alphabet: {value!r}")


__all__ = ["Alphabet"]
