"""Domain errors – malformed input data."""

from __future__ import annotations

from typing import Any, Literal

from grant_tracker.kernel.errors.base import BaseError

DecodeFailure = Literal["invalid_character", "invalid_padding", "invalid_length"]


class DomainError(BaseError):
    """Raised when input data breaks a rule of the domain."""

    default_code = "domain_error"
    category = "data"


class DecodeError(DomainError):
    """An encoded payload is not valid radix-64 text.

    ``reason`` names the offending condition; ``position`` is the index in the
    original payload where it was detected (``None`` for length failures).
    """

    default_code = "decode_error"

    def __init__(
        self,
        reason: DecodeFailure,
        message: str | None = None,
        *,
        position: int | None = None,
        character: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or reason.replace("_", " "), **kwargs)
        self.reason = reason
        self.position = position
        self.character = character
        self.detail.setdefault("reason", reason)
        if position is not None:
            self.detail.setdefault("position", position)
        if character is not None:
            self.detail.setdefault("character", character)


__all__ = ["DecodeError", "DecodeFailure", "DomainError"]
