"""Kernel encoding – strict radix-64 decoder.

Decoding is pure and synchronous.  Every malformed payload is reported with a
:class:`~grant_tracker.kernel.errors.DecodeError` whose ``reason`` is one of
``invalid_character``, ``invalid_padding`` or ``invalid_length``; positions
always refer to the payload exactly as the caller passed it.
"""
from __future__ import annotations

import base64

from grant_tracker.kernel.encoding.alphabet import Alphabet
from grant_tracker.kernel.errors import DecodeError

PAD = "="
MAX_PADDING = 2
BLOCK_SIZE = 4

_WHITESPACE = frozenset(" \t\r\n\f\v")


class Radix64Decoder:
    """Validating base64 decoder.

    Args:
        alphabet: ``Alphabet.STANDARD`` (``+/``) or ``Alphabet.URL_SAFE`` (``-_``).
        require_padding: Reject unpadded payloads whose length is not a
            multiple of four.
        ignore_whitespace: Drop ASCII whitespace (MIME line breaks) before
            validating.
    """

    def __init__(
        self,
        alphabet: Alphabet | str = Alphabet.STANDARD,
        *,
        require_padding: bool = False,
        ignore_whitespace: bool = False,
    ) -> None:
        self.alphabet = Alphabet.parse(alphabet)
        self.require_padding = require_padding
        self.ignore_whitespace = ignore_whitespace
        self._symbols = frozenset(self.alphabet.characters)

    def decode(self, payload: str) -> bytes:
        if not isinstance(payload, str):
            raise TypeError(f"payload must be str, not {type(payload).__name__}")
        if not payload:
            return b""

        data = self._validated_symbols(payload)
        if not data:
            return b""

        body = "".join(data)
        padded = body + PAD * (-len(body) % BLOCK_SIZE)
        return base64.b64decode(padded, altchars=self.alphabet.altchars, validate=True)

    def _validated_symbols(self, payload: str) -> list[str]:
        data: list[str] = []
        padding = 0
        for index, char in enumerate(payload):
            if self.ignore_whitespace and char in _WHITESPACE:
                continue
            if char == PAD:
                padding += 1
                if padding > MAX_PADDING:
                    raise DecodeError(
                        "invalid_padding",
                        f"More than {MAX_PADDING} padding characters (at index {index})",
                        position=index,
                        character=char,
                    )
                continue
            if char not in self._symbols:
                raise DecodeError(
                    "invalid_character",
                    f"Invalid character {char!r} at index {index}",
                    position=index,
                    character=char,
                )
            if padding:
                raise DecodeError(
                    "invalid_padding",
                    f"Padding followed by data at index {index}",
                    position=index,
                    character=char,
                )
            data.append(char)

        self._check_length(len(data), padding)
        return data

    def _check_length(self, symbols: int, padding: int) -> None:
        total = symbols + padding
        if padding:
            if total % BLOCK_SIZE:
                raise DecodeError(
                    "invalid_length",
                    f"Padded length {total} is not a multiple of {BLOCK_SIZE}",
                )
            return
        remainder = symbols % BLOCK_SIZE
        if remainder == 1:
            raise DecodeError(
                "invalid_length",
                f"Length {symbols} leaves a dangling symbol",
            )
        if remainder and self.require_padding:
            raise DecodeError(
                "invalid_length",
                f"Unpadded length {symbols} is not a multiple of {BLOCK_SIZE}",
            )


def decode_base64(payload: str, alphabet: Alphabet | str = Alphabet.STANDARD) -> bytes:
    """Decode *payload* with default options; see :class:`Radix64Decoder`."""
    return Radix64Decoder(alphabet).decode(payload)


def encode_base64(
    data: bytes,
    alphabet: Alphabet | str = Alphabet.STANDARD,
    *,
    pad: bool = True,
) -> str:
    """Inverse of :func:`decode_base64`."""
    encoded = base64.b64encode(data, altchars=Alphabet.parse(alphabet).altchars).decode("ascii")
    return encoded if pad else encoded.rstrip(PAD)


__all__ = ["BLOCK_SIZE", "PAD", "Radix64Decoder", "decode_base64", "encode_base64"]
