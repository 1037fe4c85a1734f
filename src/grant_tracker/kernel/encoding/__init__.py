"""Kernel encoding – radix-64 (base64) codec."""
from grant_tracker.kernel.encoding.alphabet import Alphabet
from grant_tracker.kernel.encoding.radix64 import (
    BLOCK_SIZE,
    PAD,
    Radix64Decoder,
    decode_base64,
    encode_base64,
)

__all__ = [
    "Alphabet",
    "BLOCK_SIZE",
    "PAD",
    "Radix64Decoder",
    "decode_base64",
    "encode_base64",
]
