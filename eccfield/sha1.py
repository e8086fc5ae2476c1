"""SHA-1 over whole 64-byte blocks with an explicit finishing step.

The message length field holds the low 32 bits of the bit count; the upper
32 bits of the length field are always zero.
"""

from __future__ import annotations

import struct

__all__ = ["Sha1", "sha1"]

_MASK = 0xFFFFFFFF
_BLOCK_SIZE = 64
_INITIAL = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)


def _rotl(value: int, bits: int) -> int:
    return ((value << bits) | (value >> (32 - bits))) & _MASK


def _round_constants(index: int, b: int, c: int, d: int) -> tuple[int, int]:
    if index < 20:
        return d ^ (b & (c ^ d)), 0x5A827999
    if index < 40:
        return b ^ c ^ d, 0x6ED9EBA1
    if index < 60:
        return (b & c) | (d & (b | c)), 0x8F1BBCDC
    return b ^ c ^ d, 0xCA62C1D6


class Sha1:
    """Running SHA-1 state."""

    block_size = _BLOCK_SIZE
    digest_size = 20

    def __init__(self) -> None:
        self._state = list(_INITIAL)

    def _process_block(self, block: bytes) -> None:
        schedule = list(struct.unpack(">16I", block))
        for index in range(16, 80):
            schedule.append(
                _rotl(
                    schedule[index - 3]
                    ^ schedule[index - 8]
                    ^ schedule[index - 14]
                    ^ schedule[index - 16],
                    1,
                )
            )

        a, b, c, d, e = self._state
        for index, word in enumerate(schedule):
            f, k = _round_constants(index, b, c, d)
            temp = (_rotl(a, 5) + f + e + k + word) & _MASK
            a, b, c, d, e = temp, a, _rotl(b, 30), c, d

        self._state = [
            (value + delta) & _MASK
            for value, delta in zip(self._state, (a, b, c, d, e))
        ]

    def update(self, block: bytes) -> None:
        """Absorb exactly one 64-byte block."""
        block = bytes(block)
        if len(block) != _BLOCK_SIZE:
            raise ValueError(f"block must be {_BLOCK_SIZE} bytes, got {len(block)}")
        self._process_block(block)

    def final(self, message: bytes, total_length: int) -> None:
        """Absorb the rest of the message and apply the padding.

        ``total_length`` is the length of the whole message in bytes; the part
        already absorbed, ``total_length - len(message)``, must be a multiple
        of 64.
        """
        message = bytes(message)
        absorbed = total_length - len(message)
        if absorbed < 0 or absorbed % _BLOCK_SIZE:
            raise ValueError(
                "total length must exceed the remaining message by a multiple of 64"
            )
        padded = (
            message
            + b"\x80"
            + bytes((55 - len(message)) % _BLOCK_SIZE)
            + struct.pack(">II", 0, (total_length * 8) & _MASK)
        )
        for start in range(0, len(padded), _BLOCK_SIZE):
            self._process_block(padded[start : start + _BLOCK_SIZE])

    def digest(self) -> bytes:
        """Return the current state as 20 big-endian bytes."""
        return struct.pack(">5I", *self._state)


def sha1(data: bytes) -> bytes:
    """Return the SHA-1 digest of ``data``."""
    state = Sha1()
    state.final(data, len(data))
    return state.digest()