"""SHA-224 and SHA-256 over whole 64-byte blocks with an explicit finishing step.

The message length field holds the low 32 bits of the bit count; the upper
32 bits of the length field are always zero.
"""

from __future__ import annotations

import struct

__all__ = ["Sha256", "Sha224", "sha224", "sha256"]

_MASK = 0xFFFFFFFF
_BLOCK_SIZE = 64

_K256 = (
    0x428A2F98, 0x71374491, 0xB5C0FBCF, 0xE9B5DBA5, 0x3956C25B, 0x59F111F1, 0x923F82A4, 0xAB1C5ED5,
    0xD807AA98, 0x12835B01, 0x243185BE, 0x550C7DC3, 0x72BE5D74, 0x80DEB1FE, 0x9BDC06A7, 0xC19BF174,
    0xE49B69C1, 0xEFBE4786, 0x0FC19DC6, 0x240CA1CC, 0x2DE92C6F, 0x4A7484AA, 0x5CB0A9DC, 0x76F988DA,
    0x983E5152, 0xA831C66D, 0xB00327C8, 0xBF597FC7, 0xC6E00BF3, 0xD5A79147, 0x06CA6351, 0x14292967,
    0x27B70A85, 0x2E1B2138, 0x4D2C6DFC, 0x53380D13, 0x650A7354, 0x766A0ABB, 0x81C2C92E, 0x92722C85,
    0xA2BFE8A1, 0xA81A664B, 0xC24B8B70, 0xC76C51A3, 0xD192E819, 0xD6990624, 0xF40E3585, 0x106AA070,
    0x19A4C116, 0x1E376C08, 0x2748774C, 0x34B0BCB5, 0x391C0CB3, 0x4ED8AA4A, 0x5B9CCA4F, 0x682E6FF3,
    0x748F82EE, 0x78A5636F, 0x84C87814, 0x8CC70208, 0x90BEFFFA, 0xA4506CEB, 0xBEF9A3F7, 0xC67178F2,
)


def _rotr(value: int, bits: int) -> int:
    return ((value >> bits) | (value << (32 - bits))) & _MASK


def _big_sigma0(x: int) -> int:
    return _rotr(x, 2) ^ _rotr(x, 13) ^ _rotr(x, 22)


def _big_sigma1(x: int) -> int:
    return _rotr(x, 6) ^ _rotr(x, 11) ^ _rotr(x, 25)


def _small_sigma0(x: int) -> int:
    return _rotr(x, 7) ^ _rotr(x, 18) ^ (x >> 3)


def _small_sigma1(x: int) -> int:
    return _rotr(x, 17) ^ _rotr(x, 19) ^ (x >> 10)


def _choose(x: int, y: int, z: int) -> int:
    return (x & y) ^ (~x & _MASK & z)


def _majority(x: int, y: int, z: int) -> int:
    return (x & y) ^ (x & z) ^ (y & z)


class Sha256:
    """Running SHA-256 state."""

    block_size = _BLOCK_SIZE
    digest_size = 32
    _initial: tuple[int, ...] = (
        0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A,
        0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19,
    )

    def __init__(self) -> None:
        self._state = list(self._initial)

    def _process_block(self, block: bytes) -> None:
        schedule = list(struct.unpack(">16I", block))
        for index in range(16, 64):
            schedule.append(
                (
                    schedule[index - 16]
                    + _small_sigma0(schedule[index - 15])
                    + schedule[index - 7]
                    + _small_sigma1(schedule[index - 2])
                )
                & _MASK
            )

        a, b, c, d, e, f, g, h = self._state
        for constant, word in zip(_K256, schedule):
            t1 = (h + _big_sigma1(e) + _choose(e, f, g) + constant + word) & _MASK
            t2 = (_big_sigma0(a) + _majority(a, b, c)) & _MASK
            h, g, f, e = g, f, e, (d + t1) & _MASK
            d, c, b, a = c, b, a, (t1 + t2) & _MASK

        self._state = [
            (value + delta) & _MASK
            for value, delta in zip(self._state, (a, b, c, d, e, f, g, h))
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
        """Return the leading state words as big-endian bytes."""
        words = self.digest_size // 4
        return struct.pack(f">{words}I", *self._state[:words])


class Sha224(Sha256):
    """Running SHA-224 state."""

    digest_size = 28
    _initial = (
        0xC1059ED8, 0x367CD507, 0x3070DD17, 0xF70E5939,
        0xFFC00B31, 0x68581511, 0x64F98FA7, 0xBEFA4FA4,
    )


def sha224(data: bytes) -> bytes:
    """Return the SHA-224 digest of ``data``."""
    state = Sha224()
    state.final(data, len(data))
    return state.digest()


def sha256(data: bytes) -> bytes:
    """Return the SHA-256 digest of ``data``."""
    state = Sha256()
    state.final(data, len(data))
    return state.digest()