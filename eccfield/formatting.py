"""Hexadecimal rendering and simple console input/output."""

from __future__ import annotations

import sys
from typing import TextIO

__all__ = [
    "uint_to_hex",
    "bytes_to_hex",
    "write",
    "readline",
    "print_bytes",
    "print_integer",
]


def uint_to_hex(value: int, word_bytes: int = 4) -> str:
    """Render the low ``word_bytes`` bytes of ``value`` as fixed-width lowercase hex."""
    if word_bytes <= 0:
        raise ValueError(f"word size must be positive, got {word_bytes}")
    digits = 2 * word_bytes
    return format(value & ((1 << (8 * word_bytes)) - 1), f"0{digits}x")


def bytes_to_hex(value: bytes) -> str:
    """Render a little-endian byte string as hex, most significant byte first."""
    return bytes(reversed(value)).hex()


def write(text: str, stream: TextIO | None = None) -> None:
    """Write ``text`` to ``stream`` (standard output by default)."""
    out = stream if stream is not None else sys.stdout
    out.write(text)


def readline(length: int, stream: TextIO | None = None) -> str:
    """Read at most ``length`` characters, stopping at a newline or end of input.

    A terminating newline is consumed but not returned.
    """
    source = stream if stream is not None else sys.stdin
    chars: list[str] = []
    for _ in range(length):
        ch = source.read(1)
        if not ch or ch == "\n":
            break
        chars.append(ch)
    return "".join(chars)


def print_bytes(value: bytes, stream: TextIO | None = None) -> None:
    """Print a byte string as hex followed by a newline."""
    write(bytes_to_hex(value) + "\n", stream)


def print_integer(value: int, stream: TextIO | None = None) -> None:
    """Print one machine word as hex followed by a newline."""
    write(uint_to_hex(value) + "\n", stream)