"""Prime-field arithmetic on non-negative integers of a fixed word width.

Elements are plain ints. Every operation behaves like fixed-width
multi-word arithmetic: values live in ``[0, 2**(words * word_bits))``
and carries or borrows wrap around that width.
"""

from __future__ import annotations

import secrets
from dataclasses import dataclass

__all__ = [
    "PrimeData",
    "gen_add",
    "gen_subtract",
    "gen_halving",
    "gen_negate",
    "gen_multiply_div",
    "reduce",
    "binary_euclidean_inverse",
    "cr_add",
    "cr_subtract",
    "cr_halving",
    "cr_negate",
]


@dataclass
class PrimeData:
    """A prime modulus together with the constants derived from it."""

    prime: int
    word_bits: int = 32
    r_squared: int = 0
    n0: int = 0
    gfp_one: int = 1
    montgomery_domain: bool = False

    def __post_init__(self) -> None:
        if self.prime < 3 or self.prime % 2 == 0:
            raise ValueError(f"modulus must be an odd number >= 3, got {self.prime}")
        if self.word_bits <= 0:
            raise ValueError(f"word width must be positive, got {self.word_bits}")

    @property
    def bits(self) -> int:
        """Number of significant bits of the prime."""
        return self.prime.bit_length()

    @property
    def words(self) -> int:
        """Number of machine words needed to hold a field element."""
        return -(-self.bits // self.word_bits)

    @property
    def width(self) -> int:
        """Total bit width of a field element's storage."""
        return self.words * self.word_bits

    @property
    def modulus(self) -> int:
        """The wrap-around bound ``2**width`` of the storage."""
        return 1 << self.width

    @property
    def mask(self) -> int:
        """Bit mask covering the whole storage width."""
        return self.modulus - 1

    def random(self) -> int:
        """Return a uniformly chosen non-zero element below the prime."""
        return secrets.randbelow(self.prime - 1) + 1


def _select(flag: int, if_set: int, if_clear: int) -> int:
    """Pick ``if_set`` when ``flag`` is 1 and ``if_clear`` when it is 0, without branching."""
    mask = -flag
    return (if_set & mask) | (if_clear & ~mask)


def gen_add(a: int, b: int, prime_data: PrimeData) -> int:
    """Return ``(a + b) mod p`` for reduced operands."""
    total = a + b
    if total >= prime_data.modulus or total >= prime_data.prime:
        return (total - prime_data.prime) & prime_data.mask
    return total


def gen_subtract(a: int, b: int, prime_data: PrimeData) -> int:
    """Return ``(a - b) mod p`` for reduced operands."""
    if a < b:
        return (a - b + prime_data.prime) & prime_data.mask
    return a - b


def gen_halving(a: int, prime_data: PrimeData) -> int:
    """Return ``a / 2 mod p``: halve even values, add the prime to odd ones first."""
    if a & 1:
        return (a + prime_data.prime) >> 1
    return a >> 1


def gen_negate(a: int, prime_data: PrimeData) -> int:
    """Return ``-a mod p``; zero stays zero."""
    if a == 0:
        return 0
    return (prime_data.prime - a) & prime_data.mask


def gen_multiply_div(a: int, b: int, prime_data: PrimeData) -> int:
    """Multiply and reduce by division."""
    return (a * b) % prime_data.prime


def reduce(a: int, prime_data: PrimeData) -> int:
    """Bring a non-negative value below the prime."""
    if a < 0:
        raise ValueError("cannot reduce a negative value")
    return a % prime_data.prime


def binary_euclidean_inverse(to_invert: int, prime_data: PrimeData) -> int:
    """Invert an element with the binary extended Euclidean algorithm.

    Raises ZeroDivisionError for zero and ValueError when the value shares
    a factor with the modulus.
    """
    if to_invert == 0:
        raise ZeroDivisionError("zero has no inverse")

    prime = prime_data.prime
    u, v = to_invert, prime
    x1, x2 = 1, 0

    while u != 1 and v != 1:
        if u == 0 or v == 0:
            raise ValueError(f"{to_invert} is not invertible modulo {prime}")
        while u % 2 == 0:
            u >>= 1
            x1 = gen_halving(x1, prime_data)
        while v % 2 == 0:
            v >>= 1
            x2 = gen_halving(x2, prime_data)
        if u >= v:
            u -= v
            x1 = gen_subtract(x1, x2, prime_data)
        else:
            v -= u
            x2 = gen_subtract(x2, x1, prime_data)

    return reduce(x1 if u == 1 else x2, prime_data)


def cr_add(a: int, b: int, prime_data: PrimeData) -> int:
    """Branch-free ``(a + b) mod p``."""
    total = a + b
    carry = total >> prime_data.width
    res = total & prime_data.mask
    no_borrow = int(res >= prime_data.prime)
    temp = (res - prime_data.prime) & prime_data.mask
    return _select(carry | no_borrow, temp, res)


def cr_subtract(a: int, b: int, prime_data: PrimeData) -> int:
    """Branch-free ``(a - b) mod p``."""
    diff = a - b
    borrow = int(diff < 0)
    res = diff & prime_data.mask
    temp = (res + prime_data.prime) & prime_data.mask
    return _select(borrow, temp, res)


def cr_halving(a: int, prime_data: PrimeData) -> int:
    """Branch-free ``a / 2 mod p``."""
    odd = a & 1
    total = a + prime_data.prime
    carry = (total >> prime_data.width) & 1
    chosen = _select(odd, total & prime_data.mask, a)
    return (chosen >> 1) | ((carry & odd) << (prime_data.width - 1))


def cr_negate(a: int, prime_data: PrimeData) -> int:
    """Branch-free ``-a mod p``; zero stays zero."""
    temp = (prime_data.prime - a) & prime_data.mask
    return _select(int(a == 0), a, temp)