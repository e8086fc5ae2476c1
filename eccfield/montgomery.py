"""Montgomery arithmetic over a prime field.

An element ``a`` is held in the Montgomery domain as ``a * R mod p``, where
``R = 2**width`` and ``width`` is the storage width of the prime data. The
constants ``r_squared`` and ``n0`` on :class:`PrimeData` drive the
multiplication. When either is left at zero it is derived from the prime.
Neither can be zero for a valid odd modulus.
"""

from __future__ import annotations

from .field import PrimeData

__all__ = [
    "compute_r",
    "compute_r_squared",
    "compute_n0",
    "mont_multiply",
    "cr_mont_multiply",
    "normal_to_montgomery",
    "montgomery_to_normal",
    "mont_inverse_binary",
    "mont_inverse_fermat",
    "mont_exponent",
    "mult_two_mont",
]


def compute_r(prime_data: PrimeData) -> int:
    """Return ``R mod p`` with ``R = 2**width``."""
    return (1 << prime_data.width) % prime_data.prime


def compute_r_squared(prime_data: PrimeData) -> int:
    """Return ``R**2 mod p``."""
    return (1 << (2 * prime_data.width)) % prime_data.prime


def compute_n0(prime_data: PrimeData) -> int:
    """Return ``-p**-1 mod 2**word_bits``, the per-word reduction constant."""
    word_modulus = 1 << prime_data.word_bits
    return -pow(prime_data.prime, -1, word_modulus) % word_modulus


def _n0(prime_data: PrimeData) -> int:
    return prime_data.n0 or compute_n0(prime_data)


def _r_squared(prime_data: PrimeData) -> int:
    return prime_data.r_squared or compute_r_squared(prime_data)


def _sos_reduce(a: int, b: int, prime_data: PrimeData) -> int:
    """Word-by-word Montgomery reduction of ``a * b``; the result is below ``2p``."""
    word_bits = prime_data.word_bits
    word_mask = (1 << word_bits) - 1
    n0 = _n0(prime_data)
    prime = prime_data.prime

    product = a * b
    for shift in range(0, prime_data.width, word_bits):
        m = ((product >> shift) * n0) & word_mask
        product += (m * prime) << shift
    return product >> prime_data.width


def mont_multiply(a: int, b: int, prime_data: PrimeData) -> int:
    """Return ``a * b * R**-1 mod p``."""
    result = _sos_reduce(a, b, prime_data)
    if result >= prime_data.prime:
        result -= prime_data.prime
    return result & prime_data.mask


def cr_mont_multiply(a: int, b: int, prime_data: PrimeData) -> int:
    """Branch-free ``a * b * R**-1 mod p``."""
    high = _sos_reduce(a, b, prime_data)
    carry = high >> prime_data.width
    low = high & prime_data.mask
    reduced = (low - prime_data.prime) & prime_data.mask
    no_borrow = int(low >= prime_data.prime)
    select = -(carry | no_borrow)
    return (reduced & select) | (low & ~select)


def normal_to_montgomery(value: int, prime_data: PrimeData) -> int:
    """Move ``value`` into the Montgomery domain."""
    return mont_multiply(value, _r_squared(prime_data), prime_data)


def montgomery_to_normal(value: int, prime_data: PrimeData) -> int:
    """Move ``value`` out of the Montgomery domain."""
    return mont_multiply(value, 1, prime_data)


def mont_inverse_binary(a: int, prime_data: PrimeData) -> int:
    """Invert an element of the Montgomery domain: ``(aR)**-1 * R**2 mod p``.

    Raises ZeroDivisionError when ``a`` is a multiple of the prime.
    """
    prime = prime_data.prime
    if a % prime == 0:
        raise ZeroDivisionError("zero has no inverse")

    u, v = a, prime
    x1, x2 = 1, 0
    k = 0
    while v:
        if v % 2 == 0:
            v >>= 1
            x1 <<= 1
        elif u % 2 == 0:
            u >>= 1
            x2 <<= 1
        elif v >= u:
            v = (v - u) >> 1
            x2 += x1
            x1 <<= 1
        else:
            u = (u - v) >> 1
            x1 += x2
            x2 <<= 1
        k += 1
    # x1 = a**-1 * 2**k mod p
    x1 %= prime

    width = prime_data.width
    r_squared = _r_squared(prime_data)
    if k < width:
        x1 = mont_multiply(x1, r_squared, prime_data)
        k += width
    result = mont_multiply(x1, r_squared, prime_data)
    if k > width:
        result = mont_multiply(result, 1 << (2 * width - k), prime_data)
    return result


def mont_exponent(a: int, exponent: int, prime_data: PrimeData) -> int:
    """Return ``a**exponent`` in the Montgomery domain.

    The running value starts at ``prime_data.gfp_one``, which must hold the
    Montgomery form of one (``R mod p``).
    """
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    result = prime_data.gfp_one
    for bit in reversed(range(exponent.bit_length())):
        result = mont_multiply(result, result, prime_data)
        if (exponent >> bit) & 1:
            result = mont_multiply(result, a, prime_data)
    return result


def mont_inverse_fermat(to_invert: int, prime_data: PrimeData) -> int:
    """Invert an element of the Montgomery domain by raising it to ``p - 2``."""
    return mont_exponent(to_invert, prime_data.prime - 2, prime_data)


def mult_two_mont(a: int, b: int, prime_data: PrimeData, r_squared: int) -> int:
    """Return ``a * b mod p`` for normal-domain operands using two reductions."""
    product = cr_mont_multiply(a, b, prime_data)
    return cr_mont_multiply(product, r_squared, prime_data)