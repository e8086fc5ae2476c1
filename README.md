# eccfield

Arithmetic for elliptic curve cryptography over prime fields, written in plain
Python with no third-party dependencies.

Field elements are ordinary Python `int`s. The field functions behave like
fixed-width multi-word arithmetic: a `PrimeData` describes the prime and the
word width, and carries or borrows wrap around `words * word_bits` bits.

| Module | What it provides |
| --- | --- |
| `eccfield.field` | `PrimeData` and GF(p) arithmetic: `gen_add`, `gen_subtract`, `gen_halving`, `gen_negate`, `gen_multiply_div`, `reduce`, `binary_euclidean_inverse`, and the branch-free `cr_add`, `cr_subtract`, `cr_halving`, `cr_negate` |
| `eccfield.montgomery` | `compute_r`, `compute_r_squared`, `compute_n0`, `mont_multiply`, `cr_mont_multiply`, `normal_to_montgomery`, `montgomery_to_normal`, `mont_inverse_binary`, `mont_inverse_fermat`, `mont_exponent`, `mult_two_mont` |
| `eccfield.sha1` | `Sha1` block hasher and the one-shot `sha1(data)` |
| `eccfield.sha2` | `Sha256` and `Sha224` block hashers and the one-shot `sha256(data)` and `sha224(data)` |
| `eccfield.curve` | `AffinePoint`, `ProjectivePoint`, `CurveParameters`, affine point arithmetic and `generic_mul` |
| `eccfield.std_projective` | Standard projective coordinates `(X/Z, Y/Z)`: `is_valid`, `equals`, `to_affine`, `from_affine`, `negate` |
| `eccfield.jacobian` | Jacobian coordinates `(X/Z², Y/Z³)`: `is_valid`, `equals`, `to_affine`, `from_affine`, `double`, `add`, `add_affine`, `negate` |
| `eccfield.formatting` | Hex rendering (`uint_to_hex`, `bytes_to_hex`) and small I/O helpers (`write`, `readline`, `print_bytes`, `print_integer`) |

## Field arithmetic

```python
from eccfield.field import PrimeData, gen_add, binary_euclidean_inverse

p = PrimeData(prime=97)          # 32-bit words by default
gen_add(90, 10, p)               # 3
binary_euclidean_inverse(12, p)  # 89
```

`PrimeData` rejects even moduli and moduli below 3 with `ValueError`.
`binary_euclidean_inverse` raises `ZeroDivisionError` for zero.
`PrimeData.random()` returns a random non-zero element below the prime.

## Montgomery domain

`mont_multiply(a, b, p)` returns `a * b * R⁻¹ mod p` with `R = 2**width`.
`normal_to_montgomery` and `montgomery_to_normal` move values between domains.
When `r_squared` or `n0` on the `PrimeData` are left at zero they are derived
from the prime. `mont_exponent` starts from `prime_data.gfp_one`, so for
Montgomery work set `gfp_one` to `compute_r(prime_data)`.

## Curves and points

`CurveParameters` holds the field data, the prime data of the group order, the
constants `a` and `b` of `y² = x³ + ax + b`, and the base point. Its
`add`, `subtract`, `multiply`, `square`, `negate`, `halving`, `inverse` and
`random_element` methods do field arithmetic; `multiply` and `inverse` switch
to Montgomery arithmetic when `prime_data.montgomery_domain` is true.

```python
from eccfield.curve import AffinePoint, CurveParameters, affine_add, affine_is_valid
from eccfield.field import PrimeData

param = CurveParameters(
    prime_data=PrimeData(prime=97),
    order_n_data=PrimeData(prime=5),
    param_a=2,
    param_b=3,
    base_point=AffinePoint(3, 6),
)
affine_is_valid(param.base_point, param)             # True
affine_add(param.base_point, param.base_point, param)  # AffinePoint(x=80, y=10, identity=False)
```

Points are frozen dataclasses; every operation returns a new point. The point
at infinity has `identity=True`.

The `jacobian` and `std_projective` modules work on `ProjectivePoint` in their
own coordinate systems and convert to and from `AffinePoint`.

## Hashing

```python
from eccfield.sha1 import sha1
from eccfield.sha2 import sha224, sha256

sha1(b"abc")
sha224(b"abc")
sha256(b"abc")
```

The block classes expose the steps a streaming caller needs: `update(block)`
for each full 64-byte block, `final(message, total_length)` for the remaining
bytes (the bytes already absorbed must be a multiple of 64, otherwise
`ValueError`), and `digest()` for the result. The length field holds only the
low 32 bits of the message's bit count.

## Formatting

`uint_to_hex(value, word_bytes=4)` renders one word as fixed-width lowercase
hex. `bytes_to_hex` takes a little-endian byte string and prints the most
significant byte first. `readline(length, stream)` reads up to `length`
characters, stopping at a newline or end of input.

## What the package does not do

- It has no built-in scalar multiplication. `generic_mul` calls the
  multiplier stored in `CurveParameters.eccp_mul` (or `eccp_mul_base_point`
  when a precomputed table is set and the point is the base point) and raises
  `ValueError` when none is configured; the caller supplies these callables.
- It has no key generation, key agreement or signature protocols, and no
  side-channel hardened point multiplication.
- It has no command-line interface.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.