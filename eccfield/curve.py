"""Short Weierstrass curves ``y^2 = x^3 + ax + b`` over a prime field.

Field elements are plain ints. When the prime data is flagged as being in
the Montgomery domain, all coordinates and the curve constants are expected
in Montgomery form and multiplication and inversion work in that domain.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from .field import (
    PrimeData,
    binary_euclidean_inverse,
    gen_add,
    gen_halving,
    gen_multiply_div,
    gen_negate,
    gen_subtract,
)
from .montgomery import mont_inverse_binary, mont_multiply

__all__ = [
    "AffinePoint",
    "ProjectivePoint",
    "CurveParameters",
    "affine_is_valid",
    "affine_compare",
    "affine_add",
    "affine_subtract",
    "affine_double",
    "affine_negate",
    "generic_mul",
]


@dataclass(frozen=True)
class AffinePoint:
    """A point in affine coordinates; ``identity`` marks the point at infinity."""

    x: int = 0
    y: int = 0
    identity: bool = False


@dataclass(frozen=True)
class ProjectivePoint:
    """A point in projective coordinates; ``identity`` marks the point at infinity."""

    x: int = 0
    y: int = 0
    z: int = 0
    identity: bool = False


PointMultiplier = Callable[[AffinePoint, int, "CurveParameters"], AffinePoint]
BasePointMultiplier = Callable[[int, "CurveParameters"], AffinePoint]


@dataclass
class CurveParameters:
    """Curve constants, field data and the configured scalar multipliers."""

    prime_data: PrimeData
    order_n_data: PrimeData
    param_a: int
    param_b: int
    base_point: AffinePoint
    eccp_mul: Optional[PointMultiplier] = None
    eccp_mul_base_point: Optional[BasePointMultiplier] = None
    base_point_precomputed_table: list[AffinePoint] = field(default_factory=list)
    base_point_precomputed_table_width: int = 0

    def add(self, a: int, b: int) -> int:
        """Field addition."""
        return gen_add(a, b, self.prime_data)

    def subtract(self, a: int, b: int) -> int:
        """Field subtraction."""
        return gen_subtract(a, b, self.prime_data)

    def multiply(self, a: int, b: int) -> int:
        """Field multiplication in the configured domain."""
        if self.prime_data.montgomery_domain:
            return mont_multiply(a, b, self.prime_data)
        return gen_multiply_div(a, b, self.prime_data)

    def square(self, a: int) -> int:
        """Field squaring in the configured domain."""
        return self.multiply(a, a)

    def negate(self, a: int) -> int:
        """Field negation."""
        return gen_negate(a, self.prime_data)

    def halving(self, a: int) -> int:
        """Field division by two."""
        return gen_halving(a, self.prime_data)

    def inverse(self, a: int) -> int:
        """Field inversion in the configured domain; zero raises ZeroDivisionError."""
        if self.prime_data.montgomery_domain:
            return mont_inverse_binary(a, self.prime_data)
        return binary_euclidean_inverse(a, self.prime_data)

    def random_element(self) -> int:
        """Return a random non-zero field element."""
        return self.prime_data.random()


_IDENTITY = AffinePoint(identity=True)


def affine_is_valid(point: AffinePoint, param: CurveParameters) -> bool:
    """Check the curve equation; the cofactor is not taken into account."""
    if point.identity:
        return True
    prime = param.prime_data.prime
    if point.x >= prime or point.y >= prime:
        return False
    x = point.x
    right = param.multiply(x, param.square(x))
    right = param.add(right, param.multiply(x, param.param_a))
    right = param.add(right, param.param_b)
    return param.square(point.y) == right


def affine_compare(a: AffinePoint, b: AffinePoint, param: CurveParameters) -> int:
    """Order two points: identity first, then by x, then by y. Returns -1, 0 or 1."""
    if a.identity:
        return 0 if b.identity else -1
    if b.identity:
        return 1
    if a.x != b.x:
        return -1 if a.x < b.x else 1
    if a.y != b.y:
        return -1 if a.y < b.y else 1
    return 0


def affine_add(a: AffinePoint, b: AffinePoint, param: CurveParameters) -> AffinePoint:
    """Add two affine points."""
    if a.identity:
        return b
    if b.identity:
        return a
    if a.x == b.x:
        if a.y == b.y:
            return affine_double(a, param)
        # Only two y values exist per x coordinate, so b is -a.
        return _IDENTITY

    slope = param.multiply(
        param.inverse(param.subtract(b.x, a.x)), param.subtract(b.y, a.y)
    )
    x3 = param.subtract(param.subtract(param.square(slope), a.x), b.x)
    y3 = param.subtract(param.multiply(param.subtract(a.x, x3), slope), a.y)
    return AffinePoint(x3, y3)


def affine_subtract(
    minuend: AffinePoint, subtrahend: AffinePoint, param: CurveParameters
) -> AffinePoint:
    """Return ``minuend - subtrahend``."""
    return affine_add(minuend, affine_negate(subtrahend, param), param)


def affine_double(a: AffinePoint, param: CurveParameters) -> AffinePoint:
    """Double an affine point."""
    if a.identity:
        return _IDENTITY
    if param.negate(a.y) == a.y:
        # A point of order two doubles to the identity.
        return _IDENTITY

    x_squared = param.square(a.x)
    numerator = param.add(param.add(param.add(x_squared, x_squared), x_squared), param.param_a)
    slope = param.multiply(param.inverse(param.add(a.y, a.y)), numerator)
    x3 = param.subtract(param.subtract(param.square(slope), a.x), a.x)
    y3 = param.subtract(param.multiply(slope, param.subtract(a.x, x3)), a.y)
    return AffinePoint(x3, y3)


def affine_negate(point: AffinePoint, param: CurveParameters) -> AffinePoint:
    """Return ``-point``."""
    return AffinePoint(point.x, param.negate(point.y), point.identity)


def generic_mul(point: AffinePoint, scalar: int, param: CurveParameters) -> AffinePoint:
    """Multiply ``point`` by ``scalar`` with the best configured method.

    The fixed-base multiplier is used when it is configured with a
    precomputed table and ``point`` is the base point.
    """
    if (
        param.eccp_mul_base_point is not None
        and param.base_point_precomputed_table
        and param.base_point_precomputed_table_width != 0
        and affine_compare(param.base_point, point, param) == 0
    ):
        return param.eccp_mul_base_point(scalar, param)
    if param.eccp_mul is None:
        raise ValueError("no point multiplication is configured")
    return param.eccp_mul(point, scalar, param)