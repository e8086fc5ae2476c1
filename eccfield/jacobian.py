"""Jacobian projective coordinates: ``(X, Y, Z)`` stands for ``(X/Z^2, Y/Z^3)``."""

from __future__ import annotations

from .curve import AffinePoint, CurveParameters, ProjectivePoint

__all__ = [
    "is_valid",
    "equals",
    "to_affine",
    "from_affine",
    "double",
    "add",
    "add_affine",
    "negate",
]

_IDENTITY = ProjectivePoint(identity=True)


def is_valid(point: ProjectivePoint, param: CurveParameters) -> bool:
    """Check ``Y^2 = X^3 + aXZ^4 + bZ^6``; the cofactor is not taken into account."""
    if point.identity:
        return True
    prime = param.prime_data.prime
    if point.x >= prime or point.y >= prime or point.z >= prime:
        return False

    x, y, z = point.x, point.y, point.z
    z2 = param.square(z)
    z4 = param.square(z2)
    z6 = param.multiply(z2, z4)
    right = param.multiply(param.square(x), x)
    right = param.add(param.multiply(z6, param.param_b), right)
    right = param.add(param.multiply(param.multiply(x, z4), param.param_a), right)
    return param.square(y) == right


def equals(a: ProjectivePoint, b: ProjectivePoint, param: CurveParameters) -> bool:
    """Return True when both points describe the same affine point."""
    if a.identity or b.identity:
        return a.identity and b.identity

    a_z2 = param.square(a.z)
    b_z2 = param.square(b.z)
    if param.multiply(a_z2, b.x) != param.multiply(b_z2, a.x):
        return False
    a_z3 = param.multiply(a_z2, a.z)
    b_z3 = param.multiply(b_z2, b.z)
    return param.multiply(a_z3, b.y) == param.multiply(b_z3, a.y)


def to_affine(point: ProjectivePoint, param: CurveParameters) -> AffinePoint:
    """Convert to affine coordinates; a zero ``Z`` yields the identity."""
    if point.identity or point.z == 0:
        return AffinePoint(identity=True)
    z_inverse = param.inverse(point.z)
    z_inverse2 = param.square(z_inverse)
    x = param.multiply(point.x, z_inverse2)
    y = param.multiply(param.multiply(point.y, z_inverse2), z_inverse)
    return AffinePoint(x, y)


def from_affine(point: AffinePoint, param: CurveParameters) -> ProjectivePoint:
    """Convert an affine point, using ``Z = 1`` in the configured domain."""
    return ProjectivePoint(point.x, point.y, param.prime_data.gfp_one, point.identity)


def double(point: ProjectivePoint, param: CurveParameters) -> ProjectivePoint:
    """Double a Jacobian point."""
    if point.identity:
        return _IDENTITY
    if param.negate(point.y) == point.y:
        # A point of order two doubles to the identity.
        return _IDENTITY

    x, y, z = point.x, point.y, point.z
    x_squared = param.square(x)
    z4a = param.multiply(param.square(param.square(z)), param.param_a)
    m = param.add(param.add(param.add(z4a, x_squared), x_squared), x_squared)

    two_y = param.add(y, y)
    z3 = param.multiply(two_y, z)
    four_y2 = param.square(two_y)
    s = param.multiply(x, four_y2)
    eight_y4 = param.halving(param.square(four_y2))

    x3 = param.subtract(param.square(m), param.add(s, s))
    y3 = param.subtract(param.multiply(param.subtract(s, x3), m), eight_y4)
    return ProjectivePoint(x3, y3, z3)


def add(a: ProjectivePoint, b: ProjectivePoint, param: CurveParameters) -> ProjectivePoint:
    """Add two Jacobian points."""
    if a.identity:
        return b
    if b.identity:
        return a

    z1z1 = param.square(a.z)
    z2z2 = param.square(b.z)
    u1 = param.multiply(a.x, z2z2)
    u2 = param.multiply(b.x, z1z1)
    s1 = param.multiply(a.y, param.multiply(z2z2, b.z))
    s2 = param.multiply(b.y, param.multiply(z1z1, a.z))

    if u1 == u2:
        if s1 == s2:
            return double(a, param)
        # Only two y values exist per x coordinate, so b is -a.
        return _IDENTITY

    h = param.subtract(u2, u1)
    r = param.subtract(s2, s1)
    r = param.add(r, r)
    z_sum = param.square(param.add(a.z, b.z))
    z3 = param.multiply(param.subtract(z_sum, param.add(z1z1, z2z2)), h)
    i = param.square(param.add(h, h))
    v = param.multiply(u1, i)
    j = param.multiply(h, i)
    x3 = param.subtract(param.subtract(param.subtract(param.square(r), j), v), v)
    s1j = param.multiply(s1, j)
    y3 = param.subtract(
        param.subtract(param.multiply(r, param.subtract(v, x3)), s1j), s1j
    )
    return ProjectivePoint(x3, y3, z3)


def add_affine(
    a: ProjectivePoint, b: AffinePoint, param: CurveParameters
) -> ProjectivePoint:
    """Add an affine point to a Jacobian point."""
    if a.identity:
        return from_affine(b, param)
    if b.identity:
        return a

    z2 = param.square(a.z)
    z3_ = param.multiply(a.z, z2)
    h = param.subtract(param.multiply(b.x, z2), a.x)
    r = param.subtract(param.multiply(b.y, z3_), a.y)

    if h == 0:
        if r == 0:
            return double(a, param)
        # Only two y values exist per x coordinate, so b is -a.
        return _IDENTITY

    z3 = param.multiply(a.z, h)
    hh = param.square(h)
    hhh = param.multiply(hh, h)
    v = param.multiply(hh, a.x)
    x3 = param.subtract(param.subtract(param.square(r), param.add(v, v)), hhh)
    y3 = param.subtract(
        param.multiply(param.subtract(v, x3), r), param.multiply(hhh, a.y)
    )
    return ProjectivePoint(x3, y3, z3)


def negate(point: ProjectivePoint, param: CurveParameters) -> ProjectivePoint:
    """Return ``-point``."""
    return ProjectivePoint(point.x, param.negate(point.y), point.z, point.identity)