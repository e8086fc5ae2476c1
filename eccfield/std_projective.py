"""Standard projective coordinates: ``(X, Y, Z)`` stands for ``(X/Z, Y/Z)``."""

from __future__ import annotations

from .curve import AffinePoint, CurveParameters, ProjectivePoint

__all__ = ["is_valid", "equals", "to_affine", "from_affine", "negate"]


def is_valid(point: ProjectivePoint, param: CurveParameters) -> bool:
    """Check ``Y^2 Z = X^3 + aXZ^2 + bZ^3``; the cofactor is not taken into account."""
    if point.identity:
        return True
    prime = param.prime_data.prime
    if point.x >= prime or point.y >= prime or point.z >= prime:
        return False

    x, y, z = point.x, point.y, point.z
    linear = param.add(param.multiply(param.param_a, x), param.multiply(param.param_b, z))
    right = param.multiply(linear, param.square(z))
    right = param.add(right, param.multiply(param.square(x), x))
    left = param.multiply(param.square(y), z)
    return left == right


def equals(a: ProjectivePoint, b: ProjectivePoint, param: CurveParameters) -> bool:
    """Return True when both points describe the same affine point."""
    if a.identity or b.identity:
        return a.identity and b.identity
    if param.multiply(a.z, b.x) != param.multiply(b.z, a.x):
        return False
    return param.multiply(a.z, b.y) == param.multiply(b.z, a.y)


def to_affine(point: ProjectivePoint, param: CurveParameters) -> AffinePoint:
    """Convert to affine coordinates; a zero ``Z`` yields the identity."""
    if point.identity or point.z == 0:
        return AffinePoint(identity=True)
    z_inverse = param.inverse(point.z)
    return AffinePoint(
        param.multiply(point.x, z_inverse), param.multiply(point.y, z_inverse)
    )


def from_affine(point: AffinePoint, param: CurveParameters) -> ProjectivePoint:
    """Convert an affine point, using ``Z = 1`` in the configured domain."""
    return ProjectivePoint(point.x, point.y, param.prime_data.gfp_one, point.identity)


def negate(point: ProjectivePoint, param: CurveParameters) -> ProjectivePoint:
    """Return ``-point``."""
    return ProjectivePoint(point.x, param.negate(point.y), point.z, point.identity)