"""Prime-field and Montgomery arithmetic, elliptic curve point operations and SHA hashing."""

__version__ = "0.1.0"

__all__ = [
    "curve",
    "field",
    "formatting",
    "jacobian",
    "montgomery",
    "sha1",
    "sha2",
    "std_projective",
]