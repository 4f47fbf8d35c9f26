"""Field, scalar, digit-recoding and Montgomery-ladder arithmetic for Curve25519."""

__version__ = "0.1.0"
__all__ = ["field", "scalar", "scalarops", "digits", "montgomery"]