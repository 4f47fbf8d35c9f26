"""Scalars: integers modulo the prime group order l = 2^252 + 27742317777372353535851937790883648493."""

from __future__ import annotations

L = 2**252 + 27742317777372353535851937790883648493
"""The order of the prime-order subgroup of Curve25519."""

_LOW_255_BITS = (1 << 255) - 1
_MAX_INT_INPUT = 1 << 128


def _check_length(data: bytes, expected: int) -> bytes:
    raw = bytes(data)
    if len(raw) != expected:
        raise ValueError(f"scalar encoding must be {expected} bytes, got {len(raw)}")
    return raw


class Scalar:
    """An integer s < 2^255 representing an element of Z / l.

    Scalars built by the reducing constructors and by arithmetic are
    canonical (fully reduced).  ``from_bits`` and ``from_int`` keep the
    exact bit pattern given, apart from the top bit, which is always clear.
    Equality compares those bit patterns, so an unreduced scalar is not
    equal to its reduced form.
    """

    __slots__ = ("_value",)

    def __init__(self, value: int = 0) -> None:
        if not 0 <= value <= _LOW_255_BITS:
            raise ValueError("scalar representative must lie in [0, 2^255)")
        self._value = value

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_bytes_mod_order(cls, data: bytes) -> Scalar:
        """Reduce a 256-bit little-endian integer modulo l."""
        raw = _check_length(data, 32)
        return cls(int.from_bytes(raw, "little") % L)

    @classmethod
    def from_bytes_mod_order_wide(cls, data: bytes) -> Scalar:
        """Reduce a 512-bit little-endian integer modulo l."""
        raw = _check_length(data, 64)
        return cls(int.from_bytes(raw, "little") % L)

    @classmethod
    def from_canonical_bytes(cls, data: bytes) -> Scalar:
        """Decode a canonical encoding, raising ValueError for any other."""
        raw = _check_length(data, 32)
        if raw[31] >> 7:
            raise ValueError("scalar encoding has the high bit set")
        candidate = cls.from_bits(raw)
        if not candidate.is_canonical():
            raise ValueError("scalar encoding is not reduced modulo l")
        return candidate

    @classmethod
    def from_bits(cls, data: bytes) -> Scalar:
        """Take the low 255 bits of a 256-bit integer, without reduction."""
        raw = _check_length(data, 32)
        return cls(int.from_bytes(raw, "little") & _LOW_255_BITS)

    @classmethod
    def from_int(cls, value: int) -> Scalar:
        """Build a scalar from an unsigned integer below 2^128."""
        if not 0 <= value < _MAX_INT_INPUT:
            raise ValueError("integer must lie in [0, 2^128)")
        return cls(value)

    @classmethod
    def zero(cls) -> Scalar:
        return cls(0)

    @classmethod
    def one(cls) -> Scalar:
        return cls(1)

    # ------------------------------------------------------------------
    # Encoding and inspection
    # ------------------------------------------------------------------

    def to_bytes(self) -> bytes:
        """Return the 32-byte little-endian encoding of the representative."""
        return self._value.to_bytes(32, "little")

    def bits(self) -> tuple[int, ...]:
        """Return the 256 bits of the representative, least significant first."""
        value = self._value
        return tuple((value >> i) & 1 for i in range(256))

    def reduce(self) -> Scalar:
        """Return the canonical representative modulo l."""
        return Scalar(self._value % L)

    def is_canonical(self) -> bool:
        """True if this scalar equals its own reduction modulo l."""
        return self._value < L

    def invert(self) -> Scalar:
        """Return the multiplicative inverse; the scalar must be nonzero."""
        return Scalar(pow(self._value, L - 2, L))

    # ------------------------------------------------------------------
    # Arithmetic (all results reduced modulo l)
    # ------------------------------------------------------------------

    def __add__(self, other: object) -> Scalar:
        if not isinstance(other, Scalar):
            return NotImplemented
        return Scalar((self._value + other._value) % L)

    def __sub__(self, other: object) -> Scalar:
        if not isinstance(other, Scalar):
            return NotImplemented
        return Scalar((self._value - other._value) % L)

    def __mul__(self, other: object) -> Scalar:
        if not isinstance(other, Scalar):
            return NotImplemented
        return Scalar((self._value * other._value) % L)

    def __neg__(self) -> Scalar:
        return Scalar((-self._value) % L)

    # ------------------------------------------------------------------
    # Python protocol
    # ------------------------------------------------------------------

    def __getitem__(self, index: int) -> int:
        return self.to_bytes()[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Scalar):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(("Scalar", self._value))

    def __int__(self) -> int:
        return self._value

    def __repr__(self) -> str:
        return f"Scalar({self.to_bytes().hex()})"