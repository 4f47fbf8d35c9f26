"""Scalar multiplication on the Montgomery form of Curve25519.

A ``MontgomeryPoint`` holds the affine u-coordinate of a point on either
the curve or its quadratic twist.  The u-line discards sign information,
so P and -P share an encoding; the identity is encoded as u = 0.
Multiplication by a ``Scalar`` uses the Montgomery ladder.
"""

from __future__ import annotations

from curve25519.field import FieldElement
from curve25519.scalar import Scalar

_ENCODED_LENGTH = 32

APLUS2_OVER_FOUR = FieldElement(121666)
"""(A + 2) / 4 for the curve coefficient A = 486662."""


class MontgomeryPoint:
    """The u-coordinate of a point on Curve25519 or its twist.

    Equality is defined modulo p: two encodings are equal when they
    decode to the same field element.
    """

    __slots__ = ("_bytes",)

    def __init__(self, data: bytes = bytes(_ENCODED_LENGTH)) -> None:
        raw = bytes(data)
        if len(raw) != _ENCODED_LENGTH:
            raise ValueError(
                f"Montgomery u-coordinate must be {_ENCODED_LENGTH} bytes, got {len(raw)}"
            )
        self._bytes = raw

    def to_bytes(self) -> bytes:
        """Return the 32 bytes this point was built from."""
        return self._bytes

    def _u(self) -> FieldElement:
        return FieldElement.from_bytes(self._bytes)

    # ------------------------------------------------------------------
    # Scalar multiplication
    # ------------------------------------------------------------------

    def __mul__(self, scalar: object) -> MontgomeryPoint:
        """Given self = u(P) and a scalar n, return u([n]P)."""
        if not isinstance(scalar, Scalar):
            return NotImplemented

        affine_u = self._u()
        x0 = (FieldElement.one(), FieldElement.zero())
        x1 = (affine_u, FieldElement.one())

        bits = scalar.bits()
        for i in range(254, -1, -1):
            if bits[i + 1] ^ bits[i]:
                x0, x1 = x1, x0
            x0, x1 = _differential_add_and_double(x0, x1, affine_u)
        if bits[0]:
            x0, x1 = x1, x0

        return _to_affine(x0)

    def __rmul__(self, scalar: object) -> MontgomeryPoint:
        return self.__mul__(scalar)

    # ------------------------------------------------------------------
    # Python protocol
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MontgomeryPoint):
            return NotImplemented
        return self._u() == other._u()

    def __hash__(self) -> int:
        return hash(("MontgomeryPoint", self._u()))

    def __bytes__(self) -> bytes:
        return self._bytes

    def __repr__(self) -> str:
        return f"MontgomeryPoint({self._bytes.hex()})"


_Projective = tuple[FieldElement, FieldElement]


def _to_affine(point: _Projective) -> MontgomeryPoint:
    """Dehomogenize (U : W) to u = U / W, or 0 when W is zero."""
    u_coord, w_coord = point
    return MontgomeryPoint((u_coord * w_coord.invert()).to_bytes())


def _differential_add_and_double(
    p: _Projective, q: _Projective, affine_pmq: FieldElement
) -> tuple[_Projective, _Projective]:
    """One ladder step: return (u([2]P), u(P + Q)) given u(P - Q)."""
    p_u, p_w = p
    q_u, q_w = q

    t0 = p_u + p_w
    t1 = p_u - p_w
    t2 = q_u + q_w
    t3 = q_u - q_w

    t4 = t0.square()
    t5 = t1.square()
    t6 = t4 - t5  # 4 U_P W_P

    t7 = t0 * t3
    t8 = t1 * t2

    t9 = t7 + t8
    t10 = t7 - t8

    t11 = t9.square()
    t12 = t10.square()

    t13 = APLUS2_OVER_FOUR * t6
    t14 = t4 * t5
    t15 = t13 + t5
    t16 = t6 * t15

    t17 = affine_pmq * t12
    t18 = t11

    return (t14, t16), (t18, t17)